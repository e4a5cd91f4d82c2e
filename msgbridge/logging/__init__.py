"""Logging module for the message bridge."""

from .setup import LOGGER_NAME, logger, setup_logging

__all__ = [
    "LOGGER_NAME",
    "logger",
    "setup_logging",
]
