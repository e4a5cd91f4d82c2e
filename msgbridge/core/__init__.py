"""Core building blocks shared across the bridge."""

from .exceptions import BridgeError, ConfigurationError, InvalidMessageError

__all__ = [
    "BridgeError",
    "ConfigurationError",
    "InvalidMessageError",
]
