"""Logging configuration for the message bridge."""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "msgbridge"


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Set up logging with proper handlers and formatters.

    Records go to stdout unless another stream is given.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Keep propagating so pytest's caplog and host applications see records
    logger.propagate = True

    return logger


# Global logger instance
logger = setup_logging()
