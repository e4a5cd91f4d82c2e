"""Core exceptions for the message bridge."""


class BridgeError(Exception):
    """Base exception for message bridge errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(BridgeError):
    """Raised when there's an issue with the configuration."""
    pass


class InvalidMessageError(BridgeError):
    """Raised when a message does not match either wire schema."""

    def __init__(self, message: str, code: str = "invalid_message") -> None:
        super().__init__(message)
        self.code = code
