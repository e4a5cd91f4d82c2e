"""msgbridge - Anthropic <-> OpenAI message translation

Converts Anthropic Messages conversations into OpenAI Chat Completions
messages and reads OpenAI completions back as Anthropic messages.

This module provides:
- convert_to_openai_messages: Anthropic turns -> OpenAI chat messages
- convert_to_anthropic_message: OpenAI completion -> Anthropic message
- messages_to_chat_completions: full request body translation
- Settings / load_config: YAML configuration with .env substitution

Example:
    >>> from msgbridge import convert_to_openai_messages
    >>> convert_to_openai_messages([{"role": "user", "content": "Hi"}])
    [{'role': 'user', 'content': 'Hi'}]
"""

from .config_loader import load_config
from .core import BridgeError, ConfigurationError, InvalidMessageError
from .logging import logger, setup_logging
from .messages import (
    TranslationOptions,
    chat_completion_to_messages,
    convert_to_anthropic_message,
    convert_to_openai_messages,
    messages_to_chat_completions,
)
from .settings import Settings, load_settings

__version__ = "0.1.0"

__all__ = [
    "BridgeError",
    "ConfigurationError",
    "InvalidMessageError",
    "Settings",
    "TranslationOptions",
    "chat_completion_to_messages",
    "convert_to_anthropic_message",
    "convert_to_openai_messages",
    "load_config",
    "load_settings",
    "logger",
    "messages_to_chat_completions",
    "setup_logging",
]
