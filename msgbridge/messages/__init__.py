"""Anthropic Messages translation helpers.

Provides translation between Anthropic Messages API format and OpenAI Chat
Completions API format.
"""

from .translator import (
    DEFAULT_OPTIONS,
    TOOL_RESULT_IMAGE_PLACEHOLDER,
    TranslationOptions,
    chat_completion_to_messages,
    convert_to_anthropic_message,
    convert_to_openai_messages,
    map_finish_reason,
    messages_to_chat_completions,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "TOOL_RESULT_IMAGE_PLACEHOLDER",
    "TranslationOptions",
    "chat_completion_to_messages",
    "convert_to_anthropic_message",
    "convert_to_openai_messages",
    "map_finish_reason",
    "messages_to_chat_completions",
]
