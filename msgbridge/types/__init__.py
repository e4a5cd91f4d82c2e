"""Type definitions for both message formats."""

from .chat import (
    AnthropicMessage,
    AnthropicUsage,
    ChatCompletionResponse,
    ChatMessage,
    Choice,
    ContentBlock,
    ContentPart,
    FunctionCall,
    ImageBlock,
    ImageSource,
    MessageParam,
    TextBlock,
    ToolCall,
    ToolResultBlock,
    ToolUseBlock,
    Usage,
)

__all__ = [
    "AnthropicMessage",
    "AnthropicUsage",
    "ChatCompletionResponse",
    "ChatMessage",
    "Choice",
    "ContentBlock",
    "ContentPart",
    "FunctionCall",
    "ImageBlock",
    "ImageSource",
    "MessageParam",
    "TextBlock",
    "ToolCall",
    "ToolResultBlock",
    "ToolUseBlock",
    "Usage",
]
