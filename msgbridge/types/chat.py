"""Types for the two message formats bridged by the translator.

Types are separated into:
- Anthropic types: content-block conversations (requests and responses)
- OpenAI-compatible types: chat completion messages, tool calls and responses

The `type` field of every content block is a Literal discriminant, so the
translator can branch on it exhaustively.
"""

from typing import Any, Literal, Union

from typing_extensions import TypedDict


# =============================================================================
# Anthropic Types
# =============================================================================
# Conversation turns as sent to /v1/messages, and the message object returned.


class ImageSource(TypedDict, total=False):
    """Source of an image block.

    Attributes:
        type: "base64" for inline data, "url" for a remote image.
        media_type: MIME type of inline data, e.g. "image/png".
        data: Base64 payload (for "base64" sources).
        url: Image URL (for "url" sources).
    """
    type: Literal["base64", "url"]
    media_type: str
    data: str
    url: str


class TextBlock(TypedDict, total=False):
    type: Literal["text"]
    text: str


class ImageBlock(TypedDict, total=False):
    type: Literal["image"]
    source: ImageSource


class ToolUseBlock(TypedDict, total=False):
    """A request from the assistant to invoke a tool.

    Attributes:
        id: Identifier echoed back by the matching tool_result block.
        name: Tool name.
        input: Structured tool arguments (any JSON value).
    """
    type: Literal["tool_use"]
    id: str
    name: str
    input: Any


class ToolResultBlock(TypedDict, total=False):
    """Output of a tool, sent back by the user.

    Attributes:
        tool_use_id: Id of the tool_use block this result answers.
        content: Plain string, or a list of text/image blocks.
        is_error: Whether the tool reported a failure.
    """
    type: Literal["tool_result"]
    tool_use_id: str
    content: Union[str, list[Union[TextBlock, ImageBlock]], None]
    is_error: bool


ContentBlock = Union[TextBlock, ImageBlock, ToolUseBlock, ToolResultBlock]


class MessageParam(TypedDict):
    """A conversation turn in Anthropic format."""
    role: Literal["user", "assistant"]
    content: Union[str, list[ContentBlock]]


class ResponseTextBlock(TypedDict):
    type: Literal["text"]
    text: str
    citations: None


class AnthropicUsage(TypedDict):
    """Token usage reported on an Anthropic message.

    Attributes:
        input_tokens: Number of tokens in the input.
        output_tokens: Number of tokens in the output.
        cache_creation_input_tokens: Tokens written to the prompt cache.
        cache_read_input_tokens: Tokens read from the prompt cache.
    """
    input_tokens: int
    output_tokens: int
    cache_creation_input_tokens: int
    cache_read_input_tokens: int


class AnthropicMessage(TypedDict):
    """A complete assistant message in Anthropic format.

    Attributes:
        id: Unique message identifier.
        type: Always "message".
        role: Role of the author, normally "assistant".
        content: Text block followed by any tool_use blocks.
        model: Model that generated the response.
        stop_reason: Why generation stopped:
            - "end_turn": Natural stopping point
            - "max_tokens": Hit token limit
            - "tool_use": Model wants to use a tool
            - None: No equivalent reason
        stop_sequence: The stop sequence that was hit, if any.
        usage: Token usage information.
    """
    id: str
    type: Literal["message"]
    role: str
    content: list[Union[ResponseTextBlock, ToolUseBlock]]
    model: str
    stop_reason: Literal["end_turn", "max_tokens", "tool_use"] | None
    stop_sequence: str | None
    usage: AnthropicUsage


# =============================================================================
# OpenAI-Compatible Types
# =============================================================================


class FunctionCall(TypedDict, total=False):
    """A function call within a tool call.

    Attributes:
        name: Name of the function to call.
        arguments: JSON string containing the arguments to pass to the
            function.
    """
    name: str
    arguments: str


class ToolCall(TypedDict, total=False):
    """A tool call on an assistant message.

    Attributes:
        id: Unique identifier, matched by tool messages' tool_call_id.
        type: Always "function".
        function: The function to call with its arguments.
    """
    id: str
    type: Literal["function"]
    function: FunctionCall


class ImageURL(TypedDict):
    url: str


class ContentPart(TypedDict, total=False):
    """A content part for multi-modal messages.

    Attributes:
        type: "text" or "image_url".
        text: Text content (for "text" type).
        image_url: Image URL object (for "image_url" type). The url is
            either a remote URL or a data: URI.
    """
    type: Literal["text", "image_url"]
    text: str
    image_url: ImageURL


class ChatMessage(TypedDict, total=False):
    """A message in a chat conversation (OpenAI format).

    Attributes:
        role: "system", "user", "assistant" or "tool".
        content: A string, a list of ContentPart, or missing when the
            assistant turn only carries tool_calls.
        tool_calls: Non-empty list of tool calls (assistant only).
        tool_call_id: Id of the tool call a tool message answers.
    """
    role: Literal["system", "user", "assistant", "tool"]
    content: str | list[ContentPart] | None
    tool_calls: list[ToolCall]
    tool_call_id: str


class Choice(TypedDict, total=False):
    """A choice in a chat completion response.

    Attributes:
        index: Zero-based index of this choice in the choices array.
        message: The complete message.
        finish_reason: Reason why the model stopped generating:
            - "stop": Model hit a natural stopping point
            - "length": Hit max tokens limit
            - "tool_calls": Model requested tool calls
            - "content_filter": Content was filtered
    """
    index: int
    message: ChatMessage
    finish_reason: str | None


class Usage(TypedDict, total=False):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletionResponse(TypedDict, total=False):
    """A complete (non-streaming) chat completion response.

    Attributes:
        id: Unique identifier for this completion.
        object: Object type, typically "chat.completion".
        created: Unix timestamp of when the response was created.
        model: Name of the model that generated this response.
        choices: Array of completion choices.
        usage: Token usage information.
    """
    id: str
    object: str
    created: int
    model: str
    choices: list[Choice]
    usage: Usage | None
