"""Anthropic <-> OpenAI message translation.

This module translates between Anthropic Messages conversations and OpenAI
Chat Completions messages, so an Anthropic-style conversation can be sent to
any OpenAI-compatible backend and the completion read back as an Anthropic
message.

Key mappings:
- Anthropic tool_result blocks -> OpenAI "tool" role messages
- Anthropic tool_use blocks -> OpenAI assistant tool_calls
- Anthropic image blocks -> OpenAI image_url content parts
- OpenAI finish_reason / usage -> Anthropic stop_reason / usage

Conversion of a block list happens in two passes: the blocks are first
partitioned by kind, then the partitions are emitted in a fixed order. Tool
results always come first because OpenAI requires every tool message to
directly follow the assistant message that issued the call.

Reference:
- Anthropic Messages API: https://docs.anthropic.com/en/api/messages
- OpenAI Chat Completions: https://platform.openai.com/docs/api-reference/chat
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from ..core.exceptions import InvalidMessageError
from ..types.chat import (
    AnthropicMessage,
    ChatCompletionResponse,
    ChatMessage,
    ContentPart,
    ImageBlock,
    MessageParam,
    TextBlock,
    ToolCall,
    ToolResultBlock,
    ToolUseBlock,
)

logger = logging.getLogger("msgbridge")

TOOL_RESULT_IMAGE_PLACEHOLDER = "(see following user message for image)"

_STOP_REASONS = {
    "stop": "end_turn",
    "length": "max_tokens",
    "tool_calls": "tool_use",
}


@dataclass(frozen=True)
class TranslationOptions:
    """Switches that change translator output.

    Attributes:
        emit_tool_result_images: Send images found inside tool results as a
            separate user message right after the tool messages. Off by
            default: the images are dropped and only the placeholder text
            reaches the model.
    """
    emit_tool_result_images: bool = False


DEFAULT_OPTIONS = TranslationOptions()


# =============================================================================
# Block helpers
# =============================================================================


def image_block_to_part(block: ImageBlock) -> ContentPart:
    """Convert Anthropic image block to OpenAI image_url content part.

    Anthropic format:
        {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "..."}}
        {"type": "image", "source": {"type": "url", "url": "https://..."}}

    OpenAI format:
        {"type": "image_url", "image_url": {"url": "data:image/png;base64,..."}}
        {"type": "image_url", "image_url": {"url": "https://..."}}
    """
    source = block.get("source", {})
    if source.get("type") == "base64":
        url = f"data:{source.get('media_type', '')};base64,{source.get('data', '')}"
    else:
        url = source.get("url", "")
    return {"type": "image_url", "image_url": {"url": url}}


def serialize_tool_input(input_data: Any) -> str:
    """Serialize tool input the way JSON.stringify does (compact, raw unicode)."""
    return json.dumps(input_data, ensure_ascii=False, separators=(",", ":"))


def partition_user_blocks(
    blocks: Iterable[Mapping[str, Any]],
) -> tuple[list[ToolResultBlock], list[TextBlock | ImageBlock]]:
    """Split a user turn into tool results and text/image blocks, keeping order."""
    tool_results: list[ToolResultBlock] = []
    other_blocks: list[TextBlock | ImageBlock] = []
    for block in blocks:
        block_type = block.get("type")
        if block_type == "tool_result":
            tool_results.append(block)  # type: ignore[arg-type]
        elif block_type in ("text", "image"):
            other_blocks.append(block)  # type: ignore[arg-type]
        else:
            # user turns cannot carry tool_use
            logger.debug(f"Dropping {block_type!r} block from user message")
    return tool_results, other_blocks


def partition_assistant_blocks(
    blocks: Iterable[Mapping[str, Any]],
) -> tuple[list[ToolUseBlock], list[TextBlock | ImageBlock]]:
    """Split an assistant turn into tool uses and text/image blocks, keeping order."""
    tool_uses: list[ToolUseBlock] = []
    other_blocks: list[TextBlock | ImageBlock] = []
    for block in blocks:
        block_type = block.get("type")
        if block_type == "tool_use":
            tool_uses.append(block)  # type: ignore[arg-type]
        elif block_type in ("text", "image"):
            other_blocks.append(block)  # type: ignore[arg-type]
        else:
            # assistant turns cannot carry tool_result
            logger.debug(f"Dropping {block_type!r} block from assistant message")
    return tool_uses, other_blocks


def flatten_tool_result(
    tool_result: ToolResultBlock,
) -> tuple[str, list[ImageBlock]]:
    """Reduce tool result content to a string.

    Returns:
        Tuple of (content, images) where images are the image blocks that
        were replaced by the placeholder text.
    """
    content = tool_result.get("content")
    if isinstance(content, str):
        return content, []
    if not content:
        return "", []

    images: list[ImageBlock] = []
    text_parts: list[str] = []
    for part in content:
        if part.get("type") == "image":
            images.append(part)  # type: ignore[arg-type]
            text_parts.append(TOOL_RESULT_IMAGE_PLACEHOLDER)
        else:
            text_parts.append(part.get("text", ""))
    return "\n".join(text_parts), images


def _tool_result_images_message(
    images: Sequence[ImageBlock],
    options: TranslationOptions,
) -> ChatMessage | None:
    """Decide what happens to images collected from tool results.

    OpenAI tool messages only carry text, so the images can only reach the
    model as a follow-up user message. That message is disabled by default.
    """
    if not images or not options.emit_tool_result_images:
        if images:
            logger.debug(f"Dropping {len(images)} image(s) found in tool results")
        return None
    return {"role": "user", "content": [image_block_to_part(image) for image in images]}


# =============================================================================
# Forward: Anthropic messages -> OpenAI messages
# =============================================================================


def _convert_user_blocks(
    blocks: Sequence[Mapping[str, Any]],
    options: TranslationOptions,
) -> list[ChatMessage]:
    tool_results, other_blocks = partition_user_blocks(blocks)

    converted: list[ChatMessage] = []
    collected_images: list[ImageBlock] = []
    for tool_result in tool_results:
        content, images = flatten_tool_result(tool_result)
        collected_images.extend(images)
        converted.append({
            "role": "tool",
            "tool_call_id": tool_result.get("tool_use_id", ""),
            "content": content,
        })

    images_message = _tool_result_images_message(collected_images, options)
    if images_message is not None:
        converted.append(images_message)

    if other_blocks:
        parts: list[ContentPart] = []
        for block in other_blocks:
            if block.get("type") == "image":
                parts.append(image_block_to_part(block))  # type: ignore[arg-type]
            else:
                parts.append({"type": "text", "text": block.get("text", "")})
        converted.append({"role": "user", "content": parts})

    return converted


def _convert_assistant_blocks(blocks: Sequence[Mapping[str, Any]]) -> ChatMessage:
    tool_uses, other_blocks = partition_assistant_blocks(blocks)

    message: ChatMessage = {"role": "assistant"}
    if other_blocks:
        # assistant turns never contain images; map them to "" if they do
        message["content"] = "\n".join(
            "" if block.get("type") == "image" else block.get("text", "")
            for block in other_blocks
        )

    tool_calls: list[ToolCall] = [
        {
            "id": tool_use.get("id", ""),
            "type": "function",
            "function": {
                "name": tool_use.get("name", ""),
                "arguments": serialize_tool_input(tool_use.get("input", {})),
            },
        }
        for tool_use in tool_uses
    ]
    # OpenAI rejects an empty tool_calls array
    if tool_calls:
        message["tool_calls"] = tool_calls

    return message


def convert_to_openai_messages(
    messages: Iterable[MessageParam],
    options: TranslationOptions | None = None,
) -> list[ChatMessage]:
    """Translate Anthropic conversation turns to OpenAI chat messages.

    Args:
        messages: Anthropic message params, in conversation order.
        options: Translation switches; defaults to DEFAULT_OPTIONS.

    Returns:
        OpenAI chat messages, in conversation order. A user turn can expand
        to several messages (tool messages first, then user content).

    Raises:
        InvalidMessageError: If a turn has an unknown role or its content is
            neither a string nor a list of blocks.
    """
    options = options or DEFAULT_OPTIONS
    openai_messages: list[ChatMessage] = []

    for index, message in enumerate(messages):
        role = message.get("role")
        content = message.get("content")

        if role not in ("user", "assistant"):
            raise InvalidMessageError(f"messages[{index}]: unsupported role {role!r}")

        if isinstance(content, str):
            openai_messages.append({"role": role, "content": content})
        elif isinstance(content, list):
            if role == "user":
                openai_messages.extend(_convert_user_blocks(content, options))
            else:
                openai_messages.append(_convert_assistant_blocks(content))
        else:
            raise InvalidMessageError(
                f"messages[{index}]: content must be a string or a list of blocks, "
                f"got {type(content).__name__}"
            )

    return openai_messages


# =============================================================================
# Reverse: OpenAI completion -> Anthropic message
# =============================================================================


def map_finish_reason(finish_reason: str | None) -> str | None:
    """Convert OpenAI finish_reason to Anthropic stop_reason.

    content_filter and unknown values have no Anthropic equivalent and map
    to None.
    """
    if finish_reason is None:
        return None
    return _STOP_REASONS.get(finish_reason)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_tool_arguments(call_id: str, arguments: Any) -> Any:
    """Parse tool call arguments like JSON.parse; malformed input becomes {}."""
    try:
        return json.loads(arguments or "{}", parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        logger.error(f"Failed to parse tool arguments for call {call_id!r}: {exc}")
        return {}


def convert_to_anthropic_message(completion: ChatCompletionResponse) -> AnthropicMessage:
    """Translate an OpenAI chat completion to an Anthropic message.

    Only the first choice is read. Malformed tool call arguments are logged
    and replaced with an empty object.

    Raises:
        InvalidMessageError: If the completion has no choices.
    """
    choices = completion.get("choices") or []
    if not choices:
        raise InvalidMessageError("completion has no choices", code="empty_choices")

    choice = choices[0]
    openai_message = choice.get("message") or {}
    usage = completion.get("usage") or {}

    anthropic_message: AnthropicMessage = {
        "id": completion.get("id", ""),
        "type": "message",
        "role": openai_message.get("role", "assistant"),
        "content": [
            {
                "type": "text",
                "text": openai_message.get("content") or "",
                "citations": None,
            },
        ],
        "model": completion.get("model", ""),
        "stop_reason": map_finish_reason(choice.get("finish_reason")),  # type: ignore[typeddict-item]
        # OpenAI does not report which stop sequence fired
        "stop_sequence": None,
        "usage": {
            "input_tokens": usage.get("prompt_tokens") or 0,
            "output_tokens": usage.get("completion_tokens") or 0,
            "cache_creation_input_tokens": 0,
            "cache_read_input_tokens": 0,
        },
    }

    for tool_call in openai_message.get("tool_calls") or []:
        call_id = tool_call.get("id", "")
        function = tool_call.get("function") or {}
        anthropic_message["content"].append({
            "type": "tool_use",
            "id": call_id,
            "name": function.get("name", ""),
            "input": _parse_tool_arguments(call_id, function.get("arguments")),
        })

    return anthropic_message


# =============================================================================
# Request envelope
# =============================================================================


def _convert_system(system: str | Sequence[Mapping[str, Any]] | None) -> ChatMessage | None:
    """Convert Anthropic top-level system to an OpenAI system message."""
    if system is None:
        return None

    if isinstance(system, str):
        return {"role": "system", "content": system} if system else None

    text_parts: list[str] = []
    for block in system:
        if block.get("type") == "text":
            text_parts.append(block.get("text", ""))
        else:
            logger.warning(f"Non-text block in system parameter: {block.get('type')}")

    if text_parts:
        return {"role": "system", "content": "\n".join(text_parts)}
    return None


def convert_tool_choice(tool_choice: str | Mapping[str, Any] | None) -> str | dict[str, Any] | None:
    """Convert Anthropic tool_choice to OpenAI format.

    Anthropic: "auto" | "any" | "none" | {"type": "tool", "name": "..."}
    OpenAI: "auto" | "required" | "none" | {"type": "function", "function": {"name": "..."}}
    """
    if tool_choice is None:
        return None

    choice_type = tool_choice if isinstance(tool_choice, str) else tool_choice.get("type", "")
    if choice_type == "tool" and not isinstance(tool_choice, str):
        return {"type": "function", "function": {"name": tool_choice.get("name", "")}}
    if choice_type == "any":
        return "required"
    if choice_type in ("auto", "none"):
        return choice_type

    logger.warning(f"Unknown tool_choice type: {choice_type!r}")
    return None


def convert_tools(tools: Sequence[Mapping[str, Any]] | None) -> list[dict[str, Any]] | None:
    """Convert Anthropic tools to OpenAI format.

    Anthropic: {"name": "...", "description": "...", "input_schema": {...}}
    OpenAI: {"type": "function", "function": {"name": "...", "description": "...", "parameters": {...}}}
    """
    if not tools:
        return None

    return [
        {
            "type": "function",
            "function": {
                "name": tool.get("name", ""),
                "description": tool.get("description", ""),
                "parameters": tool.get("input_schema", {}),
            },
        }
        for tool in tools
    ]


def messages_to_chat_completions(
    payload: Mapping[str, Any],
    options: TranslationOptions | None = None,
) -> dict[str, Any]:
    """Translate an Anthropic Messages request body to a Chat Completions body.

    Handles:
    - Top-level system parameter -> leading system message
    - Conversation turns (see convert_to_openai_messages)
    - Tools and tool_choice mapping
    - Parameter mapping (max_tokens, stop_sequences, temperature, top_p, stream)
    """
    openai_messages: list[ChatMessage] = []

    system_message = _convert_system(payload.get("system"))
    if system_message:
        openai_messages.append(system_message)

    openai_messages.extend(convert_to_openai_messages(payload.get("messages", []), options))

    result: dict[str, Any] = {
        "model": payload.get("model", ""),
        "messages": openai_messages,
    }

    for param in ("max_tokens", "temperature", "top_p", "stream"):
        if param in payload:
            result[param] = payload[param]

    if "stop_sequences" in payload:
        result["stop"] = payload["stop_sequences"]

    if "top_k" in payload:
        logger.debug(f"top_k={payload['top_k']} is not supported by OpenAI, ignoring")

    tools = convert_tools(payload.get("tools"))
    if tools:
        result["tools"] = tools

    tool_choice = convert_tool_choice(payload.get("tool_choice"))
    if tool_choice is not None:
        result["tool_choice"] = tool_choice

    metadata = payload.get("metadata")
    if isinstance(metadata, Mapping) and "user_id" in metadata:
        result["user"] = metadata["user_id"]

    return result


def chat_completion_to_messages(payload: ChatCompletionResponse) -> AnthropicMessage:
    """Translate a Chat Completions response body to an Anthropic Messages body."""
    return convert_to_anthropic_message(payload)
