"""Pytest configuration and fixtures for testing."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# Payload Builders
# =============================================================================


def build_openai_chat_response(
    content: str | None,
    *,
    tool_calls: list[dict[str, Any]] | None = None,
    finish_reason: str | None = "stop",
    usage: dict[str, int] | None = None,
    model: str = "fake-model",
    response_id: str = "chatcmpl-test123",
) -> dict[str, Any]:
    """Build a valid OpenAI chat completion response.

    Args:
        content: The assistant message content
        tool_calls: Optional list of {"id", "name", "arguments"} dicts;
            dict arguments are JSON-encoded, strings are kept verbatim
        finish_reason: Finish reason (stop, length, tool_calls, ...)
        usage: Token usage dict, omitted when None
        model: Model name
        response_id: Response ID

    Returns:
        Complete OpenAI chat completion response dict
    """
    message: dict[str, Any] = {"role": "assistant", "content": content}

    if tool_calls:
        message["tool_calls"] = [
            {
                "id": tc["id"],
                "type": "function",
                "function": {
                    "name": tc["name"],
                    "arguments": (
                        json.dumps(tc["arguments"])
                        if isinstance(tc.get("arguments"), dict)
                        else tc.get("arguments")
                    ),
                },
            }
            for tc in tool_calls
        ]

    response: dict[str, Any] = {
        "id": response_id,
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {"index": 0, "message": message, "finish_reason": finish_reason},
        ],
    }
    if usage is not None:
        response["usage"] = usage
    return response


@pytest.fixture
def chat_response() -> Callable[..., dict[str, Any]]:
    """Factory fixture for OpenAI chat completion responses."""
    return build_openai_chat_response


@pytest.fixture
def png_block() -> dict[str, Any]:
    return {
        "type": "image",
        "source": {"type": "base64", "media_type": "image/png", "data": "AAAA"},
    }


@pytest.fixture
def bridge_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing DEBUG and above from the msgbridge logger."""
    caplog.set_level(logging.DEBUG, logger="msgbridge")
    return caplog
