"""Tests for full request/response body translation."""

from msgbridge.messages.translator import (
    chat_completion_to_messages,
    convert_tool_choice,
    convert_tools,
    messages_to_chat_completions,
    TranslationOptions,
)


class TestMessagesToChatCompletions:
    """Tests for translating Anthropic Messages requests to Chat Completions."""

    def test_simple_request(self):
        """Test model, max_tokens and messages are carried over."""
        payload = {
            "model": "claude-3-opus",
            "max_tokens": 1024,
            "messages": [{"role": "user", "content": "Hello"}],
        }

        result = messages_to_chat_completions(payload)

        assert result == {
            "model": "claude-3-opus",
            "max_tokens": 1024,
            "messages": [{"role": "user", "content": "Hello"}],
        }

    def test_system_as_string(self):
        """Test system parameter as string becomes a leading system message."""
        payload = {
            "model": "m",
            "system": "You are a helpful assistant.",
            "messages": [{"role": "user", "content": "Hello"}],
        }

        result = messages_to_chat_completions(payload)

        assert result["messages"][0] == {"role": "system", "content": "You are a helpful assistant."}
        assert result["messages"][1]["role"] == "user"

    def test_system_as_content_blocks(self):
        """Test text blocks in system are joined with newlines."""
        payload = {
            "model": "m",
            "system": [
                {"type": "text", "text": "Rule one."},
                {"type": "text", "text": "Rule two."},
            ],
            "messages": [],
        }

        result = messages_to_chat_completions(payload)

        assert result["messages"] == [{"role": "system", "content": "Rule one.\nRule two."}]

    def test_parameters_mapping(self):
        """Test sampling parameters, stop sequences and metadata."""
        payload = {
            "model": "m",
            "messages": [],
            "temperature": 0.2,
            "top_p": 0.9,
            "top_k": 40,
            "stream": False,
            "stop_sequences": ["END"],
            "metadata": {"user_id": "user-42"},
        }

        result = messages_to_chat_completions(payload)

        assert result["temperature"] == 0.2
        assert result["top_p"] == 0.9
        assert result["stream"] is False
        assert result["stop"] == ["END"]
        assert result["user"] == "user-42"
        assert "top_k" not in result

    def test_tools_and_tool_choice(self):
        """Test tool definitions and tool_choice are translated."""
        payload = {
            "model": "m",
            "messages": [],
            "tools": [
                {
                    "name": "get_weather",
                    "description": "Weather lookup",
                    "input_schema": {"type": "object", "properties": {"city": {"type": "string"}}},
                }
            ],
            "tool_choice": {"type": "any"},
        }

        result = messages_to_chat_completions(payload)

        assert result["tools"] == [
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "description": "Weather lookup",
                    "parameters": {"type": "object", "properties": {"city": {"type": "string"}}},
                },
            }
        ]
        assert result["tool_choice"] == "required"

    def test_options_are_forwarded(self):
        """Test translation options reach the message conversion."""
        image = {"type": "image", "source": {"type": "url", "url": "https://x/y.png"}}
        payload = {
            "model": "m",
            "messages": [
                {
                    "role": "user",
                    "content": [{"type": "tool_result", "tool_use_id": "t", "content": [image]}],
                }
            ],
        }

        default = messages_to_chat_completions(payload)
        enabled = messages_to_chat_completions(
            payload, TranslationOptions(emit_tool_result_images=True)
        )

        assert [m["role"] for m in default["messages"]] == ["tool"]
        assert [m["role"] for m in enabled["messages"]] == ["tool", "user"]


class TestToolHelpers:
    """Tests for tools/tool_choice helpers."""

    def test_tool_choice_values(self):
        assert convert_tool_choice("auto") == "auto"
        assert convert_tool_choice("any") == "required"
        assert convert_tool_choice("none") == "none"
        assert convert_tool_choice({"type": "auto"}) == "auto"
        assert convert_tool_choice({"type": "none"}) == "none"
        assert convert_tool_choice(None) is None

    def test_tool_choice_specific_tool(self):
        assert convert_tool_choice({"type": "tool", "name": "calc"}) == {
            "type": "function",
            "function": {"name": "calc"},
        }

    def test_tool_choice_unknown(self):
        assert convert_tool_choice({"type": "mystery"}) is None

    def test_convert_tools_empty(self):
        assert convert_tools(None) is None
        assert convert_tools([]) is None


class TestChatCompletionToMessages:
    """Tests for the response body wrapper."""

    def test_matches_message_conversion(self, chat_response):
        completion = chat_response("Hi", finish_reason="length")

        result = chat_completion_to_messages(completion)

        assert result["stop_reason"] == "max_tokens"
        assert result["content"][0]["text"] == "Hi"
