#!/usr/bin/env python3
"""Translate a saved JSON payload between Anthropic and OpenAI formats.

Usage:
    python translate_payload.py to-openai path/to/messages_request.json
    python translate_payload.py to-anthropic path/to/chat_completion.json

to-openai accepts either a full Anthropic Messages request body (an object
with "messages") or a bare list of message params. to-anthropic expects a
Chat Completions response body. The result is printed as JSON on stdout;
logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from msgbridge.core.exceptions import BridgeError  # noqa: E402
from msgbridge.logging import setup_logging  # noqa: E402
from msgbridge.messages import (  # noqa: E402
    TranslationOptions,
    convert_to_anthropic_message,
    convert_to_openai_messages,
    messages_to_chat_completions,
)
from msgbridge.settings import load_settings  # noqa: E402

logger = logging.getLogger("msgbridge")


def _load_payload(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def translate(direction: str, payload: Any, options: TranslationOptions) -> Any:
    if direction == "to-anthropic":
        return convert_to_anthropic_message(payload)
    if isinstance(payload, list):
        return convert_to_openai_messages(payload, options)
    return messages_to_chat_completions(payload, options)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Translate a JSON payload between Anthropic and OpenAI message formats."
    )
    parser.add_argument(
        "direction",
        choices=("to-openai", "to-anthropic"),
        help="Translation direction.",
    )
    parser.add_argument("payload", help="Path to the JSON payload.")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config to read translation options from.",
    )
    parser.add_argument(
        "--emit-tool-result-images",
        action="store_true",
        help="Send images found in tool results as a follow-up user message.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    # stdout carries the JSON result, so logs go to stderr from the start
    setup_logging(logging.DEBUG if args.debug else logging.WARNING, stream=sys.stderr)

    options = TranslationOptions()
    try:
        if args.config:
            settings = load_settings(args.config)
            options = settings.translation
            if not args.debug:
                setup_logging(settings.log_level_value, stream=sys.stderr)
        if args.emit_tool_result_images:
            options = replace(options, emit_tool_result_images=True)

        payload_path = Path(args.payload)
        if not payload_path.exists():
            print(f"Payload not found: {payload_path}", file=sys.stderr)
            return 1
        result = translate(args.direction, _load_payload(payload_path), options)
    except json.JSONDecodeError as exc:
        print(f"Payload is not valid JSON: {exc}", file=sys.stderr)
        return 1
    except BridgeError as exc:
        print(f"Translation failed: {exc.message}", file=sys.stderr)
        return 1

    json.dump(result, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
