"""Conversion of Anthropic message content and system prompts."""

from __future__ import annotations

import json
from typing import Any

from kirogate.content import extract_text_content
from kirogate.models import (
    ImageBlock,
    ImageSource,
    MessageContent,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)

_EMPTY_RESULT = "(empty result)"


def _to_json_text(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _convert_image(block: dict) -> ImageBlock | None:
    if "source" not in block:
        return None
    source = block["source"]
    if not isinstance(source, dict):
        return None
    source_type = source.get("type")
    if not isinstance(source_type, str):
        return None
    return ImageBlock(
        source=ImageSource(
            source_type=source_type,
            media_type=_optional_str(source, "media_type"),
            data=_optional_str(source, "data"),
            url=_optional_str(source, "url"),
        )
    )


def _convert_tool_result(block: dict) -> ToolResultBlock | None:
    tool_use_id = block.get("tool_use_id")
    if not isinstance(tool_use_id, str) or "content" not in block:
        return None
    result_content = block["content"]
    if isinstance(result_content, str):
        text = result_content
    else:
        text = extract_text_content(convert_anthropic_content(result_content))
    return ToolResultBlock(tool_use_id=tool_use_id, content=text or _EMPTY_RESULT)


def _convert_tool_use(block: dict) -> ToolUseBlock | None:
    tool_id = block.get("id")
    name = block.get("name")
    if not isinstance(tool_id, str) or not isinstance(name, str) or "input" not in block:
        return None
    return ToolUseBlock(id=tool_id, name=name, input=block["input"])


def _convert_block(block: Any):
    if not isinstance(block, dict):
        return None
    block_type = block.get("type")
    if block_type == "text":
        text = block.get("text")
        return TextBlock(text=text) if isinstance(text, str) else None
    if block_type == "image":
        return _convert_image(block)
    if block_type == "tool_result":
        return _convert_tool_result(block)
    if block_type == "tool_use":
        return _convert_tool_use(block)
    return None


def convert_anthropic_content(content: Any) -> MessageContent:
    """Convert Anthropic content (a string or a block list) to unified content.

    Blocks of unknown type or with missing fields are dropped. Any other
    value is turned into its compact JSON text.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        converted = (_convert_block(block) for block in content)
        return [block for block in converted if block is not None]
    return _to_json_text(content)


def extract_system_prompt(system: Any) -> str:
    """Return the system prompt text from a string or a list of text blocks."""
    if system is None:
        return ""
    if isinstance(system, str):
        return system
    if isinstance(system, list):
        return "\n".join(
            block["text"]
            for block in system
            if isinstance(block, dict)
            and block.get("type") == "text"
            and isinstance(block.get("text"), str)
        )
    return _to_json_text(system)