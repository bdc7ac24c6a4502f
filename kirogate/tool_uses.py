"""Tool uses and tool results in Kiro history form."""

from __future__ import annotations

import json
import logging
from typing import Any

from kirogate.models import MessageContent, ToolCall, ToolResult, ToolResultBlock, ToolUseBlock

logger = logging.getLogger(__name__)

_EMPTY_RESULT = "(empty result)"


def _kiro_tool_result(tool_use_id: str, content: str) -> dict:
    return {
        "content": [{"text": content or _EMPTY_RESULT}],
        "status": "success",
        "toolUseId": tool_use_id,
    }


def convert_tool_results_to_kiro_format(tool_results: list[ToolResult]) -> list[dict]:
    """Convert unified tool results to Kiro ``toolResults`` entries."""
    return [_kiro_tool_result(tr.tool_use_id, tr.content) for tr in tool_results]


def extract_tool_results_from_content(content: MessageContent | None) -> list[dict]:
    """Convert tool result blocks embedded in content to Kiro entries."""
    if content is None or isinstance(content, str):
        return []
    return [
        _kiro_tool_result(block.tool_use_id, block.content)
        for block in content
        if isinstance(block, ToolResultBlock)
    ]


def _parse_arguments(arguments: str) -> Any:
    try:
        return json.loads(arguments)
    except (json.JSONDecodeError, TypeError):
        return {}


def extract_tool_uses_from_message(
    content: MessageContent | None, tool_calls: list[ToolCall] | None
) -> list[dict]:
    """Collect tool uses from ``tool_calls`` and tool-use blocks, deduplicated by id."""
    tool_uses = [
        {"name": tc.function.name, "input": _parse_arguments(tc.function.arguments), "toolUseId": tc.id}
        for tc in tool_calls or []
    ]
    if content is not None and not isinstance(content, str):
        tool_uses.extend(
            {"name": block.name, "input": block.input, "toolUseId": block.id}
            for block in content
            if isinstance(block, ToolUseBlock)
        )
    return deduplicate_tool_uses(tool_uses)


def _input_size(tool_use: dict) -> int:
    if "input" not in tool_use:
        return 0
    encoded = json.dumps(tool_use["input"], separators=(",", ":"), ensure_ascii=False)
    return len(encoded.encode("utf-8"))


def deduplicate_tool_uses(tool_uses: list[dict]) -> list[dict]:
    """Keep one tool use per ``toolUseId``: the one whose input is largest.

    Tool uses without an id are always kept. Order follows first appearance.
    """
    if len(tool_uses) <= 1:
        return list(tool_uses)

    by_id: dict[Any, dict] = {}
    for position, tool_use in enumerate(tool_uses):
        tool_id = tool_use.get("toolUseId")
        if not isinstance(tool_id, str) or not tool_id:
            by_id[("no-id", position)] = tool_use
            continue
        existing = by_id.get(tool_id)
        if existing is None or _input_size(tool_use) > _input_size(existing):
            by_id[tool_id] = tool_use

    unique = list(by_id.values())
    if len(unique) != len(tool_uses):
        logger.debug(
            "Deduplicated tool uses in conversation history: %d -> %d",
            len(tool_uses),
            len(unique),
        )
    return unique