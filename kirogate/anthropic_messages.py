"""Conversion of Anthropic messages and tools to the unified form."""

from __future__ import annotations

import json
import logging

from kirogate.anthropic_content import convert_anthropic_content
from kirogate.anthropic_models import AnthropicMessage, AnthropicTool
from kirogate.content import extract_images_from_content
from kirogate.models import (
    MessageContent,
    ToolCall,
    ToolFunction,
    ToolResult,
    ToolResultBlock,
    ToolUseBlock,
    UnifiedMessage,
    UnifiedTool,
)

logger = logging.getLogger(__name__)


def _blocks(content: MessageContent | None) -> list:
    if content is None or isinstance(content, str):
        return []
    return content


def extract_tool_results(content: MessageContent | None) -> list[ToolResult]:
    """Collect tool result blocks of a user message as unified tool results."""
    return [
        ToolResult(tool_use_id=block.tool_use_id, content=block.content)
        for block in _blocks(content)
        if isinstance(block, ToolResultBlock)
    ]


def extract_tool_uses(content: MessageContent | None) -> list[ToolCall]:
    """Collect tool-use blocks of an assistant message as unified tool calls."""
    return [
        ToolCall(
            id=block.id,
            function=ToolFunction(
                name=block.name,
                arguments=json.dumps(block.input, separators=(",", ":"), ensure_ascii=False),
            ),
        )
        for block in _blocks(content)
        if isinstance(block, ToolUseBlock)
    ]


def convert_anthropic_messages(messages: list[AnthropicMessage]) -> list[UnifiedMessage]:
    """Convert Anthropic messages, pulling out tool uses, tool results and images."""
    unified = []
    total_calls = total_results = total_images = 0

    for msg in messages:
        content = convert_anthropic_content(msg.content)
        tool_calls = tool_results = images = None

        if msg.role == "assistant":
            tool_calls = extract_tool_uses(content) or None
            if tool_calls:
                total_calls += len(tool_calls)
        elif msg.role == "user":
            tool_results = extract_tool_results(content) or None
            if tool_results:
                total_results += len(tool_results)
            images = extract_images_from_content(content) or None
            if images:
                total_images += len(images)

        unified.append(
            UnifiedMessage(
                role=msg.role,
                content=content,
                tool_calls=tool_calls,
                tool_results=tool_results,
                images=images,
            )
        )

    if total_calls or total_results or total_images:
        logger.debug(
            "Converted %d Anthropic messages: %d tool_calls, %d tool_results, %d images",
            len(messages),
            total_calls,
            total_results,
            total_images,
        )
    return unified


def convert_anthropic_tools(tools: list[AnthropicTool] | None) -> list[UnifiedTool] | None:
    """Convert Anthropic tools to unified tools; None stays None."""
    if tools is None:
        return None
    return [
        UnifiedTool(name=tool.name, description=tool.description, input_schema=tool.input_schema)
        for tool in tools
    ]