"""Conversion of OpenAI chat messages to the unified message form."""

from __future__ import annotations

import json
import logging
from typing import Any

from kirogate.content import extract_images_from_content
from kirogate.models import (
    MessageContent,
    ToolCall,
    ToolFunction,
    ToolResult,
    ToolResultBlock,
    UnifiedMessage,
)
from kirogate.openai_models import ChatMessage

logger = logging.getLogger(__name__)

_EMPTY_RESULT = "(empty result)"


def _content_as_text(content: Any) -> str:
    """Return string content as is, nothing as '', anything else as compact JSON."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False)


def extract_tool_results_from_openai(content: MessageContent | None) -> list[ToolResult]:
    """Collect tool result blocks from message content as unified tool results."""
    if content is None or isinstance(content, str):
        return []
    return [
        ToolResult(tool_use_id=block.tool_use_id, content=block.content or _EMPTY_RESULT)
        for block in content
        if isinstance(block, ToolResultBlock)
    ]


def extract_tool_calls_from_openai(message: ChatMessage) -> list[ToolCall] | None:
    """Convert the tool calls of an OpenAI assistant message, or None if it has none."""
    if message.tool_calls is None:
        return None
    return [
        ToolCall(
            id=tc.id,
            function=ToolFunction(name=tc.function.name, arguments=tc.function.arguments),
        )
        for tc in message.tool_calls
    ]


def _tool_results_message(results: list[ToolResult]) -> UnifiedMessage:
    return UnifiedMessage(role="user", content="", tool_results=list(results))


def convert_openai_messages_to_unified(
    messages: list[ChatMessage],
) -> tuple[str, list[UnifiedMessage]]:
    """Split OpenAI messages into a system prompt and unified messages.

    System messages are joined into the prompt. Runs of ``tool`` messages
    become one user message carrying their tool results.
    """
    system_parts = []
    conversation = []
    for msg in messages:
        if msg.role == "system":
            system_parts.append(_content_as_text(msg.content) + "\n")
        else:
            conversation.append(msg)
    system_prompt = "".join(system_parts).strip()

    processed: list[UnifiedMessage] = []
    pending: list[ToolResult] = []
    total_calls = total_results = total_images = 0

    for msg in conversation:
        if msg.role == "tool":
            content = msg.content if isinstance(msg.content, str) else _EMPTY_RESULT
            pending.append(ToolResult(tool_use_id=msg.tool_call_id or "", content=content))
            total_results += 1
            continue

        if pending:
            processed.append(_tool_results_message(pending))
            pending = []

        content = _content_as_text(msg.content)

        tool_calls = None
        if msg.role == "assistant":
            tool_calls = extract_tool_calls_from_openai(msg)
            if tool_calls is not None:
                total_calls += len(tool_calls)

        tool_results = None
        images = None
        if msg.role == "user":
            tool_results = extract_tool_results_from_openai(content) or None
            if tool_results:
                total_results += len(tool_results)
            images = extract_images_from_content(content) or None
            if images:
                total_images += len(images)

        processed.append(
            UnifiedMessage(
                role=msg.role,
                content=content,
                tool_calls=tool_calls,
                tool_results=tool_results,
                images=images,
            )
        )

    if pending:
        processed.append(_tool_results_message(pending))

    if total_calls or total_results or total_images:
        logger.debug(
            "Converted %d OpenAI messages: %d tool_calls, %d tool_results, %d images",
            len(messages),
            total_calls,
            total_results,
            total_images,
        )

    return system_prompt, processed