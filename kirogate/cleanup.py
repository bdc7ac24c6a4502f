"""Message cleanup before a conversation is sent to the Kiro API.

Covers turning tool content into plain text, dropping orphaned tool results
and merging adjacent messages that share a role.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from kirogate.content import extract_text_content
from kirogate.models import ToolCall, ToolResult, UnifiedMessage

logger = logging.getLogger(__name__)


def tool_calls_to_text(tool_calls: list[ToolCall]) -> str:
    """Render tool calls as readable text, one block per call."""
    parts = []
    for call in tool_calls:
        name = call.function.name
        header = f"[Tool: {name} ({call.id})]" if call.id else f"[Tool: {name}]"
        parts.append(f"{header}\n{call.function.arguments}")
    return "\n\n".join(parts)


def tool_results_to_text(tool_results: list[ToolResult]) -> str:
    """Render tool results as readable text, one block per result."""
    parts = []
    for result in tool_results:
        content = result.content or "(empty result)"
        if result.tool_use_id:
            header = f"[Tool Result ({result.tool_use_id})]"
        else:
            header = "[Tool Result]"
        parts.append(f"{header}\n{content}")
    return "\n\n".join(parts)


def strip_all_tool_content(
    messages: list[UnifiedMessage],
) -> tuple[list[UnifiedMessage], bool]:
    """Replace tool calls and tool results with their text form.

    Used when a request defines no tools, since the Kiro API rejects tool
    results without tool definitions. Returns the messages and whether any
    tool content was converted.
    """
    result = []
    calls_stripped = 0
    results_stripped = 0

    for msg in messages:
        has_calls = msg.has_tool_calls()
        has_results = msg.has_tool_results()
        if not (has_calls or has_results):
            result.append(msg)
            continue

        parts = []
        existing = extract_text_content(msg.content)
        if existing:
            parts.append(existing)
        if has_calls:
            calls_stripped += len(msg.tool_calls)
            text = tool_calls_to_text(msg.tool_calls)
            if text:
                parts.append(text)
        if has_results:
            results_stripped += len(msg.tool_results)
            text = tool_results_to_text(msg.tool_results)
            if text:
                parts.append(text)

        result.append(
            UnifiedMessage(
                role=msg.role,
                content="\n\n".join(parts) if parts else "(empty)",
                tool_calls=None,
                tool_results=None,
                images=msg.images,
            )
        )

    converted = calls_stripped > 0 or results_stripped > 0
    if converted:
        logger.debug(
            "Converted tool content to text (no tools defined): %d tool_calls, %d tool_results",
            calls_stripped,
            results_stripped,
        )
    return result, converted


def ensure_assistant_before_tool_results(
    messages: list[UnifiedMessage],
) -> tuple[list[UnifiedMessage], bool]:
    """Drop tool results that do not follow an assistant message with tool calls.

    Returns the messages and whether any tool results were dropped.
    """
    result: list[UnifiedMessage] = []
    stripped = False

    for msg in messages:
        if msg.has_tool_results():
            previous = result[-1] if result else None
            preceded = (
                previous is not None
                and previous.role == "assistant"
                and previous.has_tool_calls()
            )
            if not preceded:
                logger.warning(
                    "Stripping %d orphaned tool_results (no preceding assistant message "
                    "with tool_calls). Tool IDs: %s",
                    len(msg.tool_results),
                    [tr.tool_use_id for tr in msg.tool_results],
                )
                result.append(replace(msg, tool_results=None))
                stripped = True
                continue
        result.append(msg)

    return result, stripped


def merge_adjacent_messages(messages: list[UnifiedMessage]) -> list[UnifiedMessage]:
    """Merge runs of messages with the same role into one message.

    Texts are joined with a newline; tool calls are merged for assistant
    messages and tool results for user messages.
    """
    merged: list[UnifiedMessage] = []
    merges = 0

    for msg in messages:
        if not merged or merged[-1].role != msg.role:
            merged.append(msg)
            continue

        last = merged[-1]
        text = f"{extract_text_content(last.content)}\n{extract_text_content(msg.content)}"
        updated = replace(last, content=text)
        if msg.role == "assistant" and msg.tool_calls is not None:
            updated.tool_calls = list(last.tool_calls or []) + list(msg.tool_calls)
        if msg.role == "user" and msg.tool_results is not None:
            updated.tool_results = list(last.tool_results or []) + list(msg.tool_results)
        merged[-1] = updated
        merges += 1

    if merges:
        logger.debug("Merged %d adjacent messages", merges)
    return merged