"""Construction of the complete Kiro request payload from unified data."""

from __future__ import annotations

import logging
from dataclasses import replace

from kirogate.cleanup import (
    ensure_assistant_before_tool_results,
    merge_adjacent_messages,
    strip_all_tool_content,
)
from kirogate.content import (
    convert_images_to_kiro_format,
    extract_images_from_content,
    extract_text_content,
)
from kirogate.history import build_kiro_history
from kirogate.models import ConverterSettings, KiroPayloadResult, UnifiedMessage, UnifiedTool
from kirogate.prompt import build_system_prompt
from kirogate.thinking import inject_thinking_tags
from kirogate.tool_uses import (
    convert_tool_results_to_kiro_format,
    extract_tool_results_from_content,
)
from kirogate.tools import convert_tools_to_kiro_format, process_tools_with_long_descriptions

logger = logging.getLogger(__name__)


class EmptyConversationError(ValueError):
    """Raised when a conversation has no messages left to send."""


def build_kiro_payload_core(
    messages: list[UnifiedMessage],
    system_prompt: str,
    model_id: str,
    tools: list[UnifiedTool] | None,
    conversation_id: str,
    profile_arn: str,
    inject_thinking: bool,
    settings: ConverterSettings,
) -> KiroPayloadResult:
    """Build the Kiro ``conversationState`` payload.

    All messages but the last form the history; the last becomes the current
    message. Raises EmptyConversationError if no messages remain.
    """
    processed_tools, tool_documentation = process_tools_with_long_descriptions(
        None if tools is None else list(tools), settings
    )
    full_system_prompt = build_system_prompt(system_prompt, tool_documentation, settings)

    if tools is None:
        handled, _ = strip_all_tool_content(messages)
    else:
        handled, _ = ensure_assistant_before_tool_results(messages)

    merged = merge_adjacent_messages(handled)
    if not merged:
        raise EmptyConversationError("No messages to send")

    history_messages = list(merged[:-1])
    if full_system_prompt and history_messages:
        first = history_messages[0]
        if first.role == "user":
            original = extract_text_content(first.content)
            history_messages[0] = replace(first, content=f"{full_system_prompt}\n\n{original}")
        else:
            logger.debug(
                "First history message is not user role, "
                "skipping system prompt injection to history"
            )

    history = build_kiro_history(history_messages, model_id)

    current = merged[-1]
    current_content = extract_text_content(current.content)
    if full_system_prompt and not history:
        current_content = f"{full_system_prompt}\n\n{current_content}"

    if current.role == "assistant":
        history.append({"assistantResponseMessage": {"content": current_content}})
        current_content = "Continue"
    if not current_content:
        current_content = "Continue"

    images = (
        current.images
        if current.images is not None
        else extract_images_from_content(current.content)
    )
    kiro_images = convert_images_to_kiro_format(images)

    context: dict = {}
    kiro_tools = convert_tools_to_kiro_format(processed_tools)
    if kiro_tools:
        context["tools"] = kiro_tools

    if current.tool_results is not None:
        tool_results = convert_tool_results_to_kiro_format(current.tool_results)
    else:
        tool_results = extract_tool_results_from_content(current.content)
    if tool_results:
        context["toolResults"] = tool_results

    if inject_thinking and current.role == "user":
        current_content = inject_thinking_tags(current_content, settings)

    user_input_message: dict = {
        "content": current_content,
        "modelId": model_id,
        "origin": "AI_EDITOR",
    }
    if kiro_images:
        user_input_message["images"] = kiro_images
    if context:
        user_input_message["userInputMessageContext"] = context

    conversation_state: dict = {
        "chatTriggerType": "MANUAL",
        "conversationId": conversation_id,
        "currentMessage": {"userInputMessage": user_input_message},
    }
    if history:
        conversation_state["history"] = history

    payload: dict = {"conversationState": conversation_state}
    if profile_arn:
        payload["profileArn"] = profile_arn

    return KiroPayloadResult(payload=payload, tool_documentation=tool_documentation)