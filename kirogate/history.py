"""Construction of the Kiro conversation history array."""

from __future__ import annotations

from kirogate.content import (
    convert_images_to_kiro_format,
    extract_images_from_content,
    extract_text_content,
)
from kirogate.models import UnifiedMessage
from kirogate.tool_uses import (
    convert_tool_results_to_kiro_format,
    extract_tool_results_from_content,
    extract_tool_uses_from_message,
)


def _user_entry(msg: UnifiedMessage, model_id: str) -> dict:
    user_input: dict = {
        "content": extract_text_content(msg.content) or "(empty)",
        "modelId": model_id,
        "origin": "AI_EDITOR",
    }

    images = msg.images if msg.images is not None else extract_images_from_content(msg.content)
    kiro_images = convert_images_to_kiro_format(images)
    if kiro_images:
        user_input["images"] = kiro_images

    if msg.tool_results is not None:
        tool_results = convert_tool_results_to_kiro_format(msg.tool_results)
    else:
        tool_results = extract_tool_results_from_content(msg.content)
    if tool_results:
        user_input["userInputMessageContext"] = {"toolResults": tool_results}

    return {"userInputMessage": user_input}


def _assistant_entry(msg: UnifiedMessage) -> dict:
    response: dict = {"content": extract_text_content(msg.content) or "(empty)"}
    tool_uses = extract_tool_uses_from_message(msg.content, msg.tool_calls)
    if tool_uses:
        response["toolUses"] = tool_uses
    return {"assistantResponseMessage": response}


def build_kiro_history(messages: list[UnifiedMessage], model_id: str) -> list[dict]:
    """Convert user and assistant messages to Kiro history entries.

    Messages with any other role are left out.
    """
    history = []
    for msg in messages:
        if msg.role == "user":
            history.append(_user_entry(msg, model_id))
        elif msg.role == "assistant":
            history.append(_assistant_entry(msg))
    return history