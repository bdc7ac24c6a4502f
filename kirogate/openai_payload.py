"""Building a Kiro payload from an OpenAI chat-completion request."""

from __future__ import annotations

import logging
from typing import Callable

from kirogate.models import ConverterSettings, KiroPayloadResult
from kirogate.openai_messages import convert_openai_messages_to_unified
from kirogate.openai_models import ChatCompletionRequest
from kirogate.openai_tools import convert_openai_tools_to_unified
from kirogate.payload import build_kiro_payload_core

logger = logging.getLogger(__name__)


def build_kiro_payload(
    request: ChatCompletionRequest,
    conversation_id: str,
    profile_arn: str,
    settings: ConverterSettings,
    normalize_model: Callable[[str], str] | None = None,
) -> KiroPayloadResult:
    """Convert an OpenAI request into a complete Kiro payload.

    ``normalize_model`` maps the requested model name to a Kiro model id;
    without it the name is used as given. Raises EmptyConversationError
    when there is nothing to send.
    """
    system_prompt, unified_messages = convert_openai_messages_to_unified(request.messages)
    unified_tools = convert_openai_tools_to_unified(request.tools)
    model_id = normalize_model(request.model) if normalize_model is not None else request.model

    logger.debug(
        "Converting OpenAI request: model=%s -> %s, messages=%d, tools=%d, "
        "system_prompt_length=%d",
        request.model,
        model_id,
        len(unified_messages),
        len(unified_tools) if unified_tools is not None else 0,
        len(system_prompt),
    )

    return build_kiro_payload_core(
        unified_messages,
        system_prompt,
        model_id,
        unified_tools,
        conversation_id,
        profile_arn,
        True,
        settings,
    )