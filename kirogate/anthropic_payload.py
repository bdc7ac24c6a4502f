"""Building a Kiro payload from an Anthropic Messages API request."""

from __future__ import annotations

import logging
from typing import Callable

from kirogate.anthropic_content import extract_system_prompt
from kirogate.anthropic_messages import convert_anthropic_messages, convert_anthropic_tools
from kirogate.anthropic_models import AnthropicMessagesRequest
from kirogate.models import ConverterSettings, KiroPayloadResult
from kirogate.payload import build_kiro_payload_core

logger = logging.getLogger(__name__)


def build_kiro_payload(
    request: AnthropicMessagesRequest,
    conversation_id: str,
    profile_arn: str,
    settings: ConverterSettings,
    normalize_model: Callable[[str], str] | None = None,
) -> KiroPayloadResult:
    """Convert an Anthropic request into a complete Kiro payload.

    ``normalize_model`` maps the requested model name to a Kiro model id;
    without it the name is used as given. Raises EmptyConversationError
    when there is nothing to send.
    """
    unified_messages = convert_anthropic_messages(request.messages)
    unified_tools = convert_anthropic_tools(request.tools)
    system_prompt = extract_system_prompt(request.system)
    model_id = normalize_model(request.model) if normalize_model is not None else request.model

    logger.debug(
        "Converting Anthropic request: model=%s -> %s, messages=%d, tools=%d, "
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