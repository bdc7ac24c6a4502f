"""Assembly of the full system prompt sent along with a conversation."""

from __future__ import annotations

import logging

from kirogate.models import ConverterSettings
from kirogate.thinking import get_thinking_system_prompt_addition

logger = logging.getLogger(__name__)


def _append(prompt: str, addition: str) -> str:
    if not addition:
        return prompt
    if prompt:
        return prompt + addition
    return addition.strip()


def build_system_prompt(
    system_prompt: str, tool_documentation: str, settings: ConverterSettings
) -> str:
    """Add tool documentation and the thinking-mode explanation to the system prompt.

    An addition to an empty prompt is stripped of surrounding whitespace.
    """
    logger.debug("Initial system_prompt length: %d", len(system_prompt))
    logger.debug("Tool documentation length: %d", len(tool_documentation))
    full = _append(system_prompt, tool_documentation)
    logger.debug("After tool documentation, full_system_prompt length: %d", len(full))
    full = _append(full, get_thinking_system_prompt_addition(settings))
    logger.debug("After thinking addition, full_system_prompt length: %d", len(full))
    return full