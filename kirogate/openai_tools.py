"""Conversion of OpenAI tool definitions to the unified tool form."""

from __future__ import annotations

from kirogate.models import UnifiedTool
from kirogate.openai_models import Tool


def convert_openai_tools_to_unified(tools: list[Tool] | None) -> list[UnifiedTool] | None:
    """Convert OpenAI ``function`` tools to unified tools.

    Tools of any other type are left out. None stays None; an empty list
    gives an empty list.
    """
    if tools is None:
        return None
    return [
        UnifiedTool(
            name=tool.function.name,
            description=tool.function.description,
            input_schema=tool.function.parameters,
        )
        for tool in tools
        if tool.tool_type == "function"
    ]