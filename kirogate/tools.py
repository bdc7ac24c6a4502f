"""Tool definition handling: long descriptions and conversion to Kiro form."""

from __future__ import annotations

import logging

from kirogate.models import ConverterSettings, UnifiedTool
from kirogate.schema import sanitize_json_schema

logger = logging.getLogger(__name__)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def process_tools_with_long_descriptions(
    tools: list[UnifiedTool] | None, settings: ConverterSettings
) -> tuple[list[UnifiedTool] | None, str]:
    """Move over-long tool descriptions into a documentation text.

    Returns the tools (with long descriptions replaced by a reference) and the
    documentation to append to the system prompt. Lengths are measured in
    UTF-8 bytes; a limit of 0 disables the processing.
    """
    if tools is None:
        return None, ""

    limit = settings.tool_description_max_length
    if limit == 0:
        return tools, ""

    documentation_parts = []
    processed = []
    for tool in tools:
        description = tool.description or ""
        if _byte_length(description) <= limit:
            processed.append(tool)
            continue

        logger.debug(
            "Tool '%s' has long description (%d chars > %d), moving to system prompt",
            tool.name,
            _byte_length(description),
            limit,
        )
        documentation_parts.append(f"## Tool: {tool.name}\n\n{description}")
        processed.append(
            UnifiedTool(
                name=tool.name,
                description=f"[Full documentation in system prompt under '## Tool: {tool.name}']",
                input_schema=tool.input_schema,
            )
        )

    documentation = ""
    if documentation_parts:
        documentation = (
            "\n\n---\n# Tool Documentation\n"
            "The following tools have detailed documentation that couldn't fit in the "
            "tool definition.\n\n" + "\n\n---\n\n".join(documentation_parts)
        )

    return (processed or None), documentation


def convert_tools_to_kiro_format(tools: list[UnifiedTool] | None) -> list[dict]:
    """Convert unified tools to Kiro ``toolSpecification`` entries."""
    if tools is None:
        return []

    kiro_tools = []
    for tool in tools:
        parameters = sanitize_json_schema(tool.input_schema) if tool.input_schema is not None else {}

        description = tool.description
        if description is None or not description.strip():
            logger.debug("Tool '%s' has empty description, using placeholder", tool.name)
            description = f"Tool: {tool.name}"

        kiro_tools.append(
            {
                "toolSpecification": {
                    "name": tool.name,
                    "description": description,
                    "inputSchema": {"json": parameters},
                }
            }
        )
    return kiro_tools