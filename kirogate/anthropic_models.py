"""Anthropic Messages API request types and their parsing from JSON data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AnthropicMessage:
    """One message of an Anthropic conversation; content is a string or block list."""

    role: str
    content: Any


@dataclass
class AnthropicTool:
    """A tool definition in an Anthropic request."""

    name: str
    input_schema: Any
    description: str | None = None


@dataclass
class AnthropicMessagesRequest:
    """An Anthropic Messages API request."""

    model: str
    messages: list[AnthropicMessage]
    system: Any = None
    tools: list[AnthropicTool] | None = None


def _expect_object(data: Any, where: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{where} must be an object")
    return data


def _required_str(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{where}: field '{key}' is required and must be a string")
    return value


def _required_key(data: dict, key: str, where: str) -> Any:
    if key not in data:
        raise ValueError(f"{where}: field '{key}' is required")
    return data[key]


def _parse_message(data: Any) -> AnthropicMessage:
    where = "message"
    data = _expect_object(data, where)
    return AnthropicMessage(
        role=_required_str(data, "role", where),
        content=_required_key(data, "content", where),
    )


def _parse_tool(data: Any) -> AnthropicTool:
    where = "tool"
    data = _expect_object(data, where)
    description = data.get("description")
    if description is not None and not isinstance(description, str):
        raise ValueError(f"{where}: field 'description' must be a string")
    return AnthropicTool(
        name=_required_str(data, "name", where),
        description=description,
        input_schema=_required_key(data, "input_schema", where),
    )


def parse_messages_request(data: Any) -> AnthropicMessagesRequest:
    """Build an AnthropicMessagesRequest from decoded JSON; raise ValueError if malformed."""
    where = "request"
    data = _expect_object(data, where)
    model = _required_str(data, "model", where)

    messages = data.get("messages")
    if not isinstance(messages, list):
        raise ValueError(f"{where}: field 'messages' is required and must be an array")

    tools = data.get("tools")
    if tools is not None and not isinstance(tools, list):
        raise ValueError(f"{where}: field 'tools' must be an array")

    return AnthropicMessagesRequest(
        model=model,
        messages=[_parse_message(m) for m in messages],
        system=data.get("system"),
        tools=None if tools is None else [_parse_tool(t) for t in tools],
    )