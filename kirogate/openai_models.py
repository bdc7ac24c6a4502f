"""OpenAI chat-completion request types and their parsing from JSON data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class FunctionCall:
    """The function named in an assistant tool call."""

    name: str
    arguments: str


@dataclass
class OpenAIToolCall:
    """A tool call in an OpenAI assistant message."""

    id: str
    function: FunctionCall
    tool_type: str = "function"


@dataclass
class ChatMessage:
    """One message of an OpenAI chat conversation."""

    role: str
    content: Any = None
    name: str | None = None
    tool_calls: list[OpenAIToolCall] | None = None
    tool_call_id: str | None = None


@dataclass
class FunctionSpec:
    """A function that a tool exposes."""

    name: str
    description: str | None = None
    parameters: Any = None


@dataclass
class Tool:
    """A tool definition in an OpenAI request."""

    function: FunctionSpec
    tool_type: str = "function"


@dataclass
class ChatCompletionRequest:
    """An OpenAI chat-completion request."""

    model: str
    messages: list[ChatMessage]
    stream: bool = False
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    max_tokens: int | None = None
    max_completion_tokens: int | None = None
    stop: Any = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    tools: list[Tool] | None = None
    tool_choice: Any = None
    stream_options: Any = None
    logit_bias: Any = None
    logprobs: bool | None = None
    top_logprobs: int | None = None
    user: str | None = None
    seed: int | None = None
    parallel_tool_calls: bool | None = None


_PASSTHROUGH_FIELDS = (
    "temperature",
    "top_p",
    "n",
    "max_tokens",
    "max_completion_tokens",
    "stop",
    "presence_penalty",
    "frequency_penalty",
    "tool_choice",
    "stream_options",
    "logit_bias",
    "logprobs",
    "top_logprobs",
    "user",
    "seed",
    "parallel_tool_calls",
)


def _expect_object(data: Any, where: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{where} must be an object")
    return data


def _required_str(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{where}: field '{key}' is required and must be a string")
    return value


def _optional_str(data: dict, key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{where}: field '{key}' must be a string")
    return value


def _optional_list(data: dict, key: str, where: str) -> list | None:
    value = data.get(key)
    if value is not None and not isinstance(value, list):
        raise ValueError(f"{where}: field '{key}' must be an array")
    return value


def _parse_tool_call(data: Any) -> OpenAIToolCall:
    where = "tool call"
    data = _expect_object(data, where)
    function = _expect_object(data.get("function"), f"{where} function")
    return OpenAIToolCall(
        id=_required_str(data, "id", where),
        tool_type=_optional_str(data, "type", where) or "function",
        function=FunctionCall(
            name=_required_str(function, "name", f"{where} function"),
            arguments=_optional_str(function, "arguments", f"{where} function") or "",
        ),
    )


def _parse_tool(data: Any) -> Tool:
    where = "tool"
    data = _expect_object(data, where)
    function = _expect_object(data.get("function"), f"{where} function")
    return Tool(
        tool_type=_optional_str(data, "type", where) or "function",
        function=FunctionSpec(
            name=_required_str(function, "name", f"{where} function"),
            description=_optional_str(function, "description", f"{where} function"),
            parameters=function.get("parameters"),
        ),
    )


def parse_chat_message(data: Any) -> ChatMessage:
    """Build a ChatMessage from decoded JSON; raise ValueError if it is malformed."""
    where = "message"
    data = _expect_object(data, where)
    tool_calls = _optional_list(data, "tool_calls", where)
    return ChatMessage(
        role=_required_str(data, "role", where),
        content=data.get("content"),
        name=_optional_str(data, "name", where),
        tool_calls=None if tool_calls is None else [_parse_tool_call(tc) for tc in tool_calls],
        tool_call_id=_optional_str(data, "tool_call_id", where),
    )


def parse_chat_request(data: Any) -> ChatCompletionRequest:
    """Build a ChatCompletionRequest from decoded JSON; raise ValueError if malformed."""
    where = "request"
    data = _expect_object(data, where)
    model = _required_str(data, "model", where)

    messages = data.get("messages")
    if not isinstance(messages, list):
        raise ValueError(f"{where}: field 'messages' is required and must be an array")

    stream = data.get("stream", False)
    if stream is None:
        stream = False
    if not isinstance(stream, bool):
        raise ValueError(f"{where}: field 'stream' must be a boolean")

    tools = _optional_list(data, "tools", where)
    extras = {key: data.get(key) for key in _PASSTHROUGH_FIELDS}

    return ChatCompletionRequest(
        model=model,
        messages=[parse_chat_message(m) for m in messages],
        stream=stream,
        tools=None if tools is None else [_parse_tool(t) for t in tools],
        **extras,
    )