"""Unified, API-agnostic data types shared by the request converters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class ConverterSettings:
    """Settings that influence how requests are converted for the Kiro API."""

    tool_description_max_length: int = 10000
    fake_reasoning_enabled: bool = False
    fake_reasoning_max_tokens: int = 4000


@dataclass
class TextBlock:
    """A plain text content block."""

    text: str


@dataclass
class ImageSource:
    """Source of an image block: inline base64 data or a URL."""

    source_type: str
    media_type: str | None = None
    data: str | None = None
    url: str | None = None


@dataclass
class ImageBlock:
    """An image content block in the Anthropic style."""

    source: ImageSource


@dataclass
class ImageUrlBlock:
    """An image content block in the OpenAI style (``image_url``)."""

    url: str


@dataclass
class ToolResultBlock:
    """The result of a tool invocation, embedded in message content."""

    tool_use_id: str
    content: str


@dataclass
class ToolUseBlock:
    """A tool invocation embedded in assistant message content."""

    id: str
    name: str
    input: Any


ContentBlock = Union[TextBlock, ImageBlock, ImageUrlBlock, ToolResultBlock, ToolUseBlock]
MessageContent = Union[str, list]


@dataclass
class ToolFunction:
    """Name and JSON-encoded arguments of a called function."""

    name: str
    arguments: str


@dataclass
class ToolCall:
    """A tool call made by the assistant."""

    id: str
    function: ToolFunction
    call_type: str = "function"


@dataclass
class ToolResult:
    """The result returned for a tool call."""

    tool_use_id: str
    content: str
    result_type: str = "tool_result"


@dataclass
class UnifiedImage:
    """An inline image with its media type and base64 data."""

    media_type: str
    data: str


@dataclass
class UnifiedTool:
    """A tool definition in unified form."""

    name: str
    description: str | None = None
    input_schema: Any = None


@dataclass
class UnifiedMessage:
    """A conversation message in unified form."""

    role: str
    content: MessageContent = ""
    tool_calls: list[ToolCall] | None = None
    tool_results: list[ToolResult] | None = None
    images: list[UnifiedImage] | None = None

    def has_tool_calls(self) -> bool:
        """True if the message carries at least one tool call."""
        return bool(self.tool_calls)

    def has_tool_results(self) -> bool:
        """True if the message carries at least one tool result."""
        return bool(self.tool_results)


@dataclass
class KiroPayloadResult:
    """A built Kiro request payload and the tool documentation moved into the prompt."""

    payload: dict = field(default_factory=dict)
    tool_documentation: str = ""