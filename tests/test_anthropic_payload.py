import json

import pytest

from kirogate.anthropic_models import AnthropicMessage, AnthropicMessagesRequest, AnthropicTool
from kirogate.anthropic_payload import build_kiro_payload
from kirogate.models import ConverterSettings
from kirogate.payload import EmptyConversationError

MODEL = "claude-sonnet-4"


def _request(messages, system=None, tools=None):
    return AnthropicMessagesRequest(model=MODEL, messages=messages, system=system, tools=tools)


def _current(payload):
    return payload["conversationState"]["currentMessage"]["userInputMessage"]


def _tool_conversation():
    return [
        AnthropicMessage(role="user", content="What's the weather?"),
        AnthropicMessage(
            role="assistant",
            content=[
                {"type": "text", "text": "Let me check."},
                {"type": "tool_use", "id": "call_1", "name": "get_weather", "input": {"city": "Seattle"}},
            ],
        ),
        AnthropicMessage(
            role="user",
            content=[{"type": "tool_result", "tool_use_id": "call_1", "content": "Sunny"}],
        ),
    ]


def test_basic_payload():
    request = _request([AnthropicMessage(role="user", content="Hello!")])
    result = build_kiro_payload(request, "conv-1", "profile-arn", ConverterSettings())
    state = result.payload["conversationState"]
    assert state["conversationId"] == "conv-1"
    assert state["chatTriggerType"] == "MANUAL"
    assert "history" not in state
    current = _current(result.payload)
    assert current["content"] == "Hello!"
    assert current["modelId"] == MODEL
    assert current["origin"] == "AI_EDITOR"
    assert result.payload["profileArn"] == "profile-arn"


def test_empty_profile_arn_is_left_out():
    request = _request([AnthropicMessage(role="user", content="Hello!")])
    result = build_kiro_payload(request, "conv-1", "", ConverterSettings())
    assert "profileArn" not in result.payload


def test_system_string_goes_into_current_message():
    request = _request([AnthropicMessage(role="user", content="Hello!")], system="You are helpful.")
    content = _current(build_kiro_payload(request, "c", "p", ConverterSettings()).payload)["content"]
    assert content.startswith("You are helpful.")
    assert content.endswith("Hello!")


def test_system_blocks_are_joined():
    system = [{"type": "text", "text": "Rule one."}, {"type": "text", "text": "Rule two."}]
    request = _request([AnthropicMessage(role="user", content="Hi")], system=system)
    content = _current(build_kiro_payload(request, "c", "p", ConverterSettings()).payload)["content"]
    assert "Rule one.\nRule two." in content


def test_system_goes_into_first_history_message():
    messages = [
        AnthropicMessage(role="user", content="First"),
        AnthropicMessage(role="assistant", content="Reply"),
        AnthropicMessage(role="user", content="Second"),
    ]
    request = _request(messages, system="Be brief.")
    payload = build_kiro_payload(request, "c", "p", ConverterSettings()).payload
    first = payload["conversationState"]["history"][0]["userInputMessage"]["content"]
    assert first.startswith("Be brief.")
    assert first.endswith("First")
    assert _current(payload)["content"] == "Second"


def test_tools_are_in_context():
    schema = {"type": "object", "properties": {"city": {"type": "string"}}}
    tools = [AnthropicTool(name="get_weather", description="Get weather", input_schema=schema)]
    request = _request([AnthropicMessage(role="user", content="Weather?")], tools=tools)
    context = _current(build_kiro_payload(request, "c", "p", ConverterSettings()).payload)[
        "userInputMessageContext"
    ]
    assert len(context["tools"]) == 1
    spec = context["tools"][0]["toolSpecification"]
    assert spec["name"] == "get_weather"
    assert spec["inputSchema"]["json"] == schema


def test_with_tools_keeps_tool_format():
    tools = [AnthropicTool(name="get_weather", description="Get weather", input_schema={"type": "object"})]
    request = _request(_tool_conversation(), tools=tools)
    payload = build_kiro_payload(request, "c", "p", ConverterSettings()).payload
    history = payload["conversationState"]["history"]
    assistant = history[-1]["assistantResponseMessage"]
    assert assistant["toolUses"][0]["toolUseId"] == "call_1"
    assert assistant["toolUses"][0]["input"] == {"city": "Seattle"}
    tool_results = _current(payload)["userInputMessageContext"]["toolResults"]
    assert tool_results[0]["toolUseId"] == "call_1"
    assert tool_results[0]["status"] == "success"


def test_without_tools_converts_tool_content_to_text():
    request = _request(_tool_conversation())
    payload = build_kiro_payload(request, "c", "p", ConverterSettings()).payload
    history = payload["conversationState"]["history"]
    assistant = history[-1]["assistantResponseMessage"]
    assert "toolUses" not in assistant
    assert "[Tool: get_weather (call_1)]" in assistant["content"]
    assert "Sunny" in _current(payload)["content"]
    assert "userInputMessageContext" not in _current(payload)


def test_empty_messages_raise():
    with pytest.raises(EmptyConversationError):
        build_kiro_payload(_request([]), "c", "p", ConverterSettings())


def test_normalize_model_is_applied():
    request = _request([AnthropicMessage(role="user", content="Hi")])
    payload = build_kiro_payload(request, "c", "p", ConverterSettings(), str.upper).payload
    assert _current(payload)["modelId"] == MODEL.upper()


def test_thinking_tags_injected_when_enabled():
    request = _request([AnthropicMessage(role="user", content="Hello!")])
    settings = ConverterSettings(fake_reasoning_enabled=True)
    content = _current(build_kiro_payload(request, "c", "p", settings).payload)["content"]
    assert content.startswith("<thinking_mode>enabled</thinking_mode>")
    assert content.endswith("Hello!")


def test_last_assistant_message_moves_to_history():
    messages = [
        AnthropicMessage(role="user", content="Hi"),
        AnthropicMessage(role="assistant", content="Partial answer"),
    ]
    payload = build_kiro_payload(_request(messages), "c", "p", ConverterSettings()).payload
    history = payload["conversationState"]["history"]
    assert history[-1] == {"assistantResponseMessage": {"content": "Partial answer"}}
    assert _current(payload)["content"] == "Continue"


def test_images_in_current_message():
    messages = [
        AnthropicMessage(
            role="user",
            content=[
                {"type": "text", "text": "Look"},
                {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "abc123"}},
            ],
        )
    ]
    current = _current(build_kiro_payload(_request(messages), "c", "p", ConverterSettings()).payload)
    assert current["images"] == [{"format": "png", "source": {"bytes": "abc123"}}]
    assert current["content"] == "Look"


def test_payload_is_json_serializable_round_trip():
    request = _request(_tool_conversation(), system="Sys")
    payload = build_kiro_payload(request, "c", "p", ConverterSettings()).payload
    assert json.loads(json.dumps(payload)) == payload