import pytest

from kirogate.openai_models import (
    ChatCompletionRequest,
    ChatMessage,
    parse_chat_message,
    parse_chat_request,
)


def test_parse_simple_message():
    msg = parse_chat_message({"role": "user", "content": "Hello!"})
    assert msg == ChatMessage(role="user", content="Hello!")


def test_parse_message_with_tool_calls():
    msg = parse_chat_message(
        {
            "role": "assistant",
            "content": "Let me check.",
            "tool_calls": [
                {
                    "id": "call_123",
                    "type": "function",
                    "function": {"name": "get_weather", "arguments": '{"location": "SF"}'},
                }
            ],
        }
    )
    assert len(msg.tool_calls) == 1
    call = msg.tool_calls[0]
    assert call.id == "call_123"
    assert call.tool_type == "function"
    assert call.function.name == "get_weather"
    assert call.function.arguments == '{"location": "SF"}'


def test_parse_tool_message():
    msg = parse_chat_message({"role": "tool", "content": "Sunny", "tool_call_id": "call_123"})
    assert msg.role == "tool"
    assert msg.tool_call_id == "call_123"
    assert msg.tool_calls is None


def test_parse_message_keeps_content_array():
    content = [{"type": "text", "text": "Hello"}, {"type": "text", "text": " World"}]
    msg = parse_chat_message({"role": "user", "content": content})
    assert msg.content == content


def test_parse_message_missing_role():
    with pytest.raises(ValueError):
        parse_chat_message({"content": "x"})


def test_parse_message_not_object():
    with pytest.raises(ValueError):
        parse_chat_message(["user"])


def test_parse_tool_call_missing_function():
    with pytest.raises(ValueError):
        parse_chat_message({"role": "assistant", "tool_calls": [{"id": "call_1"}]})


def test_parse_request_defaults():
    request = parse_chat_request(
        {"model": "claude-sonnet-4", "messages": [{"role": "user", "content": "Hello!"}]}
    )
    assert request == ChatCompletionRequest(
        model="claude-sonnet-4", messages=[ChatMessage(role="user", content="Hello!")]
    )
    assert request.stream is False
    assert request.tools is None


def test_parse_request_with_tools_and_options():
    parameters = {"type": "object", "properties": {"location": {"type": "string"}}}
    request = parse_chat_request(
        {
            "model": "claude-sonnet-4",
            "messages": [],
            "stream": True,
            "temperature": 0.5,
            "max_tokens": 100,
            "tools": [
                {
                    "type": "function",
                    "function": {
                        "name": "get_weather",
                        "description": "Get weather for a location",
                        "parameters": parameters,
                    },
                }
            ],
        }
    )
    assert request.stream is True
    assert request.temperature == 0.5
    assert request.max_tokens == 100
    tool = request.tools[0]
    assert tool.tool_type == "function"
    assert tool.function.name == "get_weather"
    assert tool.function.description == "Get weather for a location"
    assert tool.function.parameters == parameters


def test_parse_request_tool_type_defaults_to_function():
    request = parse_chat_request(
        {"model": "m", "messages": [], "tools": [{"function": {"name": "Read"}}]}
    )
    assert request.tools[0].tool_type == "function"
    assert request.tools[0].function.description is None


def test_parse_request_missing_model():
    with pytest.raises(ValueError):
        parse_chat_request({"messages": []})


def test_parse_request_missing_messages():
    with pytest.raises(ValueError):
        parse_chat_request({"model": "m"})


def test_parse_request_bad_stream():
    with pytest.raises(ValueError):
        parse_chat_request({"model": "m", "messages": [], "stream": "yes"})