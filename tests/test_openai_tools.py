from kirogate.openai_models import FunctionSpec, Tool
from kirogate.openai_tools import convert_openai_tools_to_unified


def test_convert_openai_tools():
    tools = [
        Tool(
            tool_type="function",
            function=FunctionSpec(
                name="get_weather",
                description="Get weather",
                parameters={"type": "object"},
            ),
        )
    ]
    unified = convert_openai_tools_to_unified(tools)
    assert unified is not None
    assert len(unified) == 1
    assert unified[0].name == "get_weather"
    assert unified[0].description == "Get weather"
    assert unified[0].input_schema == {"type": "object"}


def test_convert_openai_tools_none():
    assert convert_openai_tools_to_unified(None) is None


def test_convert_openai_tools_empty():
    unified = convert_openai_tools_to_unified([])
    assert unified == []


def test_non_function_tools_are_filtered_out():
    tools = [
        Tool(tool_type="retrieval", function=FunctionSpec(name="search")),
        Tool(function=FunctionSpec(name="kept")),
    ]
    unified = convert_openai_tools_to_unified(tools)
    assert [t.name for t in unified] == ["kept"]


def test_missing_description_and_parameters_stay_none():
    unified = convert_openai_tools_to_unified([Tool(function=FunctionSpec(name="bare"))])
    assert unified[0].description is None
    assert unified[0].input_schema is None