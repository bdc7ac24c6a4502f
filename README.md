# kirogate

kirogate turns chat requests written for the OpenAI Chat Completions API or the
Anthropic Messages API into the conversation payload that the Kiro API expects.
It has no runtime dependencies.

## What it does

- Parses request data that has already been decoded from JSON into dataclasses:
  `kirogate.openai_models.parse_chat_request` and
  `kirogate.anthropic_models.parse_messages_request`. Both raise `ValueError`
  when the data is malformed.
- Converts OpenAI and Anthropic messages and tools into a shared internal form
  (`UnifiedMessage`, `UnifiedTool` in `kirogate.models`). OpenAI `system`
  messages are joined into one system prompt. Runs of OpenAI `tool` messages
  become a single user message that carries their tool results.
- Removes `additionalProperties` and empty `required` lists from tool JSON
  schemas at every level (`kirogate.schema.sanitize_json_schema`), because Kiro
  rejects both.
- Moves tool descriptions that are too long into a "Tool Documentation" section
  of the system prompt and leaves a reference in the tool.
- Turns tool calls and tool results into plain text when the request defines no
  tools. When tools are defined, it drops tool results that have no assistant
  tool call right before them.
- Merges adjacent messages that have the same role.
- Uses all messages except the last as the Kiro history. The last message
  becomes the current message. The system prompt goes in front of the first
  history message if that message comes from the user. If there is no history,
  it goes in front of the current message. If the last message comes from the
  assistant, it moves into the history and the current message becomes
  "Continue".
- Can add "fake reasoning" thinking tags to the current message when that
  message comes from the user.

## Install

```
pip install kirogate
```

## Usage

The sample below converts an OpenAI request:

```python
from kirogate.models import ConverterSettings
from kirogate.openai_models import parse_chat_request
from kirogate.openai_payload import build_kiro_payload

request = parse_chat_request({
    "model": "claude-sonnet-4",
    "messages": [
        {"role": "system", "content": "You are helpful."},
        {"role": "user", "content": "Hello!"},
    ],
})

result = build_kiro_payload(request, "conv-123", "profile-arn", ConverterSettings())
print(result.payload["conversationState"]["currentMessage"])
print(result.tool_documentation)
```

Anthropic requests work the same way. Parse them with
`kirogate.anthropic_models.parse_messages_request` and pass the result to
`kirogate.anthropic_payload.build_kiro_payload`.

Both `build_kiro_payload` functions take an optional fifth argument,
`normalize_model`. This is a function that maps the model name in the request
to a Kiro model id. If you leave it out, the name is used as given.

To build a payload from messages that are already in unified form, call
`kirogate.payload.build_kiro_payload_core` directly.

If there are no messages left to send, the payload builders raise
`kirogate.payload.EmptyConversationError`, which is a subclass of `ValueError`.

## Settings

`kirogate.models.ConverterSettings` has these fields:

- `tool_description_max_length` (default `10000`): the longest tool description,
  in UTF-8 bytes, that stays in the tool. `0` turns this off.
- `fake_reasoning_enabled` (default `False`): adds the thinking-mode explanation
  to the system prompt and the thinking tags to the current user message.
- `fake_reasoning_max_tokens` (default `4000`): the value given in
  `<max_thinking_length>`.

## What it does not do

kirogate only builds request payloads. It does not:

- run a server;
- send requests to the Kiro API;
- handle authentication or tokens;
- convert Kiro responses back into OpenAI or Anthropic form;
- come with a built-in table for mapping model names.

## Tests

```
pip install -e .[test]
pytest
```