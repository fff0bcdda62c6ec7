# oaikit

Typed pydantic models for an OpenAI-style service: the Realtime WebSocket
client and server events, assistant runs and threads, organization users,
and helpers that turn file sources into multipart upload parts.

Optional fields that are unset are left out of the wire form, and tagged
unions are chosen by their `type` field. Integer fields that the service
defines as unsigned 32-bit values are range-checked on validation.

## Installation

```
pip install oaikit
```

## Modules

- `oaikit.realtime_session` – session configuration (`SessionResource`),
  conversation items (`Item`, `ItemContent`), content parts, response
  resources, rate limits and errors. Helpers: `item_from_value`,
  `parse_content_part`, `parse_tool_choice` (accepts `"auto"`, `"none"`,
  `"required"` or a function choice) and `parse_max_response_output_tokens`
  (a count from 0 to 65535, or `"inf"`).
- `oaikit.realtime_client` – the nine events a client sends, with
  `client_event_to_json` and `parse_client_event`.
- `oaikit.realtime_server` – the events the server sends, with
  `parse_server_event` and `server_event_to_json`.
- `oaikit.runs` – `RunObject`, `CreateRunRequest`, `ToolsOutputs`,
  `SubmitToolOutputsRunRequest` and related enums.
- `oaikit.threads` – `ThreadObject`, `CreateThreadRequest`,
  `CreateThreadAndRunRequest` and related models.
- `oaikit.users` – `User`, `UserListResponse`, `UserRoleUpdateRequest`,
  `UserDeleteResponse`.
- `oaikit.files` – `PathSource`, `BytesSource`, `FilePart`,
  `create_file_part`, `file_stream_body`, `create_all_dir`, and the
  `FileReadError` / `FileSaveError` exceptions.

## Realtime events

```python
from oaikit.realtime_client import (
    ConversationItemCreateEvent,
    InputAudioBufferAppendEvent,
    client_event_to_json,
)
from oaikit.realtime_server import parse_server_event
from oaikit.realtime_session import item_from_value

payload = client_event_to_json(InputAudioBufferAppendEvent(audio="AAAA"))
# '{"type":"input_audio_buffer.append","audio":"AAAA"}'

event = parse_server_event('{"type": "input_audio_buffer.cleared", "event_id": "evt_1"}')
# InputAudioBufferClearedEvent(type='input_audio_buffer.cleared', event_id='evt_1')

item = item_from_value({"type": "message", "role": "user"})
create = ConversationItemCreateEvent.from_item(item)
```

Parsing functions accept either a mapping or JSON text and raise
pydantic's `ValidationError` (a `ValueError`) when the data does not fit.

## Request bodies

```python
from oaikit.runs import CreateRunRequest

body = CreateRunRequest(assistant_id="asst_1", temperature=0.5).to_dict()
# {'assistant_id': 'asst_1', 'temperature': 0.5}
```

## File sources

```python
from oaikit.files import BytesSource, PathSource, create_file_part

part = create_file_part(BytesSource(filename="notes.txt", data=b"hello"))
# FilePart(file_name='notes.txt', content=b'hello', mime_type='application/octet-stream')

streamed = create_file_part(PathSource("data/report.jsonl"))
# streamed.content is an iterator over the file's bytes in 64 KiB chunks
```

`file_stream_body` raises `FileReadError` for anything but a path source,
and `create_all_dir` creates a directory with its parents, raising
`FileSaveError` when that fails.

## What this package does not do

The package describes data; it does not talk to a server. There is no
HTTP client, no transport and no WebSocket connection: building requests,
sending them and reading the replies is left to the caller, who can feed
the decoded JSON to these models. It has no models for run steps, for
multi-part uploads or for vector stores and their files.

## Running the tests

```
pip install -e ".[test]"
pytest
```