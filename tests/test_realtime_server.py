import json

import pytest

from oaikit.realtime_client import InputAudioBufferCommitEvent
from oaikit.realtime_server import (
    ConversationItemCreatedEvent,
    ErrorEvent,
    InputAudioBufferSpeechStartedEvent,
    RateLimitsUpdatedEvent,
    ResponseContentPartAddedEvent,
    ResponseDoneEvent,
    SessionCreatedEvent,
    parse_server_event,
    server_event_to_json,
)
from oaikit.realtime_session import (
    AudioContentPart,
    IncompleteReason,
    IncompleteStatusDetail,
    ItemRole,
    ResponseStatus,
    TextContentPart,
)


def test_parse_error_event():
    event = parse_server_event(
        {
            "type": "error",
            "event_id": "ev1",
            "error": {"type": "server_error", "message": "boom"},
        }
    )
    assert isinstance(event, ErrorEvent)
    assert event.error.type == "server_error"
    assert event.error.code is None
    assert event.error.message == "boom"


def test_parse_from_json_text():
    text = json.dumps(
        {
            "type": "input_audio_buffer.speech_started",
            "event_id": "ev2",
            "audio_start_ms": 120,
            "item_id": "it1",
        }
    )
    event = parse_server_event(text)
    assert isinstance(event, InputAudioBufferSpeechStartedEvent)
    assert event.audio_start_ms == 120
    assert event.item_id == "it1"


def test_session_created_carries_session():
    event = parse_server_event(
        {
            "type": "session.created",
            "event_id": "ev3",
            "session": {"model": "m1", "voice": "alloy", "max_response_output_tokens": "inf"},
        }
    )
    assert isinstance(event, SessionCreatedEvent)
    assert event.session.model == "m1"
    assert event.session.max_response_output_tokens == "inf"


def test_item_created_without_previous_item():
    event = parse_server_event(
        {
            "type": "conversation.item.created",
            "event_id": "ev4",
            "item": {"id": "it2", "role": "user"},
        }
    )
    assert isinstance(event, ConversationItemCreatedEvent)
    assert event.previous_item_id is None
    assert event.item.role is ItemRole.USER


def test_content_part_variants():
    base = {
        "type": "response.content_part.added",
        "event_id": "ev5",
        "response_id": "r1",
        "item_id": "it3",
        "output_index": 0,
        "content_index": 1,
    }
    text_event = parse_server_event({**base, "part": {"type": "text", "text": "hi"}})
    audio_event = parse_server_event(
        {**base, "part": {"type": "audio", "transcript": "hello"}}
    )
    assert isinstance(text_event, ResponseContentPartAddedEvent)
    assert isinstance(text_event.part, TextContentPart)
    assert isinstance(audio_event.part, AudioContentPart)
    assert audio_event.part.audio is None


def test_response_done_with_status_details():
    event = parse_server_event(
        {
            "type": "response.done",
            "event_id": "ev6",
            "response": {
                "id": "r2",
                "object": "realtime.response",
                "status": "incomplete",
                "status_details": {"type": "incomplete", "reason": "max_output_tokens"},
                "output": [],
            },
        }
    )
    assert isinstance(event, ResponseDoneEvent)
    assert event.response.status is ResponseStatus.INCOMPLETE
    assert isinstance(event.response.status_details, IncompleteStatusDetail)
    assert event.response.status_details.reason is IncompleteReason.MAX_OUTPUT_TOKENS


def test_rate_limits_round_trip():
    event = RateLimitsUpdatedEvent(
        event_id="ev7",
        rate_limits=[
            {"name": "requests", "limit": 100, "remaining": 99, "reset_seconds": 1.5}
        ],
    )
    text = server_event_to_json(event)
    assert json.loads(text)["type"] == "rate_limits.updated"
    back = parse_server_event(text)
    assert back == event


def test_none_fields_are_serialised_as_null():
    event = ConversationItemCreatedEvent(event_id="ev8", item={"id": "it4"})
    data = json.loads(server_event_to_json(event))
    assert "previous_item_id" in data
    assert data["previous_item_id"] is None
    assert data["type"] == "conversation.item.created"


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        parse_server_event({"type": "no.such.event", "event_id": "ev9"})


def test_missing_required_field_raises():
    with pytest.raises(ValueError):
        parse_server_event({"type": "response.text.delta", "event_id": "ev10"})


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        parse_server_event(
            {
                "type": "conversation.item.deleted",
                "event_id": "ev11",
            }
        )
    with pytest.raises(ValueError):
        parse_server_event(
            {
                "type": "input_audio_buffer.speech_started",
                "event_id": "ev12",
                "audio_start_ms": -1,
                "item_id": "it5",
            }
        )


def test_to_json_rejects_client_event():
    with pytest.raises(TypeError):
        server_event_to_json(InputAudioBufferCommitEvent())