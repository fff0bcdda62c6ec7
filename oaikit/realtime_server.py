"""Events the realtime server sends to a client."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .realtime_session import (
    U32,
    ContentPart,
    Conversation,
    Item,
    RateLimit,
    RealtimeAPIError,
    ResponseResource,
    SessionResource,
    _validate,
    _WireModel,
)


class ErrorEvent(_WireModel):
    """Returned when an error occurs."""

    type: Literal["error"] = "error"
    event_id: str
    error: RealtimeAPIError


class SessionCreatedEvent(_WireModel):
    """Returned when a session is created."""

    type: Literal["session.created"] = "session.created"
    event_id: str
    session: SessionResource


class SessionUpdatedEvent(_WireModel):
    """Returned when a session is updated."""

    type: Literal["session.updated"] = "session.updated"
    event_id: str
    session: SessionResource


class ConversationCreatedEvent(_WireModel):
    """Returned right after session creation."""

    type: Literal["conversation.created"] = "conversation.created"
    event_id: str
    conversation: Conversation


class InputAudioBufferCommitedEvent(_WireModel):
    """Returned when the input audio buffer is committed."""

    type: Literal["input_audio_buffer.committed"] = "input_audio_buffer.committed"
    event_id: str
    previous_item_id: str
    item_id: str


class InputAudioBufferClearedEvent(_WireModel):
    """Returned when the client clears the input audio buffer."""

    type: Literal["input_audio_buffer.cleared"] = "input_audio_buffer.cleared"
    event_id: str


class InputAudioBufferSpeechStartedEvent(_WireModel):
    """Returned in server turn detection mode when speech is detected."""

    type: Literal["input_audio_buffer.speech_started"] = (
        "input_audio_buffer.speech_started"
    )
    event_id: str
    audio_start_ms: U32
    item_id: str


class InputAudioBufferSpeechStoppedEvent(_WireModel):
    """Returned in server turn detection mode when speech stops."""

    type: Literal["input_audio_buffer.speech_stopped"] = (
        "input_audio_buffer.speech_stopped"
    )
    event_id: str
    audio_end_ms: U32
    item_id: str


class ConversationItemCreatedEvent(_WireModel):
    """Returned when a conversation item is created."""

    type: Literal["conversation.item.created"] = "conversation.item.created"
    event_id: str
    previous_item_id: Optional[str] = None
    item: Item


class ConversationItemInputAudioTranscriptionCompletedEvent(_WireModel):
    """Returned when an input audio transcription succeeds."""

    type: Literal["conversation.item.input_audio_transcription.completed"] = (
        "conversation.item.input_audio_transcription.completed"
    )
    event_id: str
    item_id: str
    content_index: U32
    transcript: str


class ConversationItemInputAudioTranscriptionFailedEvent(_WireModel):
    """Returned when an input audio transcription fails."""

    type: Literal["conversation.item.input_audio_transcription.failed"] = (
        "conversation.item.input_audio_transcription.failed"
    )
    event_id: str
    item_id: str
    content_index: U32
    error: RealtimeAPIError


class ConversationItemTruncatedEvent(_WireModel):
    """Returned when an assistant audio item is truncated by the client."""

    type: Literal["conversation.item.truncated"] = "conversation.item.truncated"
    event_id: str
    item_id: str
    content_index: U32
    audio_end_ms: U32


class ConversationItemDeletedEvent(_WireModel):
    """Returned when a conversation item is deleted."""

    type: Literal["conversation.item.deleted"] = "conversation.item.deleted"
    event_id: str
    item_id: str


class ResponseCreatedEvent(_WireModel):
    """Returned when a new response is created."""

    type: Literal["response.created"] = "response.created"
    event_id: str
    response: ResponseResource


class ResponseDoneEvent(_WireModel):
    """Returned when a response is done streaming."""

    type: Literal["response.done"] = "response.done"
    event_id: str
    response: ResponseResource


class ResponseOutputItemAddedEvent(_WireModel):
    """Returned when a new item is created during response generation."""

    type: Literal["response.output_item.added"] = "response.output_item.added"
    event_id: str
    response_id: str
    output_index: U32
    item: Item


class ResponseOutputItemDoneEvent(_WireModel):
    """Returned when an item is done streaming."""

    type: Literal["response.output_item.done"] = "response.output_item.done"
    event_id: str
    response_id: str
    output_index: U32
    item: Item


class ResponseContentPartAddedEvent(_WireModel):
    """Returned when a content part is added to an assistant message."""

    type: Literal["response.content_part.added"] = "response.content_part.added"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    part: ContentPart


class ResponseContentPartDoneEvent(_WireModel):
    """Returned when a content part is done streaming."""

    type: Literal["response.content_part.done"] = "response.content_part.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    part: ContentPart


class ResponseTextDeltaEvent(_WireModel):
    """Returned when the text of a text content part is updated."""

    type: Literal["response.text.delta"] = "response.text.delta"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    delta: str


class ResponseTextDoneEvent(_WireModel):
    """Returned when the text of a text content part is done streaming."""

    type: Literal["response.text.done"] = "response.text.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    text: str


class ResponseAudioTranscriptDeltaEvent(_WireModel):
    """Returned when the transcription of audio output is updated."""

    type: Literal["response.audio_transcript.delta"] = (
        "response.audio_transcript.delta"
    )
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    delta: str


class ResponseAudioTranscriptDoneEvent(_WireModel):
    """Returned when the transcription of audio output is done streaming."""

    type: Literal["response.audio_transcript.done"] = "response.audio_transcript.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    transcript: str


class ResponseAudioDeltaEvent(_WireModel):
    """Returned when the generated audio is updated."""

    type: Literal["response.audio.delta"] = "response.audio.delta"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32
    delta: str


class ResponseAudioDoneEvent(_WireModel):
    """Returned when the generated audio is done."""

    type: Literal["response.audio.done"] = "response.audio.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    content_index: U32


class ResponseFunctionCallArgumentsDeltaEvent(_WireModel):
    """Returned when generated function call arguments are updated."""

    type: Literal["response.function_call_arguments.delta"] = (
        "response.function_call_arguments.delta"
    )
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    call_id: str
    delta: str


class ResponseFunctionCallArgumentsDoneEvent(_WireModel):
    """Returned when generated function call arguments are done streaming."""

    type: Literal["response.function_call_arguments.done"] = (
        "response.function_call_arguments.done"
    )
    event_id: str
    response_id: str
    item_id: str
    output_index: U32
    call_id: str
    arguments: str


class RateLimitsUpdatedEvent(_WireModel):
    """Emitted after every response.done event with the updated rate limits."""

    type: Literal["rate_limits.updated"] = "rate_limits.updated"
    event_id: str
    rate_limits: list[RateLimit]


_SERVER_EVENT_CLASSES = (
    ErrorEvent,
    SessionCreatedEvent,
    SessionUpdatedEvent,
    ConversationCreatedEvent,
    InputAudioBufferCommitedEvent,
    InputAudioBufferClearedEvent,
    InputAudioBufferSpeechStartedEvent,
    InputAudioBufferSpeechStoppedEvent,
    ConversationItemCreatedEvent,
    ConversationItemInputAudioTranscriptionCompletedEvent,
    ConversationItemInputAudioTranscriptionFailedEvent,
    ConversationItemTruncatedEvent,
    ConversationItemDeletedEvent,
    ResponseCreatedEvent,
    ResponseDoneEvent,
    ResponseOutputItemAddedEvent,
    ResponseOutputItemDoneEvent,
    ResponseContentPartAddedEvent,
    ResponseContentPartDoneEvent,
    ResponseTextDeltaEvent,
    ResponseTextDoneEvent,
    ResponseAudioTranscriptDeltaEvent,
    ResponseAudioTranscriptDoneEvent,
    ResponseAudioDeltaEvent,
    ResponseAudioDoneEvent,
    ResponseFunctionCallArgumentsDeltaEvent,
    ResponseFunctionCallArgumentsDoneEvent,
    RateLimitsUpdatedEvent,
)

ServerEvent = Annotated[
    Union[
        ErrorEvent,
        SessionCreatedEvent,
        SessionUpdatedEvent,
        ConversationCreatedEvent,
        InputAudioBufferCommitedEvent,
        InputAudioBufferClearedEvent,
        InputAudioBufferSpeechStartedEvent,
        InputAudioBufferSpeechStoppedEvent,
        ConversationItemCreatedEvent,
        ConversationItemInputAudioTranscriptionCompletedEvent,
        ConversationItemInputAudioTranscriptionFailedEvent,
        ConversationItemTruncatedEvent,
        ConversationItemDeletedEvent,
        ResponseCreatedEvent,
        ResponseDoneEvent,
        ResponseOutputItemAddedEvent,
        ResponseOutputItemDoneEvent,
        ResponseContentPartAddedEvent,
        ResponseContentPartDoneEvent,
        ResponseTextDeltaEvent,
        ResponseTextDoneEvent,
        ResponseAudioTranscriptDeltaEvent,
        ResponseAudioTranscriptDoneEvent,
        ResponseAudioDeltaEvent,
        ResponseAudioDoneEvent,
        ResponseFunctionCallArgumentsDeltaEvent,
        ResponseFunctionCallArgumentsDoneEvent,
        RateLimitsUpdatedEvent,
    ],
    Field(discriminator="type"),
]
_SERVER_EVENT = TypeAdapter(ServerEvent)


def parse_server_event(data: Any) -> Any:
    """Decode a server event from a mapping or JSON text; raises ValueError on bad input."""
    return _validate(_SERVER_EVENT, data)


def server_event_to_json(event: Any) -> str:
    """Encode a server event as JSON text."""
    if not isinstance(event, _SERVER_EVENT_CLASSES):
        raise TypeError(f"{type(event).__name__} is not a server event")
    return event.model_dump_json()