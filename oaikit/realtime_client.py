"""Events a client sends to the realtime server."""

from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .realtime_session import U32, Item, SessionResource, _validate, _WireModel

_EVENT_ID = frozenset({"event_id"})


class SessionUpdateEvent(_WireModel):
    """Update the session's default configuration."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["session.update"] = "session.update"
    event_id: Optional[str] = None
    session: SessionResource


class InputAudioBufferAppendEvent(_WireModel):
    """Append base64-encoded audio to the input buffer."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["input_audio_buffer.append"] = "input_audio_buffer.append"
    event_id: Optional[str] = None
    audio: str


class InputAudioBufferCommitEvent(_WireModel):
    """Commit the buffered audio to a user message."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["input_audio_buffer.commit"] = "input_audio_buffer.commit"
    event_id: Optional[str] = None


class InputAudioBufferClearEvent(_WireModel):
    """Clear the buffered audio."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["input_audio_buffer.clear"] = "input_audio_buffer.clear"
    event_id: Optional[str] = None


class ConversationItemCreateEvent(_WireModel):
    """Add an item to the conversation."""

    omit_if_none: ClassVar[frozenset] = frozenset({"event_id", "previous_item_id"})
    type: Literal["conversation.item.create"] = "conversation.item.create"
    event_id: Optional[str] = None
    previous_item_id: Optional[str] = None
    item: Item

    @classmethod
    def from_item(cls, item: Item) -> "ConversationItemCreateEvent":
        """Wrap an item in a create event with no ids set."""
        return cls(item=item)


class ConversationItemTruncateEvent(_WireModel):
    """Truncate the audio of an earlier assistant message."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["conversation.item.truncate"] = "conversation.item.truncate"
    event_id: Optional[str] = None
    item_id: str
    content_index: U32
    audio_end_ms: U32


class ConversationItemDeleteEvent(_WireModel):
    """Remove an item from the conversation history."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["conversation.item.delete"] = "conversation.item.delete"
    event_id: Optional[str] = None
    item_id: str


class ResponseCreateEvent(_WireModel):
    """Ask the server to generate a response."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["response.create"] = "response.create"
    event_id: Optional[str] = None
    response: Optional[SessionResource] = None


class ResponseCancelEvent(_WireModel):
    """Cancel an in-progress response."""

    omit_if_none: ClassVar[frozenset] = _EVENT_ID
    type: Literal["response.cancel"] = "response.cancel"
    event_id: Optional[str] = None


_CLIENT_EVENT_CLASSES = (
    SessionUpdateEvent,
    InputAudioBufferAppendEvent,
    InputAudioBufferCommitEvent,
    InputAudioBufferClearEvent,
    ConversationItemCreateEvent,
    ConversationItemTruncateEvent,
    ConversationItemDeleteEvent,
    ResponseCreateEvent,
    ResponseCancelEvent,
)

ClientEvent = Annotated[
    Union[
        SessionUpdateEvent,
        InputAudioBufferAppendEvent,
        InputAudioBufferCommitEvent,
        InputAudioBufferClearEvent,
        ConversationItemCreateEvent,
        ConversationItemTruncateEvent,
        ConversationItemDeleteEvent,
        ResponseCreateEvent,
        ResponseCancelEvent,
    ],
    Field(discriminator="type"),
]
_CLIENT_EVENT = TypeAdapter(ClientEvent)


def client_event_to_json(event: Any) -> str:
    """Encode a client event as the JSON text sent over the socket."""
    if not isinstance(event, _CLIENT_EVENT_CLASSES):
        raise TypeError(f"{type(event).__name__} is not a client event")
    return event.model_dump_json()


def parse_client_event(data: Any) -> Any:
    """Decode a client event from a mapping or JSON text."""
    return _validate(_CLIENT_EVENT, data)