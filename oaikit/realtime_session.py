"""Realtime session configuration, conversation items and response resources."""

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Mapping, Optional, Union

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    field_validator,
    model_serializer,
)

U32 = Annotated[int, Field(ge=0, le=2**32 - 1)]


class _WireModel(BaseModel):
    """Base for wire objects; fields named in ``omit_if_none`` are left out when unset."""

    omit_if_none: ClassVar[frozenset] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_unset(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in self.omit_if_none)
        }


def _validate(adapter: TypeAdapter, data: Any) -> Any:
    if isinstance(data, (str, bytes, bytearray)):
        return adapter.validate_json(data)
    return adapter.validate_python(data)


class TextContentPart(_WireModel):
    """A text content part."""

    type: Literal["text"] = "text"
    text: str


class AudioContentPart(_WireModel):
    """An audio content part with its transcript."""

    type: Literal["audio"] = "audio"
    audio: Optional[str] = None
    transcript: str


ContentPart = Annotated[
    Union[TextContentPart, AudioContentPart], Field(discriminator="type")
]
_CONTENT_PART = TypeAdapter(ContentPart)


def parse_content_part(data: Any) -> Union[TextContentPart, AudioContentPart]:
    """Build a content part from a mapping or a JSON document."""
    return _validate(_CONTENT_PART, data)


class Conversation(_WireModel):
    id: str
    object: str


class RealtimeAPIError(_WireModel):
    """Error details reported by the realtime server."""

    type: str
    code: Optional[str] = None
    message: str
    param: Optional[str] = None
    event_id: Optional[str] = None


class ItemType(str, Enum):
    MESSAGE = "message"
    FUNCTION_CALL = "function_call"
    FUNCTION_CALL_OUTPUT = "function_call_output"


class ItemStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    INCOMPLETE = "incomplete"


class ItemRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ItemContentType(str, Enum):
    INPUT_TEXT = "input_text"
    INPUT_AUDIO = "input_audio"
    TEXT = "text"
    AUDIO = "audio"


class ItemContent(_WireModel):
    omit_if_none: ClassVar[frozenset] = frozenset({"text", "audio", "transcript"})

    type: ItemContentType
    text: Optional[str] = None
    audio: Optional[str] = None
    transcript: Optional[str] = None


class Item(_WireModel):
    """A conversation item: a message, a function call or a function call output."""

    omit_if_none: ClassVar[frozenset] = frozenset(
        {
            "id",
            "type",
            "status",
            "role",
            "content",
            "call_id",
            "name",
            "arguments",
            "output",
        }
    )

    id: Optional[str] = None
    type: Optional[ItemType] = None
    status: Optional[ItemStatus] = None
    role: Optional[ItemRole] = None
    content: Optional[list[ItemContent]] = None
    call_id: Optional[str] = None
    name: Optional[str] = None
    arguments: Optional[str] = None
    output: Optional[str] = None


def item_from_value(value: Any) -> Item:
    """Build an item from decoded JSON; raises ValueError when it does not fit."""
    return Item.model_validate(value)


class RateLimit(_WireModel):
    name: str
    limit: U32
    remaining: U32
    reset_seconds: float


class Usage(_WireModel):
    total_tokens: U32
    input_tokens: U32
    output_tokens: U32


class ResponseStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"
    INCOMPLETE = "incomplete"


class FailedError(_WireModel):
    code: str
    message: str


class IncompleteReason(str, Enum):
    INTERRUPTION = "interruption"
    MAX_OUTPUT_TOKENS = "max_output_tokens"
    CONTENT_FILTER = "content_filter"


class IncompleteStatusDetail(_WireModel):
    type: Literal["incomplete"] = "incomplete"
    reason: IncompleteReason


class FailedStatusDetail(_WireModel):
    type: Literal["failed"] = "failed"
    error: Optional[FailedError] = None


ResponseStatusDetail = Annotated[
    Union[IncompleteStatusDetail, FailedStatusDetail], Field(discriminator="type")
]


class ResponseResource(_WireModel):
    id: str
    object: str
    status: ResponseStatus
    status_details: Optional[ResponseStatusDetail] = None
    output: list[Item]
    usage: Optional[Usage] = None


class AudioFormat(str, Enum):
    PCM16 = "pcm16"
    G711_ULAW = "g711-ulaw"
    G711_ALAW = "g711-alaw"


class AudioTranscription(_WireModel):
    enabled: bool
    model: str


class ServerVadTurnDetection(_WireModel):
    """Server-side voice activity detection settings."""

    type: Literal["server_vad"] = "server_vad"
    threshold: float
    prefix_padding_ms: U32
    silence_duration_ms: U32


class FunctionToolDefinition(_WireModel):
    type: Literal["function"] = "function"
    name: str
    description: str
    parameters: Any


class FunctionType(str, Enum):
    FUNCTION = "function"


class ToolChoiceFunction(_WireModel):
    """A tool choice that names one function."""

    type: FunctionType
    name: str


ToolChoiceMode = Literal["auto", "none", "required"]
ToolChoice = Union[ToolChoiceMode, ToolChoiceFunction]
_TOOL_CHOICE_MODES = ("auto", "none", "required")


def parse_tool_choice(data: Any) -> Union[str, ToolChoiceFunction]:
    """Return ``"auto"``, ``"none"``, ``"required"`` or a ToolChoiceFunction."""
    if isinstance(data, ToolChoiceFunction):
        return data
    if isinstance(data, str):
        if data in _TOOL_CHOICE_MODES:
            return data
        raise ValueError(f"unknown tool choice {data!r}")
    if isinstance(data, Mapping):
        return ToolChoiceFunction.model_validate(data)
    raise ValueError(f"cannot read a tool choice from {data!r}")


MaxResponseOutputTokens = Union[int, Literal["inf"]]
_U16_MAX = 65535


def parse_max_response_output_tokens(data: Any) -> Union[int, str]:
    """Return a token count in the 16-bit range or ``"inf"``."""
    if isinstance(data, bool):
        raise ValueError("a token limit cannot be a boolean")
    if isinstance(data, int):
        if 0 <= data <= _U16_MAX:
            return data
        raise ValueError(f"token limit {data} is outside 0..{_U16_MAX}")
    if data == "inf":
        return "inf"
    raise ValueError(f"cannot read a token limit from {data!r}")


class RealtimeVoice(str, Enum):
    ALLOY = "alloy"
    SHIMMER = "shimmer"
    ECHO = "echo"


def _require_tag(value: Any, tag: str) -> Any:
    if isinstance(value, Mapping) and value.get("type") != tag:
        raise ValueError(f"expected an object tagged {tag!r}")
    return value


class SessionResource(_WireModel):
    """Session configuration; unset fields are left out of the wire form."""

    omit_if_none: ClassVar[frozenset] = frozenset(
        {
            "model",
            "modalities",
            "instructions",
            "voice",
            "input_audio_format",
            "output_audio_format",
            "input_audio_transcription",
            "turn_detection",
            "tools",
            "tool_choice",
            "temperature",
            "max_response_output_tokens",
        }
    )

    model: Optional[str] = None
    modalities: Optional[list[str]] = None
    instructions: Optional[str] = None
    voice: Optional[RealtimeVoice] = None
    input_audio_format: Optional[AudioFormat] = None
    output_audio_format: Optional[AudioFormat] = None
    input_audio_transcription: Optional[AudioTranscription] = None
    turn_detection: Optional[ServerVadTurnDetection] = None
    tools: Optional[list[FunctionToolDefinition]] = None
    tool_choice: Optional[ToolChoice] = None
    temperature: Optional[float] = None
    max_response_output_tokens: Optional[MaxResponseOutputTokens] = None

    @field_validator("turn_detection", mode="before")
    @classmethod
    def _check_turn_detection(cls, value: Any) -> Any:
        return _require_tag(value, "server_vad")

    @field_validator("tools", mode="before")
    @classmethod
    def _check_tools(cls, value: Any) -> Any:
        if isinstance(value, list):
            for tool in value:
                _require_tag(tool, "function")
        return value

    @field_validator("tool_choice", mode="before")
    @classmethod
    def _check_tool_choice(cls, value: Any) -> Any:
        return None if value is None else parse_tool_choice(value)

    @field_validator("max_response_output_tokens", mode="before")
    @classmethod
    def _check_max_tokens(cls, value: Any) -> Any:
        return None if value is None else parse_max_response_output_tokens(value)