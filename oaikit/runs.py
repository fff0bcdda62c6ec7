"""Runs: executions of an assistant on a thread, and the requests that drive them."""

from enum import Enum
from typing import Annotated, Any, ClassVar, Optional

from pydantic import Field

from .realtime_session import U32, _WireModel

I32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class RunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    EXPIRED = "expired"


class TruncationObjectType(str, Enum):
    AUTO = "auto"
    LAST_MESSAGES = "last_messages"


class TruncationObject(_WireModel):
    """How a thread is truncated before a run."""

    type: TruncationObjectType = TruncationObjectType.AUTO
    last_messages: Optional[U32] = None


class RunObjectIncompleteDetailsReason(str, Enum):
    MAX_COMPLETION_TOKENS = "max_completion_tokens"
    MAX_PROMPT_TOKENS = "max_prompt_tokens"


class RunObjectIncompleteDetails(_WireModel):
    reason: RunObjectIncompleteDetailsReason


class RunToolCallObject(_WireModel):
    """A tool call whose output the run is waiting for."""

    id: str
    type: str
    function: dict[str, Any]


class SubmitToolOutputs(_WireModel):
    tool_calls: list[RunToolCallObject]


class RequiredAction(_WireModel):
    """Action needed before the run can continue."""

    type: str
    submit_tool_outputs: SubmitToolOutputs


class LastErrorCode(str, Enum):
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INVALID_PROMPT = "invalid_prompt"


class LastError(_WireModel):
    code: LastErrorCode
    message: str


class RunCompletionUsage(_WireModel):
    completion_tokens: U32
    prompt_tokens: U32
    total_tokens: U32


class RunObject(_WireModel):
    """An execution run on a thread."""

    id: str
    object: str
    created_at: I32
    thread_id: str
    assistant_id: Optional[str] = None
    status: RunStatus
    required_action: Optional[RequiredAction] = None
    last_error: Optional[LastError] = None
    expires_at: Optional[I32] = None
    started_at: Optional[I32] = None
    cancelled_at: Optional[I32] = None
    failed_at: Optional[I32] = None
    completed_at: Optional[I32] = None
    incomplete_details: Optional[RunObjectIncompleteDetails] = None
    model: str
    instructions: str
    tools: list[Any]
    metadata: Optional[dict[str, Any]] = None
    usage: Optional[RunCompletionUsage] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_prompt_tokens: Optional[U32] = None
    max_completion_tokens: Optional[U32] = None
    truncation_strategy: Optional[TruncationObject] = None
    tool_choice: Optional[Any] = None
    parallel_tool_calls: bool
    response_format: Optional[Any] = None


class CreateRunRequest(_WireModel):
    """Request to start a run; unset fields are left out of the wire form."""

    omit_if_none: ClassVar[frozenset] = frozenset(
        {
            "model",
            "instructions",
            "additional_instructions",
            "additional_messages",
            "tools",
            "metadata",
            "temperature",
            "top_p",
            "stream",
            "max_prompt_tokens",
            "max_completion_tokens",
            "truncation_strategy",
            "tool_choice",
            "parallel_tool_calls",
            "response_format",
        }
    )

    assistant_id: str = ""
    model: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None
    additional_messages: Optional[list[Any]] = None
    tools: Optional[list[Any]] = None
    metadata: Optional[dict[str, Any]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stream: Optional[bool] = None
    max_prompt_tokens: Optional[U32] = None
    max_completion_tokens: Optional[U32] = None
    truncation_strategy: Optional[TruncationObject] = None
    tool_choice: Optional[Any] = None
    parallel_tool_calls: Optional[bool] = None
    response_format: Optional[Any] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready body of this request."""
        return self.model_dump(mode="json")


class ModifyRunRequest(_WireModel):
    omit_if_none: ClassVar[frozenset] = frozenset({"metadata"})

    metadata: Optional[dict[str, Any]] = None


class ListRunsResponse(_WireModel):
    object: str
    data: list[RunObject]
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool


class ToolsOutputs(_WireModel):
    """The output of one tool call submitted to a run."""

    tool_call_id: Optional[str] = None
    output: Optional[str] = None


class SubmitToolOutputsRunRequest(_WireModel):
    tool_outputs: list[ToolsOutputs] = Field(default_factory=list)
    stream: Optional[bool] = None