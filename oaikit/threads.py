"""Threads that hold messages, and the requests that create and run them."""

from typing import Any, ClassVar, Optional

from .realtime_session import U32, _WireModel
from .runs import I32, TruncationObject


class ThreadObject(_WireModel):
    """A thread that contains messages."""

    id: str
    object: str
    created_at: I32
    tool_resources: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, Any]] = None


class CreateThreadRequest(_WireModel):
    """Request to create a thread; unset fields are left out of the wire form."""

    omit_if_none: ClassVar[frozenset] = frozenset(
        {"messages", "tool_resources", "metadata"}
    )

    messages: Optional[list[Any]] = None
    tool_resources: Optional[dict[str, Any]] = None
    metadata: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready body of this request."""
        return self.model_dump(mode="json")


class ModifyThreadRequest(_WireModel):
    omit_if_none: ClassVar[frozenset] = frozenset({"metadata", "tool_resources"})

    metadata: Optional[dict[str, Any]] = None
    tool_resources: Optional[dict[str, Any]] = None


class DeleteThreadResponse(_WireModel):
    id: str
    deleted: bool
    object: str


class CreateThreadAndRunRequest(_WireModel):
    """Request to create a thread and start a run on it in one call."""

    omit_if_none: ClassVar[frozenset] = frozenset(
        {
            "thread",
            "model",
            "instructions",
            "tools",
            "tool_resources",
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
    thread: Optional[CreateThreadRequest] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[list[Any]] = None
    tool_resources: Optional[dict[str, Any]] = None
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