import json

import pytest
from pydantic import ValidationError

from oaikit.runs import (
    CreateRunRequest,
    LastErrorCode,
    ListRunsResponse,
    ModifyRunRequest,
    RunObject,
    RunObjectIncompleteDetailsReason,
    RunStatus,
    SubmitToolOutputsRunRequest,
    ToolsOutputs,
    TruncationObject,
    TruncationObjectType,
)


def _run_payload(**overrides):
    payload = {
        "id": "run_abc",
        "object": "thread.run",
        "created_at": 1700000000,
        "thread_id": "thread_abc",
        "assistant_id": "asst_abc",
        "status": "requires_action",
        "required_action": {
            "type": "submit_tool_outputs",
            "submit_tool_outputs": {
                "tool_calls": [
                    {
                        "id": "call_1",
                        "type": "function",
                        "function": {"name": "lookup", "arguments": "{}"},
                    }
                ]
            },
        },
        "last_error": {"code": "rate_limit_exceeded", "message": "slow down"},
        "incomplete_details": {"reason": "max_prompt_tokens"},
        "model": "gpt-4o",
        "instructions": "be brief",
        "tools": [{"type": "code_interpreter"}],
        "parallel_tool_calls": True,
        "truncation_strategy": {"type": "last_messages", "last_messages": 5},
    }
    payload.update(overrides)
    return payload


def test_run_object_parses_nested_fields():
    run = RunObject.model_validate(_run_payload())
    assert run.status is RunStatus.REQUIRES_ACTION
    assert run.required_action.submit_tool_outputs.tool_calls[0].id == "call_1"
    assert run.last_error.code is LastErrorCode.RATE_LIMIT_EXCEEDED
    assert run.incomplete_details.reason is RunObjectIncompleteDetailsReason.MAX_PROMPT_TOKENS
    assert run.truncation_strategy.type is TruncationObjectType.LAST_MESSAGES
    assert run.truncation_strategy.last_messages == 5
    assert run.usage is None


def test_run_object_round_trip():
    run = RunObject.model_validate(_run_payload())
    again = RunObject.model_validate_json(run.model_dump_json())
    assert again == run


def test_run_object_serializes_missing_options_as_null():
    run = RunObject.model_validate(_run_payload())
    data = run.model_dump(mode="json")
    assert data["usage"] is None
    assert data["status"] == "requires_action"


def test_run_object_rejects_unknown_status():
    with pytest.raises(ValidationError):
        RunObject.model_validate(_run_payload(status="sleeping"))


def test_run_object_requires_parallel_tool_calls():
    payload = _run_payload()
    del payload["parallel_tool_calls"]
    with pytest.raises(ValidationError):
        RunObject.model_validate(payload)


def test_run_object_rejects_negative_token_limit():
    with pytest.raises(ValidationError):
        RunObject.model_validate(_run_payload(max_prompt_tokens=-1))


def test_truncation_object_defaults_to_auto():
    truncation = TruncationObject()
    assert truncation.type is TruncationObjectType.AUTO
    assert truncation.model_dump(mode="json") == {"type": "auto", "last_messages": None}


def test_create_run_request_omits_unset_fields():
    request = CreateRunRequest(assistant_id="asst_abc")
    assert request.to_dict() == {"assistant_id": "asst_abc"}


def test_create_run_request_keeps_set_fields():
    request = CreateRunRequest(
        assistant_id="asst_abc",
        stream=True,
        truncation_strategy=TruncationObject(type=TruncationObjectType.LAST_MESSAGES, last_messages=3),
    )
    body = request.to_dict()
    assert body["stream"] is True
    assert body["truncation_strategy"] == {"type": "last_messages", "last_messages": 3}
    assert "model" not in body
    assert json.loads(json.dumps(body)) == body


def test_create_run_request_round_trip():
    request = CreateRunRequest(assistant_id="asst_abc", temperature=0.5, metadata={"k": "v"})
    assert CreateRunRequest.model_validate(request.to_dict()) == request


def test_modify_run_request_empty_body():
    assert ModifyRunRequest().model_dump() == {}


def test_tool_outputs_serialize_nulls():
    request = SubmitToolOutputsRunRequest(
        tool_outputs=[ToolsOutputs(tool_call_id="call_1", output="42")]
    )
    data = request.model_dump(mode="json")
    assert data["stream"] is None
    assert data["tool_outputs"] == [{"tool_call_id": "call_1", "output": "42"}]


def test_list_runs_response_parses():
    listing = ListRunsResponse.model_validate(
        {"object": "list", "data": [_run_payload()], "has_more": False}
    )
    assert [run.id for run in listing.data] == ["run_abc"]
    assert listing.first_id is None