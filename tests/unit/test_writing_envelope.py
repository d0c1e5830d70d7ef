from __future__ import annotations

import json
from collections.abc import AsyncGenerator

import pytest

from serpscribe.core.exceptions import (
    ExternalAPIError,
    InvalidInputError,
    MediaSiteNotFoundError,
    RateLimitExceededError,
    SerpDocumentNotFoundError,
    StageExecutionError,
    StreamInterruptedError,
)
from serpscribe.schemas.writing import UserIntentStageResult
from serpscribe.services.writing.envelope import (
    error_body,
    error_response,
    sse_event,
    status_code_for,
    stream_text_events,
    success_response,
)


async def _chunks(*texts: str, error: Exception | None = None) -> AsyncGenerator[str, None]:
    for text in texts:
        yield text
    if error is not None:
        raise error


async def _collect(events) -> list[tuple[str, dict]]:
    parsed = []
    async for raw in events:
        event_line, data_line = raw.strip().split("\n")
        parsed.append((event_line.removeprefix("event: "), json.loads(data_line.removeprefix("data: "))))
    return parsed


def test_success_response_uses_camel_case() -> None:
    response = success_response(UserIntentStageResult(analysis_text="| table |"))

    assert response.status_code == 200
    assert json.loads(response.body) == {"analysisText": "| table |"}


def test_success_response_refuses_error_key() -> None:
    with pytest.raises(ValueError):
        success_response({"error": "nope"})


def test_error_body_omits_absent_details() -> None:
    assert error_body("Internal server error") == {"error": "Internal server error"}
    assert error_body("Invalid input", []) == {"error": "Invalid input", "details": []}


def test_error_response_defaults_to_500() -> None:
    response = error_response("Failed during title analysis step", "timeout")

    assert response.status_code == 500
    assert json.loads(response.body) == {
        "error": "Failed during title analysis step",
        "details": "timeout",
    }


@pytest.mark.parametrize(
    ("exc", "status_code"),
    [
        (InvalidInputError([{"path": "keyword", "message": "x"}]), 400),
        (MediaSiteNotFoundError("NOPE"), 400),
        (SerpDocumentNotFoundError("doc1"), 404),
        (ExternalAPIError("DataForSEO", "boom"), 502),
        (RateLimitExceededError("DataForSEO"), 502),
        (StageExecutionError("title analysis", "boom"), 500),
        (StreamInterruptedError("article generation", "reset"), 500),
    ],
)
def test_status_code_for(exc, status_code: int) -> None:
    assert status_code_for(exc) == status_code


def test_sse_event_keeps_unicode() -> None:
    assert sse_event("chunk", {"text": "跑鞋"}) == 'event: chunk\ndata: {"text": "跑鞋"}\n\n'


@pytest.mark.asyncio
async def test_stream_emits_chunks_then_done() -> None:
    events = await _collect(stream_text_events(_chunks("a", "b"), stage_name="article generation"))

    assert events == [
        ("chunk", {"text": "a"}),
        ("chunk", {"text": "b"}),
        ("done", {"chunks": 2}),
    ]


@pytest.mark.asyncio
async def test_stream_failure_emits_single_error_without_done() -> None:
    events = await _collect(
        stream_text_events(
            _chunks("partial", error=RuntimeError("reset by peer")),
            stage_name="article generation",
        )
    )

    assert events == [
        ("chunk", {"text": "partial"}),
        ("error", {"error": "Failed during article generation step", "details": "reset by peer"}),
    ]


@pytest.mark.asyncio
async def test_empty_stream_is_an_error() -> None:
    events = await _collect(stream_text_events(_chunks(), stage_name="persona generation"))

    assert events == [
        (
            "error",
            {"error": "Failed during persona generation step", "details": "Model returned no text"},
        )
    ]


@pytest.mark.asyncio
async def test_disconnect_stops_stream_and_closes_source() -> None:
    closed = False

    async def source() -> AsyncGenerator[str, None]:
        nonlocal closed
        try:
            for text in ("one", "two", "three"):
                yield text
        finally:
            closed = True

    checks = iter([False, True])

    async def is_disconnected() -> bool:
        return next(checks)

    events = await _collect(
        stream_text_events(source(), stage_name="article generation", is_disconnected=is_disconnected)
    )

    assert events == [("chunk", {"text": "one"})]
    assert closed is True
