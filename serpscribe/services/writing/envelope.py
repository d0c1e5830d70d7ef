"""Uniform success/error envelopes and event-stream framing."""

import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from contextlib import aclosing
from typing import Any

from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from serpscribe.core.exceptions import (
    ExternalAPIError,
    InvalidInputError,
    SerpDocumentNotFoundError,
    SerpScribeError,
    StreamInterruptedError,
)

logger = logging.getLogger(__name__)

ERROR_KEY = "error"
SSE_HEADERS = {"Cache-Control": "no-cache", "X-Accel-Buffering": "no"}


def success_response(result: BaseModel | Mapping[str, Any], status_code: int = 200) -> JSONResponse:
    """Wrap a stage result. Success payloads must never carry an ``error`` key."""
    if isinstance(result, BaseModel):
        payload = result.model_dump(mode="json", by_alias=True)
    else:
        payload = dict(result)
    if ERROR_KEY in payload:
        raise ValueError("Success payload must not contain an 'error' key")
    return JSONResponse(content=payload, status_code=status_code)


def error_body(message: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {ERROR_KEY: message}
    if details is not None:
        body["details"] = details
    return body


def error_response(message: str, details: Any = None, status_code: int = 500) -> JSONResponse:
    return JSONResponse(content=error_body(message, details), status_code=status_code)


def status_code_for(exc: SerpScribeError) -> int:
    if isinstance(exc, InvalidInputError):
        return 400
    if isinstance(exc, SerpDocumentNotFoundError):
        return 404
    if isinstance(exc, ExternalAPIError):
        return 502
    return 500


def sse_event(event: str, data: Mapping[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


def _error_event(exc: SerpScribeError) -> str:
    return sse_event("error", error_body(exc.message, exc.details))


async def stream_text_events(
    chunks: AsyncIterator[str],
    *,
    stage_name: str,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncIterator[str]:
    """Frame text chunks as SSE events.

    Emits ``chunk`` events followed by ``done``. A failure mid-stream emits
    one ``error`` event and ends the stream without ``done``; chunks already
    sent stay sent. A disconnected client ends the stream silently and the
    chunk source is closed.
    """
    emitted = 0
    async with aclosing(chunks) as source:
        try:
            async for text in source:
                if is_disconnected is not None and await is_disconnected():
                    logger.info(
                        "Client disconnected, closing stream",
                        extra={"stage": stage_name, "chunks": emitted},
                    )
                    return
                emitted += 1
                yield sse_event("chunk", {"text": text})
        except Exception as e:
            interrupted = StreamInterruptedError(stage_name, str(e) or type(e).__name__)
            logger.warning(
                "Stream interrupted",
                extra={"stage": stage_name, "chunks": emitted, "error": interrupted.details},
            )
            yield _error_event(interrupted)
            return

    if emitted == 0:
        logger.warning("Stream produced no output", extra={"stage": stage_name})
        yield _error_event(StreamInterruptedError(stage_name, "Model returned no text"))
        return

    logger.info("Stream completed", extra={"stage": stage_name, "chunks": emitted})
    yield sse_event("done", {"chunks": emitted})


def event_stream_response(events: AsyncIterator[str]) -> StreamingResponse:
    return StreamingResponse(events, media_type="text/event-stream", headers=SSE_HEADERS)
