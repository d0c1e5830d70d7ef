"""Constants for writing pipeline routes."""

ERROR_ENVELOPE_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {"type": "string"},
        "details": {},
    },
    "required": ["error"],
}


def _error_response(description: str) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"schema": ERROR_ENVELOPE_SCHEMA}},
    }


INVALID_INPUT_RESPONSE = {400: _error_response("Invalid input; details lists {path, message}")}
NOT_FOUND_RESPONSE = {404: _error_response("SERP document not found")}
UPSTREAM_RESPONSE = {502: _error_response("Upstream provider or reference page failure")}
STAGE_FAILURE_RESPONSE = {500: _error_response("Stage execution failed")}

STAGE_ERROR_RESPONSES = {**INVALID_INPUT_RESPONSE, **STAGE_FAILURE_RESPONSE}

EVENT_STREAM_RESPONSE = {
    200: {
        "description": (
            "Server-sent events: `chunk` events carrying `{\"text\": ...}`, then `done`. "
            "A failure after the stream opened is sent as one `error` event."
        ),
        "content": {"text/event-stream": {"schema": {"type": "string"}}},
    }
}
