"""Centralized logging configuration with JSON-formatted extras.

Records logged while a pipeline stage runs are tagged with that stage's
context (``stage``, ``serp_doc_id``, ``keyword``...) so agent and
integration logs can be correlated without passing the values around.
"""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any] | None] = ContextVar("serpscribe_log_context", default=None)


def current_log_context() -> dict[str, Any]:
    return dict(_log_context.get() or {})


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Attach values to every record logged inside the block."""
    token = _log_context.set({**current_log_context(), **values})
    try:
        yield
    finally:
        _log_context.reset(token)


class StageContextFilter(logging.Filter):
    """Copy the active log context onto records that don't set those keys."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in current_log_context().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class JSONExtrasFormatter(logging.Formatter):
    """Formatter that outputs a readable log line with extras as JSON.

    Output format:
        2024-01-15 10:30:45 | INFO | serpscribe.module | Message {"stage": "title analysis"}
    """

    # Everything a bare LogRecord carries is standard; the rest came from extra=.
    RESERVED_ATTRS = frozenset(
        vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
    ) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        line = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.message}"

        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in self.RESERVED_ATTRS and not key.startswith("_")
        }
        if extras:
            try:
                line = f"{line} {json.dumps(extras, default=str, ensure_ascii=False)}"
            except ValueError:
                pass

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"

        return line


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the 'serpscribe' logger with stage-tagged console output."""
    logger = logging.getLogger("serpscribe")
    logger.setLevel(level)

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(StageContextFilter())
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
