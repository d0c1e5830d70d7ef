"""Conversion of request validation failures into ordered field errors."""

from collections.abc import Mapping, Sequence
from typing import Any

from serpscribe.schemas.writing import MISSING_OR_EMPTY_MESSAGE

_LOCATION_PREFIXES = frozenset({"body", "query", "path"})


def _error_path(loc: Sequence[Any], error_type: str) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_PREFIXES:
        prefix = parts.pop(0)
        # Malformed JSON points at a character offset, not a field.
        if error_type == "json_invalid" or not parts:
            return str(prefix)
    return ".".join(str(part) for part in parts)


def _error_message(error: Mapping[str, Any]) -> str:
    if error.get("type") == "missing":
        return MISSING_OR_EMPTY_MESSAGE
    return str(error.get("msg", "Invalid value"))


def field_errors_from_validation(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Turn pydantic/FastAPI error dicts into ``[{path, message}]`` in input order."""
    field_errors: list[dict[str, str]] = []
    for error in errors:
        error_type = str(error.get("type", ""))
        field_errors.append(
            {
                "path": _error_path(error.get("loc", ()), error_type),
                "message": _error_message(error),
            }
        )
    return field_errors
