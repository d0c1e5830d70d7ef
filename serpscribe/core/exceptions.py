"""Custom exception classes for the application."""

from typing import Any


class SerpScribeError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Any = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)


# Input Errors
class InvalidInputError(SerpScribeError):
    """Request payload failed shape validation."""

    def __init__(self, field_errors: list[dict[str, str]]) -> None:
        self.field_errors = field_errors
        super().__init__("Invalid input", details=field_errors)


class MediaSiteNotFoundError(InvalidInputError):
    """Media site name is not in the catalogue."""

    def __init__(self, media_site_name: str) -> None:
        super().__init__(
            [
                {
                    "path": "mediaSiteName",
                    "message": f"Unknown media site: {media_site_name}",
                }
            ]
        )


# Document Errors
class SerpDocumentNotFoundError(SerpScribeError):
    """SERP document not found."""

    def __init__(self, serp_doc_id: str) -> None:
        super().__init__(
            "SERP document not found",
            details=f"No SERP document exists for ID: {serp_doc_id}",
        )


# Stage Errors
class StageExecutionError(SerpScribeError):
    """Error during pipeline stage execution."""

    def __init__(self, stage_name: str, message: str) -> None:
        self.stage_name = stage_name
        super().__init__(f"Failed during {stage_name} step", details=message)


class StreamInterruptedError(StageExecutionError):
    """Generation stream ended before its completion event."""


# External API Errors
class ExternalAPIError(SerpScribeError):
    """Error calling external API."""

    def __init__(self, api_name: str, message: str) -> None:
        self.api_name = api_name
        super().__init__(f"{api_name} API error", details=message)


class RateLimitExceededError(ExternalAPIError):
    """Rate limit exceeded for external API."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "Rate limit exceeded")


class APIKeyMissingError(ExternalAPIError):
    """API key not configured."""

    def __init__(self, api_name: str) -> None:
        super().__init__(api_name, "API key not configured")
