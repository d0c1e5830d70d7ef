"""Base class for writing pipeline stage services."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from serpscribe.core.exceptions import SerpScribeError, StageExecutionError
from serpscribe.core.logging import log_context

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseStageService(ABC, Generic[InputT, OutputT]):
    """Abstract base class for pipeline stages.

    Each stage should:
    1. Define stage_name (used in failure messages)
    2. Implement _execute with the main stage logic
    3. Optionally override _validate_output to reject unusable results

    Stages are stateless: one instance serves one request.
    """

    stage_name: str

    async def run(self, input_data: InputT) -> OutputT:
        """Run the stage and normalise unexpected failures.

        Application errors (not found, invalid input, upstream API errors)
        propagate unchanged. Anything else becomes StageExecutionError.
        """
        stage_info = {"stage": self.stage_name, **self._log_context(input_data)}
        logger.info("Stage started", extra=stage_info)

        try:
            with log_context(**stage_info):
                result = await self._execute(input_data)
                self._validate_output(result)
        except SerpScribeError as e:
            logger.warning(
                "Stage failed",
                extra={**stage_info, "error": e.message, "error_type": type(e).__name__},
            )
            raise
        except Exception as e:
            logger.warning(
                "Stage failed",
                extra={**stage_info, "error": str(e), "error_type": type(e).__name__},
            )
            raise StageExecutionError(self.stage_name, str(e) or type(e).__name__) from e

        logger.info("Stage completed", extra=stage_info)
        return result

    @abstractmethod
    async def _execute(self, input_data: InputT) -> OutputT:
        """Override with stage-specific logic."""
        pass

    def _validate_output(self, result: OutputT) -> None:
        """Override to reject results that are unusable downstream."""
        return None

    def _log_context(self, input_data: InputT) -> dict[str, Any]:
        context: dict[str, Any] = {}
        for field in ("serp_doc_id", "keyword", "media_site_name"):
            value = getattr(input_data, field, None)
            if value:
                context[field] = value
        return context


def require_text(value: str | None, what: str) -> str:
    """Reject empty model output."""
    if value is None or not value.strip():
        raise ValueError(f"Model returned empty {what}")
    return value.strip()
