"""Request and response schemas for the writing pipeline stages.

Wire names are camelCase (``serpDocId``, ``organicResults``); Python
attributes are snake_case. Required strings reject absent, ``null`` and
whitespace-only values with the ``missing_or_empty_field`` error type.
Optional fields accept ``null`` or absence and normalise blank values to
``None`` so executors never need to tell the two apart.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

MISSING_OR_EMPTY_FIELD = "missing_or_empty_field"
MISSING_OR_EMPTY_MESSAGE = "Field is required and must be a non-empty string"


def _require_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError(MISSING_OR_EMPTY_FIELD, MISSING_OR_EMPTY_MESSAGE)
    return value.strip()


def _optional_text(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _optional_list(value: Any) -> Any:
    if value is None:
        return None
    return value


RequiredText = Annotated[str, BeforeValidator(_require_text)]
OptionalText = Annotated[str | None, BeforeValidator(_optional_text)]
OptionalList = Annotated[list[Any] | None, BeforeValidator(_optional_list)]


class StageModel(BaseModel):
    """Base for camelCase stage payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# Inputs


class FetchSerpStageInput(StageModel):
    """Input for fetching or creating a SERP document."""

    keyword: RequiredText
    media_site_name: RequiredText


class ContentTypeStageInput(StageModel):
    """Input for content-type analysis; the document is resolved by ID."""

    serp_doc_id: RequiredText
    keyword: OptionalText = None
    organic_results: OptionalList = None


class UserIntentStageInput(StageModel):
    """Input for user-intent analysis."""

    serp_doc_id: RequiredText
    keyword: RequiredText
    organic_results: OptionalList = None
    related_queries: OptionalList = None


class TitleStageInput(StageModel):
    """Input for SERP title analysis."""

    serp_doc_id: RequiredText
    keyword: RequiredText
    organic_results: OptionalList = None


class BetterHaveStageInput(StageModel):
    """Input for better-have gap analysis."""

    serp_doc_id: RequiredText
    keyword: RequiredText
    organic_results: OptionalList = None
    people_also_ask: OptionalList = None
    related_queries: OptionalList = None
    ai_overview: Annotated[str | dict[str, Any] | None, BeforeValidator(_optional_text)] = None


class ActionPlanStageInput(StageModel):
    """Input for action-plan generation. Every report is optional."""

    keyword: RequiredText
    media_site_name: RequiredText
    content_type_report_text: OptionalText = None
    user_intent_report_text: OptionalText = None
    title_recommendation_text: OptionalText = None
    better_have_recommendation_text: OptionalText = None
    keyword_report: Any | None = None
    selected_cluster_name: OptionalText = None


class FinalPromptStageInput(ActionPlanStageInput):
    """Input for assembling the final writing prompt."""

    action_plan: RequiredText
    organic_results: OptionalList = None


class ArticleStageInput(StageModel):
    """Input for article generation or refinement.

    Fresh generation needs ``keyword`` and ``actionPlan``. Refinement is
    selected by ``inputText`` and/or ``targetUrl``.
    """

    keyword: OptionalText = None
    action_plan: OptionalText = None
    media_site_name: OptionalText = None
    content_type_report_text: OptionalText = None
    user_intent_report_text: OptionalText = None
    better_have_recommendation_text: OptionalText = None
    keyword_report: Any | None = None
    selected_cluster_name: OptionalText = None
    organic_results: OptionalList = None
    input_text: OptionalText = None
    target_url: OptionalText = None

    @field_validator("target_url")
    @classmethod
    def _require_http_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = value.strip()
        if not cleaned.startswith(("http://", "https://")):
            raise PydanticCustomError(
                "invalid_url",
                "Target URL must start with http:// or https://",
            )
        return cleaned

    @property
    def is_refinement(self) -> bool:
        return bool(self.input_text or self.target_url)


class PersonaStageInput(StageModel):
    """Input for persona generation from a keyword list."""

    keywords: list[str]
    cluster_name: OptionalText = None

    @field_validator("keywords")
    @classmethod
    def _require_keywords(cls, value: list[str]) -> list[str]:
        cleaned = [keyword.strip() for keyword in value if keyword and keyword.strip()]
        if not cleaned:
            raise PydanticCustomError(
                MISSING_OR_EMPTY_FIELD,
                "At least 1 keyword is required for persona creation",
            )
        return cleaned


# Results


class ContentTypeStageResult(StageModel):
    analysis_text: str
    recommendation_text: str


class UserIntentStageResult(StageModel):
    analysis_text: str


class TitleStageResult(StageModel):
    analysis_json: dict[str, Any]
    recommendation_text: str


class BetterHaveStageResult(StageModel):
    analysis_json: dict[str, Any]
    recommendation_text: str


class ActionPlanStageResult(StageModel):
    action_plan_text: str


class FinalPromptStageResult(StageModel):
    final_prompt: str


class FetchSerpStageResult(StageModel):
    id: str
    original_keyword: str


class MediaSiteResponse(StageModel):
    name: str
    url: str
    title: str
    description: str
    language: str
    region: str


class MediaSiteListResponse(StageModel):
    items: list[MediaSiteResponse]
