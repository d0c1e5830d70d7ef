"""SERP document schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class OrganicResult(BaseModel):
    """One organic result row. Unknown provider fields are kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    position: int | None = None
    title: str | None = None
    url: str | None = None
    description: str | None = None


class SerpDocument(BaseModel):
    """Read-only view of a stored SERP result."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    main_keyword: str
    region: str
    language: str
    organic_results: list[OrganicResult] = Field(default_factory=list)
    people_also_ask: list[str] = Field(default_factory=list)
    related_queries: list[str] = Field(default_factory=list)
    ai_overview: str | None = None

    @field_validator("people_also_ask", "related_queries", mode="before")
    @classmethod
    def _drop_empty_entries(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(item) for item in value if item]
        return value
