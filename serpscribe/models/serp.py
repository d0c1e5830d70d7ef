"""Stored SERP result documents."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Index, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from serpscribe.models.base import Base, TimestampMixin, UUIDMixin


class SerpResult(Base, UUIDMixin, TimestampMixin):
    """One SERP snapshot for a keyword in a region/language."""

    __tablename__ = "serp_results"
    __table_args__ = (
        Index(
            "ix_serp_results_lookup",
            "normalized_keyword",
            "region",
            "language",
            "created_at",
        ),
    )

    original_keyword: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    normalized_keyword: Mapped[str] = mapped_column(String(500), nullable=False)
    region: Mapped[str] = mapped_column(String(10), nullable=False)
    language: Mapped[str] = mapped_column(String(20), nullable=False)
    organic_results: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, default=list
    )
    people_also_ask: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    related_queries: Mapped[list[str]] = mapped_column(JSONB, nullable=False, default=list)
    ai_overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_results: Mapped[int | None] = mapped_column(nullable=True)
    provider_response_id: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<SerpResult {self.id} keyword={self.original_keyword!r} {self.region}/{self.language}>"
