"""Repository for SERP result documents."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from serpscribe.models.serp import SerpResult
from serpscribe.schemas.serp import SerpDocument

logger = logging.getLogger(__name__)


def normalize_keyword(keyword: str) -> str:
    """Lowercase and collapse whitespace so lookups ignore formatting."""
    return " ".join(keyword.lower().split())


def to_document(row: SerpResult) -> SerpDocument:
    return SerpDocument(
        id=row.id,
        main_keyword=row.original_keyword,
        region=row.region,
        language=row.language,
        organic_results=row.organic_results or [],
        people_also_ask=row.people_also_ask or [],
        related_queries=row.related_queries or [],
        ai_overview=row.ai_overview,
    )


class SerpResultRepository:
    """Reads and stores SERP documents. Analysis stages only ever read."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def fetch_by_id(self, serp_doc_id: str) -> SerpDocument | None:
        result = await self.session.execute(
            select(SerpResult).where(SerpResult.id == serp_doc_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            logger.info("SERP document not found", extra={"serp_doc_id": serp_doc_id})
            return None
        return to_document(row)

    async def find_latest(
        self,
        keyword: str,
        region: str,
        language: str,
    ) -> SerpDocument | None:
        """Return the newest stored document for a keyword in a locale."""
        result = await self.session.execute(
            select(SerpResult)
            .where(
                SerpResult.normalized_keyword == normalize_keyword(keyword),
                SerpResult.region == region,
                SerpResult.language == language,
            )
            .order_by(SerpResult.created_at.desc())
            .limit(1)
        )
        row = result.scalar_one_or_none()
        return to_document(row) if row is not None else None

    async def create(
        self,
        *,
        keyword: str,
        region: str,
        language: str,
        organic_results: list[dict[str, Any]],
        people_also_ask: list[str],
        related_queries: list[str],
        ai_overview: str | None = None,
        total_results: int | None = None,
        provider_response_id: str | None = None,
    ) -> SerpDocument:
        row = SerpResult(
            original_keyword=keyword,
            normalized_keyword=normalize_keyword(keyword),
            region=region,
            language=language,
            organic_results=organic_results,
            people_also_ask=people_also_ask,
            related_queries=related_queries,
            ai_overview=ai_overview,
            total_results=total_results,
            provider_response_id=provider_response_id,
        )
        self.session.add(row)
        await self.session.flush()
        logger.info(
            "SERP document stored",
            extra={
                "serp_doc_id": row.id,
                "keyword": keyword,
                "region": region,
                "language": language,
                "organic_count": len(organic_results),
            },
        )
        return to_document(row)
