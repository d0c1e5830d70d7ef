"""Fetch-or-create stage for SERP documents."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from serpscribe.core.exceptions import MediaSiteNotFoundError
from serpscribe.integrations.dataforseo import DataForSEOClient, get_location_code
from serpscribe.repositories.serp_repository import SerpResultRepository
from serpscribe.schemas.writing import FetchSerpStageInput, FetchSerpStageResult
from serpscribe.services.media_sites import find_media_site
from serpscribe.services.writing.base_stage import BaseStageService

logger = logging.getLogger(__name__)


class FetchSerpStage(BaseStageService[FetchSerpStageInput, FetchSerpStageResult]):
    """Returns the stored SERP for a keyword in the site's locale, fetching it if absent."""

    stage_name = "fetch SERP"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repository = SerpResultRepository(session)

    async def _execute(self, input_data: FetchSerpStageInput) -> FetchSerpStageResult:
        site = find_media_site(input_data.media_site_name)
        if site is None:
            raise MediaSiteNotFoundError(input_data.media_site_name)

        existing = await self.repository.find_latest(
            input_data.keyword,
            site.region,
            site.language,
        )
        if existing is not None:
            logger.info(
                "Reusing stored SERP document",
                extra={"serp_doc_id": existing.id, "keyword": input_data.keyword},
            )
            return FetchSerpStageResult(id=existing.id, original_keyword=existing.main_keyword)

        async with DataForSEOClient() as client:
            serp = await client.get_serp_results(
                input_data.keyword,
                location_code=get_location_code(site.region),
                language_code=site.language,
            )

        document = await self.repository.create(
            keyword=input_data.keyword,
            region=site.region,
            language=site.language,
            organic_results=serp["organic_results"],
            people_also_ask=serp["people_also_ask"],
            related_queries=serp["related_queries"],
            ai_overview=serp["ai_overview"],
            total_results=serp["total_results"],
            provider_response_id=serp["provider_response_id"],
        )
        await self.session.commit()
        return FetchSerpStageResult(id=document.id, original_keyword=document.main_keyword)
