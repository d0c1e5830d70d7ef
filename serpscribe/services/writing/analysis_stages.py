"""SERP analysis stages: content type, user intent, title, better have."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from serpscribe.agents.base_agent import TextRecommendationInput
from serpscribe.agents.better_have import (
    BetterHaveAnalysisInput,
    BetterHaveAnalyzerAgent,
    BetterHaveRecommenderAgent,
)
from serpscribe.agents.content_type import (
    ContentTypeAnalysisInput,
    ContentTypeAnalyzerAgent,
    ContentTypeRecommenderAgent,
)
from serpscribe.agents.title import (
    TitleAnalysisInput,
    TitleAnalyzerAgent,
    TitleRecommenderAgent,
)
from serpscribe.agents.user_intent import UserIntentAnalysisInput, UserIntentAnalyzerAgent
from serpscribe.core.exceptions import SerpDocumentNotFoundError
from serpscribe.repositories.serp_repository import SerpResultRepository
from serpscribe.schemas.writing import (
    BetterHaveStageInput,
    BetterHaveStageResult,
    ContentTypeStageInput,
    ContentTypeStageResult,
    TitleStageInput,
    TitleStageResult,
    UserIntentStageInput,
    UserIntentStageResult,
)
from serpscribe.services.writing.base_stage import BaseStageService, require_text
from serpscribe.services.writing.serp_formatting import (
    format_ai_overview,
    format_organic_results,
    format_people_also_ask,
    format_related_queries,
)

logger = logging.getLogger(__name__)


class ContentTypeStage(BaseStageService[ContentTypeStageInput, ContentTypeStageResult]):
    """Classifies ranking pages by content type.

    Unlike the other analysis stages this one resolves its SERP document
    by ID; the caller-supplied keyword and results are not used.
    """

    stage_name = "content type analysis"

    def __init__(self, session: AsyncSession) -> None:
        self.repository = SerpResultRepository(session)

    async def _execute(self, input_data: ContentTypeStageInput) -> ContentTypeStageResult:
        document = await self.repository.fetch_by_id(input_data.serp_doc_id)
        if document is None:
            raise SerpDocumentNotFoundError(input_data.serp_doc_id)

        serp_results = format_organic_results(document.organic_results)
        if not serp_results:
            raise ValueError(f"SERP document {document.id} has no organic results")

        analysis_text = await ContentTypeAnalyzerAgent().run(
            ContentTypeAnalysisInput(keyword=document.main_keyword, serp_results=serp_results)
        )
        analysis_text = require_text(analysis_text, "content type analysis")

        recommendation_text = await ContentTypeRecommenderAgent().run(
            TextRecommendationInput(keyword=document.main_keyword, analysis_text=analysis_text)
        )
        return ContentTypeStageResult(
            analysis_text=analysis_text,
            recommendation_text=require_text(recommendation_text, "content type recommendation"),
        )


class UserIntentStage(BaseStageService[UserIntentStageInput, UserIntentStageResult]):
    """Analyses search intent from caller-supplied SERP fields."""

    stage_name = "user intent analysis"

    async def _execute(self, input_data: UserIntentStageInput) -> UserIntentStageResult:
        analysis_text = await UserIntentAnalyzerAgent().run(
            UserIntentAnalysisInput(
                keyword=input_data.keyword,
                serp_results=format_organic_results(input_data.organic_results),
                related_queries=format_related_queries(input_data.related_queries),
            )
        )
        return UserIntentStageResult(
            analysis_text=require_text(analysis_text, "user intent analysis"),
        )


class TitleStage(BaseStageService[TitleStageInput, TitleStageResult]):
    """Analyses ranking titles and recommends one."""

    stage_name = "title analysis"

    async def _execute(self, input_data: TitleStageInput) -> TitleStageResult:
        analysis = await TitleAnalyzerAgent().run(
            TitleAnalysisInput(
                keyword=input_data.keyword,
                serp_results=format_organic_results(input_data.organic_results),
            )
        )
        recommendation_text = await TitleRecommenderAgent().run(
            TextRecommendationInput(
                keyword=input_data.keyword,
                analysis_text=analysis.model_dump_json(indent=2),
            )
        )
        return TitleStageResult(
            analysis_json=analysis.model_dump(mode="json"),
            recommendation_text=require_text(recommendation_text, "title recommendation"),
        )


class BetterHaveStage(BaseStageService[BetterHaveStageInput, BetterHaveStageResult]):
    """Finds topics and questions the article should cover."""

    stage_name = "better have analysis"

    async def _execute(self, input_data: BetterHaveStageInput) -> BetterHaveStageResult:
        analysis = await BetterHaveAnalyzerAgent().run(
            BetterHaveAnalysisInput(
                keyword=input_data.keyword,
                serp_results=format_organic_results(input_data.organic_results),
                people_also_ask=format_people_also_ask(input_data.people_also_ask),
                related_queries=format_related_queries(input_data.related_queries),
                ai_overview=format_ai_overview(input_data.ai_overview),
            )
        )
        if not analysis.items:
            raise ValueError("Model returned no better-have items")

        analysis_text = "\n".join(
            f"* **{item.recommendation}**: Justification: {item.justification} ({item.source})"
            for item in analysis.items
        )
        recommendation_text = await BetterHaveRecommenderAgent().run(
            TextRecommendationInput(keyword=input_data.keyword, analysis_text=analysis_text)
        )
        return BetterHaveStageResult(
            analysis_json=analysis.model_dump(mode="json"),
            recommendation_text=require_text(recommendation_text, "better have recommendation"),
        )
