"""Streaming generation stages: article writing/refinement and personas.

``run`` does all the work that can fail before the first byte (input mode
checks, reference scraping, graph building) and returns a PreparedStream.
The route then frames the stream's chunks as server-sent events.
"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from serpscribe.agents.article_writer import (
    ArticleRefinerAgent,
    ArticleRefinerInput,
    ArticleWriterAgent,
    ArticleWriterInput,
)
from serpscribe.agents.base_agent import BaseAgent
from serpscribe.agents.knowledge_graph import KnowledgeGraphAgent, KnowledgeGraphInput
from serpscribe.agents.persona import PersonaGeneratorAgent, PersonaGeneratorInput
from serpscribe.config import settings
from serpscribe.core.exceptions import ExternalAPIError, InvalidInputError
from serpscribe.integrations.scraper import WebsiteScraper
from serpscribe.schemas.writing import (
    MISSING_OR_EMPTY_MESSAGE,
    ArticleStageInput,
    PersonaStageInput,
)
from serpscribe.services.writing.base_stage import BaseStageService
from serpscribe.services.writing.final_prompt import build_final_prompt

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PreparedStream:
    """An agent and its input, ready to stream."""

    agent: BaseAgent[Any, str]
    input_data: BaseModel

    def chunks(self) -> AsyncIterator[str]:
        return self.agent.stream_text(self.input_data)


def check_article_mode(input_data: ArticleStageInput) -> None:
    """Reject article requests that select neither generation mode.

    Raises:
        InvalidInputError: before any external call is made.
    """
    if input_data.is_refinement:
        return
    field_errors = []
    if not input_data.action_plan:
        field_errors.append(
            {
                "path": "actionPlan",
                "message": "Provide actionPlan, or inputText/targetUrl to refine an article",
            }
        )
    if not input_data.keyword:
        field_errors.append({"path": "keyword", "message": MISSING_OR_EMPTY_MESSAGE})
    if field_errors:
        raise InvalidInputError(field_errors)


class ArticleGenerationStage(BaseStageService[ArticleStageInput, PreparedStream]):
    """Prepares fresh article generation or refinement of a draft."""

    stage_name = "article generation"

    async def _execute(self, input_data: ArticleStageInput) -> PreparedStream:
        check_article_mode(input_data)
        if input_data.is_refinement:
            return await self._prepare_refinement(input_data)

        final_prompt = build_final_prompt(
            keyword=input_data.keyword or "",
            action_plan=input_data.action_plan or "",
            media_site_name=input_data.media_site_name,
            content_type_report_text=input_data.content_type_report_text,
            user_intent_report_text=input_data.user_intent_report_text,
            better_have_recommendation_text=input_data.better_have_recommendation_text,
            keyword_report=input_data.keyword_report,
            selected_cluster_name=input_data.selected_cluster_name,
            organic_results=input_data.organic_results,
        )
        return PreparedStream(
            agent=ArticleWriterAgent(),
            input_data=ArticleWriterInput(final_prompt=final_prompt),
        )

    async def _prepare_refinement(self, input_data: ArticleStageInput) -> PreparedStream:
        reference_text = ""
        if input_data.target_url:
            reference_text = await self._fetch_reference(input_data.target_url)

        # The draft is refined when given; otherwise the reference is rewritten.
        article_text = input_data.input_text or reference_text
        graph_source = reference_text or article_text
        graph_text = await KnowledgeGraphAgent().run(KnowledgeGraphInput(text=graph_source))

        logger.info(
            "Refinement prepared",
            extra={
                "has_draft": bool(input_data.input_text),
                "target_url": input_data.target_url,
                "reference_chars": len(reference_text),
                "graph_chars": len(graph_text or ""),
            },
        )
        return PreparedStream(
            agent=ArticleRefinerAgent(),
            input_data=ArticleRefinerInput(input_text=article_text, graph_text=graph_text or ""),
        )

    async def _fetch_reference(self, url: str) -> str:
        async with WebsiteScraper() as scraper:
            page = await scraper.scrape_page(url)
        if "error" in page:
            raise ExternalAPIError("Reference page", page["error"])
        text = page.get("text_content") or ""
        if not text.strip():
            raise ExternalAPIError("Reference page", f"No readable content at {url}")
        return text


class PersonaGenerationStage(BaseStageService[PersonaStageInput, PreparedStream]):
    """Prepares persona generation over a capped keyword list."""

    stage_name = "persona generation"

    async def _execute(self, input_data: PersonaStageInput) -> PreparedStream:
        max_keywords = settings.persona_max_keywords
        keywords = input_data.keywords[:max_keywords]
        if len(input_data.keywords) > max_keywords:
            logger.info(
                "Keyword list truncated for persona generation",
                extra={"received": len(input_data.keywords), "kept": max_keywords},
            )
        return PreparedStream(
            agent=PersonaGeneratorAgent(),
            input_data=PersonaGeneratorInput(
                keywords=keywords,
                cluster_name=input_data.cluster_name,
                max_personas=settings.persona_max_personas,
            ),
        )
