"""Agents for "better have" gap analysis."""

import logging

from pydantic import BaseModel, Field

from serpscribe.agents.base_agent import BaseAgent, TextRecommendationInput

logger = logging.getLogger(__name__)


class BetterHaveItem(BaseModel):
    """One element an article on the keyword should contain."""

    recommendation: str = Field(description="Specific topic, question, concept or phrase to cover")
    justification: str = Field(description="Brief evidence from the SERP data")
    source: str = Field(
        description="organic_results, people_also_ask, related_queries, or ai_overview"
    )


class BetterHaveAnalysis(BaseModel):
    """Structured better-have analysis."""

    items: list[BetterHaveItem] = Field(default_factory=list)


class BetterHaveAnalysisInput(BaseModel):
    """Input for the better-have analyzer."""

    keyword: str
    serp_results: str = ""
    people_also_ask: str = ""
    related_queries: str = ""
    ai_overview: str = ""


class BetterHaveAnalyzerAgent(BaseAgent[BetterHaveAnalysisInput, BetterHaveAnalysis]):
    """Identifies topics an article needs to match and beat the SERP."""

    model_tier = "reasoning"
    temperature = 0.4

    @property
    def system_prompt(self) -> str:
        return """You are an SEO content strategist. From the SERP data you are given (organic results, People Also Ask, related queries, AI overview), identify 5-10 specific topics, questions, concepts or phrases beyond the core keyword that an article must include to satisfy user intent, build reader trust and stand out from competitors.

Rules:
- Be specific. Never give generic advice such as "write high-quality content".
- Tie every item to evidence in the provided data and name the data source.
- Use only the provided data.
- Keep every recommendation and justification brief.
- Write in the same language as the keyword."""

    @property
    def output_type(self) -> type[BetterHaveAnalysis]:
        return BetterHaveAnalysis

    def _build_prompt(self, input_data: BetterHaveAnalysisInput) -> str:
        logger.debug(
            "Building better-have prompt",
            extra={
                "keyword": input_data.keyword,
                "has_paa": bool(input_data.people_also_ask),
                "has_related_queries": bool(input_data.related_queries),
                "has_ai_overview": bool(input_data.ai_overview),
            },
        )
        return f"""Keyword: {input_data.keyword}

Organic results:
{input_data.serp_results or "None provided."}

People Also Ask:
{input_data.people_also_ask or "None provided."}

Related queries:
{input_data.related_queries or "None provided."}

AI overview:
{input_data.ai_overview or "None provided."}"""


class BetterHaveRecommenderAgent(BaseAgent[TextRecommendationInput, str]):
    """Synthesises the better-have items into a 1-2 sentence takeaway."""

    model_tier = "fast"
    temperature = 0.3

    @property
    def system_prompt(self) -> str:
        return """You are an SEO analyst reviewing a "better have in article" analysis.

Summarise the main themes of the recommendations (for example answering People Also Ask questions, or covering comparisons common in the SERP) in one or at most two short, actionable sentences. Do not list the individual items. Write in the same language as the keyword.

Output only those sentences."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: TextRecommendationInput) -> str:
        return f"""Keyword: {input_data.keyword}

Better-have analysis:
{input_data.analysis_text}"""
