"""Agents for SERP title analysis."""

import logging

from pydantic import BaseModel, Field

from serpscribe.agents.base_agent import BaseAgent, TextRecommendationInput

logger = logging.getLogger(__name__)


class TitleAnalysis(BaseModel):
    """Structured title analysis."""

    title: str = Field(description="Suggested optimised title for the article")
    analysis: str = Field(description="Concise analysis of patterns in the ranking titles")
    recommendations: list[str] = Field(
        default_factory=list,
        description="Short, actionable title recommendations",
    )


class TitleAnalysisInput(BaseModel):
    """Input for the title analyzer."""

    keyword: str
    serp_results: str = ""


class TitleAnalyzerAgent(BaseAgent[TitleAnalysisInput, TitleAnalysis]):
    """Finds patterns in ranking titles and proposes a title."""

    model_tier = "standard"
    temperature = 0.4

    @property
    def system_prompt(self) -> str:
        return """You are an SEO analyst specialising in SERP title analysis. Base your analysis strictly on the keyword and SERP results you are given.

Look for patterns in the ranking titles: length, keyword placement, numbers, years, brackets, emotional hooks and format cues. Explain what you find, give title recommendations, and suggest one title for new content on the keyword.

Keep "analysis" to a short summary of the key findings and every recommendation to a single short line. Write in the same language as the keyword."""

    @property
    def output_type(self) -> type[TitleAnalysis]:
        return TitleAnalysis

    def _build_prompt(self, input_data: TitleAnalysisInput) -> str:
        serp_section = input_data.serp_results or "No SERP results were provided."
        return f"""## SEO Report: Analyze SERP Titles for [{input_data.keyword}]

Pages ranking on the first page for "{input_data.keyword}":

{serp_section}"""


class TitleRecommenderAgent(BaseAgent[TextRecommendationInput, str]):
    """Condenses a title analysis into one recommendation sentence."""

    model_tier = "fast"
    temperature = 0.2

    @property
    def system_prompt(self) -> str:
        return """You are an SEO analyst reviewing a title analysis.

Respond with exactly one sentence in the form: "Recommended title: [TITLE] because: [SUMMARY]". Take the title from the analysis and keep the summary to a short phrase derived from it. Write in the same language as the keyword.

Output only that sentence."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: TextRecommendationInput) -> str:
        return f"""Keyword: {input_data.keyword}

Title analysis:
{input_data.analysis_text}"""
