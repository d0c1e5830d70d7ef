"""Agents for content-type analysis of a SERP."""

import logging

from pydantic import BaseModel, Field

from serpscribe.agents.base_agent import BaseAgent, TextRecommendationInput

logger = logging.getLogger(__name__)

CONTENT_TYPES = (
    "How to guides",
    "Step by step tutorials",
    "List posts",
    "Opinion editorials",
    "Videos",
    "Product pages",
    "Category pages",
    "Landing pages for a service",
)


class ContentTypeAnalysisInput(BaseModel):
    """Input for the content-type analyzer."""

    keyword: str
    serp_results: str = Field(description="Numbered organic results with descriptions")


class ContentTypeAnalyzerAgent(BaseAgent[ContentTypeAnalysisInput, str]):
    """Classifies first-page results into the eight content types.

    Output is a Markdown table with "Content Type" and "Pages" columns.
    """

    model_tier = "standard"
    temperature = 0.2

    @property
    def system_prompt(self) -> str:
        content_types = "\n".join(
            f"{index}. {content_type}" for index, content_type in enumerate(CONTENT_TYPES, start=1)
        )
        return f"""You are an SEO analyst specialising in content type analysis. Base your analysis strictly on the keyword and SERP results you are given; do not use outside knowledge.

There are exactly eight content types:
{content_types}

Consider both the TITLE and the DESCRIPTION of each result when deciding its content type.

Respond only with a Markdown table with two columns, "Content Type" and "Pages":
- "Content Type" holds the content type and the number of pages in it.
- "Pages" lists only the position numbers (e.g. 1, 2, 3). Never include URLs.

Do not add introductions, explanations, summaries or code fences. Keep cell contents short."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: ContentTypeAnalysisInput) -> str:
        return f"""## SEO Report: Content Type Analysis for [{input_data.keyword}]

These are the pages ranking on the first page of a search engine for "{input_data.keyword}", with positions, titles, URLs and descriptions:

{input_data.serp_results}

Categorise every page into one of the eight content types and collate the results into the table."""


class ContentTypeRecommenderAgent(BaseAgent[TextRecommendationInput, str]):
    """Turns a content-type table into a one-sentence recommendation."""

    model_tier = "fast"
    temperature = 0.2

    @property
    def system_prompt(self) -> str:
        return """You are an SEO analyst reviewing a Content Type Analysis report in Markdown.

Respond with exactly one sentence that recommends the dominant content type and gives a very short reason taken directly from the report (for example, that it is the most frequent type on the SERP). Use the form: "Write a [TYPE] because: [REASON]". Write the sentence in the same language as the keyword.

Output only that sentence."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: TextRecommendationInput) -> str:
        return f"""Keyword: {input_data.keyword}

Content Type Analysis report:
{input_data.analysis_text}"""
