"""Agent for user-intent analysis of a SERP."""

import logging

from pydantic import BaseModel

from serpscribe.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)


class UserIntentAnalysisInput(BaseModel):
    """Input for the user-intent analyzer."""

    keyword: str
    serp_results: str = ""
    related_queries: str = ""


class UserIntentAnalyzerAgent(BaseAgent[UserIntentAnalysisInput, str]):
    """Maps ranking pages to search-intent categories.

    Produces a Markdown intent table followed by a related-keyword summary
    when related queries are available.
    """

    model_tier = "standard"
    temperature = 0.2

    @property
    def system_prompt(self) -> str:
        return """You are an SEO analyst specialising in user intent. Base your analysis strictly on the query, SERP results and related queries you are given; do not use outside knowledge.

Use exactly four intent categories: Navigational, Informational, Commercial, Transactional.

For each page:
1. Use the TITLE to infer the user's primary goal.
2. Use the DESCRIPTION for context on the kind of site or information the user expects.
3. Assign one intent category.

Output a Markdown table with three columns:
- "Search Intent Category": the category.
- "Actual Intent": the specific goal in under 10 words, with the number of pages matching it.
- "Pages": only the position numbers. Never include URLs.

If related queries are provided, follow the table with a "Related Keywords Summary" section that summarises the themes of related queries per intent category with one or two examples each. Do not build a table per keyword.

Do not add introductions, conclusions or code fences."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: UserIntentAnalysisInput) -> str:
        logger.debug(
            "Building user intent prompt",
            extra={
                "keyword": input_data.keyword,
                "has_serp_results": bool(input_data.serp_results),
                "has_related_queries": bool(input_data.related_queries),
            },
        )
        serp_section = input_data.serp_results or "No SERP results were provided."
        if input_data.related_queries:
            related_section = f"Related queries:\n{input_data.related_queries}"
        else:
            related_section = "No related queries were provided; skip the Related Keywords Summary."

        return f"""## SEO Report: User Intent Analysis for [{input_data.keyword}]

Pages ranking on the first page for "{input_data.keyword}":

{serp_section}

{related_section}"""
