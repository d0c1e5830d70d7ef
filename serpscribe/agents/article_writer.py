"""Streaming agents that write or refine the article."""

import logging

from pydantic import BaseModel

from serpscribe.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)

FORMATTING_RULES = """Formatting rules:
- Output only the article. No introductions, analysis or notes about the process.
- Do not use Markdown tables. If a table is needed, write it in HTML.
- Place any references or URLs at the very end, separate from the body."""


class ArticleWriterInput(BaseModel):
    """Input for fresh article generation."""

    final_prompt: str


class ArticleWriterAgent(BaseAgent[ArticleWriterInput, str]):
    """Writes a complete SEO article from the assembled writing prompt."""

    model_tier = "reasoning"
    temperature = 0.7

    @property
    def system_prompt(self) -> str:
        return f"""You are a senior editor writing original long-form SEO articles for a digital publisher. Follow the writing brief exactly: its action plan, outline, keywords, style and audience.

{FORMATTING_RULES}"""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: ArticleWriterInput) -> str:
        return input_data.final_prompt


class ArticleRefinerInput(BaseModel):
    """Input for refining a draft with graph suggestions."""

    input_text: str
    graph_text: str = ""


class ArticleRefinerAgent(BaseAgent[ArticleRefinerInput, str]):
    """Rewrites an article using knowledge-graph writing suggestions."""

    model_tier = "reasoning"
    temperature = 0.6

    @property
    def system_prompt(self) -> str:
        return f"""You are a senior editor. Using the writing suggestions in the graph, adjust the structure of the given article and fill in missing information, producing a NEW complete article that covers every gap the suggestions point out.

- Base the article only on the given text and graph suggestions.
- If the graph is empty or has no actionable suggestions, refine the text for clarity and completeness as best you can.

{FORMATTING_RULES}"""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: ArticleRefinerInput) -> str:
        graph_text = input_data.graph_text or "(no graph suggestions)"
        return f"""{input_data.input_text}
---
Writing suggestions (knowledge graph):
---
{graph_text}"""
