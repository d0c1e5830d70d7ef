"""Assembly of the final article-writing prompt.

The prompt is a deterministic template over the action plan and the
analysis reports; no model call happens here.
"""

from collections.abc import Sequence
from typing import Any

from serpscribe.services.media_sites import describe_media_site
from serpscribe.services.writing.serp_formatting import (
    NOT_PROVIDED,
    format_keyword_report,
    format_organic_results,
)

KEYWORD_REPORT_IN_PLAN = "<!-- Keyword report details were incorporated into the action plan -->"

WRITER_BRIEF = """You will write a brand-new article for the given keyword, from scratch.

Think the article through step by step before writing and review it afterwards. Keep iterating until the content is fully optimised for keyword usage, readability and search best practice. Check the article rigorously before you finish.

Write an SEO article of 2000-3000 words."""

STYLE_RULES = """Avoid:
- writing keyword insights into the article
- bilingual text
- sentences about SEO or marketing
- analysis processes, internal links or source references in the body

Output only the article content. Place any references or URLs at the very end, separate from the main content, and do not count them towards the word count.

Group similar keywords naturally in sentences. Every keyword or phrase in the better-have list must appear at least once.

Analyse competitor content and create unique, differentiated content. Cover topics competitors discuss without depth and add insights that provide more value.

Formatting and readability:
- Use lists, data and examples.
- Break up long paragraphs."""


def build_final_prompt(
    *,
    keyword: str,
    action_plan: str,
    media_site_name: str | None = None,
    content_type_report_text: str | None = None,
    user_intent_report_text: str | None = None,
    better_have_recommendation_text: str | None = None,
    keyword_report: Any = None,
    selected_cluster_name: str | None = None,
    organic_results: Sequence[Any] | None = None,
) -> str:
    """Build the writing prompt handed to the article writer."""
    # A selected cluster means the report already shaped the action plan.
    if selected_cluster_name:
        keyword_report_text = KEYWORD_REPORT_IN_PLAN
    else:
        keyword_report_text = format_keyword_report(keyword_report)

    better_have = better_have_recommendation_text or NOT_PROVIDED
    sections = [
        WRITER_BRIEF,
        action_plan.strip(),
        f"Focus keyword: {keyword}",
    ]
    if keyword_report_text:
        sections.append(keyword_report_text.strip())
    sections.extend(
        [
            f"Write in the style of this media site:\n{describe_media_site(media_site_name)}",
            f"Use this content type recommendation: {content_type_report_text or NOT_PROVIDED}",
            f"Use these better-have points to enhance the article:\n{better_have}",
            f"Match this user intent recommendation:\n{user_intent_report_text or NOT_PROVIDED}",
        ]
    )
    competitors = format_organic_results(organic_results)
    if competitors:
        sections.append(f"Competitor pages currently ranking:\n{competitors}")
    sections.append(STYLE_RULES)
    sections.append(f"Must include these keywords and phrases:\n- {better_have}")
    return "\n\n".join(sections) + "\n"
