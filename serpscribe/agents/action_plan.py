"""Agent for synthesising the editorial action plan."""

import logging

from pydantic import BaseModel

from serpscribe.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)

MISSING_REPORT = "Not provided."


class ActionPlanInput(BaseModel):
    """Input for the action-plan generator. Absent reports are ``None``."""

    keyword: str
    media_site_description: str
    content_type_recommendation: str | None = None
    user_intent_recommendation: str | None = None
    title_recommendation: str | None = None
    better_have_recommendation: str | None = None
    keyword_report: str = ""


class ActionPlanGeneratorAgent(BaseAgent[ActionPlanInput, str]):
    """Combines whichever analysis reports exist into an action plan.

    Any subset of reports may be missing; missing ones are stated as such
    in the prompt so the model still produces a best-effort plan.
    """

    model_tier = "reasoning"
    temperature = 0.6

    @property
    def system_prompt(self) -> str:
        return """You are an SEO project manager with a background in consumer behaviour, traditional marketing and digital marketing.

Tasks:
1. Identify the theme of the keyword.
2. Write a specific action plan for an article on the keyword, using the SEO analysis results you are given. Some analysis sections may be missing; plan with what is available.

Output these sections as H2 headings:
## Keyword Theme
A concise explanation of the theme.
## Action Plan
3-5 concrete points, each an action written as one or two sentences, tailored to the target media site.
## Keywords to Cover in the Article
The keywords and phrases the article must include.

Example action plan points:
- Create in-depth recipes for each soup, highlighting traditional preparation methods.
- Develop content around the health benefits of key ingredients.
- Produce video tutorials for complex recipes, showcasing proper techniques.

Write in the language of the target media site."""

    @property
    def output_type(self) -> type[str]:
        return str

    def _build_prompt(self, input_data: ActionPlanInput) -> str:
        logger.debug(
            "Building action plan prompt",
            extra={
                "keyword": input_data.keyword,
                "has_content_type": input_data.content_type_recommendation is not None,
                "has_user_intent": input_data.user_intent_recommendation is not None,
                "has_title": input_data.title_recommendation is not None,
                "has_better_have": input_data.better_have_recommendation is not None,
                "has_keyword_report": bool(input_data.keyword_report),
            },
        )
        theme_subject = input_data.keyword_report or input_data.keyword
        return f"""Keyword: {input_data.keyword}

SEO analysis results:
- Key topics and trust factors (better have): {input_data.better_have_recommendation or MISSING_REPORT}
- Content type: {input_data.content_type_recommendation or MISSING_REPORT}
- User intent: {input_data.user_intent_recommendation or MISSING_REPORT}
- Title: {input_data.title_recommendation or MISSING_REPORT}

Target media site:
{input_data.media_site_description}

Keyword theme source:
{theme_subject}"""
