"""Synthesis stages: action plan and final writing prompt."""

import logging

from serpscribe.agents.action_plan import ActionPlanGeneratorAgent, ActionPlanInput
from serpscribe.schemas.writing import (
    ActionPlanStageInput,
    ActionPlanStageResult,
    FinalPromptStageInput,
    FinalPromptStageResult,
)
from serpscribe.services.media_sites import describe_media_site, find_media_site
from serpscribe.services.writing.base_stage import BaseStageService, require_text
from serpscribe.services.writing.final_prompt import build_final_prompt
from serpscribe.services.writing.serp_formatting import format_keyword_report

logger = logging.getLogger(__name__)


class ActionPlanStage(BaseStageService[ActionPlanStageInput, ActionPlanStageResult]):
    """Builds a best-effort action plan from whichever reports were supplied."""

    stage_name = "action plan generation"

    async def _execute(self, input_data: ActionPlanStageInput) -> ActionPlanStageResult:
        if find_media_site(input_data.media_site_name) is None:
            logger.info(
                "Unknown media site, planning without site profile",
                extra={"media_site_name": input_data.media_site_name},
            )

        action_plan_text = await ActionPlanGeneratorAgent().run(
            ActionPlanInput(
                keyword=input_data.keyword,
                media_site_description=describe_media_site(input_data.media_site_name),
                content_type_recommendation=input_data.content_type_report_text,
                user_intent_recommendation=input_data.user_intent_report_text,
                title_recommendation=input_data.title_recommendation_text,
                better_have_recommendation=input_data.better_have_recommendation_text,
                keyword_report=format_keyword_report(
                    input_data.keyword_report,
                    input_data.selected_cluster_name,
                ),
            )
        )
        return ActionPlanStageResult(
            action_plan_text=require_text(action_plan_text, "action plan"),
        )


class FinalPromptStage(BaseStageService[FinalPromptStageInput, FinalPromptStageResult]):
    """Assembles the article-writing prompt from the plan and reports."""

    stage_name = "final prompt generation"

    async def _execute(self, input_data: FinalPromptStageInput) -> FinalPromptStageResult:
        final_prompt = build_final_prompt(
            keyword=input_data.keyword,
            action_plan=input_data.action_plan,
            media_site_name=input_data.media_site_name,
            content_type_report_text=input_data.content_type_report_text,
            user_intent_report_text=input_data.user_intent_report_text,
            better_have_recommendation_text=input_data.better_have_recommendation_text,
            keyword_report=input_data.keyword_report,
            selected_cluster_name=input_data.selected_cluster_name,
            organic_results=input_data.organic_results,
        )
        return FinalPromptStageResult(final_prompt=final_prompt)
