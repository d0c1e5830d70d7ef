"""Writing pipeline API endpoints."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse

from serpscribe.api.v1.writing.constants import (
    EVENT_STREAM_RESPONSE,
    NOT_FOUND_RESPONSE,
    STAGE_ERROR_RESPONSES,
    UPSTREAM_RESPONSE,
)
from serpscribe.dependencies import DbSession
from serpscribe.schemas.writing import (
    ActionPlanStageInput,
    ActionPlanStageResult,
    ArticleStageInput,
    BetterHaveStageInput,
    BetterHaveStageResult,
    ContentTypeStageInput,
    ContentTypeStageResult,
    FetchSerpStageInput,
    FetchSerpStageResult,
    FinalPromptStageInput,
    FinalPromptStageResult,
    MediaSiteListResponse,
    MediaSiteResponse,
    PersonaStageInput,
    TitleStageInput,
    TitleStageResult,
    UserIntentStageInput,
    UserIntentStageResult,
)
from serpscribe.services.media_sites import MEDIA_SITES
from serpscribe.services.writing.analysis_stages import (
    BetterHaveStage,
    ContentTypeStage,
    TitleStage,
    UserIntentStage,
)
from serpscribe.services.writing.envelope import (
    event_stream_response,
    stream_text_events,
    success_response,
)
from serpscribe.services.writing.generation_stages import (
    ArticleGenerationStage,
    PersonaGenerationStage,
)
from serpscribe.services.writing.planning_stages import ActionPlanStage, FinalPromptStage
from serpscribe.services.writing.serp_stage import FetchSerpStage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/media-sites",
    response_model=MediaSiteListResponse,
    summary="List media sites",
    description="Return the publisher sites content can be planned and written for.",
)
async def list_media_sites() -> JSONResponse:
    """List the media site catalogue."""
    items = [
        MediaSiteResponse(
            name=site.name,
            url=site.url,
            title=site.title,
            description=site.description,
            language=site.language,
            region=site.region,
        )
        for site in MEDIA_SITES
    ]
    return success_response(MediaSiteListResponse(items=items))


@router.post(
    "/serp",
    response_model=FetchSerpStageResult,
    summary="Fetch or create SERP",
    description=(
        "Return the newest stored SERP document for the keyword in the media site's locale, "
        "fetching and storing a live SERP when none exists."
    ),
    responses={**STAGE_ERROR_RESPONSES, **UPSTREAM_RESPONSE},
)
async def fetch_serp(payload: FetchSerpStageInput, session: DbSession) -> JSONResponse:
    """Find or create the SERP document for a keyword."""
    result = await FetchSerpStage(session).run(payload)
    return success_response(result)


@router.post(
    "/content-type",
    response_model=ContentTypeStageResult,
    summary="Analyze content type",
    description=(
        "Classify the ranking pages of a stored SERP document by content type and "
        "recommend the type to write."
    ),
    responses={**STAGE_ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
)
async def analyze_content_type(payload: ContentTypeStageInput, session: DbSession) -> JSONResponse:
    """Run content type analysis for a SERP document."""
    result = await ContentTypeStage(session).run(payload)
    return success_response(result)


@router.post(
    "/user-intent",
    response_model=UserIntentStageResult,
    summary="Analyze user intent",
    description="Categorise the search intent behind the supplied SERP results.",
    responses=STAGE_ERROR_RESPONSES,
)
async def analyze_user_intent(payload: UserIntentStageInput) -> JSONResponse:
    """Run user intent analysis."""
    result = await UserIntentStage().run(payload)
    return success_response(result)


@router.post(
    "/title",
    response_model=TitleStageResult,
    summary="Analyze titles",
    description="Find patterns in ranking titles, suggest a title and recommend one.",
    responses=STAGE_ERROR_RESPONSES,
)
async def analyze_title(payload: TitleStageInput) -> JSONResponse:
    """Run SERP title analysis."""
    result = await TitleStage().run(payload)
    return success_response(result)


@router.post(
    "/better-have",
    response_model=BetterHaveStageResult,
    summary="Analyze better-have topics",
    description=(
        "Identify topics, questions and phrases an article should include, based on organic "
        "results, People Also Ask, related queries and the AI overview."
    ),
    responses=STAGE_ERROR_RESPONSES,
)
async def analyze_better_have(payload: BetterHaveStageInput) -> JSONResponse:
    """Run better-have gap analysis."""
    result = await BetterHaveStage().run(payload)
    return success_response(result)


@router.post(
    "/action-plan",
    response_model=ActionPlanStageResult,
    summary="Generate action plan",
    description=(
        "Synthesise an editorial action plan from any subset of the analysis reports. "
        "Missing reports are treated as absent sections."
    ),
    responses=STAGE_ERROR_RESPONSES,
)
async def generate_action_plan(payload: ActionPlanStageInput) -> JSONResponse:
    """Generate the action plan."""
    result = await ActionPlanStage().run(payload)
    return success_response(result)


@router.post(
    "/final-prompt",
    response_model=FinalPromptStageResult,
    summary="Generate final prompt",
    description="Assemble the article-writing prompt from the action plan and reports.",
    responses=STAGE_ERROR_RESPONSES,
)
async def generate_final_prompt(payload: FinalPromptStageInput) -> JSONResponse:
    """Assemble the final writing prompt."""
    result = await FinalPromptStage().run(payload)
    return success_response(result)


@router.post(
    "/article",
    summary="Generate article",
    description=(
        "Stream a new article from an action plan, or a refined article when inputText "
        "and/or targetUrl are supplied."
    ),
    response_class=StreamingResponse,
    responses={**EVENT_STREAM_RESPONSE, **STAGE_ERROR_RESPONSES, **UPSTREAM_RESPONSE},
)
async def generate_article(payload: ArticleStageInput, request: Request) -> StreamingResponse:
    """Stream article generation as server-sent events."""
    prepared = await ArticleGenerationStage().run(payload)
    return event_stream_response(
        stream_text_events(
            prepared.chunks(),
            stage_name=ArticleGenerationStage.stage_name,
            is_disconnected=request.is_disconnected,
        )
    )


@router.post(
    "/personas",
    summary="Generate personas",
    description=(
        "Stream up to five user personas derived from the keywords. Only the first 80 "
        "keywords are used."
    ),
    response_class=StreamingResponse,
    responses={**EVENT_STREAM_RESPONSE, **STAGE_ERROR_RESPONSES},
)
async def generate_personas(payload: PersonaStageInput, request: Request) -> StreamingResponse:
    """Stream persona generation as server-sent events."""
    prepared = await PersonaGenerationStage().run(payload)
    return event_stream_response(
        stream_text_events(
            prepared.chunks(),
            stage_name=PersonaGenerationStage.stage_name,
            is_disconnected=request.is_disconnected,
        )
    )
