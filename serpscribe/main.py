"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from serpscribe.api.v1.router import api_router
from serpscribe.config import settings
from serpscribe.core.database import close_db, init_db
from serpscribe.core.exceptions import SerpScribeError
from serpscribe.core.logging import setup_logging
from serpscribe.services.writing.envelope import error_response, status_code_for
from serpscribe.services.writing.validation import field_errors_from_validation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    setup_logging(logging.DEBUG if settings.debug else logging.INFO)

    logger.info(
        "Starting SerpScribe",
        extra={
            "environment": settings.environment,
            "version": settings.app_version,
            "model_reasoning": settings.get_model("reasoning"),
            "model_standard": settings.get_model("standard"),
            "model_fast": settings.get_model("fast"),
        },
    )

    if settings.create_tables_on_startup:
        await init_db()
        logger.info("Database tables initialized")

    yield

    logger.info("Shutting down SerpScribe")
    await close_db()


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = field_errors_from_validation(exc.errors())
    logger.info(
        "Invalid input",
        extra={"path": request.url.path, "field_errors": field_errors},
    )
    return error_response("Invalid input", field_errors, status_code=400)


async def handle_app_error(request: Request, exc: SerpScribeError) -> JSONResponse:
    return error_response(exc.message, exc.details, status_code=status_code_for(exc))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return error_response("Internal server error", str(exc) or type(exc).__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "SEO content-writing pipeline: SERP retrieval, content type, user intent, title "
            "and better-have analysis, action planning, and streamed article and persona "
            "generation. Every stage is independently callable."
        ),
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        cast(Any, CORSMiddleware),
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, cast(Any, handle_validation_error))
    app.add_exception_handler(SerpScribeError, cast(Any, handle_app_error))
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get(
        "/health",
        summary="Health check",
        description="Return service health status and version information.",
    )
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app()
