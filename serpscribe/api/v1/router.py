"""API v1 router aggregator."""

from fastapi import APIRouter

from serpscribe.api.v1.writing.routes import router as writing_router

api_router = APIRouter()

api_router.include_router(writing_router, prefix="/writing", tags=["Writing"])
