"""API package - v1 router."""

from fastapi import APIRouter

from web.api import survey

api_router = APIRouter()
api_router.include_router(survey.router, prefix="/survey", tags=["survey"])

__all__ = [
    "api_router",
]
