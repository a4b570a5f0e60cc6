"""Survey API views - thin layer over the survey service."""

from fastapi import APIRouter

from app.container import container
from app.models.surveys import Survey, SurveySummary
from web.api.errors import validate_survey_id

router = APIRouter()


@router.get("/get_surveys", response_model=list[SurveySummary])
async def get_surveys(refresh: bool = False) -> list[SurveySummary]:
    """List staff surveys, refreshed from the API when older than an hour."""
    return await container.surveys.get_surveys(force=refresh)


@router.get("/get_survey", response_model=Survey)
async def get_survey(survey_id: str | None = None, refresh: bool = False) -> Survey:
    """Get one survey with its answer table."""
    survey_id = validate_survey_id(survey_id)
    return await container.surveys.get_survey(survey_id, force=refresh)
