"""Survey services."""

from app.services.surveys.assembler import build_survey, build_survey_table, filter_staff_surveys, to_raw_responses
from app.services.surveys.freshness import STALE_AFTER, is_stale, utc_now
from app.services.surveys.service import SurveyService

__all__ = [
    "SurveyService",
    "is_stale",
    "utc_now",
    "STALE_AFTER",
    "filter_staff_surveys",
    "build_survey",
    "build_survey_table",
    "to_raw_responses",
]
