"""Models package - DDL and entities."""

from app.models.common import CACHE_DDL
from app.models.surveys import (
    QuestionAnswer,
    QuestionSummary,
    RawResponse,
    Survey,
    SurveyDetails,
    SurveySummary,
)

ALL_DDL = [
    CACHE_DDL,
]

__all__ = [
    # Common
    "CACHE_DDL",
    # Surveys
    "SurveySummary",
    "Survey",
    "SurveyDetails",
    "QuestionSummary",
    "RawResponse",
    "QuestionAnswer",
    # All DDL
    "ALL_DDL",
]
