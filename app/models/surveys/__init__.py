"""Survey domain models - summaries, assembled surveys, raw responses."""

from app.models.surveys.response import QuestionAnswer, RawResponse
from app.models.surveys.summary import SurveySummary
from app.models.surveys.survey import QuestionSummary, Survey, SurveyDetails

__all__ = [
    "SurveySummary",
    "Survey",
    "SurveyDetails",
    "QuestionSummary",
    "RawResponse",
    "QuestionAnswer",
]
