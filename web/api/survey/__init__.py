"""Survey API."""

from web.api.survey.views import get_survey, get_surveys, router

__all__ = [
    "router",
    "get_surveys",
    "get_survey",
]
