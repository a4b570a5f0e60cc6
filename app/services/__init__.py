"""Services package - service class exports."""

from app.services.common import RefreshCoalescer
from app.services.surveys import SurveyService

__all__ = [
    "RefreshCoalescer",
    "SurveyService",
]
