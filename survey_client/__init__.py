"""SurveyMonkey API client package."""

from survey_client.base import BaseClient
from survey_client.client import SURVEY_LIST_FIELDS, SurveyMonkeyClient
from survey_client.errors import RemoteError, RemoteNotFoundError

__all__ = [
    # Base
    "BaseClient",
    # Errors
    "RemoteError",
    "RemoteNotFoundError",
    # Clients
    "SurveyMonkeyClient",
    "SURVEY_LIST_FIELDS",
]
