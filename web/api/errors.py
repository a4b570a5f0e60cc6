"""API errors and validation helpers."""

import re

from app.errors import NotFoundError, RefreshError


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Upstream survey ids are numeric; allow the cache key alphabet
SURVEY_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def validate_survey_id(survey_id: str | None) -> str:
    """Validate survey_id is present and safe to use as a cache key."""
    if not survey_id:
        raise ValidationError("Missing survey_id")
    if not SURVEY_ID_RE.match(survey_id):
        raise ValidationError(f"Invalid survey_id: {survey_id!r}")
    return survey_id


__all__ = [
    "NotFoundError",
    "RefreshError",
    "ValidationError",
    "validate_survey_id",
]
