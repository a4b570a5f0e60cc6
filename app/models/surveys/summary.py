"""Survey list entry."""

from datetime import datetime

from pydantic import BaseModel


class SurveySummary(BaseModel):
    """Lightweight listing entry; one fetch stamps every entry with the same ``last_updated``."""

    id: str
    title: str
    analysis_url: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    question_count: int | None = None
    num_responses: int | None = None
    last_updated: datetime
