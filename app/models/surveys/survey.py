"""Assembled survey with its per-question answer table."""

from datetime import datetime

from pydantic import BaseModel


class SurveyDetails(BaseModel):
    """Survey header."""

    id: str
    title: str
    num_responses: int = 0
    url: str | None = None
    last_updated: datetime


class QuestionSummary(BaseModel):
    """Answer counts for one question, in Likert bucket order."""

    title: str
    strongly_agree_count: int = 0
    agree_count: int = 0
    disagree_count: int = 0
    strongly_disagree_count: int = 0


class Survey(BaseModel):
    """Survey document stored under ``surveys/{id}``."""

    details: SurveyDetails
    data: list[QuestionSummary] = []
