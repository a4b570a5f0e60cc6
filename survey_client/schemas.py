"""SurveyMonkey v2 API schemas.

Wire names are mapped onto the names the rest of the code uses:
``survey_id`` -> ``id``, ``answers[].answer_id`` -> ``answer_choices[].id``.
"""

from pydantic import BaseModel, Field, field_validator


class _Schema(BaseModel):
    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True


class SurveyListItemSchema(_Schema):
    """Survey entry from ``get_survey_list``."""

    id: str = Field(alias="survey_id")
    title: str = ""
    analysis_url: str | None = None
    date_created: str | None = None
    date_modified: str | None = None
    question_count: int | None = None
    num_responses: int | None = None


class AnswerChoiceSchema(_Schema):
    """One possible answer of a question."""

    id: str = Field(alias="answer_id")
    text: str | None = None
    type: str | None = None


class QuestionSchema(_Schema):
    """Question on a survey page."""

    id: str = Field(alias="question_id")
    heading: str = ""
    answer_choices: list[AnswerChoiceSchema] = Field(alias="answers", default=[])


class PageSchema(_Schema):
    """Survey page."""

    id: str | None = Field(alias="page_id", default=None)
    questions: list[QuestionSchema] = []


class SurveyDetailsSchema(_Schema):
    """Survey details from ``get_survey_details``."""

    id: str = Field(alias="survey_id")
    title: str
    num_responses: int = 0
    pages: list[PageSchema] = []

    @field_validator("title", mode="before")
    @classmethod
    def _title_text(cls, value):
        # Details wrap the title as {"text": ..., "enabled": ...}
        if isinstance(value, dict):
            return value.get("text", "")
        return value


class CollectorSchema(_Schema):
    """Collector from ``get_collector_list``."""

    id: str | None = Field(alias="collector_id", default=None)
    url: str | None = None


class RespondentSchema(_Schema):
    """Respondent from ``get_respondent_list``."""

    id: str = Field(alias="respondent_id")


class AnswerSchema(_Schema):
    """Answer cell of a response; ``row`` holds the chosen answer id."""

    row: str | None = None
    col: str | None = None
    text: str | None = None


class ResponseQuestionSchema(_Schema):
    """One answered question of a response."""

    question_id: str
    answers: list[AnswerSchema] = []


class ResponseSchema(_Schema):
    """Per-respondent row from ``get_responses``."""

    respondent_id: str
    questions: list[ResponseQuestionSchema] = []


class SurveyListSchema(_Schema):
    surveys: list[SurveyListItemSchema] = []


class CollectorListSchema(_Schema):
    collectors: list[CollectorSchema] = []


class RespondentListSchema(_Schema):
    respondents: list[RespondentSchema] = []
