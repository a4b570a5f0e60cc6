"""Survey assembler - reshape raw API data into cached documents.

The upstream API spreads one survey over four calls: details (questions and
their answer choices), collectors (the public url), respondents and
responses. Responses only reference question and answer ids, so answer
counts are built by looking each question up by id in every response.
"""

from collections.abc import Iterable
from datetime import datetime

from loguru import logger

from app.models.surveys import (
    QuestionAnswer,
    QuestionSummary,
    RawResponse,
    Survey,
    SurveyDetails,
    SurveySummary,
)
from survey_client.schemas import (
    CollectorSchema,
    QuestionSchema,
    ResponseSchema,
    SurveyDetailsSchema,
    SurveyListItemSchema,
)

STAFF_PREFIXES = ("Staff", "staff")

# Answer choice position -> QuestionSummary field
BUCKETS = (
    "strongly_agree_count",
    "agree_count",
    "disagree_count",
    "strongly_disagree_count",
)


def filter_staff_surveys(entries: Iterable[SurveyListItemSchema], now: datetime) -> list[SurveySummary]:
    """Stamp entries with ``now`` and keep titles starting with "Staff" or "staff"."""
    stamped = [
        SurveySummary(
            id=e.id,
            title=e.title,
            analysis_url=e.analysis_url,
            date_created=e.date_created,
            date_modified=e.date_modified,
            question_count=e.question_count,
            num_responses=e.num_responses,
            last_updated=now,
        )
        for e in entries
    ]
    return [s for s in stamped if s.title[:5] in STAFF_PREFIXES]


def to_raw_responses(rows: Iterable[ResponseSchema]) -> list[RawResponse]:
    """Reduce response rows to question -> first answer row per respondent."""
    return [
        RawResponse(
            respondent_id=row.respondent_id,
            questions=[
                QuestionAnswer(
                    question_id=q.question_id,
                    answer_id=q.answers[0].row if q.answers else None,
                )
                for q in row.questions
            ],
        )
        for row in rows
    ]


def count_answers(question: QuestionSchema, answers: list[dict[str, str | None]]) -> list[int]:
    """Count respondents per answer choice of ``question``, one count per bucket."""
    counts = []
    for idx in range(len(BUCKETS)):
        if idx >= len(question.answer_choices):
            counts.append(0)
            continue
        answer_id = question.answer_choices[idx].id
        counts.append(sum(1 for a in answers if a.get(question.id) == answer_id))
    return counts


def build_survey_table(details: SurveyDetailsSchema, responses: list[RawResponse]) -> list[QuestionSummary]:
    """Answer counts for every question on the first page, in page order."""
    if not details.pages:
        logger.warning("Survey {} has no pages", details.id)
        return []

    answers = [r.answers_by_question() for r in responses]
    table = []
    for question in details.pages[0].questions:
        counts = count_answers(question, answers)
        table.append(QuestionSummary(title=question.heading, **dict(zip(BUCKETS, counts, strict=True))))
    return table


def build_survey(
    details: SurveyDetailsSchema,
    collectors: list[CollectorSchema],
    responses: list[RawResponse],
    now: datetime,
) -> Survey:
    """Pull details, collector url and responses together into one survey."""
    url = collectors[0].url if collectors else None
    if url is None:
        logger.warning("Survey {} has no collector url", details.id)

    return Survey(
        details=SurveyDetails(
            id=details.id,
            title=details.title,
            num_responses=details.num_responses,
            url=url,
            last_updated=now,
        ),
        data=build_survey_table(details, responses),
    )
