"""Survey API client - surveys, collectors, respondents, responses."""

from survey_client.base import STATUS_INVALID_REQUEST, BaseClient, parse
from survey_client.errors import RemoteError, RemoteNotFoundError
from survey_client.schemas import (
    CollectorListSchema,
    CollectorSchema,
    RespondentListSchema,
    ResponseSchema,
    SurveyDetailsSchema,
    SurveyListItemSchema,
    SurveyListSchema,
)

SURVEY_LIST_FIELDS = (
    "title",
    "analysis_url",
    "date_created",
    "date_modified",
    "question_count",
    "num_responses",
)


class SurveyMonkeyClient(BaseClient):
    """Client for the SurveyMonkey v2 survey endpoints."""

    async def list_surveys(self, fields: tuple[str, ...] = SURVEY_LIST_FIELDS) -> list[SurveyListItemSchema]:
        """POST get_survey_list - surveys of the account."""
        data = await self._post("get_survey_list", {"fields": list(fields)})
        return parse(SurveyListSchema, data, "get_survey_list").surveys

    async def get_survey_details(self, survey_id: str) -> SurveyDetailsSchema:
        """POST get_survey_details - pages, questions and answer choices."""
        try:
            data = await self._post("get_survey_details", {"survey_id": survey_id})
        except RemoteError as e:
            # survey_id is the only parameter, so an invalid request means an unknown survey
            if e.upstream_status == STATUS_INVALID_REQUEST:
                raise RemoteNotFoundError(f"get_survey_details: unknown survey {survey_id}") from e
            raise
        return parse(SurveyDetailsSchema, data, "get_survey_details")

    async def get_collector_urls(self, survey_id: str, fields: tuple[str, ...] = ("url",)) -> list[CollectorSchema]:
        """POST get_collector_list - collectors, first one holds the survey url."""
        data = await self._post("get_collector_list", {"survey_id": survey_id, "fields": list(fields)})
        return parse(CollectorListSchema, data, "get_collector_list").collectors

    async def get_respondents(self, survey_id: str) -> list[str]:
        """POST get_respondent_list - ids of respondents."""
        data = await self._post("get_respondent_list", {"survey_id": survey_id})
        return [r.id for r in parse(RespondentListSchema, data, "get_respondent_list").respondents]

    async def get_responses(self, survey_id: str, respondent_ids: list[str]) -> list[ResponseSchema]:
        """POST get_responses - answers of the given respondents."""
        data = await self._post("get_responses", {"survey_id": survey_id, "respondent_ids": respondent_ids})
        return parse(list[ResponseSchema], data, "get_responses")
