"""Survey service - read-through cache over the remote survey API."""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from app.errors import NotFoundError, RefreshError
from app.models.surveys import Survey, SurveySummary
from app.repositories import SURVEY_LIST_KEY, BaseCacheRepository, survey_key, validate_key
from app.services.common.coalescer import RefreshCoalescer
from app.services.surveys.assembler import build_survey, filter_staff_surveys, to_raw_responses
from app.services.surveys.freshness import STALE_AFTER, is_stale, utc_now
from survey_client import RemoteError, RemoteNotFoundError, SurveyMonkeyClient

T = TypeVar("T")

_summaries = TypeAdapter(list[SurveySummary])


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, RemoteError) and exc.retryable


class SurveyService:
    """Survey list and survey documents, refreshed from the API when stale."""

    def __init__(
        self,
        client: SurveyMonkeyClient,
        cache_repo: BaseCacheRepository,
        stale_after: int = STALE_AFTER,
        refresh_attempts: int = 1,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._client = client
        self._cache = cache_repo
        self._stale_after = stale_after
        self._refresh_attempts = max(1, refresh_attempts)
        self._clock = clock
        self._coalescer = RefreshCoalescer()

    # ========== Survey list ==========

    async def get_surveys(self, force: bool = False) -> list[SurveySummary]:
        """Cached staff surveys, refreshed when missing or older than the threshold."""
        if not force:
            cached = await self._fresh_surveys()
            if cached is not None:
                return cached
        return await self._coalescer.run(SURVEY_LIST_KEY, lambda: self._refresh_surveys(force))

    async def refresh_surveys(self) -> list[SurveySummary]:
        """Refresh the survey list regardless of its age."""
        return await self.get_surveys(force=True)

    async def _cached_surveys(self) -> list[SurveySummary] | None:
        data = await asyncio.to_thread(self._cache.get, SURVEY_LIST_KEY)
        if data is None:
            return None
        try:
            return _summaries.validate_python(data)
        except ValidationError as e:
            logger.warning("Cached survey list is unreadable, refreshing: {}", e)
            return None

    async def _fresh_surveys(self) -> list[SurveySummary] | None:
        """Cached list when it is fresh, else ``None``."""
        surveys = await self._cached_surveys()
        if surveys is None:
            return None

        # All entries of one fetch share last_updated; an empty list falls back to its write time
        if surveys:
            fetched_at = surveys[0].last_updated
        else:
            fetched_at = await asyncio.to_thread(self._cache.updated_at, SURVEY_LIST_KEY)
            if fetched_at is None:
                return None

        return None if self._is_stale(fetched_at) else surveys

    async def _refresh_surveys(self, force: bool) -> list[SurveySummary]:
        if not force:
            cached = await self._fresh_surveys()
            if cached is not None:
                logger.debug("Survey list refreshed by a concurrent request")
                return cached

        logger.info("Refreshing survey list")
        try:
            entries = await self._with_retry(self._client.list_surveys)
        except RemoteError as e:
            logger.warning("Survey list refresh failed: {}", e)
            raise RefreshError(SURVEY_LIST_KEY, e) from e

        now = self._clock()
        surveys = filter_staff_surveys(entries, now)
        await asyncio.to_thread(self._cache.put, SURVEY_LIST_KEY, [s.model_dump(mode="json") for s in surveys], now)
        logger.info("Survey list refreshed: kept {} of {} surveys", len(surveys), len(entries))
        return surveys

    # ========== Single survey ==========

    async def get_survey(self, survey_id: str, force: bool = False) -> Survey:
        """Cached survey, fetched when missing and refreshed when stale."""
        key = validate_key(survey_key(survey_id))
        if not force:
            cached = await self._fresh_survey(key)
            if cached is not None:
                return cached
        return await self._coalescer.run(key, lambda: self._refresh_survey(survey_id, force))

    async def refresh_survey(self, survey_id: str) -> Survey:
        """Refresh one survey regardless of its age."""
        return await self.get_survey(survey_id, force=True)

    async def _fresh_survey(self, key: str) -> Survey | None:
        """Cached survey when present and fresh, else ``None``."""
        data = await asyncio.to_thread(self._cache.get, key)
        if data is None:
            return None
        try:
            survey = Survey.model_validate(data)
        except ValidationError as e:
            logger.warning("Cached {} is unreadable, refreshing: {}", key, e)
            return None
        return None if self._is_stale(survey.details.last_updated) else survey

    async def _refresh_survey(self, survey_id: str, force: bool) -> Survey:
        key = survey_key(survey_id)
        if not force:
            cached = await self._fresh_survey(key)
            if cached is not None:
                logger.debug("{} refreshed by a concurrent request", key)
                return cached

        logger.info("Refreshing survey {}", survey_id)
        try:
            survey = await self._with_retry(self._fetch_survey, survey_id)
        except RemoteNotFoundError as e:
            logger.warning("Survey {} not found upstream", survey_id)
            raise NotFoundError(f"Survey {survey_id} not found") from e
        except RemoteError as e:
            logger.warning("Survey {} refresh failed: {}", survey_id, e)
            raise RefreshError(key, e) from e

        await asyncio.to_thread(self._cache.put, key, survey.model_dump(mode="json"), survey.details.last_updated)
        logger.info("Survey {} refreshed: {} questions", survey_id, len(survey.data))
        return survey

    async def _fetch_survey(self, survey_id: str) -> Survey:
        """Details, collector url, respondents, responses - then assemble."""
        details = await self._client.get_survey_details(survey_id)
        collectors = await self._client.get_collector_urls(survey_id)
        respondent_ids = await self._client.get_respondents(survey_id)

        rows = []
        if respondent_ids:
            rows = await self._client.get_responses(survey_id, respondent_ids)

        return build_survey(details, collectors, to_raw_responses(rows), self._clock())

    # ========== Helpers ==========

    def _is_stale(self, last_updated: datetime) -> bool:
        return is_stale(last_updated, self._clock(), self._stale_after)

    async def _with_retry(self, fn: Callable[..., Awaitable[T]], *args) -> T:
        """Call ``fn`` up to ``refresh_attempts`` times on retryable remote errors."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._refresh_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        ):
            with attempt:
                result = await fn(*args)
        return result
