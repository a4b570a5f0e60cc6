#!/usr/bin/env python3
"""
Refresh cached surveys from the SurveyMonkey API.

Usage:
    python warm_cache.py               # Refresh survey list and every listed survey
    python warm_cache.py 1234 5678     # Refresh specific surveys
    python warm_cache.py --list-only   # Refresh survey list only
    python warm_cache.py --force       # Drop cached entries before refreshing
"""

import asyncio
import sys

from loguru import logger

from app.errors import NotFoundError, RefreshError
from app.repositories import SURVEY_LIST_KEY, create_cache_repository, survey_key
from app.services.surveys.service import SurveyService
from settings import LOG_LEVEL, AppConfig
from settings.logging import setup_logging
from survey_client import SurveyMonkeyClient


async def warm(survey_ids: list[str] | None, list_only: bool, force: bool, config: AppConfig) -> bool:
    """Refresh the list and surveys; True when every refresh succeeded."""
    cache_repo = create_cache_repository(config.cache)
    ok = True

    try:
        async with SurveyMonkeyClient(config.api) as client:
            service = SurveyService(
                client=client,
                cache_repo=cache_repo,
                stale_after=config.stale_after,
                refresh_attempts=config.refresh_attempts,
            )

            if survey_ids is None:
                if force:
                    cache_repo.delete(SURVEY_LIST_KEY)
                try:
                    surveys = await service.refresh_surveys()
                except RefreshError as e:
                    logger.error("{}", e.message)
                    return False
                logger.info("Survey list: {} surveys", len(surveys))
                if list_only:
                    return True
                survey_ids = [s.id for s in surveys]

            for survey_id in survey_ids:
                try:
                    if force:
                        cache_repo.delete(survey_key(survey_id))
                    survey = await service.refresh_survey(survey_id)
                except (RefreshError, NotFoundError) as e:
                    logger.error("{}", e.message)
                    ok = False
                    continue
                except ValueError as e:
                    # Upstream ids are not guaranteed to be valid cache keys
                    logger.error("Skipping survey {!r}: {}", survey_id, e)
                    ok = False
                    continue
                logger.info("Survey {}: {} ({} questions)", survey_id, survey.details.title, len(survey.data))
    finally:
        cache_repo.close()

    return ok


def main():
    setup_logging(level=LOG_LEVEL, to_file=True)
    args = sys.argv[1:]

    if "--help" in args or "-h" in args:
        print(__doc__)
        return

    force = "--force" in args or "-f" in args
    list_only = "--list-only" in args
    args = [a for a in args if a not in ("--force", "-f", "--list-only")]

    survey_ids = None
    if args:
        survey_ids = [a for a in args if a.isdigit()]
        if len(survey_ids) != len(args):
            print(__doc__)
            sys.exit(1)
        logger.info("Refreshing surveys: {}", survey_ids)
    else:
        logger.info("Refreshing survey list{}", "" if list_only else " and all listed surveys")

    ok = asyncio.run(warm(survey_ids, list_only, force, AppConfig()))
    if not ok:
        logger.error("Some refreshes failed")
        sys.exit(1)
    logger.info("Cache warm-up complete!")


if __name__ == "__main__":
    main()
