"""Repositories package - cache storage for survey documents."""

from app.repositories.base import BaseCacheRepository, Document, validate_key
from app.repositories.cache import DbCacheRepository, FileCacheRepository
from app.repositories.db import get_write_connection, init_tables
from settings import CacheConfig

SURVEY_LIST_KEY = "survey_list"


def survey_key(survey_id: str) -> str:
    """Cache key of one survey document."""
    return f"surveys/{survey_id}"


def create_cache_repository(config: CacheConfig) -> BaseCacheRepository:
    """Build the configured cache backend."""
    if config.backend == "file":
        return FileCacheRepository(config.root)
    if config.backend == "duckdb":
        return DbCacheRepository(config.db_path)
    raise ValueError(f"Unknown cache backend: {config.backend!r}")


__all__ = [
    # DB
    "init_tables",
    "get_write_connection",
    # Base
    "BaseCacheRepository",
    "Document",
    "validate_key",
    # Backends
    "FileCacheRepository",
    "DbCacheRepository",
    "create_cache_repository",
    # Keys
    "SURVEY_LIST_KEY",
    "survey_key",
]
