"""Cache repository backends."""

from app.repositories.cache.db import DbCacheRepository
from app.repositories.cache.file import FileCacheRepository

__all__ = [
    "DbCacheRepository",
    "FileCacheRepository",
]
