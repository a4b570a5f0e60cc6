"""DuckDB cache repository - survey documents in one table."""

import json
import threading
from datetime import UTC, datetime
from pathlib import Path

from loguru import logger

from app.repositories.base import BaseCacheRepository, Document, validate_key
from app.repositories.db import get_write_connection


class DbCacheRepository(BaseCacheRepository):
    """Repository for cached documents in DuckDB; upserts are single statements."""

    def __init__(self, db_path: str | Path):
        self._db = get_write_connection(db_path)
        self._lock = threading.Lock()
        super().__init__()

    def _fetchone(self, query: str, params: list) -> tuple | None:
        with self._lock:
            return self._db.execute(query, params).fetchone()

    def _execute(self, query: str, params: list) -> None:
        with self._lock:
            self._db.execute(query, params)

    def get(self, key: str) -> Document | None:
        row = self._fetchone("SELECT data FROM survey_cache WHERE key = ?", [validate_key(key)])
        if not row:
            logger.debug("Cache miss: {}", key)
            return None

        try:
            data = json.loads(row[0])
        except json.JSONDecodeError as e:
            logger.warning("Cache entry {} is not valid JSON, ignoring: {}", key, e)
            return None
        logger.debug("Cache hit: {}", key)
        return data

    def put(self, key: str, document: Document, updated_at: datetime | None = None) -> None:
        stamp = (updated_at or datetime.now(UTC)).astimezone(UTC).replace(tzinfo=None)
        self._execute(
            """
            INSERT OR REPLACE INTO survey_cache (key, data, updated_at)
            VALUES (?, ?, ?)
            """,
            [validate_key(key), json.dumps(document), stamp],
        )
        logger.debug("Cache saved: {}", key)

    def updated_at(self, key: str) -> datetime | None:
        row = self._fetchone("SELECT updated_at FROM survey_cache WHERE key = ?", [validate_key(key)])
        if not row:
            return None
        # Stored as naive UTC
        return row[0].replace(tzinfo=UTC)

    def delete(self, key: str) -> None:
        self._execute("DELETE FROM survey_cache WHERE key = ?", [validate_key(key)])
        logger.debug("Cache deleted: {}", key)

    def close(self) -> None:
        with self._lock:
            self._db.close()
        logger.debug("DB connection closed")
