"""File cache repository - one JSON file per key."""

import json
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from loguru import logger

from app.repositories.base import BaseCacheRepository, Document, validate_key


class FileCacheRepository(BaseCacheRepository):
    """Stores ``{root}/{key}.json``; writes are temp file + ``os.replace``."""

    def __init__(self, root: Path | str):
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        super().__init__()

    def _path(self, key: str) -> Path:
        return self._root / f"{validate_key(key)}.json"

    def get(self, key: str) -> Document | None:
        path = self._path(key)
        try:
            contents = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Cache miss: {}", key)
            return None

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            logger.warning("Cache entry {} is not valid JSON, ignoring: {}", key, e)
            return None
        logger.debug("Cache hit: {}", key)
        return data

    def put(self, key: str, document: Document, updated_at: datetime | None = None) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document)

        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            if updated_at is not None:
                ts = updated_at.timestamp()
                os.utime(tmp, (ts, ts))
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Cache saved: {}", key)

    def updated_at(self, key: str) -> datetime | None:
        """File mtime, which ``put`` sets to the document's ``updated_at``."""
        try:
            mtime = self._path(key).stat().st_mtime
        except FileNotFoundError:
            return None
        return datetime.fromtimestamp(mtime, UTC)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
        logger.debug("Cache deleted: {}", key)
