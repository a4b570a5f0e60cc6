"""Base cache repository."""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from loguru import logger

Document = dict[str, Any] | list[Any]

_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+(/[A-Za-z0-9_-]+)*$")


def validate_key(key: str) -> str:
    """Reject keys that are not slash-separated ``[A-Za-z0-9_-]`` segments."""
    if not isinstance(key, str) or not _KEY_RE.match(key):
        raise ValueError(f"Invalid cache key: {key!r}")
    return key


class BaseCacheRepository(ABC):
    """Key -> JSON document store.

    ``get`` returns ``None`` for a missing key, ``put`` replaces the whole
    document and readers never observe a partial write.
    """

    def __init__(self):
        logger.debug("{} initialized", self.__class__.__name__)

    @abstractmethod
    def get(self, key: str) -> Document | None:
        """Load a document, ``None`` when absent."""

    @abstractmethod
    def put(self, key: str, document: Document, updated_at: datetime | None = None) -> None:
        """Create or overwrite a document, stamped with ``updated_at`` (default now)."""

    @abstractmethod
    def updated_at(self, key: str) -> datetime | None:
        """UTC time the document was last written, ``None`` when absent."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a document; no-op when absent."""

    def exists(self, key: str) -> bool:
        """Check if a document is cached."""
        return self.get(key) is not None

    def close(self) -> None:
        """Release backend resources."""
