"""Common models - shared tables."""

from app.models.common.cache import CACHE_DDL

__all__ = [
    "CACHE_DDL",
]
