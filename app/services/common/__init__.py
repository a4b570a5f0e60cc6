"""Shared service helpers."""

from app.services.common.coalescer import RefreshCoalescer

__all__ = [
    "RefreshCoalescer",
]
