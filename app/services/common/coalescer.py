"""Per-key refresh coalescing."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from loguru import logger

T = TypeVar("T")


class RefreshCoalescer:
    """Runs at most one refresh per key; concurrent callers share its result."""

    def __init__(self):
        self._inflight: dict[str, asyncio.Task] = {}

    def in_flight(self, key: str) -> bool:
        return key in self._inflight

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Await the in-flight refresh for ``key`` or start one with ``factory``."""
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(factory())
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._forget(key, t))
        else:
            logger.debug("Joining in-flight refresh: {}", key)

        # One cancelled caller must not cancel the refresh for the others
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # Mark the error retrieved even when every caller was cancelled
        if not task.cancelled():
            task.exception()
