"""In-process memoization for catalog and detail builds."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

CATALOG_KEY = "catalog"


def details_key(docs_url: str) -> str:
    return f"details:{docs_url}"


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class MemoCache:
    """Key -> value cache with a time-to-live and single-flight builds.

    At most one build runs per key at a time; callers that queue behind a
    build re-check the cache before starting their own. A ``ttl`` of zero or
    less disables caching entirely.
    """

    def __init__(self, ttl: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    def get(self, key: str) -> Any | None:
        """Return the live value for ``key`` or ``None``; expired entries are dropped."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self.clock():
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        if self.enabled:
            self._entries[key] = CacheEntry(value=value, expires_at=self.clock() + self.ttl)

    async def get_or_build(
        self,
        key: str,
        builder: Callable[[], Awaitable[Any]],
        should_cache: Callable[[Any], bool] = lambda value: True,
    ) -> Any:
        """Return the cached value for ``key``, building it if needed.

        Args:
            key: Cache key
            builder: Coroutine factory producing the value
            should_cache: Predicate deciding whether a built value is stored;
                used to keep degraded (empty) results out of the cache
        """
        if not self.enabled:
            return await builder()

        cached = self.get(key)
        if cached is not None:
            return cached

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            cached = self.get(key)
            if cached is not None:
                logger.debug(f"Cache hit for '{key}' after waiting on build")
                return cached

            value = await builder()
            if should_cache(value):
                self.set(key, value)
            return value

    def invalidate(self, key: str | None = None) -> int:
        """Drop ``key`` (or every key when ``None``); returns entries removed."""
        if key is None:
            cleared = len(self._entries)
            self._entries.clear()
            return cleared
        return 1 if self._entries.pop(key, None) is not None else 0

    def __len__(self) -> int:
        return len(self._entries)
