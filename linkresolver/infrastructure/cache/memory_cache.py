"""In-process resolver cache with TTL and a size bound.

Used when Redis is disabled or unreachable. Keys are CacheKey value
objects, so no string formatting is involved. The lock only guards dict
access and is never held while compute runs.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Awaitable, Callable

from linkresolver.domain.value_objects import CacheKey, ResolutionResult

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """Thread-safe memoization store (implements ICacheStore).

    Entries expire ttl seconds after insertion (never when ttl is None).
    When max_entries is exceeded the oldest insertion is evicted.
    """

    def __init__(
        self,
        ttl: int | None = 3600,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[CacheKey, tuple[float | None, ResolutionResult]] = (
            OrderedDict()
        )
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: CacheKey) -> ResolutionResult | None:
        """Return the live entry for key, or None (expired entries are dropped)."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, result = entry
            if expires_at is not None and expires_at <= self._clock():
                del self._entries[key]
                return None
            return result

    def set(self, key: CacheKey, result: ResolutionResult) -> None:
        """Store result under key, evicting the oldest entries beyond max_entries."""
        expires_at = None if self.ttl is None else self._clock() + self.ttl
        with self._lock:
            self._entries[key] = (expires_at, result)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    async def get_or_compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[ResolutionResult]],
    ) -> ResolutionResult:
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache HIT: %s", key)
            return cached
        logger.debug("Cache MISS: %s", key)
        result = await compute()
        self.set(key, result)
        return result

    async def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        if count:
            logger.info("Cache CLEARED: %s in-memory entries", count)
        return count
