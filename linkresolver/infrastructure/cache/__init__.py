"""Cache: resolver memoization stores and Redis key utilities.

build_cache_store() picks Redis when enabled and reachable, otherwise the
in-process store.
"""

from __future__ import annotations

import logging

from linkresolver.application.interfaces import ICacheStore
from linkresolver.core.config import Settings
from linkresolver.infrastructure.cache.keys import (
    link_resolver_key,
    link_resolver_pattern,
)
from linkresolver.infrastructure.cache.memory_cache import InMemoryCacheStore
from linkresolver.infrastructure.cache.redis_cache import RedisCacheStore

logger = logging.getLogger(__name__)


async def build_cache_store(settings: Settings) -> ICacheStore:
    """Return a connected Redis store, or an in-memory store as fallback."""
    if settings.redis_enabled:
        store = RedisCacheStore(settings=settings)
        await store.connect()
        if store.is_available():
            return store
        logger.warning("Redis unavailable; using in-memory resolver cache")
    return InMemoryCacheStore(
        ttl=settings.link_cache_ttl,
        max_entries=settings.link_cache_max_entries,
    )


__all__ = [
    "InMemoryCacheStore",
    "RedisCacheStore",
    "build_cache_store",
    "link_resolver_key",
    "link_resolver_pattern",
]
