"""Redis-backed resolver cache.

Stores ResolutionResult as JSON under keys built by
linkresolver.infrastructure.cache.keys, with a TTL per entry. Redis
failures never reach callers: a failed read is a miss and a failed write
leaves the result uncached.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import redis.asyncio as redis

from linkresolver.core.config import Settings, get_settings
from linkresolver.domain.exceptions import ValidationException
from linkresolver.domain.value_objects import CacheKey, ResolutionResult
from linkresolver.infrastructure.cache.keys import (
    link_resolver_key,
    link_resolver_pattern,
)

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Async Redis resolver cache (implements ICacheStore).

    Call connect() at startup and disconnect() at shutdown. A connection
    error triggers one reconnect attempt before the operation gives up.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache store.

        Args:
            redis_client: Optional Redis client for testing or DI; treated as connected.
            settings: Optional settings (defaults to get_settings()).
        """
        self.settings = settings or get_settings()
        self.redis = redis_client
        self.ttl = self.settings.link_cache_ttl
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            await client.aclose()
            self._connected = False
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Drop the current client and connect again. Returns True if reconnected."""
        if self.redis is not None:
            try:
                await self.redis.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value for key, or None if missing/unavailable."""
        if not self.is_available():
            return None
        for attempt in range(2):
            try:
                value = await self.redis.get(key)
            except (redis.ConnectionError, redis.TimeoutError):
                if attempt == 0 and await self._reconnect():
                    continue
                logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
                return None
            except redis.RedisError:
                logger.exception("Cache get error for key %s", key)
                return None
            if value is None:
                logger.debug("Cache MISS: %s", key)
                return None
            logger.debug("Cache HIT: %s", key)
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                logger.warning("Discarding undecodable cache entry %s", key)
                return None
        return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value (JSON-serialized) with TTL. Returns True on success."""
        if not self.is_available():
            return False
        ttl = ttl or self.ttl
        serialized = json.dumps(value)
        for attempt in range(2):
            try:
                await self.redis.setex(key, ttl, serialized)
            except (redis.ConnectionError, redis.TimeoutError):
                if attempt == 0 and await self._reconnect():
                    continue
                logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
                return False
            except redis.RedisError:
                logger.exception("Cache set error for key %s", key)
                return False
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
            return True
        return False

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK.

        Args:
            pattern: Redis SCAN match pattern (e.g. linkresolver:*).

        Returns:
            Number of keys deleted.
        """
        if not self.is_available():
            return 0
        chunk_size = 500
        deleted = 0
        try:
            chunk: list[str] = []
            async for key in self.redis.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= chunk_size:
                    deleted += int(await self.redis.unlink(*chunk) or 0)
                    chunk = []
            if chunk:
                deleted += int(await self.redis.unlink(*chunk) or 0)
        except redis.RedisError:
            logger.exception("Cache delete_pattern error for %s", pattern)
            return deleted
        if deleted > 0:
            logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted

    async def get_or_compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[ResolutionResult]],
    ) -> ResolutionResult:
        redis_key = link_resolver_key(key)
        cached = await self.get(redis_key)
        if isinstance(cached, dict):
            try:
                return ResolutionResult.from_dict(cached)
            except ValidationException:
                logger.warning("Discarding malformed cache entry %s", redis_key)
        result = await compute()
        await self.set(redis_key, result.to_dict())
        return result

    async def clear(self) -> int:
        return await self.delete_pattern(link_resolver_pattern())
