"""Cache stores and the single-flight get-or-compute manager for page models."""

import asyncio
import fnmatch
import logging
import time
from typing import Awaitable, Callable, Dict, Optional, Tuple, Type, TypeVar

import redis.asyncio as redis
from pydantic import BaseModel, ValidationError

from pagecompose.core.config import Settings

logger = logging.getLogger("pagecompose")

M = TypeVar("M", bound=BaseModel)


class MemoryCacheStore:
    """In-process cache store with per-key expiry."""

    def __init__(self):
        self._entries: Dict[str, Tuple[float, str]] = {}

    async def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= time.monotonic():
            self._entries.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int = 600) -> None:
        now = time.monotonic()
        self._purge_expired(now)
        self._entries[key] = (now + max(1, ttl_seconds), value)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def invalidate_pattern(self, pattern: str) -> None:
        for key in [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]:
            self._entries.pop(key, None)

    async def health_check(self) -> bool:
        return True

    def _purge_expired(self, now: float) -> None:
        for key in [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]:
            del self._entries[key]


class RedisCacheStore:
    """Redis-backed cache store on the asyncio client."""

    def __init__(self, url: str):
        self.url = url
        self._client: Optional[redis.Redis] = None

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.from_url(
                self.url,
                decode_responses=True,
                max_connections=100,
            )
        return self._client

    async def get(self, key: str) -> Optional[str]:
        """Get a cached value by key."""
        try:
            return await self.client.get(key)
        except redis.ConnectionError:
            logger.warning("Redis unavailable, cache miss for %s", key)
            return None

    async def set(self, key: str, value: str, ttl_seconds: int = 600) -> None:
        """Set a cached value with TTL."""
        try:
            await self.client.setex(key, ttl_seconds, value)
        except redis.ConnectionError:
            logger.warning("Redis unavailable, %s not cached", key)

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except redis.ConnectionError:
            logger.warning("Redis unavailable, %s not deleted", key)

    async def invalidate_pattern(self, pattern: str) -> None:
        """Delete all keys matching a pattern."""
        try:
            keys = [key async for key in self.client.scan_iter(match=pattern)]
            if keys:
                await self.client.delete(*keys)
        except redis.ConnectionError:
            logger.warning("Redis unavailable, pattern %s not invalidated", pattern)

    async def health_check(self) -> bool:
        """Check if Redis is reachable."""
        try:
            return await self.client.ping()
        except redis.ConnectionError:
            return False


def build_cache_store(settings: Settings):
    """Create the cache store selected by ``CACHE_BACKEND``."""
    if settings.CACHE_BACKEND == "redis":
        return RedisCacheStore(settings.REDIS_URL)
    if settings.CACHE_BACKEND != "memory":
        logger.warning("Unknown CACHE_BACKEND %r, using memory", settings.CACHE_BACKEND)
    return MemoryCacheStore()


class CacheManager:
    """Get-or-compute over a cache store, computing at most once per key at a time.

    Concurrent callers for a key that is being computed await the same task.
    Failures propagate to every waiter. ``None`` results and failures are
    never stored, and neither is a result whose key was invalidated while it
    was being computed.
    """

    def __init__(self, store, ttl_seconds: int = 600):
        self.store = store
        self.ttl_seconds = ttl_seconds
        self._inflight: Dict[str, asyncio.Task] = {}

    async def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Awaitable[Optional[M]]],
        schema: Type[M],
    ) -> Optional[M]:
        cached = await self._lookup(key, schema)
        if cached is not None:
            logger.debug("Cache hit %s", key)
            return cached

        task = self._inflight.get(key)
        if task is None:
            logger.debug("Cache miss %s", key)
            task = asyncio.ensure_future(self._compute_and_store(key, compute))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug("Awaiting in-flight computation for %s", key)

        # Cancelling one caller must not cancel the shared computation
        return await asyncio.shield(task)

    async def _compute_and_store(self, key: str, compute) -> Optional[M]:
        value = await compute()
        if value is not None and self._inflight.get(key) is asyncio.current_task():
            await self.store.set(key, value.model_dump_json(), self.ttl_seconds)
        return value

    async def _lookup(self, key: str, schema: Type[M]) -> Optional[M]:
        raw = await self.store.get(key)
        if raw is None:
            return None
        try:
            return schema.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding undecodable cache entry %s", key)
            await self.store.delete(key)
            return None

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    def _drop_inflight(self, pattern: str) -> None:
        for key in [k for k in self._inflight if fnmatch.fnmatchcase(k, pattern)]:
            del self._inflight[key]

    async def invalidate(self, key: str) -> None:
        """Drop a cached entry; an in-flight computation for it will not be stored."""
        self._inflight.pop(key, None)
        await self.store.delete(key)

    async def invalidate_pattern(self, pattern: str) -> None:
        self._drop_inflight(pattern)
        await self.store.invalidate_pattern(pattern)
