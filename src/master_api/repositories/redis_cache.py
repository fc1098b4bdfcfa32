"""Redis implementation of CacheStore.

Lets several API worker processes share one cache. Values are stored as
JSON produced by a pydantic TypeAdapter registered for each key, so a
read returns the same typed value that was written.

Sliding expiration maps onto Redis key TTLs: writes use ``SET ... EX``
and reads use ``GETEX ... EX`` so each hit pushes the expiry forward.
Redis has no per-key eviction priority; ``CacheEntryOptions.priority``
is ignored and eviction follows the server's maxmemory-policy.
"""

import logging
import math
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

import redis
from pydantic import TypeAdapter

from master_api.config import get_redis_client
from master_api.entities import CacheEntryOptions

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis-backed cache with sliding expiration.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        adapters: Mapping[str, TypeAdapter],
        redis_client: redis.Redis | None = None,
        namespace: str = "master_api",
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            adapters: TypeAdapter per cache key, used to (de)serialise values.
            redis_client: Redis client instance. If None, creates default.
            namespace: Prefix for every Redis key written by this store.
        """
        self._adapters = dict(adapters)
        self._client = redis_client or get_redis_client()
        self._namespace = namespace
        # Remembers each key's window so reads can refresh it.
        self._windows: dict[str, int | None] = {}

    @classmethod
    def create(
        cls,
        adapters: Mapping[str, TypeAdapter],
        namespace: str = "master_api",
    ) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with the default client.

        Args:
            adapters: TypeAdapter per cache key.
            namespace: Redis key prefix.

        Returns:
            Configured RedisCacheStore
        """
        return cls(adapters=adapters, namespace=namespace)

    def _redis_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def _adapter(self, key: str) -> TypeAdapter:
        try:
            return self._adapters[key]
        except KeyError:
            raise KeyError(f"No serializer registered for cache key {key!r}") from None

    @staticmethod
    def _ttl_seconds(options: CacheEntryOptions) -> int | None:
        seconds = options.sliding_seconds
        if seconds is None:
            return None
        return max(1, math.ceil(seconds))

    def get(self, key: str) -> Any | None:
        adapter = self._adapter(key)
        ttl = self._windows.get(key)
        if ttl is None:
            raw = self._client.get(self._redis_key(key))
        else:
            raw = self._client.getex(self._redis_key(key), ex=ttl)
        if raw is None:
            return None
        return adapter.validate_json(raw)

    def set(self, key: str, value: Any, options: CacheEntryOptions) -> None:
        adapter = self._adapter(key)
        ttl = self._ttl_seconds(options)
        self._client.set(self._redis_key(key), adapter.dump_json(value), ex=ttl)
        self._windows[key] = ttl

    def remove(self, key: str) -> bool:
        self._windows.pop(key, None)
        return bool(self._client.delete(self._redis_key(key)))

    async def get_or_create(
        self,
        key: str,
        factory: Callable[[], Awaitable[T]],
        options: CacheEntryOptions,
    ) -> T:
        # The window must be known before the first read in this process.
        self._windows.setdefault(key, self._ttl_seconds(options))

        cached = self.get(key)
        if cached is not None:
            logger.debug("Redis cache hit for %s", key)
            return cached

        logger.debug("Redis cache miss for %s", key)
        value = await factory()
        self.set(key, value, options)
        return value

    def health_check(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False
