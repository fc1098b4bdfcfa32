"""Cache storage protocol.

Defines the interface for any key-value cache backend that handlers can
read through. Implementations include:
- In-process dictionary with sliding expiration (default)
- Redis, shared between worker processes
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from master_api.entities import CacheEntryOptions

T = TypeVar("T")


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Handlers receive a ``CacheStore`` at
    construction so tests can pass a spy or a store with a fake clock.

    Example:
        ```python
        from master_api.repositories import InMemoryCacheStore

        cache: CacheStore = InMemoryCacheStore()
        countries = await cache.get_or_create(
            "Countries",
            lambda: geo_service.get_countries(None),
            CacheEntryOptions(sliding_expiration=timedelta(minutes=30)),
        )
        ```
    """

    def get(self, key: str) -> Any | None:
        """Read an entry, refreshing its sliding expiration.

        Args:
            key: The cache key

        Returns:
            The cached value, or None when missing or expired
        """
        ...

    def set(self, key: str, value: Any, options: CacheEntryOptions) -> None:
        """Store or replace an entry.

        Args:
            key: The cache key
            value: The value to cache
            options: Expiration and priority for the entry
        """
        ...

    def remove(self, key: str) -> bool:
        """Remove an entry.

        Args:
            key: The cache key

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    async def get_or_create(
        self,
        key: str,
        factory: Callable[[], Awaitable[T]],
        options: CacheEntryOptions,
    ) -> T:
        """Return the cached value, computing and storing it on a miss.

        The read and the write are not atomic: concurrent misses may each
        await the factory, and the last write wins.

        Args:
            key: The cache key
            factory: Coroutine function producing the value on a miss
            options: Expiration and priority used when storing

        Returns:
            The cached or freshly computed value
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
