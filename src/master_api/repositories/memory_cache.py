"""In-process implementation of CacheStore.

Entries live in a dictionary owned by one process. Each entry expires
after going unread for its sliding expiration window; every successful
read restarts the window. An optional size limit triggers compaction
that never evicts NEVER_REMOVE entries.
"""

import logging
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from master_api.entities import CacheEntryEntity, CacheEntryOptions, CachePriority

T = TypeVar("T")

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """Dictionary-backed cache with sliding expiration.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        size_limit: int | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            clock: Monotonic seconds source. Defaults to time.monotonic.
            size_limit: Maximum number of entries before compaction. None is unbounded.
        """
        if size_limit is not None and size_limit < 1:
            raise ValueError("size_limit must be >= 1")
        self._clock = clock or time.monotonic
        self._size_limit = size_limit
        self._entries: dict[str, CacheEntryEntity] = {}
        self._lock = threading.Lock()

    @classmethod
    def create(cls, size_limit: int | None = None) -> "InMemoryCacheStore":
        return cls(size_limit=size_limit)

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(now):
                del self._entries[key]
                return None
            entry.last_access = now
            return entry.value

    def set(self, key: str, value: Any, options: CacheEntryOptions) -> None:
        now = self._clock()
        with self._lock:
            if key not in self._entries:
                self._make_room(now)
            self._entries[key] = CacheEntryEntity(
                key=key,
                value=value,
                options=options,
                last_access=now,
            )

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    async def get_or_create(
        self,
        key: str,
        factory: Callable[[], Awaitable[T]],
        options: CacheEntryOptions,
    ) -> T:
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached

        logger.debug("Cache miss for %s", key)
        value = await factory()
        self.set(key, value, options)
        return value

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def count(self) -> int:
        """Number of live entries (expired ones are purged first)."""
        now = self._clock()
        with self._lock:
            self._purge_expired(now)
            return len(self._entries)

    def health_check(self) -> bool:
        return True

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]

    def _make_room(self, now: float) -> None:
        # Caller holds the lock.
        if self._size_limit is None or len(self._entries) < self._size_limit:
            return

        self._purge_expired(now)
        overflow = len(self._entries) - self._size_limit + 1
        if overflow <= 0:
            return

        candidates = sorted(
            (
                entry
                for entry in self._entries.values()
                if entry.options.priority is not CachePriority.NEVER_REMOVE
            ),
            key=lambda entry: (entry.options.priority, entry.last_access),
        )
        for entry in candidates[:overflow]:
            del self._entries[entry.key]

        if len(self._entries) >= self._size_limit:
            logger.warning(
                "Cache is full (%d of %d entries) and nothing left is evictable",
                len(self._entries),
                self._size_limit,
            )
