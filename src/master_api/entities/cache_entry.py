"""Cache entry domain entities."""

from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum
from typing import Any


class CachePriority(IntEnum):
    """Eviction priority under size pressure. Lower values go first."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    NEVER_REMOVE = 3


@dataclass(frozen=True)
class CacheEntryOptions:
    """How long an entry lives and how readily it is evicted.

    Attributes:
        sliding_expiration: Entry expires after going unread for this long.
            None means it never expires by time.
        priority: Eviction priority when the store is over its size limit
    """

    sliding_expiration: timedelta | None = None
    priority: CachePriority = CachePriority.NORMAL

    @property
    def sliding_seconds(self) -> float | None:
        if self.sliding_expiration is None:
            return None
        return self.sliding_expiration.total_seconds()


@dataclass
class CacheEntryEntity:
    """A value held by an in-process cache store.

    Attributes:
        key: The cache key
        value: The cached value
        options: Expiration and priority options the entry was stored with
        last_access: Clock reading of the last write or successful read
    """

    key: str
    value: Any
    options: CacheEntryOptions
    last_access: float

    def is_expired(self, now: float) -> bool:
        seconds = self.options.sliding_seconds
        if seconds is None:
            return False
        return now - self.last_access >= seconds
