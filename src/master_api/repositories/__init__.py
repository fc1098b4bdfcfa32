"""Repository layer for cache storage.

Implementations are protocol-based (structural typing), not
inheritance-based. Any class implementing the CacheStore methods
satisfies the protocol.
"""

from master_api.protocols import CacheStore

from .memory_cache import InMemoryCacheStore
from .redis_cache import RedisCacheStore

__all__ = [
    "CacheStore",
    "InMemoryCacheStore",
    "RedisCacheStore",
]
