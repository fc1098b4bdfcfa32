"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory -> Redis, reference -> remote services)
- Unit testing with spy implementations
- Clear separation of concerns
"""

from .account_service import AccountService
from .cache_store import CacheStore
from .geo_service import GeoService

__all__ = [
    "AccountService",
    "CacheStore",
    "GeoService",
]
