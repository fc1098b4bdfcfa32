"""Domain entities for internal representation.

These are pure dataclasses used internally by handlers, services and
cache stores. They are NOT API contracts - use DTOs from the dto
package for request validation and response envelopes.
"""

from .account import UserAccount
from .cache_entry import CacheEntryEntity, CacheEntryOptions, CachePriority
from .geo import Country, EnabledCountry, Language, ProvinceState
from .paged_result import PagedResult
from .pagination import PageRequest

__all__ = [
    "CacheEntryEntity",
    "CacheEntryOptions",
    "CachePriority",
    "Country",
    "EnabledCountry",
    "Language",
    "PageRequest",
    "PagedResult",
    "ProvinceState",
    "UserAccount",
]
