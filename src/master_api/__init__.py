"""Master API - account reopening and geographic reference data over HTTP.

Layers:
    - protocols: Interface contracts (CacheStore, GeoService, AccountService)
    - repositories: Cache store implementations (in-memory, Redis)
    - services: In-memory reference implementations of the domain services
    - handlers: HTTP endpoint handlers returning HandlerResult values
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from master_api.api.app import create_app

    app = create_app()
    ```
"""

from master_api.config import get_settings, settings
from master_api.dto import HandlerResult, LoginRequest, SuccessEnvelope
from master_api.entities import (
    CacheEntryOptions,
    CachePriority,
    Country,
    EnabledCountry,
    Language,
    PagedResult,
    PageRequest,
    ProvinceState,
)
from master_api.handlers import AccountHandler, GeoHandler
from master_api.protocols import AccountService, CacheStore, GeoService
from master_api.repositories import InMemoryCacheStore, RedisCacheStore
from master_api.services import InMemoryAccountService, InMemoryGeoService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "AccountService",
    "CacheStore",
    "GeoService",
    # Handlers (HTTP)
    "AccountHandler",
    "GeoHandler",
    # Cache stores
    "InMemoryCacheStore",
    "RedisCacheStore",
    # Reference services
    "InMemoryAccountService",
    "InMemoryGeoService",
    # Entities (domain models)
    "CacheEntryOptions",
    "CachePriority",
    "Country",
    "EnabledCountry",
    "Language",
    "PagedResult",
    "PageRequest",
    "ProvinceState",
    # DTOs (API contracts)
    "HandlerResult",
    "LoginRequest",
    "SuccessEnvelope",
]
