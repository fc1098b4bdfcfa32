"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services, cache store and handlers stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No process-wide singletons; tests pass their own collaborators
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from pydantic import TypeAdapter

from master_api.config import Settings, get_settings
from master_api.entities import Country, PagedResult
from master_api.handlers import (
    COUNTRIES_CACHE_KEY,
    AccountHandler,
    GeoHandler,
    countries_cache_options,
)
from master_api.protocols import AccountService, CacheStore, GeoService
from master_api.repositories import InMemoryCacheStore, RedisCacheStore
from master_api.services import InMemoryAccountService, InMemoryGeoService

logger = logging.getLogger(__name__)


def build_cache_store(settings: Settings) -> CacheStore:
    """Create the cache store selected by CACHE_BACKEND."""
    if settings.cache_backend == "redis":
        return RedisCacheStore.create(
            adapters={COUNTRIES_CACHE_KEY: TypeAdapter(PagedResult[Country])},
        )
    return InMemoryCacheStore.create()


def get_geo_handler(request: Request) -> GeoHandler:
    """Dependency injection for GeoHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "geo_handler", None)
    if handler is None:
        raise RuntimeError("GeoHandler not initialized. Check lifespan setup.")
    return handler


def get_account_handler(request: Request) -> AccountHandler:
    """Dependency injection for AccountHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "account_handler", None)
    if handler is None:
        raise RuntimeError("AccountHandler not initialized. Check lifespan setup.")
    return handler


def get_cache_store(request: Request) -> CacheStore:
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise RuntimeError("Cache store not initialized. Check lifespan setup.")
    return cache


def build_lifespan(
    settings: Settings | None = None,
    geo_service: GeoService | None = None,
    account_service: AccountService | None = None,
    cache: CacheStore | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan context manager for the FastAPI app.

    Any collaborator left as None gets its default implementation.

    Args:
        settings: Application settings. Defaults to get_settings().
        geo_service: Geo service used by GeoHandler.
        account_service: Account service used by AccountHandler.
        cache: Cache store for the default country list.

    Returns:
        Lifespan function suitable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = settings or get_settings()
        cache_store = cache or build_cache_store(app_settings)

        app.state.cache = cache_store
        app.state.geo_handler = GeoHandler(
            geo_service=geo_service or InMemoryGeoService.create(),
            cache=cache_store,
            cache_options=countries_cache_options(app_settings.countries_cache_minutes),
        )
        app.state.account_handler = AccountHandler(
            account_service=account_service or InMemoryAccountService.create(),
            login_redirect_url=app_settings.login_redirect_url,
        )

        logger.info("Cache backend: %s", type(cache_store).__name__)
        logger.info("Countries cache window: %d minutes", app_settings.countries_cache_minutes)
        logger.info("Login redirect: %s", app_settings.login_redirect_url)

        yield

        del app.state.account_handler
        del app.state.geo_handler
        del app.state.cache
        logger.info("Master API shut down")

    return lifespan


# Type aliases for cleaner dependency injection
GeoHandlerDep = Annotated[GeoHandler, Depends(get_geo_handler)]
AccountHandlerDep = Annotated[AccountHandler, Depends(get_account_handler)]
CacheDep = Annotated[CacheStore, Depends(get_cache_store)]
