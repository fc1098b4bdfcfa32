"""HTTP handlers for geographic reference data.

Handlers validate and normalise request values, delegate to the geo
service and shape the answer as a ``HandlerResult``. Service errors are
not caught here; the global exception handlers map them.
"""

from datetime import timedelta
from typing import Any

from master_api.dto import INVALID_REQUEST_PARAMETERS, HandlerResult, ModelAction, ModelType
from master_api.entities import CacheEntryOptions, CachePriority, PageRequest
from master_api.protocols import CacheStore, GeoService

COUNTRIES_CACHE_KEY = "Countries"


def countries_cache_options(minutes: int = 30) -> CacheEntryOptions:
    """Options for the cached default country list."""
    return CacheEntryOptions(
        sliding_expiration=timedelta(minutes=minutes),
        priority=CachePriority.NEVER_REMOVE,
    )


class GeoHandler:
    """HTTP handlers for countries, languages and states.

    Only the default (unpaged) country list is cached. Paged country
    queries and every other listing go straight to the service.

    Example:
        ```python
        handler = GeoHandler(
            geo_service=InMemoryGeoService.create(),
            cache=InMemoryCacheStore.create(),
        )
        result = await handler.get_countries(page=None, size=None)
        ```
    """

    def __init__(
        self,
        geo_service: GeoService,
        cache: CacheStore,
        cache_options: CacheEntryOptions | None = None,
    ) -> None:
        """Initialize the geo handler.

        Args:
            geo_service: The geo service for business logic (required).
            cache: Store used for the default country list (required).
            cache_options: Entry options for that list. Defaults to a 30 minute
                sliding window that is never evicted for space.
        """
        self._geo = geo_service
        self._cache = cache
        self._cache_options = cache_options or countries_cache_options()

    async def get_countries(self, page: Any = None, size: Any = None) -> HandlerResult:
        """Handle GET /countries requests."""
        page_request = PageRequest.parse(page, size)
        if page_request is not None:
            result = await self._geo.get_countries(page_request)
        else:
            result = await self._cache.get_or_create(
                COUNTRIES_CACHE_KEY,
                lambda: self._geo.get_countries(None),
                self._cache_options,
            )
        return HandlerResult.paged(result)

    async def get_languages(self, page: Any = None, size: Any = None) -> HandlerResult:
        """Handle GET /languages requests."""
        result = await self._geo.get_languages(PageRequest.parse(page, size))
        return HandlerResult.paged(result)

    async def get_enabled_countries(self, page: Any = None, size: Any = None) -> HandlerResult:
        """Handle GET /countries/enabled requests."""
        result = await self._geo.get_enabled_countries(PageRequest.parse(page, size))
        return HandlerResult.paged(result)

    async def get_province_states(
        self,
        page: Any = None,
        size: Any = None,
        iso2: str | None = None,
    ) -> HandlerResult:
        """Handle GET /states requests.

        ``iso2`` is passed to the service exactly as received.
        """
        result = await self._geo.get_states(PageRequest.parse(page, size), iso2 or None)
        return HandlerResult.paged(result)

    async def enable_disable_country(
        self, iso2: str, user_id: str, enable: bool
    ) -> HandlerResult:
        """Handle PATCH /country/{iso2}/enable and /disable requests.

        Args:
            iso2: Country code from the route
            user_id: Id of the acting administrator
            enable: True to enable, False to disable

        Returns:
            400 with no body when iso2 is empty, otherwise a success envelope
        """
        if not iso2:
            return HandlerResult.bad_request()

        await self._geo.enable_disable_country(iso2, user_id, enable)
        # TODO: evict COUNTRIES_CACHE_KEY here once stale reads after admin edits are ruled a bug
        return HandlerResult.success(ModelType.ENABLED_COUNTRY, ModelAction.UPDATE)

    async def set_country_language(
        self, iso2: str, language_code: str, main: bool = False
    ) -> HandlerResult:
        """Handle PATCH /country/{iso2}/lang/{languageCode} requests.

        The country code is upper-cased and the language code lower-cased
        before the service is called.
        """
        if not iso2 or not language_code:
            return HandlerResult.bad_request(INVALID_REQUEST_PARAMETERS)

        iso2 = iso2.upper()
        language_code = language_code.lower()
        await self._geo.set_country_language(iso2, language_code, main)
        return HandlerResult.success(ModelType.COUNTRY_LANGUAGE, ModelAction.UPDATE)
