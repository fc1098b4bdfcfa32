"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic) and the cache store,
and return framework-neutral ``HandlerResult`` values.

Architecture:
    Route -> Handler -> Service
    (HTTP) -> (Shaping) -> (Business)
"""

from .account_handler import AccountHandler
from .geo_handler import COUNTRIES_CACHE_KEY, GeoHandler, countries_cache_options

__all__ = [
    "AccountHandler",
    "GeoHandler",
    "COUNTRIES_CACHE_KEY",
    "countries_cache_options",
]
