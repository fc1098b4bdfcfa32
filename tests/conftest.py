"""Shared fixtures and test doubles."""

import pytest

from master_api.config import Settings
from master_api.entities import Country, Language, PagedResult, ProvinceState
from master_api.repositories import InMemoryCacheStore
from master_api.services import InMemoryAccountService

COUNTRY_TOTAL = 250


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def advance_minutes(self, minutes: float) -> None:
        self.advance(minutes * 60)


class SpyCache:
    """CacheStore wrapper recording every interaction."""

    def __init__(self, inner: InMemoryCacheStore | None = None) -> None:
        self.inner = inner or InMemoryCacheStore()
        self.calls: list[tuple[str, str]] = []

    def get(self, key):
        self.calls.append(("get", key))
        return self.inner.get(key)

    def set(self, key, value, options):
        self.calls.append(("set", key))
        self.inner.set(key, value, options)

    def remove(self, key):
        self.calls.append(("remove", key))
        return self.inner.remove(key)

    async def get_or_create(self, key, factory, options):
        self.calls.append(("get_or_create", key))
        return await self.inner.get_or_create(key, factory, options)

    def health_check(self):
        return True


class SpyGeoService:
    """GeoService double returning canned pages and recording calls.

    Every listing reports a total larger than the page it returns.
    """

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.country_fetches = 0

    async def get_countries(self, page):
        self.calls.append(("get_countries", page))
        self.country_fetches += 1
        data = [
            Country(iso2="CA", iso3="CAN", name="Canada", enabled=True),
            Country(iso2="US", iso3="USA", name="United States", enabled=True),
        ]
        if page is not None:
            data = data[: page.size]
        return PagedResult(data=data, total=COUNTRY_TOTAL)

    async def get_languages(self, page):
        self.calls.append(("get_languages", page))
        return PagedResult(data=[Language(code="en", name="English")], total=40)

    async def get_enabled_countries(self, page):
        self.calls.append(("get_enabled_countries", page))
        return PagedResult(data=[], total=3)

    async def get_states(self, page, iso2=None):
        self.calls.append(("get_states", page, iso2))
        return PagedResult(data=[ProvinceState(iso2="US", code="TX", name="Texas")], total=51)

    async def enable_disable_country(self, iso2, user_id, enable):
        self.calls.append(("enable_disable_country", iso2, user_id, enable))

    async def set_country_language(self, iso2, language_code, main):
        self.calls.append(("set_country_language", iso2, language_code, main))

    def called(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def spy_geo():
    return SpyGeoService()


@pytest.fixture
def spy_cache(clock):
    return SpyCache(InMemoryCacheStore(clock=clock))


@pytest.fixture
def test_settings():
    return Settings(
        web_url="https://app.example.com",
        login_page="/account/login",
        api_version="v1",
        cache_backend="memory",
        countries_cache_minutes=30,
        admin_role="Admin",
        user_id_header="X-User-Id",
        user_roles_header="X-User-Roles",
    )


@pytest.fixture
def account_service():
    service = InMemoryAccountService()
    service.register("closed.user", "s3cret!", closed=True)
    service.register("active.user", "s3cret!")
    return service

