"""Reference geo service holding its catalogue in memory.

Stands in for the persistent geo service so the API runs on its own.
Default (unpaged) listings return every row sorted by name; paged
listings slice that same order.
"""

import asyncio
import logging
from dataclasses import dataclass, field, replace

from master_api.entities import (
    Country,
    EnabledCountry,
    Language,
    PagedResult,
    PageRequest,
    ProvinceState,
)
from master_api.errors import CountryNotFoundError, LanguageNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_COUNTRIES = (
    Country(iso2="BR", iso3="BRA", name="Brazil", enabled=True),
    Country(iso2="CA", iso3="CAN", name="Canada", enabled=True),
    Country(iso2="DE", iso3="DEU", name="Germany"),
    Country(iso2="ES", iso3="ESP", name="Spain"),
    Country(iso2="FR", iso3="FRA", name="France"),
    Country(iso2="MX", iso3="MEX", name="Mexico"),
    Country(iso2="PT", iso3="PRT", name="Portugal"),
    Country(iso2="US", iso3="USA", name="United States", enabled=True),
)

DEFAULT_LANGUAGES = (
    Language(code="de", name="German"),
    Language(code="en", name="English"),
    Language(code="es", name="Spanish"),
    Language(code="fr", name="French"),
    Language(code="pt", name="Portuguese"),
)

DEFAULT_STATES = (
    ProvinceState(iso2="BR", code="SP", name="Sao Paulo"),
    ProvinceState(iso2="BR", code="RJ", name="Rio de Janeiro"),
    ProvinceState(iso2="CA", code="ON", name="Ontario"),
    ProvinceState(iso2="CA", code="QC", name="Quebec"),
    ProvinceState(iso2="US", code="CA", name="California"),
    ProvinceState(iso2="US", code="NY", name="New York"),
    ProvinceState(iso2="US", code="TX", name="Texas"),
)

DEFAULT_COUNTRY_LANGUAGES = {
    "BR": ["pt"],
    "CA": ["en", "fr"],
    "US": ["en"],
}

DEFAULT_MAIN_LANGUAGES = {
    "BR": "pt",
    "CA": "en",
    "US": "en",
}


@dataclass
class _CountrySettings:
    languages: list[str] = field(default_factory=list)
    main_language: str | None = None
    updated_by: str | None = None


def _page(items: list, page: PageRequest | None) -> PagedResult:
    if page is None:
        return PagedResult(data=list(items), total=len(items))
    return page.apply(items)


class InMemoryGeoService:
    """In-memory implementation of the GeoService protocol.

    Example:
        ```python
        service = InMemoryGeoService.create()
        result = await service.get_countries(PageRequest(page=1, size=5))
        ```
    """

    def __init__(
        self,
        countries: tuple[Country, ...] | list[Country] = DEFAULT_COUNTRIES,
        languages: tuple[Language, ...] | list[Language] = DEFAULT_LANGUAGES,
        states: tuple[ProvinceState, ...] | list[ProvinceState] = DEFAULT_STATES,
        country_languages: dict[str, list[str]] | None = None,
        main_languages: dict[str, str] | None = None,
    ) -> None:
        self._countries = {country.iso2: country for country in countries}
        self._languages = {language.code: language for language in languages}
        self._states = list(states)
        links = DEFAULT_COUNTRY_LANGUAGES if country_languages is None else country_languages
        mains = DEFAULT_MAIN_LANGUAGES if main_languages is None else main_languages
        self._settings = {
            iso2: _CountrySettings(languages=list(codes), main_language=mains.get(iso2))
            for iso2, codes in links.items()
        }
        self._lock = asyncio.Lock()

    @classmethod
    def create(cls) -> "InMemoryGeoService":
        """Factory method seeding the default catalogue."""
        return cls()

    async def get_countries(self, page: PageRequest | None) -> PagedResult[Country]:
        ordered = sorted(self._countries.values(), key=lambda country: country.name)
        return _page(ordered, page)

    async def get_languages(self, page: PageRequest | None) -> PagedResult[Language]:
        ordered = sorted(self._languages.values(), key=lambda language: language.name)
        return _page(ordered, page)

    async def get_enabled_countries(
        self, page: PageRequest | None
    ) -> PagedResult[EnabledCountry]:
        enabled = []
        for country in sorted(self._countries.values(), key=lambda country: country.name):
            if not country.enabled:
                continue
            country_settings = self._settings.get(country.iso2, _CountrySettings())
            enabled.append(
                EnabledCountry(
                    iso2=country.iso2,
                    name=country.name,
                    languages=list(country_settings.languages),
                    main_language=country_settings.main_language,
                    updated_by=country_settings.updated_by,
                )
            )
        return _page(enabled, page)

    async def get_states(
        self, page: PageRequest | None, iso2: str | None = None
    ) -> PagedResult[ProvinceState]:
        states = self._states
        if iso2:
            states = [state for state in states if state.iso2 == iso2]
        ordered = sorted(states, key=lambda state: (state.iso2, state.name))
        return _page(ordered, page)

    async def enable_disable_country(self, iso2: str, user_id: str, enable: bool) -> None:
        async with self._lock:
            country = self._countries.get(iso2.upper())
            if country is None:
                raise CountryNotFoundError(iso2)

            self._countries[country.iso2] = replace(country, enabled=enable)
            country_settings = self._settings.setdefault(country.iso2, _CountrySettings())
            country_settings.updated_by = user_id

        logger.info(
            "Country %s %s by user %s",
            country.iso2,
            "enabled" if enable else "disabled",
            user_id,
        )

    async def set_country_language(self, iso2: str, language_code: str, main: bool) -> None:
        async with self._lock:
            if iso2 not in self._countries:
                raise CountryNotFoundError(iso2)
            if language_code not in self._languages:
                raise LanguageNotFoundError(language_code)

            country_settings = self._settings.setdefault(iso2, _CountrySettings())
            if language_code not in country_settings.languages:
                country_settings.languages.append(language_code)
            if main:
                country_settings.main_language = language_code

        logger.info(
            "Language %s linked to country %s (main=%s)", language_code, iso2, main
        )
