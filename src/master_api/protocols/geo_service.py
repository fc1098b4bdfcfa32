"""Geographic reference service protocol."""

from typing import Protocol, runtime_checkable

from master_api.entities import (
    Country,
    EnabledCountry,
    Language,
    PagedResult,
    PageRequest,
    ProvinceState,
)


@runtime_checkable
class GeoService(Protocol):
    """Protocol for the service owning countries, languages and states.

    Every listing takes an optional ``PageRequest``; None asks for the
    default set. Results always carry the full matching count.
    """

    async def get_countries(self, page: PageRequest | None) -> PagedResult[Country]:
        ...

    async def get_languages(self, page: PageRequest | None) -> PagedResult[Language]:
        ...

    async def get_enabled_countries(
        self, page: PageRequest | None
    ) -> PagedResult[EnabledCountry]:
        ...

    async def get_states(
        self, page: PageRequest | None, iso2: str | None = None
    ) -> PagedResult[ProvinceState]:
        """List provinces/states, optionally restricted to one country.

        Args:
            page: Page window, or None for the default set
            iso2: Country filter, compared as given
        """
        ...

    async def enable_disable_country(self, iso2: str, user_id: str, enable: bool) -> None:
        """Switch a country on or off, recording who did it.

        Raises:
            CountryNotFoundError: If no country has this code
        """
        ...

    async def set_country_language(self, iso2: str, language_code: str, main: bool) -> None:
        """Associate a language with a country, optionally as its main language.

        Raises:
            CountryNotFoundError: If no country has this code
            LanguageNotFoundError: If no language has this code
        """
        ...
