"""Geographic reference entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Country:
    iso2: str
    iso3: str
    name: str
    enabled: bool = False


@dataclass(frozen=True)
class Language:
    code: str
    name: str


@dataclass(frozen=True)
class ProvinceState:
    iso2: str
    code: str
    name: str


@dataclass(frozen=True)
class EnabledCountry:
    """A country switched on for use, with its language associations.

    Attributes:
        iso2: Two-letter country code
        name: Country display name
        languages: Language codes associated with the country
        main_language: The country's primary language code, if one is set
        updated_by: Id of the user who last enabled the country
    """

    iso2: str
    name: str
    languages: list[str] = field(default_factory=list)
    main_language: str | None = None
    updated_by: str | None = None
