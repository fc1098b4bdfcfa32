"""
Tests for the in-memory reference services.
"""

import asyncio

import pytest

from master_api.entities import PageRequest
from master_api.errors import (
    AccountNotClosedError,
    CountryNotFoundError,
    InvalidCredentialsError,
    LanguageNotFoundError,
)
from master_api.services import InMemoryGeoService


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def geo():
    return InMemoryGeoService.create()


def test_default_countries_sorted_by_name(geo):
    result = run(geo.get_countries(None))

    names = [country.name for country in result.data]
    assert names == sorted(names)
    assert result.total == len(result.data) == 8


def test_paged_countries(geo):
    result = run(geo.get_countries(PageRequest(page=2, size=3)))

    assert [country.iso2 for country in result.data] == ["DE", "MX", "PT"]
    assert result.total == 8


def test_languages(geo):
    result = run(geo.get_languages(PageRequest(page=1, size=2)))

    assert [language.code for language in result.data] == ["en", "fr"]
    assert result.total == 5


def test_states_filter_is_exact(geo):
    upper = run(geo.get_states(None, "US"))
    lower = run(geo.get_states(None, "us"))
    everything = run(geo.get_states(None))

    assert {state.iso2 for state in upper.data} == {"US"}
    assert upper.total == 3
    assert lower.total == 0
    assert everything.total == 7


def test_enable_country_records_user(geo):
    run(geo.enable_disable_country("DE", "admin-7", True))

    enabled = run(geo.get_enabled_countries(None))
    germany = next(country for country in enabled.data if country.iso2 == "DE")
    assert germany.updated_by == "admin-7"
    assert enabled.total == 4


def test_disable_country(geo):
    run(geo.enable_disable_country("US", "admin-7", False))

    enabled = run(geo.get_enabled_countries(None))
    assert "US" not in {country.iso2 for country in enabled.data}
    assert not next(c for c in run(geo.get_countries(None)).data if c.iso2 == "US").enabled


def test_enable_unknown_country(geo):
    with pytest.raises(CountryNotFoundError):
        run(geo.enable_disable_country("ZZ", "admin-7", True))


def test_set_main_language_replaces_previous_main(geo):
    run(geo.set_country_language("CA", "fr", True))

    canada = next(c for c in run(geo.get_enabled_countries(None)).data if c.iso2 == "CA")
    assert canada.main_language == "fr"
    assert canada.languages == ["en", "fr"]


def test_add_secondary_language(geo):
    run(geo.set_country_language("US", "es", False))

    us = next(c for c in run(geo.get_enabled_countries(None)).data if c.iso2 == "US")
    assert us.languages == ["en", "es"]
    assert us.main_language == "en"


def test_set_language_unknown_codes(geo):
    with pytest.raises(CountryNotFoundError):
        run(geo.set_country_language("ZZ", "en", False))
    with pytest.raises(LanguageNotFoundError):
        run(geo.set_country_language("US", "xx", False))


def test_reopen_closed_account(account_service):
    run(account_service.reopen_account("closed.user", "s3cret!"))

    account = account_service.get("closed.user")
    assert account.closed is False
    assert account.closed_at is None


def test_reopen_with_wrong_password(account_service):
    with pytest.raises(InvalidCredentialsError):
        run(account_service.reopen_account("closed.user", "nope"))
    assert account_service.get("closed.user").closed is True


def test_reopen_unknown_user(account_service):
    with pytest.raises(InvalidCredentialsError):
        run(account_service.reopen_account("ghost", "s3cret!"))


def test_reopen_open_account(account_service):
    with pytest.raises(AccountNotClosedError):
        run(account_service.reopen_account("active.user", "s3cret!"))


def test_passwords_are_hashed(account_service):
    assert account_service.get("closed.user").password_hash != "s3cret!"
