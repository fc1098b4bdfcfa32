"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from master_api.api.app import create_app
from master_api.repositories import InMemoryCacheStore
from master_api.services import InMemoryGeoService

ADMIN = {"X-User-Id": "admin-1", "X-User-Roles": "User, Admin"}
NON_ADMIN = {"X-User-Id": "user-9", "X-User-Roles": "User"}


@pytest.fixture
def spy_client(test_settings, spy_geo, spy_cache, account_service):
    """Client backed by spies, for checking what reaches the collaborators."""
    app = create_app(
        settings=test_settings,
        geo_service=spy_geo,
        account_service=account_service,
        cache=spy_cache,
    )
    with TestClient(app) as client:
        yield client


@pytest.fixture
def client(test_settings, clock, account_service):
    """Client backed by the in-memory reference services."""
    app = create_app(
        settings=test_settings,
        geo_service=InMemoryGeoService.create(),
        account_service=account_service,
        cache=InMemoryCacheStore(clock=clock),
    )
    with TestClient(app) as client:
        yield client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Master API"
    assert data["endpoints"]["geo"] == "/api/v1/geo"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["cache_healthy"] is True


def test_countries_default_set(client):
    response = client.get("/api/v1/geo/countries")

    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, list)
    assert len(body) == 8
    assert response.headers["X-TOTAL-RECORDS"] == "8"
    assert body[0] == {"iso2": "BR", "iso3": "BRA", "name": "Brazil", "enabled": True}


def test_countries_paged_header_is_full_total(client):
    response = client.get("/api/v1/geo/countries", params={"page": 2, "size": 3})

    assert len(response.json()) == 3
    assert response.headers["X-TOTAL-RECORDS"] == "8"


def test_countries_invalid_paging_falls_back_to_default(spy_client, spy_geo):
    response = spy_client.get("/api/v1/geo/countries", params={"page": "abc", "size": "-2"})

    assert response.status_code == 200
    assert spy_geo.called("get_countries") == [("get_countries", None)]


def test_countries_cached_across_requests(spy_client, spy_geo, clock):
    first = spy_client.get("/api/v1/geo/countries")
    clock.advance_minutes(10)
    second = spy_client.get("/api/v1/geo/countries", params={"page": 0, "size": 0})

    assert spy_geo.country_fetches == 1
    assert first.json() == second.json()


def test_paged_countries_bypass_cache(spy_client, spy_cache):
    spy_client.get("/api/v1/geo/countries", params={"page": 1, "size": 1})

    assert spy_cache.calls == []


@pytest.mark.parametrize(
    "path,total",
    [
        ("/api/v1/geo/languages", "5"),
        ("/api/v1/geo/countries/enabled", "3"),
        ("/api/v1/geo/states", "7"),
    ],
)
def test_listings_carry_total_header(client, path, total):
    response = client.get(path, params={"page": 1, "size": 1})

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert response.headers["X-TOTAL-RECORDS"] == total


def test_states_filtered_by_country(client):
    response = client.get("/api/v1/geo/states", params={"iso2": "CA"})

    assert {state["iso2"] for state in response.json()} == {"CA"}
    assert response.headers["X-TOTAL-RECORDS"] == "2"


def test_total_header_exposed_to_browsers(client):
    response = client.get(
        "/api/v1/geo/languages",
        headers={"Origin": "https://app.example.com"},
    )

    assert "x-total-records" in response.headers["access-control-expose-headers"].lower()


def test_enable_country_as_admin(spy_client, spy_geo):
    response = spy_client.patch("/api/v1/geo/country/US/enable", headers=ADMIN)

    assert response.status_code == 200
    assert response.json() == {"module": "EnabledCountry", "action": "Update", "status": "Success"}
    assert spy_geo.called("enable_disable_country") == [
        ("enable_disable_country", "US", "admin-1", True)
    ]


def test_disable_country_as_admin(spy_client, spy_geo):
    response = spy_client.patch("/api/v1/geo/country/CA/disable", headers=ADMIN)

    assert response.status_code == 200
    assert spy_geo.called("enable_disable_country") == [
        ("enable_disable_country", "CA", "admin-1", False)
    ]


def test_mutation_requires_identity(spy_client, spy_geo):
    response = spy_client.patch("/api/v1/geo/country/US/enable")

    assert response.status_code == 401
    assert spy_geo.calls == []


def test_mutation_requires_admin_role(spy_client, spy_geo):
    response = spy_client.patch("/api/v1/geo/country/US/lang/en", headers=NON_ADMIN)

    assert response.status_code == 403
    assert spy_geo.calls == []


def test_country_language_normalised(spy_client, spy_geo):
    response = spy_client.patch(
        "/api/v1/geo/country/us/lang/EN", params={"main": "true"}, headers=ADMIN
    )

    assert response.status_code == 200
    assert response.json()["module"] == "CountryLanguage"
    assert spy_geo.called("set_country_language") == [
        ("set_country_language", "US", "en", True)
    ]


def test_unknown_country_maps_to_404(client):
    response = client.patch("/api/v1/geo/country/ZZ/enable", headers=ADMIN)

    assert response.status_code == 404
    assert response.json()["error_code"] == "COUNTRY_NOT_FOUND"


def test_enabled_country_visible_after_enable(client):
    client.patch("/api/v1/geo/country/DE/enable", headers=ADMIN)

    response = client.get("/api/v1/geo/countries/enabled")

    germany = next(c for c in response.json() if c["iso2"] == "DE")
    assert germany["updated_by"] == "admin-1"


def test_country_list_stays_cached_after_enable(client):
    before = client.get("/api/v1/geo/countries").json()
    client.patch("/api/v1/geo/country/DE/enable", headers=ADMIN)
    after = client.get("/api/v1/geo/countries").json()

    assert after == before


def test_reopen_redirects_to_login(client, account_service):
    response = client.post(
        "/api/v1/account/reopen",
        json={"username": "closed.user", "password": "s3cret!"},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "https://app.example.com/account/login"
    assert account_service.get("closed.user").closed is False


def test_reopen_bad_credentials(client):
    response = client.post(
        "/api/v1/account/reopen",
        json={"username": "closed.user", "password": "wrong"},
        follow_redirects=False,
    )

    assert response.status_code == 401
    assert response.json()["error_code"] == "INVALID_CREDENTIALS"


def test_reopen_open_account_conflict(client):
    response = client.post(
        "/api/v1/account/reopen",
        json={"username": "active.user", "password": "s3cret!"},
        follow_redirects=False,
    )

    assert response.status_code == 409


def test_reopen_requires_credentials(client):
    response = client.post("/api/v1/account/reopen", json={"username": "", "password": ""})

    assert response.status_code == 422
