#!/usr/bin/env python3
"""
Demo script for the Master API handlers.

Runs the geo and account handlers in-process against the in-memory
reference services and prints what each endpoint would answer.
"""

import asyncio

from master_api.dto import LoginRequest
from master_api.handlers import AccountHandler, GeoHandler
from master_api.repositories import InMemoryCacheStore
from master_api.services import InMemoryAccountService, InMemoryGeoService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_geo() -> None:
    """Demonstrate cached and paged geo listings."""
    print_section("Geo listings")

    handler = GeoHandler(
        geo_service=InMemoryGeoService.create(),
        cache=InMemoryCacheStore.create(),
    )

    result = await handler.get_countries()
    print(f"\nDefault country list (cached): {len(result.body)} rows, headers={result.headers}")

    result = await handler.get_countries(page=2, size=3)
    print(f"Page 2 of size 3: {[c.iso2 for c in result.body]}, headers={result.headers}")

    result = await handler.get_province_states(iso2="US")
    print(f"US states: {[s.name for s in result.body]}")

    print_section("Admin mutations")
    result = await handler.enable_disable_country("DE", "demo-admin", True)
    print(f"\nEnable DE -> {result.status_code} {result.body}")

    result = await handler.set_country_language("de", "DE", main=True)
    print(f"Set DE main language -> {result.status_code} {result.body}")

    result = await handler.set_country_language("", "en")
    print(f"Missing iso2 -> {result.status_code} {result.body!r}")

    result = await handler.get_enabled_countries()
    for country in result.body:
        print(f"  {country.iso2}: languages={country.languages} main={country.main_language}")


async def demo_account() -> None:
    """Demonstrate reopening a closed account."""
    print_section("Account reopen")

    service = InMemoryAccountService.create()
    service.register("demo", "demo-password", closed=True)
    handler = AccountHandler(
        account_service=service,
        login_redirect_url="http://localhost:3000/login",
    )

    result = await handler.reopen_account(LoginRequest(username="demo", password="demo-password"))
    print(f"\nReopen -> {result.status_code} Location: {result.redirect_url}")
    print(f"Account closed now: {service.get('demo').closed}")


def main() -> None:
    asyncio.run(demo_geo())
    asyncio.run(demo_account())


if __name__ == "__main__":
    main()
