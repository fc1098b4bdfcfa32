"""Versioned API routes.

Each route pulls its handler from app.state, calls it and converts the
returned ``HandlerResult`` into a response.
"""

from fastapi import APIRouter, Query, Response

from master_api.dto import ErrorResponse, LoginRequest, SuccessEnvelope
from master_api.entities import Country, EnabledCountry, Language, ProvinceState

from .dependencies import AccountHandlerDep, GeoHandlerDep
from .security import AdminDep

geo_router = APIRouter(prefix="/geo", tags=["geo"])
account_router = APIRouter(prefix="/account", tags=["account"])

_PAGE = Query(None, description="1-based page number; 0 or missing returns the default set")
_SIZE = Query(None, description="Page size; 0 or missing returns the default set")

_TOTAL_HEADER_DOC = {
    "X-TOTAL-RECORDS": {
        "description": "Total matching records, independent of the page window",
        "schema": {"type": "integer"},
    }
}


def _paged_doc(model: type) -> dict:
    return {200: {"model": list[model], "headers": _TOTAL_HEADER_DOC}}


_MUTATION_DOC: dict = {
    200: {"model": SuccessEnvelope},
    400: {"description": "Missing route parameters"},
    404: {"model": ErrorResponse},
}


@geo_router.get("/countries", responses=_paged_doc(Country))
async def get_countries(
    handler: GeoHandlerDep,
    page: str | None = _PAGE,
    size: str | None = _SIZE,
) -> Response:
    result = await handler.get_countries(page, size)
    return result.to_response()


@geo_router.get("/languages", responses=_paged_doc(Language))
async def get_languages(
    handler: GeoHandlerDep,
    page: str | None = _PAGE,
    size: str | None = _SIZE,
) -> Response:
    result = await handler.get_languages(page, size)
    return result.to_response()


@geo_router.get("/countries/enabled", responses=_paged_doc(EnabledCountry))
async def get_enabled_countries(
    handler: GeoHandlerDep,
    page: str | None = _PAGE,
    size: str | None = _SIZE,
) -> Response:
    result = await handler.get_enabled_countries(page, size)
    return result.to_response()


@geo_router.get("/states", responses=_paged_doc(ProvinceState))
async def get_province_states(
    handler: GeoHandlerDep,
    page: str | None = _PAGE,
    size: str | None = _SIZE,
    iso2: str | None = Query(None, description="Restrict to one country"),
) -> Response:
    result = await handler.get_province_states(page, size, iso2)
    return result.to_response()


@geo_router.patch("/country/{iso2}/enable", responses=_MUTATION_DOC)
async def patch_enable(iso2: str, handler: GeoHandlerDep, user: AdminDep) -> Response:
    result = await handler.enable_disable_country(iso2, user.user_id, True)
    return result.to_response()


@geo_router.patch("/country/{iso2}/disable", responses=_MUTATION_DOC)
async def patch_disable(iso2: str, handler: GeoHandlerDep, user: AdminDep) -> Response:
    result = await handler.enable_disable_country(iso2, user.user_id, False)
    return result.to_response()


@geo_router.patch("/country/{iso2}/lang/{language_code}", responses=_MUTATION_DOC)
async def patch_country_language(
    iso2: str,
    language_code: str,
    handler: GeoHandlerDep,
    user: AdminDep,
    main: bool = Query(False, description="Make this the country's main language"),
) -> Response:
    result = await handler.set_country_language(iso2, language_code, main)
    return result.to_response()


@account_router.post(
    "/reopen",
    status_code=302,
    responses={
        302: {"description": "Account reopened; redirect to the login page"},
        401: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def reopen_account(request: LoginRequest, handler: AccountHandlerDep) -> Response:
    result = await handler.reopen_account(request)
    return result.to_response()
