from typing import Any

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from master_api.config import Settings, configure_logging, get_settings
from master_api.dto import TOTAL_RECORDS_HEADER, HealthCheckResponse
from master_api.protocols import AccountService, CacheStore, GeoService

from .dependencies import CacheDep, build_lifespan
from .error_handlers import register_error_handlers
from .routes import account_router, geo_router

API_TITLE = "Master API"
API_VERSION = "0.1.0"
API_DESCRIPTION = "Account reopening and geographic reference data"


def create_app(
    settings: Settings | None = None,
    geo_service: GeoService | None = None,
    account_service: AccountService | None = None,
    cache: CacheStore | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Collaborators left as None fall back to the in-memory reference
    services and the cache backend named by CACHE_BACKEND.
    """
    app_settings = settings or get_settings()
    configure_logging()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        lifespan=build_lifespan(
            settings=app_settings,
            geo_service=geo_service,
            account_service=account_service,
            cache=cache,
        ),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[TOTAL_RECORDS_HEADER],
    )

    app.state.settings = app_settings
    register_error_handlers(app)

    app.include_router(geo_router, prefix=app_settings.api_prefix)
    app.include_router(account_router, prefix=app_settings.api_prefix)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        prefix = app_settings.api_prefix
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "description": API_DESCRIPTION,
            "endpoints": {
                "geo": f"{prefix}/geo",
                "account": f"{prefix}/account",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(cache_store: CacheDep) -> JSONResponse:
        """Health check endpoint."""
        is_healthy = cache_store.health_check()
        body = HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_backend=type(cache_store).__name__,
            cache_healthy=is_healthy,
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "master_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
