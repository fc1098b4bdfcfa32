"""Global mapping from domain exceptions to HTTP responses.

Handlers let service errors propagate; this is the single place that
decides their status code and body shape.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from master_api.dto import ErrorResponse
from master_api.errors import (
    AccountNotClosedError,
    GeoError,
    InvalidCredentialsError,
    MasterApiError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching type wins.
_STATUS_BY_ERROR: tuple[tuple[type[MasterApiError], int], ...] = (
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AccountNotClosedError, status.HTTP_409_CONFLICT),
    (GeoError, status.HTTP_404_NOT_FOUND),
    (ServiceUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: MasterApiError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(MasterApiError)
    async def domain_error_handler(request: Request, exc: MasterApiError) -> JSONResponse:
        status_code = status_for(exc)
        logger.info(
            "%s %s failed with %s (%d)",
            request.method,
            request.url.path,
            exc.error_code,
            status_code,
        )
        body = ErrorResponse(error_code=exc.error_code, message=exc.message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
