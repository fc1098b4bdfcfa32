"""Response DTOs and the handler result value object."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel, Field

from master_api.entities import PagedResult

TOTAL_RECORDS_HEADER = "X-TOTAL-RECORDS"

INVALID_REQUEST_PARAMETERS = "Invalid request parameters."


class ModelType(str, Enum):
    ENABLED_COUNTRY = "EnabledCountry"
    COUNTRY_LANGUAGE = "CountryLanguage"


class ModelAction(str, Enum):
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


class EventStatus(str, Enum):
    SUCCESS = "Success"
    FAILURE = "Failure"


class SuccessEnvelope(BaseModel):
    """Generic acknowledgement returned by mutation endpoints."""

    module: ModelType = Field(..., description="Kind of record that was changed")
    action: ModelAction = Field(..., description="What was done to it")
    status: EventStatus = Field(..., description="Outcome of the action")


class ErrorResponse(BaseModel):
    """Body returned by the global exception handlers."""

    error_code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_backend: str = Field(..., description="Configured cache backend")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")


@dataclass(frozen=True)
class HandlerResult:
    """What a handler decided to answer, independent of the web framework.

    The route layer turns it into a Starlette response with ``to_response``.

    Attributes:
        status_code: HTTP status code
        body: JSON-serialisable body, or None for an empty body
        headers: Extra response headers
        redirect_url: Location for redirect results
    """

    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    redirect_url: str | None = None

    @classmethod
    def ok(cls, body: Any = None, headers: dict[str, str] | None = None) -> "HandlerResult":
        return cls(status_code=status.HTTP_200_OK, body=body, headers=dict(headers or {}))

    @classmethod
    def paged(cls, result: PagedResult) -> "HandlerResult":
        """200 with the page as the body and the full count in a header."""
        return cls.ok(body=list(result.data), headers={TOTAL_RECORDS_HEADER: str(result.total)})

    @classmethod
    def success(cls, module: ModelType, action: ModelAction) -> "HandlerResult":
        envelope = SuccessEnvelope(module=module, action=action, status=EventStatus.SUCCESS)
        return cls.ok(body=envelope.model_dump(mode="json"))

    @classmethod
    def bad_request(cls, message: str | None = None) -> "HandlerResult":
        return cls(status_code=status.HTTP_400_BAD_REQUEST, body=message)

    @classmethod
    def redirect(cls, url: str, status_code: int = status.HTTP_302_FOUND) -> "HandlerResult":
        return cls(status_code=status_code, redirect_url=url)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_url is not None

    def to_response(self) -> Response:
        if self.redirect_url is not None:
            return RedirectResponse(
                self.redirect_url, status_code=self.status_code, headers=self.headers
            )
        if self.body is None:
            return Response(status_code=self.status_code, headers=self.headers)
        return JSONResponse(
            content=jsonable_encoder(self.body),
            status_code=self.status_code,
            headers=self.headers,
        )
