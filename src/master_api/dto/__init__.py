"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import LoginRequest
from .responses import (
    INVALID_REQUEST_PARAMETERS,
    TOTAL_RECORDS_HEADER,
    ErrorResponse,
    EventStatus,
    HandlerResult,
    HealthCheckResponse,
    ModelAction,
    ModelType,
    SuccessEnvelope,
)

__all__ = [
    "LoginRequest",
    "ErrorResponse",
    "EventStatus",
    "HandlerResult",
    "HealthCheckResponse",
    "ModelAction",
    "ModelType",
    "SuccessEnvelope",
    "INVALID_REQUEST_PARAMETERS",
    "TOTAL_RECORDS_HEADER",
]
