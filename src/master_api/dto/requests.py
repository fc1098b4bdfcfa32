"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request DTO carrying a username/password pair.

    Both fields are required and non-empty; FastAPI rejects the request
    with 422 before the handler runs otherwise.
    """

    username: str = Field(..., description="Account login name", min_length=1)
    password: str = Field(..., description="Account password", min_length=1)
