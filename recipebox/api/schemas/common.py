"""Common API schemas used across endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    database_ok: bool
    recipe_count: int | None = None
    vision_configured: bool = False
    pin_configured: bool = False


class VerifyPinRequest(BaseModel):
    """PIN entered on the lock screen."""

    pin: str = ""


class VerifyPinResponse(BaseModel):
    """Whether the PIN was correct."""

    valid: bool
