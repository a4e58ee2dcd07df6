"""API response models."""

from pydantic import BaseModel
from typing import Any, Literal

from infivalidator.validators.models import ValidationError


class SanitizeResponse(BaseModel):
    """Sanitized request body with any rule failures."""

    message: str = "Object has been sanitized successfully."
    data: Any = None
    errors: list[ValidationError] = []


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    error: str
    message: str


class HealthResponse(BaseModel):
    """Service health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    rules: dict[str, list[str]]
