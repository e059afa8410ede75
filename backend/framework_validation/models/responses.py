"""API response models."""

from pydantic import BaseModel
from typing import Literal


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    frameworks: list[str]


class FrameworksResponse(BaseModel):
    """Frameworks the engine can validate against."""

    frameworks: list[str]
