"""Health check endpoint."""

import time
from fastapi import APIRouter

from framework_validation.models.responses import HealthResponse
from framework_validation.validators import framework_validator

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check. The engine has no external dependencies to probe."""
    frameworks = framework_validator.frameworks
    return HealthResponse(
        status="healthy" if frameworks else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        frameworks=frameworks,
    )
