"""Validation API — score an artifact against its framework's structural rules."""

from fastapi import APIRouter

import structlog

from framework_validation.models.requests import ValidateArtifactRequest
from framework_validation.models.responses import FrameworksResponse
from framework_validation.validators import ValidationResult, framework_validator

logger = structlog.get_logger()

router = APIRouter()


@router.get("/frameworks", response_model=FrameworksResponse)
async def list_frameworks():
    """List the frameworks with a registered evaluator."""
    return FrameworksResponse(frameworks=framework_validator.frameworks)


@router.post("/validate", response_model=ValidationResult)
async def validate_artifact(request: ValidateArtifactRequest):
    """Validate an artifact and return its score, grade, rules, and suggestions.

    The caller owns authorization, persistence, and audit storage; the
    engine's own structured log line carries the audit metadata.
    """
    logger.debug(
        "validation_requested",
        framework=request.framework,
        artifact_type=request.type,
        element_count=len(request.elements),
        relationship_count=len(request.relationships),
    )
    return framework_validator.validate_artifact(request)
