"""API request models."""

from pydantic import Field

from framework_validation.validators.models import Artifact


class ValidateArtifactRequest(Artifact):
    """An artifact submitted for validation.

    Unknown framework strings are accepted and score 0 rather than being rejected.
    """

    framework: str = Field(
        ...,
        min_length=1,
        description="Modeling framework: c4, archimate, togaf, or bpmn",
        examples=["c4"],
    )
    type: str = Field(
        default="",
        description="Framework-specific diagram type, e.g. c4_context",
        examples=["c4_context"],
    )

