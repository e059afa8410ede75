"""Model reader — flattens an artifact payload into the engine's read-only inputs."""

from typing import Any, Union

from framework_validation.validators.models import Artifact, Element, Relationship


def read_artifact(artifact: Union[Artifact, dict[str, Any]]) -> Artifact:
    """Coerce a raw mapping (camelCase or snake_case keys) into an Artifact.

    Raises:
        pydantic.ValidationError: if a record is malformed
    """
    if isinstance(artifact, Artifact):
        return artifact
    return Artifact.model_validate(artifact)


def read_model(
    artifact: Union[Artifact, dict[str, Any]],
) -> tuple[tuple[Element, ...], tuple[Relationship, ...]]:
    """Return the artifact's elements and relationships as immutable snapshots."""
    artifact = read_artifact(artifact)
    return tuple(artifact.elements), tuple(artifact.relationships)
