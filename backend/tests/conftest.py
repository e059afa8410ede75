"""Shared test fixtures."""

import copy
from typing import Callable, Optional

import pytest

from framework_validation.validators import Element, FrameworkValidator, Relationship

ElementFactory = Callable[..., Element]
RelationshipFactory = Callable[..., Relationship]


@pytest.fixture
def make_element() -> ElementFactory:
    """Build an Element; description defaults to a non-blank text."""

    def _make(
        element_id: str,
        element_type: str,
        name: Optional[str] = None,
        description: Optional[str] = "Documented element",
        layer: Optional[str] = None,
    ) -> Element:
        return Element(
            element_id=element_id,
            element_type=element_type,
            name=name or element_id,
            description=description,
            layer=layer,
        )

    return _make


@pytest.fixture
def make_relationship() -> RelationshipFactory:
    """Build a Relationship; id is derived from the endpoints unless given."""

    def _make(
        source: str,
        target: str,
        relationship_type: str = "uses",
        label: Optional[str] = "Uses",
        relationship_id: Optional[str] = None,
    ) -> Relationship:
        return Relationship(
            relationship_id=relationship_id or f"{source}->{target}",
            source_element_id=source,
            target_element_id=target,
            relationship_type=relationship_type,
            label=label,
        )

    return _make


@pytest.fixture
def validator() -> FrameworkValidator:
    """A fresh validator with the built-in evaluators."""
    return FrameworkValidator()


VALID_C4_ARTIFACT = {
    "framework": "c4",
    "type": "c4_context",
    "elements": [
        {
            "elementId": "el-1",
            "elementType": "c4_person",
            "name": "End User",
            "description": "Uses the application",
            "layer": None,
        },
        {
            "elementId": "el-2",
            "elementType": "c4_system",
            "name": "Main System",
            "description": "Core application system",
            "layer": None,
        },
        {
            "elementId": "el-3",
            "elementType": "c4_external_system",
            "name": "Email Service",
            "description": "Sends emails to users",
            "layer": None,
        },
    ],
    "relationships": [
        {
            "relationshipId": "rel-1",
            "sourceElementId": "el-1",
            "targetElementId": "el-2",
            "relationshipType": "uses",
            "label": "Uses application",
        },
        {
            "relationshipId": "rel-2",
            "sourceElementId": "el-2",
            "targetElementId": "el-3",
            "relationshipType": "sends_data",
            "label": "Sends notifications",
        },
    ],
}


@pytest.fixture
def c4_context_artifact() -> dict:
    """Well-formed C4 context payload in the camelCase shape the storage layer emits."""
    return copy.deepcopy(VALID_C4_ARTIFACT)
