"""ArchiMate Evaluator — layer, relationship type, and element type allow-lists."""

from typing import Sequence

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.models import Element, Relationship, RuleOutcome
from framework_validation.validators.reference_data import (
    ARCHIMATE_ELEMENT_TYPES,
    ARCHIMATE_LAYERS,
    ARCHIMATE_RELATIONSHIP_TYPES,
)


class ArchiMateEvaluator(BaseEvaluator):
    """Validates ArchiMate models. The artifact type is ignored."""

    @property
    def framework(self) -> str:
        return "archimate"

    def evaluate(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        artifact_type: str = "",
    ) -> list[RuleOutcome]:
        rules = []

        # 1. Layers (elements without a layer are not checked)
        invalid_layers = [e for e in elements if e.layer and e.layer not in ARCHIMATE_LAYERS]
        rules.append(self._rule(
            "Elements must belong to valid ArchiMate layers",
            ok=not invalid_layers,
            message_ok="All elements have valid layers",
            message_bad=(
                f"{len(invalid_layers)} element(s) with invalid layers: "
                + ", ".join(f"{e.name} ({e.layer})" for e in invalid_layers)
            ),
        ))

        # 2. Relationship types
        invalid_rels = [
            r for r in relationships if r.relationship_type not in ARCHIMATE_RELATIONSHIP_TYPES
        ]
        rules.append(self._rule(
            "Cross-layer relationships must follow ArchiMate rules",
            ok=not invalid_rels,
            message_ok="All relationships use valid ArchiMate types",
            message_bad=(
                f"{len(invalid_rels)} relationship(s) with invalid types: "
                + ", ".join(r.relationship_type for r in invalid_rels)
            ),
        ))

        # 3. Element types
        invalid_types = [e for e in elements if e.element_type not in ARCHIMATE_ELEMENT_TYPES]
        rules.append(self._rule(
            "Elements must have valid ArchiMate element types",
            ok=not invalid_types,
            message_ok="All elements have valid types",
            message_bad=(
                f"{len(invalid_types)} element(s) with invalid types: "
                + ", ".join(f"{e.name} ({e.element_type})" for e in invalid_types)
            ),
        ))

        # 4. Documentation
        rules.append(self._descriptions_rule(elements))

        return rules
