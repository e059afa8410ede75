"""C4 Evaluator — diagram-level population checks plus documentation and connectivity."""

from typing import Sequence

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.models import (
    Element,
    Relationship,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
)
from framework_validation.validators.reference_data import (
    C4_COMPONENT,
    C4_COMPONENT_TYPES,
    C4_CONTAINER,
    C4_CONTAINER_TYPES,
    C4_CONTEXT,
    C4_PERSON_TYPES,
    C4_SYSTEM_TYPES,
)


class C4Evaluator(BaseEvaluator):
    """Validates C4 context, container, and component diagrams."""

    @property
    def framework(self) -> str:
        return "c4"

    def evaluate(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        artifact_type: str = "",
    ) -> list[RuleOutcome]:
        rules = []

        # ── 1. Diagram-level population ──
        if artifact_type == C4_CONTEXT:
            rules.append(self._require_at_least_one(
                "Context diagram must have at least 1 person",
                elements, C4_PERSON_TYPES, "person",
                "No persons found in context diagram",
            ))
            rules.append(self._require_at_least_one(
                "Context diagram must have at least 1 system",
                elements, C4_SYSTEM_TYPES, "system",
                "No systems found in context diagram",
            ))

        if artifact_type == C4_CONTAINER:
            rules.append(self._require_at_least_one(
                "Container diagram must have at least 1 container",
                elements, C4_CONTAINER_TYPES, "container",
                "No containers found",
            ))

        if artifact_type == C4_COMPONENT:
            rules.append(self._require_at_least_one(
                "Component diagram must have at least 1 component",
                elements, C4_COMPONENT_TYPES, "component",
                "No components found",
            ))

        # ── 2. Documentation ──
        rules.append(self._descriptions_rule(elements, list_names=True))
        rules.append(self._labels_rule(relationships))

        # ── 3. Connectivity ──
        rules.append(self._orphans_rule(elements, relationships))

        return rules

    def _labels_rule(self, relationships: Sequence[Relationship]) -> RuleOutcome:
        unlabeled = [r for r in relationships if self._is_blank(r.label)]
        return self._rule(
            "Relationships must have labels",
            ok=not unlabeled,
            message_ok="All relationships have labels",
            message_bad=(
                f"{len(unlabeled)} relationship(s) missing labels: "
                f"{', '.join(r.relationship_id for r in unlabeled)}"
            ),
            severity=RuleSeverity.WARNING,
        )

    def _orphans_rule(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
    ) -> RuleOutcome:
        """Elements touching no relationship only degrade to a warning."""
        connected: set[str] = set()
        for rel in relationships:
            connected.add(rel.source_element_id)
            connected.add(rel.target_element_id)

        orphans = [e for e in elements if e.element_id not in connected]
        return self._rule(
            "No orphan elements (must have at least 1 relationship)",
            ok=not orphans,
            message_ok="All elements are connected",
            message_bad=f"{len(orphans)} orphan element(s): {self._names(orphans)}",
            severity=RuleSeverity.WARNING,
            bad_status=RuleStatus.WARNING,
        )
