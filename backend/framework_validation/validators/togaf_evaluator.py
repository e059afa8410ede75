"""TOGAF Evaluator — ADM phase presence and ordering, deliverables, building blocks.

Phase ordering is inferred from element names: each phase name is normalized
and matched against the ADM sequence by substring containment in either
direction. Names that match no ADM phase are ignored for ordering purposes.
"""

import re
from typing import Optional, Sequence

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.models import (
    Element,
    Relationship,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
)
from framework_validation.validators.reference_data import (
    ADM_PHASE_ORDER,
    BUILDING_BLOCK_MARKERS,
    TOGAF_BUILDING_BLOCK,
    TOGAF_DELIVERABLE,
    TOGAF_PHASE,
)

_WHITESPACE = re.compile(r"\s+")


def normalize_phase_name(name: str) -> str:
    """'Architecture Vision' → 'architecture_vision'."""
    return _WHITESPACE.sub("_", name.lower())


def adm_phase_index(name: str) -> Optional[int]:
    """Position of the first ADM phase matching the given name, if any."""
    normalized = normalize_phase_name(name)
    for index, phase in enumerate(ADM_PHASE_ORDER):
        if phase in normalized or normalized in phase:
            return index
    return None


class TogafEvaluator(BaseEvaluator):
    """Validates TOGAF ADM artifacts."""

    @property
    def framework(self) -> str:
        return "togaf"

    def evaluate(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        artifact_type: str = "",
    ) -> list[RuleOutcome]:
        rules = []

        # ── 1. Phases present ──
        phases = self._of_types(elements, [TOGAF_PHASE])
        rules.append(self._rule(
            "ADM phases must be present",
            ok=len(phases) > 0,
            message_ok=f"Found {len(phases)} ADM phase(s)",
            message_bad="No ADM phases found",
        ))

        # ── 2. Phase order ──
        if len(phases) > 1:
            rules.append(self._phase_order_rule(phases))

        # ── 3. Deliverables ──
        deliverables = self._of_types(elements, [TOGAF_DELIVERABLE])
        rules.append(self._rule(
            "Each phase should have at least 1 deliverable",
            ok=len(deliverables) > 0,
            message_ok=f"Found {len(deliverables)} deliverable(s)",
            message_bad="No deliverables found",
            severity=RuleSeverity.WARNING,
            bad_status=RuleStatus.WARNING,
        ))

        # ── 4. Building block classification ──
        building_blocks = self._of_types(elements, [TOGAF_BUILDING_BLOCK])
        if building_blocks:
            unclassified = [bb for bb in building_blocks if not self._is_classified(bb)]
            rules.append(self._rule(
                "Building blocks must be classified (ABB or SBB)",
                ok=not unclassified,
                message_ok="All building blocks are classified",
                message_bad=f"{len(unclassified)} building block(s) not classified as ABB or SBB",
                severity=RuleSeverity.WARNING,
                bad_status=RuleStatus.WARNING,
            ))

        # ── 5. Documentation ──
        rules.append(self._descriptions_rule(elements))

        return rules

    def _phase_order_rule(self, phases: list[Element]) -> RuleOutcome:
        indices = [
            index for index in (adm_phase_index(p.name) for p in phases) if index is not None
        ]
        in_order = all(prev <= curr for prev, curr in zip(indices, indices[1:]))
        return self._rule(
            "ADM phases must be in correct order",
            ok=in_order,
            message_ok="Phases are in correct ADM order",
            message_bad="Phases may not follow standard ADM order",
            severity=RuleSeverity.WARNING,
            bad_status=RuleStatus.WARNING,
        )

    @staticmethod
    def _is_classified(element: Element) -> bool:
        text = f"{element.name}\n{element.description or ''}".lower()
        return any(marker in text for marker in BUILDING_BLOCK_MARKERS)
