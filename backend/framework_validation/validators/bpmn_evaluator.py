"""BPMN Evaluator — graph-structural checks on process models.

Start/end event cardinality, gateway fan-out, and task reachability from the
start event(s). Reachability is computed by a breadth-first traversal over
the sequence flows.
"""

from collections import Counter
from typing import Sequence

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.models import Element, Relationship, RuleOutcome
from framework_validation.validators.reachability import reachable_from
from framework_validation.validators.reference_data import (
    BPMN_END_EVENT,
    BPMN_GATEWAY_TYPES,
    BPMN_START_EVENT,
    BPMN_TASK_TYPES,
    GATEWAY_MIN_OUTGOING,
)


class BpmnEvaluator(BaseEvaluator):
    """Validates BPMN process diagrams."""

    @property
    def framework(self) -> str:
        return "bpmn"

    def evaluate(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        artifact_type: str = "",
    ) -> list[RuleOutcome]:
        rules = []

        # ── 1. Exactly one start event ──
        start_events = self._of_types(elements, [BPMN_START_EVENT])
        rules.append(self._rule(
            "Process must have exactly 1 start event",
            ok=len(start_events) == 1,
            message_ok="Process has 1 start event",
            message_bad=f"Found {len(start_events)} start event(s), expected exactly 1",
        ))

        # ── 2. At least one end event ──
        end_events = self._of_types(elements, [BPMN_END_EVENT])
        rules.append(self._rule(
            "Process must have at least 1 end event",
            ok=len(end_events) >= 1,
            message_ok=f"Found {len(end_events)} end event(s)",
            message_bad="No end events found",
        ))

        # ── 3. Gateway fan-out ──
        gateways = self._of_types(elements, BPMN_GATEWAY_TYPES)
        if gateways:
            rules.append(self._gateway_rule(gateways, relationships))

        # ── 4. Task reachability ──
        if start_events:
            rules.append(self._reachability_rule(elements, relationships, start_events))

        return rules

    def _gateway_rule(
        self,
        gateways: list[Element],
        relationships: Sequence[Relationship],
    ) -> RuleOutcome:
        outgoing = Counter(rel.source_element_id for rel in relationships)
        narrow = [gw for gw in gateways if outgoing[gw.element_id] < GATEWAY_MIN_OUTGOING]
        return self._rule(
            "All gateways must have 2+ outgoing connections",
            ok=not narrow,
            message_ok="All gateways have sufficient outgoing connections",
            message_bad=(
                f"{len(narrow)} gateway(s) with fewer than 2 outgoing connections: "
                f"{self._names(narrow)}"
            ),
        )

    def _reachability_rule(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        start_events: list[Element],
    ) -> RuleOutcome:
        reachable = reachable_from((e.element_id for e in start_events), relationships)
        tasks = self._of_types(elements, BPMN_TASK_TYPES)
        unreachable = [t for t in tasks if t.element_id not in reachable]
        return self._rule(
            "Every task must be reachable from start event",
            ok=not unreachable,
            message_ok="All tasks are reachable from the start event",
            message_bad=f"{len(unreachable)} task(s) not reachable: {self._names(unreachable)}",
        )
