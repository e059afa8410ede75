"""Base evaluator — abstract class implementing the Strategy Pattern.

Each framework evaluator is a standalone, independently testable unit.
New frameworks are added by registering an evaluator, without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from framework_validation.validators.models import (
    Element,
    Relationship,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
)


class BaseEvaluator(ABC):
    """Abstract base for all framework rule evaluators.

    Contract:
        - evaluate() is deterministic: same input → same output, same rule order
        - evaluate() never mutates elements or relationships
        - evaluate() returns freshly built RuleOutcome values
        - No I/O, no randomness
    """

    @property
    @abstractmethod
    def framework(self) -> str:
        """Framework key this evaluator is registered under (e.g. ``"c4"``)."""
        ...

    @abstractmethod
    def evaluate(
        self,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
        artifact_type: str = "",
    ) -> list[RuleOutcome]:
        """Run the framework's structural checks.

        Args:
            elements: Read-only elements of the artifact
            relationships: Read-only relationships of the artifact
            artifact_type: Framework-specific diagram type (only some frameworks use it)

        Returns:
            Ordered list of rule outcomes
        """
        ...

    # ── Helper Methods ──

    def _rule(
        self,
        rule: str,
        ok: bool,
        message_ok: str,
        message_bad: str,
        severity: RuleSeverity = RuleSeverity.ERROR,
        bad_status: RuleStatus = RuleStatus.FAIL,
    ) -> RuleOutcome:
        """Convenience method to create a RuleOutcome from a boolean check."""
        return RuleOutcome(
            rule=rule,
            status=RuleStatus.PASS if ok else bad_status,
            message=message_ok if ok else message_bad,
            severity=severity,
        )

    def _require_at_least_one(
        self,
        rule: str,
        elements: Sequence[Element],
        types: Iterable[str],
        noun: str,
        missing_message: str,
    ) -> RuleOutcome:
        """Pass if at least one element has one of the given types."""
        found = self._of_types(elements, types)
        return self._rule(
            rule,
            ok=len(found) >= 1,
            message_ok=f"Found {len(found)} {noun}(s)",
            message_bad=missing_message,
        )

    def _descriptions_rule(
        self,
        elements: Sequence[Element],
        list_names: bool = False,
    ) -> RuleOutcome:
        """Every element must carry a non-blank description (warning severity)."""
        missing = [e for e in elements if self._is_blank(e.description)]
        message_bad = f"{len(missing)} element(s) missing descriptions"
        if list_names:
            message_bad += f": {self._names(missing)}"
        return self._rule(
            "All elements must have descriptions",
            ok=not missing,
            message_ok="All elements have descriptions",
            message_bad=message_bad,
            severity=RuleSeverity.WARNING,
        )

    @staticmethod
    def _of_types(elements: Sequence[Element], types: Iterable[str]) -> list[Element]:
        """Filter elements whose type is in the given family, preserving order."""
        wanted = frozenset(types)
        return [e for e in elements if e.element_type in wanted]

    @staticmethod
    def _is_blank(value: Optional[str]) -> bool:
        return not value or not value.strip()

    @staticmethod
    def _names(elements: Iterable[Element]) -> str:
        return ", ".join(e.name for e in elements)
