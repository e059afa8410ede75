"""Validation models — diagram records, rule outcomes, scoring, and result structure.

All validation is deterministic: same input → same output, no randomness.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RuleStatus(str, Enum):
    """Outcome of a single structural check."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class RuleSeverity(str, Enum):
    """Informational severity attached to a rule. Does not affect the score."""

    ERROR = "error"
    WARNING = "warning"


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class _DiagramRecord(BaseModel):
    """Read-only record accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Element(_DiagramRecord):
    """A single modeled entity (person, system, task, ...) within an artifact."""

    element_id: str
    element_type: str
    name: str
    description: Optional[str] = None
    layer: Optional[str] = None  # ArchiMate only


class Relationship(_DiagramRecord):
    """A directed, labeled edge between two elements."""

    relationship_id: str
    source_element_id: str
    target_element_id: str
    relationship_type: str
    label: Optional[str] = None


class Artifact(_DiagramRecord):
    """An architecture/process diagram as handed over by the storage layer."""

    framework: str
    type: str = ""
    elements: list[Element] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)


class RuleOutcome(BaseModel):
    """The pass/warning/fail result of one structural check."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    rule: str
    status: RuleStatus
    message: str
    severity: RuleSeverity


# Weight each status contributes to the score. Severity is not weighted.
STATUS_WEIGHTS = {
    RuleStatus.PASS: 1.0,
    RuleStatus.WARNING: 0.5,
    RuleStatus.FAIL: 0.0,
}

# Inclusive lower bounds, checked top-down
GRADE_THRESHOLDS = (
    (90, Grade.A),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
)


def calculate_score(rules: list[RuleOutcome]) -> int:
    """Reduce rule outcomes to a 0-100 score.

    Every rule counts equally; a warning is worth half a pass. The ratio is
    rounded half-up so ties never bias downwards. An empty list scores 0.
    """
    if not rules:
        return 0

    passed_weight = sum(STATUS_WEIGHTS[RuleStatus(rule.status)] for rule in rules)
    return math.floor(passed_weight * 100 / len(rules) + 0.5)


def calculate_grade(score: int) -> Grade:
    """Map a score to a letter grade."""
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


class ValidationResult(BaseModel):
    """Complete validation result — the output of the validation engine."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    score: int = Field(ge=0, le=100, description="Weighted structural score 0-100")
    grade: Grade
    framework: str
    rules: tuple[RuleOutcome, ...] = ()
    suggestions: tuple[str, ...] = ()

    @property
    def fail_count(self) -> int:
        return sum(1 for rule in self.rules if rule.status == RuleStatus.FAIL)

    @property
    def warning_count(self) -> int:
        return sum(1 for rule in self.rules if rule.status == RuleStatus.WARNING)

    @classmethod
    def build(
        cls,
        framework: str,
        rules: list[RuleOutcome],
        suggestions: list[str],
    ) -> "ValidationResult":
        """Build a complete result from rule outcomes and derived suggestions."""
        score = calculate_score(rules)
        return cls(
            score=score,
            grade=calculate_grade(score),
            framework=framework,
            rules=tuple(rules),
            suggestions=tuple(suggestions),
        )
