"""Validation Engine — dispatches to a framework evaluator, computes score, produces result.

This is the main entry point for artifact validation. It selects the evaluator
registered for the artifact's framework, runs it, and derives the score, grade,
and suggestions.

Usage:
    engine = FrameworkValidator()
    result = engine.validate("bpmn", "bpmn_process", elements, relationships)
    if result.grade == "F":
        # Show result.suggestions to the author
"""

import time
from typing import Any, Optional, Sequence, Union

import structlog

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.models import (
    Artifact,
    Element,
    Relationship,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
    ValidationResult,
)
from framework_validation.validators.reader import read_artifact, read_model

# Import all evaluators
from framework_validation.validators.c4_evaluator import C4Evaluator
from framework_validation.validators.archimate_evaluator import ArchiMateEvaluator
from framework_validation.validators.togaf_evaluator import TogafEvaluator
from framework_validation.validators.bpmn_evaluator import BpmnEvaluator
from framework_validation.validators.suggestions import generate_suggestions

logger = structlog.get_logger()

EMPTY_ARTIFACT_RULE = RuleOutcome(
    rule="Artifact must contain elements",
    status=RuleStatus.FAIL,
    message="No elements found in artifact",
    severity=RuleSeverity.ERROR,
)


class FrameworkValidator:
    """Selects the evaluator for a framework and produces a unified validation result.

    Design principles:
        - Deterministic: same input → same output, including rule order
        - Reentrant: no state is touched during validate()
        - Extensible: add frameworks by registering evaluators
        - Observable: logs every validation run with timing
    """

    def __init__(self, evaluators: Optional[list[BaseEvaluator]] = None):
        """Initialize with the built-in evaluators or a custom list.

        Args:
            evaluators: Optional list of evaluators. If None, uses all defaults.
        """
        self._evaluators: dict[str, BaseEvaluator] = {}
        for evaluator in evaluators if evaluators is not None else self._default_evaluators():
            self.register(evaluator)

    @staticmethod
    def _default_evaluators() -> list[BaseEvaluator]:
        return [
            C4Evaluator(),
            ArchiMateEvaluator(),
            TogafEvaluator(),
            BpmnEvaluator(),
        ]

    @property
    def frameworks(self) -> list[str]:
        """Registered framework keys, sorted."""
        return sorted(self._evaluators)

    def get_evaluator(self, framework: str) -> Optional[BaseEvaluator]:
        return self._evaluators.get(framework)

    def validate(
        self,
        framework: str,
        artifact_type: str,
        elements: Sequence[Element],
        relationships: Sequence[Relationship],
    ) -> ValidationResult:
        """Score an artifact's elements and relationships against its framework.

        Args:
            framework: Framework key (c4, archimate, togaf, bpmn)
            artifact_type: Framework-specific diagram type (consulted by C4 only)
            elements: Elements of the artifact
            relationships: Relationships of the artifact

        Returns:
            ValidationResult with score, grade, rules, and suggestions
        """
        start_time = time.perf_counter()

        if not elements:
            rules = [EMPTY_ARTIFACT_RULE]
        else:
            evaluator = self._evaluators.get(framework)
            if evaluator is None:
                logger.warning(
                    "unknown_framework",
                    framework=framework,
                    registered=self.frameworks,
                )
                rules = []
            else:
                rules = evaluator.evaluate(elements, relationships, artifact_type)

        suggestions = generate_suggestions(rules, len(elements), len(relationships))
        result = ValidationResult.build(framework, rules, suggestions)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "artifact_validated",
            framework=framework,
            artifact_type=artifact_type,
            score=result.score,
            grade=result.grade,
            rule_count=len(result.rules),
            fail_count=result.fail_count,
            warning_count=result.warning_count,
            duration_ms=round(total_duration, 2),
        )

        return result

    def validate_artifact(self, artifact: Union[Artifact, dict[str, Any]]) -> ValidationResult:
        """Read an artifact payload and validate it.

        Raises:
            pydantic.ValidationError: if the payload is malformed
        """
        artifact = read_artifact(artifact)
        elements, relationships = read_model(artifact)
        return self.validate(artifact.framework, artifact.type, elements, relationships)

    def register(self, evaluator: BaseEvaluator) -> None:
        """Add an evaluator, replacing any existing one for the same framework."""
        key = evaluator.framework
        if not key or not key.strip():
            raise ValueError("Evaluator framework key must not be blank")
        self._evaluators[key] = evaluator

    def unregister(self, framework: str) -> None:
        """Remove the evaluator for a framework, if present."""
        self._evaluators.pop(framework, None)


# Module-level singleton
framework_validator = FrameworkValidator()
