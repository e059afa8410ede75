"""Framework Validator — deterministic structural scoring for architecture diagrams.

Usage:
    from framework_validation.validators import framework_validator

    result = framework_validator.validate(framework, artifact_type, elements, relationships)
    for suggestion in result.suggestions:
        ...
"""

from framework_validation.validators.base import BaseEvaluator
from framework_validation.validators.engine import FrameworkValidator, framework_validator
from framework_validation.validators.models import (
    Artifact,
    Element,
    Grade,
    Relationship,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
    ValidationResult,
    calculate_grade,
    calculate_score,
)
from framework_validation.validators.reachability import reachable_from
from framework_validation.validators.reader import read_artifact, read_model
from framework_validation.validators.suggestions import generate_suggestions

__all__ = [
    "BaseEvaluator",
    "FrameworkValidator",
    "framework_validator",
    "Artifact",
    "Element",
    "Grade",
    "Relationship",
    "RuleOutcome",
    "RuleSeverity",
    "RuleStatus",
    "ValidationResult",
    "calculate_grade",
    "calculate_score",
    "reachable_from",
    "read_artifact",
    "read_model",
    "generate_suggestions",
]
