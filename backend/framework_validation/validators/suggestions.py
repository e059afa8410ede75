"""Suggestion generator — turns failed and warned rules into actionable text."""

from framework_validation.validators.models import RuleOutcome, RuleStatus

ADD_ELEMENTS_SUGGESTION = "Add elements to the diagram to improve the score"
ADD_RELATIONSHIPS_SUGGESTION = "Add relationships between elements to show connections"


def generate_suggestions(
    rules: list[RuleOutcome],
    element_count: int,
    relationship_count: int,
) -> list[str]:
    """Build the ordered suggestion list.

    All fixes come before all considerations, each group in rule order.
    """
    suggestions = [f"Fix: {r.message}" for r in rules if r.status == RuleStatus.FAIL]
    suggestions.extend(f"Consider: {r.message}" for r in rules if r.status == RuleStatus.WARNING)

    if element_count == 0:
        suggestions.append(ADD_ELEMENTS_SUGGESTION)

    if relationship_count == 0 and element_count > 1:
        suggestions.append(ADD_RELATIONSHIPS_SUGGESTION)

    return suggestions
