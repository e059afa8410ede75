"""Score calculator and grade mapper tests."""

import pytest

from framework_validation.validators import (
    Grade,
    RuleOutcome,
    RuleSeverity,
    RuleStatus,
    calculate_grade,
    calculate_score,
)


def _outcome(status: RuleStatus, severity: RuleSeverity = RuleSeverity.ERROR) -> RuleOutcome:
    return RuleOutcome(rule="check", status=status, message="msg", severity=severity)


PASS = _outcome(RuleStatus.PASS)
WARN = _outcome(RuleStatus.WARNING)
FAIL = _outcome(RuleStatus.FAIL)


class TestCalculateScore:
    def test_empty_rules_score_zero(self) -> None:
        assert calculate_score([]) == 0

    def test_all_pass(self) -> None:
        assert calculate_score([PASS, PASS, PASS]) == 100

    def test_all_fail(self) -> None:
        assert calculate_score([FAIL, FAIL]) == 0

    def test_warning_counts_half(self) -> None:
        assert calculate_score([WARN]) == 50
        assert calculate_score([PASS, WARN]) == 75

    @pytest.mark.parametrize(
        "rules,expected",
        [
            ([PASS, FAIL, FAIL], 33),
            ([PASS, PASS, FAIL], 67),
            ([WARN, FAIL, FAIL, FAIL], 13),
            ([PASS, WARN, FAIL, FAIL], 38),
            ([PASS, PASS, PASS, FAIL, FAIL], 60),
        ],
    )
    def test_rounds_to_nearest_with_ties_up(self, rules: list[RuleOutcome], expected: int) -> None:
        assert calculate_score(rules) == expected

    def test_severity_does_not_affect_score(self) -> None:
        # Known quirk: an error-severity fail weighs the same as a warning-severity fail.
        error_fail = _outcome(RuleStatus.FAIL, RuleSeverity.ERROR)
        warning_fail = _outcome(RuleStatus.FAIL, RuleSeverity.WARNING)
        assert calculate_score([PASS, error_fail]) == calculate_score([PASS, warning_fail]) == 50

    def test_score_always_in_range(self) -> None:
        statuses = [PASS, WARN, FAIL]
        for a in statuses:
            for b in statuses:
                for c in statuses:
                    assert 0 <= calculate_score([a, b, c]) <= 100


class TestCalculateGrade:
    @pytest.mark.parametrize(
        "score,grade",
        [
            (100, Grade.A),
            (90, Grade.A),
            (89, Grade.B),
            (80, Grade.B),
            (79, Grade.C),
            (70, Grade.C),
            (69, Grade.D),
            (60, Grade.D),
            (59, Grade.F),
            (0, Grade.F),
        ],
    )
    def test_inclusive_lower_bounds(self, score: int, grade: Grade) -> None:
        assert calculate_grade(score) == grade

    def test_total_over_score_range(self) -> None:
        grades = [calculate_grade(score) for score in range(0, 101)]
        assert all(isinstance(g, Grade) for g in grades)
        # Monotonic: a higher score never gets a worse letter
        order = [Grade.F, Grade.D, Grade.C, Grade.B, Grade.A]
        ranks = [order.index(g) for g in grades]
        assert ranks == sorted(ranks)
