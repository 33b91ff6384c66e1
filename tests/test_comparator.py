"""Tests for conditions, ranges and their textual negation."""

import pytest

from semver_constraints import GREATER_THAN_MIN, Condition, Constraint, Op, Range, SemverError, Version

V = Version.parse

SAMPLE_VERSIONS = [
    "0.0.0",
    "1.1.9",
    "1.2.0-alpha",
    "1.2.0",
    "1.2.5",
    "1.3.0-0",
    "1.3.0-beta",
    "1.3.0",
    "2.0.0",
]


def _bracket(operator):
    return Range(
        Condition(Op.GREATER_THAN_OR_EQUAL, V("1.2.0")),
        Condition(Op.LESS_THAN, V("1.3.0-0")),
        operator,
    )


class TestOp:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("", Op.EQUAL),
            ("=", Op.EQUAL),
            ("!=", Op.NOT_EQUAL),
            ("<", Op.LESS_THAN),
            ("<=", Op.LESS_THAN_OR_EQUAL),
            ("=<", Op.LESS_THAN_OR_EQUAL),
            (">", Op.GREATER_THAN),
            (">=", Op.GREATER_THAN_OR_EQUAL),
            ("=>", Op.GREATER_THAN_OR_EQUAL),
        ],
    )
    def test_from_token(self, token, expected):
        assert Op.from_token(token) is expected

    @pytest.mark.parametrize("token", ["==", "^", "~", "<>", "!"])
    def test_invalid_token(self, token):
        with pytest.raises(SemverError):
            Op.from_token(token)


class TestCondition:
    @pytest.mark.parametrize(
        "operator, satisfied, unsatisfied",
        [
            (Op.EQUAL, "1.2.3+build", "1.2.4"),
            (Op.NOT_EQUAL, "1.2.4", "1.2.3"),
            (Op.LESS_THAN, "1.2.3-rc.1", "1.2.3"),
            (Op.LESS_THAN_OR_EQUAL, "1.2.3", "1.2.4-0"),
            (Op.GREATER_THAN, "1.2.4-0", "1.2.3"),
            (Op.GREATER_THAN_OR_EQUAL, "1.2.3", "1.2.3-rc.1"),
        ],
    )
    def test_is_satisfied_by(self, operator, satisfied, unsatisfied):
        condition = Condition(operator, V("1.2.3"))
        assert condition.is_satisfied_by(V(satisfied))
        assert not condition.is_satisfied_by(V(unsatisfied))

    @pytest.mark.parametrize(
        "operator, expected",
        [
            (Op.EQUAL, "!=1.2.3"),
            (Op.NOT_EQUAL, "=1.2.3"),
            (Op.LESS_THAN, ">=1.2.3"),
            (Op.LESS_THAN_OR_EQUAL, ">1.2.3"),
            (Op.GREATER_THAN, "<=1.2.3"),
            (Op.GREATER_THAN_OR_EQUAL, "<1.2.3"),
        ],
    )
    def test_opposite(self, operator, expected):
        assert Condition(operator, V("1.2.3")).opposite() == expected

    def test_to_string(self):
        assert str(Condition(Op.LESS_THAN_OR_EQUAL, V("1.2.3-beta+b1"))) == "<=1.2.3-beta+b1"

    def test_greater_than_min(self):
        assert str(GREATER_THAN_MIN) == ">=0.0.0"
        assert GREATER_THAN_MIN.is_satisfied_by(V("0.0.0"))
        assert not GREATER_THAN_MIN.is_satisfied_by(V("0.0.0-alpha"))


class TestRange:
    @pytest.mark.parametrize(
        "operator, satisfied",
        [
            (Op.EQUAL, {"1.2.0", "1.2.5"}),
            (Op.NOT_EQUAL, {"0.0.0", "1.1.9", "1.2.0-alpha", "1.3.0-0", "1.3.0-beta", "1.3.0", "2.0.0"}),
            (Op.LESS_THAN, {"0.0.0", "1.1.9", "1.2.0-alpha"}),
            (Op.LESS_THAN_OR_EQUAL, {"0.0.0", "1.1.9", "1.2.0-alpha", "1.2.0", "1.2.5"}),
            (Op.GREATER_THAN, {"1.3.0-0", "1.3.0-beta", "1.3.0", "2.0.0"}),
            (Op.GREATER_THAN_OR_EQUAL, {"1.2.0", "1.2.5", "1.3.0-0", "1.3.0-beta", "1.3.0", "2.0.0"}),
        ],
    )
    def test_is_satisfied_by(self, operator, satisfied):
        bracket = _bracket(operator)
        assert {v for v in SAMPLE_VERSIONS if bracket.is_satisfied_by(V(v))} == satisfied

    @pytest.mark.parametrize(
        "operator, rendered, opposite",
        [
            (Op.EQUAL, ">=1.2.0 <1.3.0-0", "<1.2.0 || >=1.3.0-0"),
            (Op.NOT_EQUAL, "<1.2.0 || >=1.3.0-0", ">=1.2.0 <1.3.0-0"),
            (Op.LESS_THAN, "<1.2.0", ">=1.2.0"),
            (Op.LESS_THAN_OR_EQUAL, "<1.3.0-0", ">=1.3.0-0"),
            (Op.GREATER_THAN, ">=1.3.0-0", "<1.3.0-0"),
            (Op.GREATER_THAN_OR_EQUAL, ">=1.2.0", "<1.2.0"),
        ],
    )
    def test_rendering(self, operator, rendered, opposite):
        bracket = _bracket(operator)
        assert str(bracket) == rendered
        assert bracket.opposite() == opposite

    @pytest.mark.parametrize("operator", list(Op))
    def test_rendering_parses_to_same_predicate(self, operator):
        bracket = _bracket(operator)
        constraint = Constraint.parse(str(bracket))
        for text in SAMPLE_VERSIONS:
            assert constraint.is_satisfied_by(V(text)) == bracket.is_satisfied_by(V(text))

    @pytest.mark.parametrize("operator", list(Op))
    def test_opposite_parses_to_negation(self, operator):
        bracket = _bracket(operator)
        negated = Constraint.parse(bracket.opposite())
        for text in SAMPLE_VERSIONS:
            assert negated.is_satisfied_by(V(text)) is not bracket.is_satisfied_by(V(text))

    def test_nested_range(self):
        inner = _bracket(Op.LESS_THAN_OR_EQUAL)
        outer = Range(Condition(Op.GREATER_THAN_OR_EQUAL, V("1.0.0")), inner, Op.EQUAL)
        assert str(outer) == ">=1.0.0 <1.3.0-0"
        assert outer.is_satisfied_by(V("1.2.9"))
        assert not outer.is_satisfied_by(V("0.9.0"))
