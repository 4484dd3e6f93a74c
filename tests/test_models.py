"""Tests for the configuration models (core/models.py).

All models are frozen dataclasses that reject inconsistent parameters
at construction — these tests verify both halves of that contract.
"""

from __future__ import annotations

import dataclasses
import re

import pytest

from limited_value.core.models import (
    AllowedValues,
    Composite,
    LengthLimit,
    NumericRange,
    PatternRule,
)
from limited_value.core.rules import in_range, max_length
from limited_value.exceptions import InvalidConfigError


# ---------------------------------------------------------------------------
# LengthLimit
# ---------------------------------------------------------------------------

class TestLengthLimit:
    def test_defaults_minimum_to_zero(self) -> None:
        assert LengthLimit(maximum=5).minimum == 0

    def test_frozen(self) -> None:
        limit = LengthLimit(maximum=5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            limit.maximum = 10  # type: ignore[misc]

    def test_minimum_above_maximum_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="exceeds maximum"):
            LengthLimit(maximum=2, minimum=3)

    def test_negative_minimum_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="negative"):
            LengthLimit(maximum=2, minimum=-1)

    @pytest.mark.parametrize("bad", [2.5, "5", True, None])
    def test_non_integer_bounds_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidConfigError):
            LengthLimit(maximum=bad)  # type: ignore[arg-type]

    def test_equal_bounds_allowed(self) -> None:
        assert LengthLimit(maximum=3, minimum=3).maximum == 3


# ---------------------------------------------------------------------------
# NumericRange
# ---------------------------------------------------------------------------

class TestNumericRange:
    def test_open_ended(self) -> None:
        assert NumericRange(minimum=0).maximum is None

    def test_no_bounds_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="at least one bound"):
            NumericRange()

    def test_inverted_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="exceeds maximum"):
            NumericRange(minimum=10, maximum=1)

    @pytest.mark.parametrize("bad", [float("nan"), "0", True])
    def test_non_real_bounds_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidConfigError):
            NumericRange(minimum=bad, maximum=100)  # type: ignore[arg-type]

    def test_integer_bound_beyond_float_range(self) -> None:
        huge = 10**400
        assert NumericRange(0, huge).maximum == huge
        assert NumericRange(-huge, 0).minimum == -huge

    def test_huge_bound_rule_still_validates(self) -> None:
        rule = in_range(0, 10**400)
        assert rule.validate(5) == 5
        assert rule.validate(2.5) == 2.5
        assert rule.validate(10**400 + 1) is None

    def test_hashable(self) -> None:
        assert hash(NumericRange(0, 100)) == hash(NumericRange(0, 100))


# ---------------------------------------------------------------------------
# PatternRule
# ---------------------------------------------------------------------------

class TestPatternRule:
    def test_compiled_once_at_construction(self) -> None:
        rule = PatternRule("^[a-z]+$")
        assert isinstance(rule.compiled, re.Pattern)
        assert rule.compiled.pattern == "^[a-z]+$"

    def test_flags_are_applied(self) -> None:
        rule = PatternRule("^abc$", re.IGNORECASE)
        assert rule.compiled.search("ABC") is not None

    def test_malformed_pattern_fails_fast(self) -> None:
        with pytest.raises(InvalidConfigError, match="Malformed regular expression"):
            PatternRule("([a-z")

    def test_non_string_pattern_rejected(self) -> None:
        with pytest.raises(InvalidConfigError):
            PatternRule(123)  # type: ignore[arg-type]

    def test_equality_ignores_compiled(self) -> None:
        assert PatternRule("a+") == PatternRule("a+")

    def test_repr_omits_compiled(self) -> None:
        assert "compiled" not in repr(PatternRule("a+"))


# ---------------------------------------------------------------------------
# AllowedValues
# ---------------------------------------------------------------------------

class TestAllowedValues:
    def test_frozenset_from_any_iterable(self) -> None:
        allowed = AllowedValues(["red", "green", "red"])
        assert allowed.values == frozenset({"red", "green"})

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="must not be empty"):
            AllowedValues([])

    def test_bare_string_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="not a single string"):
            AllowedValues("red")

    def test_unhashable_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="hashable"):
            AllowedValues([["red"]])

    def test_frozen(self) -> None:
        allowed = AllowedValues(["red"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            allowed.values = frozenset()  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

class TestComposite:
    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="at least one"):
            Composite(validators=())

    def test_non_validator_member_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="must be validators"):
            Composite(validators=(max_length(5), "max-length:5"))  # type: ignore[arg-type]
