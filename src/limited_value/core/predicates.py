"""Pure predicates for the built-in rules.

Each predicate has the shape ``(config, value) -> bool``, is
deterministic, and never raises for invalid input: a payload of the
wrong runtime type simply fails the check.
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from limited_value.core.models import (
    AllowedValues,
    Composite,
    LengthLimit,
    NumericRange,
    PatternRule,
)


def within_length(config: LengthLimit, value: Any) -> bool:
    """True when ``config.minimum <= len(value) <= config.maximum``."""
    try:
        size = len(value)
    except TypeError:
        return False
    return config.minimum <= size <= config.maximum


def within_range(config: NumericRange, value: Any) -> bool:
    """True for a real number inside the inclusive range.

    ``bool`` is rejected even though it subclasses ``int``; NaN fails
    every comparison and is therefore rejected as well.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if config.minimum is not None and not value >= config.minimum:
        return False
    if config.maximum is not None and not value <= config.maximum:
        return False
    return True


def matches_pattern(config: PatternRule, value: Any) -> bool:
    """True when the compiled pattern finds a match in a string payload."""
    if not isinstance(value, str):
        return False
    return config.compiled.search(value) is not None


def is_member(config: AllowedValues, value: Any) -> bool:
    """True when *value* belongs to the allowed set."""
    try:
        return value in config.values
    except TypeError:
        # Unhashable payloads cannot be members of a frozenset.
        return False


def satisfies_all(config: Composite, value: Any) -> bool:
    """True when every member validator's predicate accepts *value*."""
    return all(
        member.predicate(member.config, value) for member in config.validators
    )


def satisfies_any(config: Composite, value: Any) -> bool:
    """True when at least one member validator's predicate accepts *value*."""
    return any(
        member.predicate(member.config, value) for member in config.validators
    )
