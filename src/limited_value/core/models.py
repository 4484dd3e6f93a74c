"""Configuration models for the built-in validation rules.

All models are **frozen** dataclasses: immutable value objects that are
bound to a validator once and never change afterwards.  Each model
checks its own structural consistency in ``__post_init__`` and raises
:class:`~limited_value.exceptions.InvalidConfigError` immediately, so a
broken rule definition can never reach ``validate``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Any

from limited_value.exceptions import InvalidConfigError

if TYPE_CHECKING:
    from limited_value.core.validator import Validator


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_bound(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        # Only floats can be NaN; ints beyond float range must not be converted.
        and not (isinstance(value, float) and math.isnan(value))
    )


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LengthLimit:
    """Inclusive bounds on ``len(payload)``."""

    maximum: int
    """Largest accepted length."""

    minimum: int = 0
    """Smallest accepted length."""

    def __post_init__(self) -> None:
        if not _is_count(self.maximum) or not _is_count(self.minimum):
            raise InvalidConfigError(
                f"Length bounds must be integers, got "
                f"minimum={self.minimum!r}, maximum={self.maximum!r}.",
            )
        if self.minimum < 0:
            raise InvalidConfigError(
                f"Minimum length must not be negative, got {self.minimum}.",
            )
        if self.minimum > self.maximum:
            raise InvalidConfigError(
                f"Minimum length {self.minimum} exceeds maximum {self.maximum}.",
                hint="Swap the bounds or widen the maximum.",
            )


# ---------------------------------------------------------------------------
# Numeric range
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumericRange:
    """Inclusive numeric bounds.  ``None`` leaves that side open."""

    minimum: Real | None = None
    maximum: Real | None = None

    def __post_init__(self) -> None:
        for label, bound in (("minimum", self.minimum), ("maximum", self.maximum)):
            if bound is not None and not _is_bound(bound):
                raise InvalidConfigError(
                    f"Range {label} must be a real number, got {bound!r}.",
                )
        if self.minimum is None and self.maximum is None:
            raise InvalidConfigError(
                "A numeric range needs at least one bound.",
                hint="Pass minimum=, maximum= or both.",
            )
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise InvalidConfigError(
                f"Range minimum {self.minimum} exceeds maximum {self.maximum}.",
                hint="Swap the bounds.",
            )


# ---------------------------------------------------------------------------
# Regular expression
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PatternRule:
    """A regular expression, compiled once when the rule is defined.

    The compiled pattern is searched, not full-matched: anchor the
    expression with ``^`` and ``$`` (or ``\\A`` / ``\\Z``) to constrain
    the whole payload.
    """

    pattern: str
    flags: int = 0
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            raise InvalidConfigError(
                f"Pattern must be a string, got {type(self.pattern).__name__}.",
            )
        try:
            compiled = re.compile(self.pattern, self.flags)
        except (re.error, TypeError, ValueError) as exc:
            raise InvalidConfigError(
                f"Malformed regular expression {self.pattern!r}: {exc}",
            ) from exc
        # Frozen dataclass: assign the derived field once, at construction.
        object.__setattr__(self, "compiled", compiled)


# ---------------------------------------------------------------------------
# Enumerated set
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, init=False)
class AllowedValues:
    """A fixed, non-empty set of accepted payloads."""

    values: frozenset[Hashable]

    def __init__(self, values: Iterable[Hashable]) -> None:
        if isinstance(values, (str, bytes)):
            raise InvalidConfigError(
                "Allowed values must be a collection, not a single string.",
                hint="Wrap the value in a list: one_of(['only']).",
            )
        try:
            frozen = frozenset(values)
        except TypeError as exc:
            raise InvalidConfigError(
                f"Allowed values must be hashable: {exc}",
            ) from exc
        if not frozen:
            raise InvalidConfigError("The allowed-value set must not be empty.")
        object.__setattr__(self, "values", frozen)


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Composite:
    """An ordered, non-empty group of validators combined by a predicate."""

    validators: tuple[Validator[Any, Any], ...]

    def __post_init__(self) -> None:
        from limited_value.core.validator import Validator

        if not self.validators:
            raise InvalidConfigError("A composite rule needs at least one validator.")
        for member in self.validators:
            if not isinstance(member, Validator):
                raise InvalidConfigError(
                    f"Composite members must be validators, got {member!r}.",
                )
