"""Concrete validators for the common rule families.

Each factory fixes a configuration model and a predicate and returns a
ready :class:`~limited_value.core.validator.Validator`.  Rule names use
the same textual syntax :func:`parse_rule` accepts, so a validator's
``name`` can be fed back into the parser.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sized
from dataclasses import dataclass
from numbers import Real
from typing import Any

from limited_value.core.models import (
    AllowedValues,
    Composite,
    LengthLimit,
    NumericRange,
    PatternRule,
)
from limited_value.core.normalizers import chain, identity
from limited_value.core.predicates import (
    is_member,
    matches_pattern,
    satisfies_all,
    satisfies_any,
    within_length,
    within_range,
)
from limited_value.core.validator import Validator
from limited_value.exceptions import RuleSyntaxError

NormalizerFn = Callable[[Any], Any]


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def max_length(
    maximum: int,
    *,
    normalize: NormalizerFn = identity,
) -> Validator[LengthLimit, Sized]:
    """Accept payloads whose length is at most *maximum*."""
    return Validator(
        LengthLimit(maximum=maximum),
        within_length,
        normalize,
        name=f"max-length:{maximum}",
    )


def length_between(
    minimum: int,
    maximum: int,
    *,
    normalize: NormalizerFn = identity,
) -> Validator[LengthLimit, Sized]:
    """Accept payloads whose length lies in ``[minimum, maximum]``."""
    return Validator(
        LengthLimit(maximum=maximum, minimum=minimum),
        within_length,
        normalize,
        name=f"length:{minimum}:{maximum}",
    )


def in_range(
    minimum: Real | None = None,
    maximum: Real | None = None,
    *,
    normalize: NormalizerFn = identity,
) -> Validator[NumericRange, Real]:
    """Accept real numbers in the inclusive range; ``None`` is unbounded."""
    low = "" if minimum is None else minimum
    high = "" if maximum is None else maximum
    return Validator(
        NumericRange(minimum=minimum, maximum=maximum),
        within_range,
        normalize,
        name=f"range:{low}:{high}",
    )


def matches(
    pattern: str,
    flags: int = 0,
    *,
    normalize: NormalizerFn = identity,
) -> Validator[PatternRule, str]:
    """Accept strings in which *pattern* finds a match.

    A malformed *pattern* raises
    :class:`~limited_value.exceptions.InvalidConfigError` here, not at
    validation time.
    """
    return Validator(
        PatternRule(pattern=pattern, flags=flags),
        matches_pattern,
        normalize,
        name=f"pattern:{pattern}",
    )


def one_of(
    values: Iterable[Hashable],
    *,
    normalize: NormalizerFn = identity,
) -> Validator[AllowedValues, Hashable]:
    """Accept payloads that are members of *values*."""
    config = AllowedValues(values)
    listed = ",".join(sorted(str(v) for v in config.values))
    return Validator(
        config,
        is_member,
        normalize,
        name=f"one-of:{listed}",
    )


def all_of(*validators: Validator[Any, Any]) -> Validator[Composite, Any]:
    """Accept payloads that every member validator accepts.

    The member normalizers are chained in order and applied once; the
    member predicates then see that shared canonical form.
    """
    config = Composite(validators=tuple(validators))
    return Validator(
        config,
        satisfies_all,
        chain(*(v.normalize for v in config.validators)),
        name=" & ".join(v.name for v in config.validators),
    )


def any_of(*validators: Validator[Any, Any]) -> Validator[Composite, Any]:
    """Accept payloads that at least one member validator accepts."""
    config = Composite(validators=tuple(validators))
    return Validator(
        config,
        satisfies_any,
        chain(*(v.normalize for v in config.validators)),
        name=" | ".join(v.name for v in config.validators),
    )


# ---------------------------------------------------------------------------
# Textual rule syntax
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RuleKind:
    """One entry of the textual rule grammar."""

    kind: str
    syntax: str
    example: str
    description: str
    numeric: bool
    """Whether values checked under this rule are numbers, not text."""


RULE_KINDS: tuple[RuleKind, ...] = (
    RuleKind("max-length", "max-length:N", "max-length:5",
             "Length at most N.", numeric=False),
    RuleKind("length", "length:LO:HI", "length:2:20",
             "Length between LO and HI, inclusive.", numeric=False),
    RuleKind("range", "range:LO:HI", "range:0:100",
             "Number between LO and HI; leave a side empty for no bound.",
             numeric=True),
    RuleKind("pattern", "pattern:REGEX", "pattern:^[a-z]+$",
             "Regular expression finds a match.", numeric=False),
    RuleKind("one-of", "one-of:A,B,C", "one-of:red,green,blue",
             "Member of the comma-separated set.", numeric=False),
)

_KINDS_BY_NAME: dict[str, RuleKind] = {k.kind: k for k in RULE_KINDS}


def rule_kind(text: str) -> RuleKind:
    """Return the :class:`RuleKind` that *text* starts with."""
    kind = text.partition(":")[0].strip()
    try:
        return _KINDS_BY_NAME[kind]
    except KeyError:
        raise RuleSyntaxError(
            f"Unknown rule kind: {kind!r}",
            hint="Known kinds: " + ", ".join(_KINDS_BY_NAME),
        ) from None


def parse_rule(
    text: str,
    *,
    normalize: NormalizerFn = identity,
) -> Validator[Any, Any]:
    """Build a validator from a ``kind:arguments`` rule string.

    Raises
    ------
    RuleSyntaxError
        If the kind is unknown or its arguments are malformed.
    InvalidConfigError
        If the arguments parse but describe an inconsistent rule.
    """
    kind = rule_kind(text)
    arg = text.partition(":")[2]

    if kind.kind == "max-length":
        return max_length(_parse_int(arg, kind), normalize=normalize)

    if kind.kind == "length":
        low, high = _split_pair(arg, kind)
        return length_between(
            _parse_int(low, kind), _parse_int(high, kind), normalize=normalize,
        )

    if kind.kind == "range":
        low, high = _split_pair(arg, kind)
        return in_range(
            _parse_bound(low, kind), _parse_bound(high, kind), normalize=normalize,
        )

    if kind.kind == "pattern":
        if not arg:
            raise _syntax_error(kind, "missing regular expression")
        return matches(arg, normalize=normalize)

    # one-of
    items = [item for item in arg.split(",") if item]
    if not items:
        raise _syntax_error(kind, "missing allowed values")
    return one_of(items, normalize=normalize)


def _syntax_error(kind: RuleKind, problem: str) -> RuleSyntaxError:
    return RuleSyntaxError(
        f"Malformed {kind.kind} rule: {problem}.",
        hint=f"Expected {kind.syntax}, e.g. {kind.example}",
    )


def _split_pair(arg: str, kind: RuleKind) -> tuple[str, str]:
    parts = arg.split(":")
    if len(parts) != 2:
        raise _syntax_error(kind, "expected two bounds")
    return parts[0].strip(), parts[1].strip()


def _parse_int(text: str, kind: RuleKind) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise _syntax_error(kind, f"{text!r} is not an integer") from None


def _parse_bound(text: str, kind: RuleKind) -> int | float | None:
    if not text:
        return None
    number = parse_number(text)
    if number is None:
        raise _syntax_error(kind, f"{text!r} is not a number")
    return number


def parse_number(text: str) -> int | float | None:
    """Parse *text* as an ``int``, else a ``float``; ``None`` if neither."""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return None
