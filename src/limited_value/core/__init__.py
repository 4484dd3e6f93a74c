"""Core layer — validators, limited values and their pure helpers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Invalid input is a ``None`` result, never an exception.
"""

from limited_value.core.conversion import convert, convert_all, extract
from limited_value.core.limited import LimitedValue, define_limited
from limited_value.core.models import (
    AllowedValues,
    Composite,
    LengthLimit,
    NumericRange,
    PatternRule,
)
from limited_value.core.protocols import Normalizer, Predicate
from limited_value.core.rules import (
    all_of,
    any_of,
    in_range,
    length_between,
    matches,
    max_length,
    one_of,
    parse_rule,
)
from limited_value.core.validator import Validator

__all__: list[str] = [
    "AllowedValues",
    "Composite",
    "LengthLimit",
    "LimitedValue",
    "Normalizer",
    "NumericRange",
    "PatternRule",
    "Predicate",
    "Validator",
    "all_of",
    "any_of",
    "convert",
    "convert_all",
    "define_limited",
    "extract",
    "in_range",
    "length_between",
    "matches",
    "max_length",
    "one_of",
    "parse_rule",
]
