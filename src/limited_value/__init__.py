"""limited-value — immutable wrappers whose existence proves validity.

A :class:`~limited_value.core.limited.LimitedValue` subclass is bound to
exactly one :class:`~limited_value.core.validator.Validator`; instances
can only be obtained through ``create``, which returns ``None`` when the
input does not pass the rule.
"""

from limited_value.core import (
    LimitedValue,
    Validator,
    all_of,
    any_of,
    convert,
    define_limited,
    extract,
    in_range,
    length_between,
    matches,
    max_length,
    one_of,
)
from limited_value.version import __version__

__all__: list[str] = [
    "LimitedValue",
    "Validator",
    "__version__",
    "all_of",
    "any_of",
    "convert",
    "define_limited",
    "extract",
    "in_range",
    "length_between",
    "matches",
    "max_length",
    "one_of",
]
