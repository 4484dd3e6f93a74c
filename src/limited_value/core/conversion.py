"""Functional helpers over limited values.

Thin module-level counterparts of the :class:`LimitedValue` methods, for
call sites that read better as functions (``map(extract, values)``).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from limited_value.core.limited import LimitedValue

T = TypeVar("T")


def extract(value: LimitedValue[T]) -> T:
    """Return the normalized payload of *value*."""
    return value.extract()


def convert(
    value: LimitedValue[T], target: type[LimitedValue[T]],
) -> LimitedValue[T] | None:
    """Re-validate *value* under *target*'s rule; ``None`` when it fails.

    Same as ``target.create(extract(value))``.
    """
    return value.convert_to(target)


def convert_all(
    values: Iterable[LimitedValue[T]],
    target: type[LimitedValue[T]],
) -> tuple[list[LimitedValue[T]], list[LimitedValue[T]]]:
    """Convert every value, partitioning into ``(converted, rejected)``.

    Order is preserved within each list.
    """
    converted: list[LimitedValue[T]] = []
    rejected: list[LimitedValue[T]] = []
    for value in values:
        result = value.convert_to(target)
        if result is None:
            rejected.append(value)
        else:
            converted.append(result)
    return converted, rejected
