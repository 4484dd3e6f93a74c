"""Protocols (interfaces) for the pluggable pieces of a validator.

A :class:`~limited_value.core.validator.Validator` is assembled from a
configuration value, a :class:`Predicate` and a :class:`Normalizer`.
Any callable with the right signature satisfies these protocols
structurally (no explicit inheritance required), so plain functions and
lambdas are the expected implementations.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")
C_contra = TypeVar("C_contra", contravariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class Normalizer(Protocol[T]):
    """Canonicalises raw input before it is checked.

    Implementations must be pure, total and idempotent:
    ``normalize(normalize(x)) == normalize(x)``.  Input of a type the
    normalizer does not understand is returned unchanged rather than
    raising, so that rejection is left to the predicate.
    """

    def __call__(self, value: T, /) -> T:
        ...  # pragma: no cover


class Predicate(Protocol[C_contra, T_contra]):
    """Decides whether a normalized payload satisfies a configuration.

    Implementations must be pure and deterministic, and must express
    invalidity only through the boolean result, never by raising.
    """

    def __call__(self, config: C_contra, value: T_contra, /) -> bool:
        ...  # pragma: no cover
