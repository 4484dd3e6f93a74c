"""Pure normalizers applied to raw input before validation.

Every function in this module is a **pure**, idempotent transformation.
Non-string input passes through unchanged so that a normalizer never
turns a wrong-typed value into an exception; the predicate is what
rejects it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def identity(value: Any) -> Any:
    """Return *value* unchanged."""
    return value


def strip(value: Any) -> Any:
    """Trim leading and trailing whitespace from strings."""
    if isinstance(value, str):
        return value.strip()
    return value


def lower(value: Any) -> Any:
    """Lower-case strings."""
    if isinstance(value, str):
        return value.lower()
    return value


def collapse_whitespace(value: Any) -> Any:
    """Trim and squeeze every internal whitespace run to one space."""
    if isinstance(value, str):
        return " ".join(value.split())
    return value


def chain(*normalizers: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose *normalizers* left to right into a single normalizer.

    Duplicates and :func:`identity` links are dropped.  The result is
    idempotent as long as each link is idempotent and the links do not
    undo one another, which holds for every normalizer in this module.
    """
    links: list[Callable[[Any], Any]] = []
    for fn in normalizers:
        if fn is identity or fn in links:
            continue
        links.append(fn)

    if not links:
        return identity
    if len(links) == 1:
        return links[0]

    def _chained(value: Any) -> Any:
        for fn in links:
            value = fn(value)
        return value

    _chained.__name__ = "+".join(getattr(fn, "__name__", "normalizer") for fn in links)
    return _chained
