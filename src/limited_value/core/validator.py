"""The :class:`Validator` value — one validation rule.

A validator pairs an immutable configuration with a predicate and a
normalizer.  It is a frozen value, not a service: once built it never
changes, so it can be shared freely and reused for any number of calls.

Guarantees
----------
* ``validate`` never raises for invalid input; rejection is ``None``.
* Structural problems (``None`` config, non-callable parts) raise
  :class:`~limited_value.exceptions.InvalidConfigError` at construction.
* ``validate`` is referentially transparent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from limited_value.core.normalizers import identity
from limited_value.core.protocols import Normalizer, Predicate
from limited_value.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

C = TypeVar("C")
T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Validator(Generic[C, T]):
    """Binds a predicate to concrete configuration data.

    Parameters
    ----------
    config:
        Immutable rule parameters handed to *predicate* on every call.
    predicate:
        ``(config, value) -> bool``.
    normalize:
        Canonicaliser applied before the predicate.  The normalized
        value is what a successful ``validate`` returns.
    name:
        Display name used in logs and error messages.  Defaults to the
        predicate's ``__name__``.
    """

    config: C
    predicate: Predicate[C, T]
    normalize: Normalizer[T] = identity
    name: str = field(default="", kw_only=True)

    def __post_init__(self) -> None:
        if self.config is None:
            raise InvalidConfigError(
                "Validator config must not be None.",
                hint="Pass the rule parameters the predicate expects.",
            )
        if not callable(self.predicate):
            raise InvalidConfigError(
                f"Validator predicate must be callable, got {self.predicate!r}.",
            )
        if not callable(self.normalize):
            raise InvalidConfigError(
                f"Validator normalizer must be callable, got {self.normalize!r}.",
            )
        if not self.name:
            object.__setattr__(
                self, "name", getattr(self.predicate, "__name__", "validator"),
            )
        logger.debug("Defined validator %s with config %r", self.name, self.config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, raw: Any) -> T | None:
        """Return the normalized *raw* when it passes, else ``None``.

        ``None`` is never a valid payload: a normalized value of
        ``None`` is rejected without consulting the predicate.
        """
        value = self.normalize(raw)
        if value is not None and self.predicate(self.config, value):
            return value
        logger.debug("Rejected %r under %s", raw, self.name)
        return None

    def is_valid(self, raw: Any) -> bool:
        """Return ``True`` when :meth:`validate` would accept *raw*."""
        return self.validate(raw) is not None
