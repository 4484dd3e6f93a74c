"""Custom exception hierarchy for limited-value.

Only *programmer errors* are exceptions.  An input that fails a rule is
an ordinary outcome and is reported as ``None`` by ``validate`` and
``create``; nothing in :mod:`limited_value.core` raises for it.

Hierarchy
---------
LimitedValueError
├── InvalidConfigError
├── ValueRejectedError
├── RuleSyntaxError
└── EnvironmentError
"""

from __future__ import annotations


class LimitedValueError(Exception):
    """Base exception for all limited-value errors.

    Every error condition the CLI renders maps to a subclass of this
    exception so that the error boundary can print a clean message
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Validator definition --------------------------------------------------

class InvalidConfigError(LimitedValueError):
    """Raised when a validator is built from inconsistent configuration.

    Examples are a malformed regular expression, ``minimum > maximum``
    or an empty allowed-value set.  Always raised at construction time,
    never from ``validate``.
    """


# --- Boundary helpers ------------------------------------------------------

class ValueRejectedError(LimitedValueError):
    """Raised by ``create_or_raise`` when the input fails the rule."""

    def __init__(
        self,
        message: str,
        *,
        rule: str,
        raw: object,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.rule: str = rule
        self.raw: object = raw


class RuleSyntaxError(LimitedValueError):
    """Raised when a textual rule such as ``max-length:5`` cannot be parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LimitedValueError):
    """Raised when an optional runtime dependency is not available."""
