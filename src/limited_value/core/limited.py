"""The :class:`LimitedValue` wrapper — a value whose existence proves validity.

Each concrete subclass is a *tag*: it is bound to exactly one
:class:`~limited_value.core.validator.Validator` and its instances can
only be produced by :meth:`LimitedValue.create`, which runs that
validator.  Two tags may share a payload type yet stay distinct types,
so values checked under different rules are never silently
interchangeable for a type checker::

    class ShortName(LimitedValue[str], validator=max_length(5, normalize=strip)):
        pass

    ShortName.create("  short")   # ShortName('short')
    ShortName.create("too long")  # None

Equality, hashing and ordering look only at the payload, so
``ShortName.create("x") == LongName.create("x")``.
"""

from __future__ import annotations

import functools
import types
from typing import Any, ClassVar, Generic, TypeVar

from limited_value.core.validator import Validator
from limited_value.exceptions import InvalidConfigError, ValueRejectedError

T = TypeVar("T")
L = TypeVar("L", bound="LimitedValue[Any]")

_ADMIT = object()
"""Private admission token held only by :meth:`LimitedValue.create`."""


@functools.total_ordering
class LimitedValue(Generic[T]):
    """Immutable wrapper around one normalized, validated payload."""

    __slots__ = ("_payload",)

    validator: ClassVar[Validator[Any, Any]]

    def __init_subclass__(
        cls,
        *,
        validator: Validator[Any, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if validator is None:
            return
        if not isinstance(validator, Validator):
            raise InvalidConfigError(
                f"{cls.__name__} must be bound to a Validator, got {validator!r}.",
            )
        cls.validator = validator

    def __init__(self, payload: T, *, _admit: object = None) -> None:
        if _admit is not _ADMIT:
            name = type(self).__name__
            raise TypeError(
                f"{name} cannot be instantiated directly; use {name}.create().",
            )
        object.__setattr__(self, "_payload", payload)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def bound_validator(cls) -> Validator[Any, Any]:
        """Return the validator this tag is bound to."""
        validator = getattr(cls, "validator", None)
        if validator is None:
            raise InvalidConfigError(
                f"{cls.__name__} is not bound to a validator.",
                hint=f"Declare it as: class {cls.__name__}(LimitedValue[T], validator=...)",
            )
        return validator

    @classmethod
    def create(cls: type[L], raw: Any) -> L | None:
        """Validate *raw* and wrap its normalized form, or return ``None``."""
        value = cls.bound_validator().validate(raw)
        if value is None:
            return None
        return cls(value, _admit=_ADMIT)

    @classmethod
    def create_or_raise(cls: type[L], raw: Any) -> L:
        """Like :meth:`create`, but raise :class:`ValueRejectedError` on failure.

        Intended for outer boundaries (request parsing, CLI input) that
        prefer an exception to a ``None`` check.
        """
        created = cls.create(raw)
        if created is None:
            rule = cls.bound_validator().name
            raise ValueRejectedError(
                f"{raw!r} is not a valid {cls.__name__} (rule: {rule}).",
                rule=rule,
                raw=raw,
            )
        return created

    # ------------------------------------------------------------------
    # Access and conversion
    # ------------------------------------------------------------------

    def extract(self) -> T:
        """Return the normalized payload."""
        return self._payload

    def convert_to(
        self: LimitedValue[T], target: type[LimitedValue[T]],
    ) -> LimitedValue[T] | None:
        """Re-validate the payload under *target*'s rule.

        Always the same as ``target.create(self.extract())``: returns
        ``None`` when the payload does not satisfy the target rule.  The
        target must share this value's payload type; a type checker
        reports ``LimitedValue[int]`` converted into a
        ``LimitedValue[str]`` tag, while at runtime such a payload is
        simply rejected by the target's predicate.
        """
        return target.create(self._payload)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LimitedValue):
            return bool(self._payload == other._payload)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, LimitedValue):
            return bool(self._payload < other._payload)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._payload)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (type(self), self._payload))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"

    def __str__(self) -> str:
        return str(self._payload)


def define_limited(
    name: str,
    validator: Validator[Any, Any],
    *,
    module: str = __name__,
) -> type[LimitedValue[Any]]:
    """Create a new :class:`LimitedValue` tag bound to *validator*.

    Equivalent to a ``class`` statement; useful when tags are built
    from data (for example rules parsed from the command line).

    The tag's ``__module__`` is *module*, which defaults to this module.
    Pickle looks tags up by module and name, so a tag whose values are
    pickled must be assigned to a module-level name and created with
    ``module=__name__`` of that module.
    """
    cls = types.new_class(
        name,
        (LimitedValue,),
        {"validator": validator},
        lambda ns: ns.update({"__slots__": ()}),
    )
    cls.__module__ = module
    return cls


def _restore(cls: type[L], payload: Any) -> L:
    """Unpickling hook: re-admit *payload* through the class's rule."""
    return cls.create_or_raise(payload)

