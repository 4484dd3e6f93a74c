"""Tests for :class:`Validator` (core/validator.py).

Covers the construction invariants, the ``validate`` contract
(present iff the predicate accepts the normalized input), determinism
and immutability.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

import pytest

from limited_value.core.models import LengthLimit
from limited_value.core.normalizers import strip
from limited_value.core.predicates import within_length
from limited_value.core.validator import Validator
from limited_value.exceptions import InvalidConfigError

_RAW_INPUTS: list[Any] = ["", "  short", "short", "much too long", "   ", 5, None]


def _is_even(config: int, value: Any) -> bool:
    return isinstance(value, int) and value % config == 0


class TestConstruction:
    def test_positional_signature(self) -> None:
        v = Validator(LengthLimit(maximum=5), within_length, strip)
        assert v.config == LengthLimit(maximum=5)
        assert v.predicate is within_length
        assert v.normalize is strip

    def test_name_defaults_to_predicate_name(self) -> None:
        assert Validator(2, _is_even).name == "_is_even"

    def test_explicit_name(self) -> None:
        assert Validator(2, _is_even, name="even").name == "even"

    def test_none_config_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="must not be None"):
            Validator(None, _is_even)

    def test_non_callable_predicate_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="predicate must be callable"):
            Validator(2, "even")  # type: ignore[arg-type]

    def test_non_callable_normalizer_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="normalizer must be callable"):
            Validator(2, _is_even, "strip")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        v = Validator(2, _is_even)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.config = 3  # type: ignore[misc]

    def test_equal_definitions_are_equal(self) -> None:
        assert Validator(2, _is_even) == Validator(2, _is_even)
        assert hash(Validator(2, _is_even)) == hash(Validator(2, _is_even))


class TestValidate:
    @pytest.mark.parametrize("raw", _RAW_INPUTS)
    def test_present_iff_predicate_holds(self, short_text: Validator, raw: Any) -> None:
        normalized = short_text.normalize(raw)
        expected = normalized is not None and short_text.predicate(
            short_text.config, normalized,
        )
        assert (short_text.validate(raw) is not None) is expected

    def test_returns_normalized_value(self, short_text: Validator) -> None:
        assert short_text.validate("  short") == "short"

    def test_rejects(self, short_text: Validator) -> None:
        assert short_text.validate("much too long") is None

    def test_rejection_is_not_an_exception(self) -> None:
        v = Validator(2, _is_even)
        assert v.validate("not a number") is None

    def test_none_is_never_a_payload(self) -> None:
        v = Validator(1, lambda config, value: True)
        assert v.validate(None) is None

    @pytest.mark.parametrize("raw", _RAW_INPUTS)
    def test_deterministic(self, short_text: Validator, raw: Any) -> None:
        results = {repr(short_text.validate(raw)) for _ in range(3)}
        assert len(results) == 1

    def test_is_valid(self, short_text: Validator) -> None:
        assert short_text.is_valid("abc") is True
        assert short_text.is_valid("abcdefgh") is False


class TestLogging:
    def test_rejection_logged_at_debug(
        self, short_text: Validator, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="limited_value")
        short_text.validate("much too long")
        assert "Rejected 'much too long' under max-length:5" in caplog.text

    def test_acceptance_not_logged(
        self, short_text: Validator, caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="limited_value")
        short_text.validate("ok")
        assert "Rejected" not in caplog.text
