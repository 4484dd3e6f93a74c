"""Shared pytest fixtures and configuration for the limited-value test suite.

Guidelines
----------
* Core tests are pure function calls — no mocking, no side effects.
* CLI tests go through ``main(argv)`` and read captured output.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from limited_value.core.normalizers import strip
from limited_value.core.rules import max_length
from limited_value.core.validator import Validator


@pytest.fixture()
def short_text() -> Validator:
    """``length <= 5`` after trimming."""
    return max_length(5, normalize=strip)
