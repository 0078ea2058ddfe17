"""Shared fixtures for rulecheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

import pytest

from rulecheck.config import get_settings
from rulecheck.errors import OK, Err, Failure, Result
from rulecheck.validation import clear_pattern_cache


@dataclass
class CountingRule:
    """Plain-callable rule returning a fixed outcome and counting its calls."""

    outcome: Result[None, Failure]
    calls: int = 0

    def __call__(self, value: Any) -> Result[None, Failure]:
        self.calls += 1
        return self.outcome


@pytest.fixture
def passing() -> CountingRule:
    return CountingRule(OK)


@pytest.fixture
def failing() -> CountingRule:
    return CountingRule(Err(Failure("first rule failed")))


@pytest.fixture
def failing_too() -> CountingRule:
    return CountingRule(Err(Failure("second rule failed")))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the library logger, cached settings and compiled patterns after each test."""
    lib = logging.getLogger("rulecheck")
    original_handlers, original_level, original_propagate = lib.handlers[:], lib.level, lib.propagate
    yield
    lib.handlers = original_handlers
    lib.setLevel(original_level)
    lib.propagate = original_propagate
    get_settings.cache_clear()
    clear_pattern_cache()
