"""Rule Primitives

Atomic checks: bounds, ranges, enumerations and patterns. Each primitive
builds its failure up front and reports through `ensure`, so pass/fail
handling is the same everywhere.

Values lacking the capability a rule needs (e.g. a string given to Min) fail
with a type mismatch instead of raising.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, TypeVar

from rulecheck.config import get_settings
from rulecheck.errors import (
    Err, Failure, Result,
    above_maximum, below_minimum, ensure, invalid_pattern, not_in_enum, pattern_mismatch, wrong_type,
)
from rulecheck.logging import rule_logger

from .base import Rule
from .combinators import ChainAll
from .constraints import ORDERED, TEXT, is_ordered, is_text, require_ordered, require_text

N = TypeVar("N")
S = TypeVar("S", bound=str)


@lru_cache(maxsize=1)
def _pattern_cache() -> Callable[[str, int], re.Pattern]:
    # Sized from settings on first use so importing never reads the environment
    return lru_cache(maxsize=get_settings().REGEX_CACHE_SIZE)(re.compile)


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """Compile once per (pattern, flags) for the whole process. Errors are not cached.

    The cache is created on the first call, so RULECHECK_REGEX_CACHE_SIZE is read
    then; invalid settings raise there rather than at import.
    """
    return _pattern_cache()(pattern, flags)


def clear_pattern_cache() -> None:
    """Drop compiled patterns; the next compile re-reads the cache size from settings."""
    _pattern_cache.cache_clear()


# ============================================================================
# Numeric Rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class Min(Rule[N]):
    """Value must be at least `bound` (inclusive)."""
    bound: Any

    def __post_init__(self):
        require_ordered("Min bound", self.bound)

    @property
    def constraint_name(self) -> str:
        return f"min[{self.bound}]"

    def validate(self, value: N) -> Result[None, Failure]:
        if not is_ordered(value): return Err(wrong_type(value, ORDERED))
        return ensure(value >= self.bound, below_minimum(value, self.bound))


@dataclass(frozen=True, slots=True)
class Max(Rule[N]):
    """Value must be at most `bound` (inclusive)."""
    bound: Any

    def __post_init__(self):
        require_ordered("Max bound", self.bound)

    @property
    def constraint_name(self) -> str:
        return f"max[{self.bound}]"

    def validate(self, value: N) -> Result[None, Failure]:
        if not is_ordered(value): return Err(wrong_type(value, ORDERED))
        return ensure(value <= self.bound, above_maximum(value, self.bound))


@dataclass(frozen=True, slots=True)
class RangeInclusive(Rule[N]):
    """low <= value <= high, checked as Min(low) then Max(high).

    The failure is whichever bound check fails first. `low > high` is not
    rejected; such a range fails every value.
    """
    low: Any
    high: Any
    chain: ChainAll = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "chain", ChainAll(Min(self.low), Max(self.high)))

    @property
    def constraint_name(self) -> str:
        return f"range[{self.low}, {self.high}]"

    def validate(self, value: N) -> Result[None, Failure]:
        return self.chain.validate(value)


# ============================================================================
# Membership / Pattern Rules
# ============================================================================

@dataclass(frozen=True, slots=True)
class Enum(Rule):
    """Value must equal one of the allowed values. No allowed values means nothing passes."""
    allowed: tuple[Any, ...]

    def __init__(self, *allowed: Any):
        object.__setattr__(self, "allowed", tuple(allowed))

    @property
    def constraint_name(self) -> str:
        return f"one_of[{', '.join(repr(a) for a in self.allowed)}]"

    def validate(self, value: Any) -> Result[None, Failure]:
        return ensure(any(option == value for option in self.allowed), not_in_enum(value, self.allowed))


@dataclass(frozen=True, slots=True)
class Regex(Rule[S]):
    """String value must contain a match for `pattern` (re.search semantics).

    The pattern is compiled on first use. A malformed pattern is reported as a
    failure on every application rather than raised at construction.
    """
    pattern: str
    flags: int = 0

    def __post_init__(self):
        require_text("Regex pattern", self.pattern)

    @property
    def constraint_name(self) -> str:
        return f"pattern[{self.pattern}]"

    def validate(self, value: S) -> Result[None, Failure]:
        if not is_text(value): return Err(wrong_type(value, TEXT))
        try:
            compiled = compile_pattern(self.pattern, self.flags)
        except re.error as e:
            rule_logger().warning("regex_compile_failed", pattern=self.pattern, error=str(e))
            return Err(invalid_pattern(self.pattern, e))
        return ensure(compiled.search(value) is not None, pattern_mismatch(value, self.pattern))
