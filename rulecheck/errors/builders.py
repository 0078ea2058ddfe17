"""Failure Builders

Ergonomic constructors for each entry of the failure taxonomy. Builders only
format messages; deciding pass/fail is left to the rules.
"""
from typing import Any, Sequence

from .types import Failure


# =============================================================================
# Bound Violations
# =============================================================================

def below_minimum(value: Any, bound: Any) -> Failure:
    return Failure(f"{value!r} is less than minimum {bound!r}")


def above_maximum(value: Any, bound: Any) -> Failure:
    return Failure(f"{value!r} is greater than maximum {bound!r}")


# =============================================================================
# Membership / Pattern Violations
# =============================================================================

def not_in_enum(value: Any, allowed: Sequence[Any]) -> Failure:
    return Failure(f"{value!r} not in {list(allowed)!r}")


def pattern_mismatch(value: str, pattern: str) -> Failure:
    return Failure(f"{value!r} does not match pattern {pattern!r}")


def invalid_pattern(pattern: str, cause: Exception) -> Failure:
    return Failure(f"invalid pattern {pattern!r}: {cause}")


def wrong_type(value: Any, expected: str) -> Failure:
    """Value lacks the capability a rule needs (e.g. ordering, text)."""
    return Failure(f"expected {expected}, got {type(value).__name__} {value!r}")


# =============================================================================
# Composite Violations
# =============================================================================

def element_failed(index: int, cause: Failure) -> Failure:
    """Wrap an element failure with its zero-based position."""
    return Failure(f"value at index {index}: {cause.message}", causes=(cause,))


def none_satisfied(causes: Sequence[Failure]) -> Failure:
    """Aggregate every branch failure of an any-of chain, in evaluation order."""
    return Failure(f"no rule satisfied: [{'; '.join(c.message for c in causes)}]", causes=tuple(causes))


def custom_rejected(value: Any, name: str) -> Failure:
    return Failure(f"{value!r} failed {name}")


def custom_raised(name: str, exc: Exception) -> Failure:
    return Failure(f"{name} raised {type(exc).__name__}: {exc}")
