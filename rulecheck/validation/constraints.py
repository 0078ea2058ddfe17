"""Domain Constraints

Runtime capability checks standing in for type-level constraints:
- ordered: real numbers supporting total ordering (int, float, Fraction, Decimal), NaN excluded
- text: str and its subclasses
- equality: every object qualifies, membership compares with ==

`require_*` helpers guard rule construction and raise DomainConstraintError.
`is_*` predicates are used at application time, where a mismatch is reported
as a failure instead.
"""
from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from numbers import Real
from typing import Any, Callable

from rulecheck.errors import DomainConstraintError

ORDERED = "real number"
TEXT = "string"


def is_ordered(value: Any) -> bool:
    # bool is an int subclass but never a meaningful bound or measurement
    if not isinstance(value, (Real, Decimal)) or isinstance(value, bool):
        return False
    # NaN has no ordering; Decimal NaN raises InvalidOperation when compared
    return not (value.is_nan() if isinstance(value, Decimal) else value != value)


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_sequence(value: Any) -> bool:
    """Ordered, indexable collections; str/bytes are scalars here."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def require_ordered(name: str, value: Any) -> None:
    if not is_ordered(value):
        raise DomainConstraintError(f"{name} must be a {ORDERED}, got {type(value).__name__}")


def require_text(name: str, value: Any) -> None:
    if not is_text(value):
        raise DomainConstraintError(f"{name} must be a {TEXT}, got {type(value).__name__}")


def require_callable(name: str, value: Any) -> Callable:
    if not callable(value):
        raise DomainConstraintError(f"{name} must be callable, got {type(value).__name__}")
    return value
