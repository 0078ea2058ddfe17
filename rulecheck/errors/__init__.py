"""Result-Based Failure Reporting

Rules never raise for a bad value. They return Ok(None) or Err(Failure).

Usage:
    from rulecheck.errors import Ok, Err, Failure, ensure

    def even(n: int):
        return ensure(n % 2 == 0, Failure(f"{n} is odd"))

    match even(3):
        case Ok():
            ...
        case Err(failure):
            print(failure.message)
"""
from .types import (
    Result,
    Ok,
    Err,
    OK,
    Failure,
    ValidationError,
    DomainConstraintError,
    ok,
    err,
    ensure,
)

from .builders import (
    below_minimum,
    above_maximum,
    not_in_enum,
    pattern_mismatch,
    invalid_pattern,
    wrong_type,
    element_failed,
    none_satisfied,
    custom_rejected,
    custom_raised,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "OK",
    "Failure",
    "ValidationError",
    "DomainConstraintError",
    # Constructors
    "ok",
    "err",
    "ensure",
    # Builders
    "below_minimum",
    "above_maximum",
    "not_in_enum",
    "pattern_mismatch",
    "invalid_pattern",
    "wrong_type",
    "element_failed",
    "none_satisfied",
    "custom_rejected",
    "custom_raised",
]
