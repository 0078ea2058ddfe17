"""Monadic Result Types for Rule Outcomes

Every rule application returns a Result: Ok(None) when the value passes,
Err(Failure) when it does not. Failures are plain immutable values; nothing
here raises unless the caller explicitly asks to (unwrap/expect).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Failure:
    """Human-readable description of a failed check.

    Aggregate and element failures keep the failures they were built from in
    `causes`, in evaluation order.
    """
    message: str
    causes: tuple[Failure, ...] = ()

    def __str__(self) -> str: return self.message


class ValidationError(ValueError):
    """Raised when a caller opts into exception-based flow (Rule.check, Err.expect)."""

    def __init__(self, failure: Failure, prefix: str | None = None):
        self.failure = failure
        super().__init__(f"{prefix}: {failure.message}" if prefix else failure.message)


class DomainConstraintError(TypeError):
    """Raised at construction time when a rule parameter lacks a required capability."""


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result monad."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, Failure]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Failure], F]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, Failure]]) -> Result[U, Failure]:
        """Chain operations that may fail."""
        return f(self.value)

    def or_else(self, f: Callable[[Failure], Result[T, F]]) -> Result[T, F]:
        """No-op for Ok variant."""
        return self  # type: ignore

    def match(self, ok: Callable[[T], U], err: Callable[[Failure], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result monad. Wraps a Failure."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises because Err has no value to unwrap."""
        raise _as_exception(self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, msg: str) -> NoReturn:
        raise _as_exception(self.error, msg)

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op for Err variant."""
        return self  # type: ignore

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Try to recover from failure."""
        return f(self.error)

    def match(self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Pattern match on Result. Forces exhaustive handling."""
        return err(self.error)


# Type alias for Result monad
Result = Union[Ok[T], Err[E]]

OK: Ok[None] = Ok(None)


def _as_exception(error: object, prefix: str | None = None) -> Exception:
    if isinstance(error, Failure):
        return ValidationError(error, prefix)
    return ValueError(f"{prefix}: {error}" if prefix else f"Called unwrap on Err: {error}")


def ok(value: T) -> Ok[T]:
    """Construct Ok variant."""
    return Ok(value)


def err(error: E) -> Err[E]:
    """Construct Err variant."""
    return Err(error)


def ensure(condition: bool, failure: Failure) -> Result[None, Failure]:
    """Guard that turns a condition and a pre-built failure into a Result.

    Returns Ok(None) when the condition holds, otherwise Err wrapping that
    exact failure object.
    """
    return OK if condition else Err(failure)
