"""Rule base class.

A Rule is an immutable callable: `rule(value)` returns Ok(None) or
Err(Failure). Rules compose via operators:
- & : all must pass (ChainAll)
- | : at least one must pass (ChainAny)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from rulecheck.errors import Failure, Result, ValidationError
from rulecheck.logging import rule_logger

if TYPE_CHECKING:
    from .combinators import ChainAll, ChainAny, WithMessage

T = TypeVar("T")

RuleLike = Callable[[Any], Result[None, Failure]]


class Rule(ABC, Generic[T]):
    """Base class for every rule and combinator."""

    @abstractmethod
    def validate(self, value: T) -> Result[None, Failure]:
        """Check a value. Never raises for a bad value."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Short descriptor, e.g. `min[10]`."""

    def __call__(self, value: T) -> Result[None, Failure]: return self.validate(value)

    def check(self, value: T) -> None:
        """Exception-based variant of validate: raises ValidationError on failure."""
        if (result := self.validate(value)).is_err():
            rule_logger().debug("rule_check_failed", rule=self.constraint_name, failure=result.error.message)
            raise ValidationError(result.error)

    def __and__(self, other: RuleLike) -> ChainAll:
        from .combinators import ChainAll
        return ChainAll(self, other)

    def __or__(self, other: RuleLike) -> ChainAny:
        from .combinators import ChainAny
        return ChainAny(self, other)

    def with_message(self, message: str) -> WithMessage:
        from .combinators import WithMessage
        return WithMessage(self, message)


def describe(rule: RuleLike) -> str:
    """Descriptor for any rule-like callable, including plain functions."""
    if isinstance(rule, Rule):
        return rule.constraint_name
    return getattr(rule, "__name__", repr(rule))
