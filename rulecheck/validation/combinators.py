"""Combinators

Build new rules out of existing ones. Sub-rules are applied in the order they
were supplied; that order decides which failure ChainAll reports and how
ChainAny orders its aggregate.

Sub-rules may be Rule instances or plain callables returning a Result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from rulecheck.errors import (
    OK, Err, Failure, Ok, Result,
    custom_raised, custom_rejected, element_failed, ensure, none_satisfied, wrong_type,
)

from .base import Rule, RuleLike, describe
from .constraints import is_sequence, require_callable


def _rules(rules: Sequence[RuleLike]) -> tuple[RuleLike, ...]:
    return tuple(require_callable(f"rule at position {i}", r) for i, r in enumerate(rules))


@dataclass(frozen=True, slots=True)
class ChainAll(Rule):
    """All rules must pass. Stops at the first failure and returns it unchanged."""
    rules: tuple[RuleLike, ...]

    def __init__(self, *rules: RuleLike):
        object.__setattr__(self, "rules", _rules(rules))

    @property
    def constraint_name(self) -> str:
        return f"all_of[{', '.join(describe(r) for r in self.rules)}]"

    def validate(self, value: Any) -> Result[None, Failure]:
        for rule in self.rules:
            if (result := rule(value)).is_err(): return result
        return OK

    def __and__(self, other: RuleLike) -> ChainAll: return ChainAll(*self.rules, other)


@dataclass(frozen=True, slots=True)
class ChainAny(Rule):
    """At least one rule must pass.

    Stops at the first success. When every rule fails the result aggregates
    all branch failures in evaluation order, so an empty chain always fails.
    """
    rules: tuple[RuleLike, ...]

    def __init__(self, *rules: RuleLike):
        object.__setattr__(self, "rules", _rules(rules))

    @property
    def constraint_name(self) -> str:
        return f"any_of[{', '.join(describe(r) for r in self.rules)}]"

    def validate(self, value: Any) -> Result[None, Failure]:
        failures: list[Failure] = []
        for rule in self.rules:
            if (result := rule(value)).is_ok(): return OK
            failures.append(result.error)
        return Err(none_satisfied(failures))

    def __or__(self, other: RuleLike) -> ChainAny: return ChainAny(*self.rules, other)


@dataclass(frozen=True, slots=True)
class SliceValidator(Rule):
    """Apply a single-value rule to every element of a sequence.

    Fails on the first failing element, naming its zero-based index. An empty
    sequence passes.
    """
    rule: RuleLike

    def __post_init__(self):
        require_callable("rule", self.rule)

    @property
    def constraint_name(self) -> str:
        return f"each[{describe(self.rule)}]"

    def validate(self, values: Sequence[Any]) -> Result[None, Failure]:
        if not is_sequence(values):
            return Err(wrong_type(values, "sequence"))
        for index, value in enumerate(values):
            if (result := self.rule(value)).is_err():
                return Err(element_failed(index, result.error))
        return OK


@dataclass(frozen=True, slots=True)
class WithMessage(Rule):
    """Wrapper to override the failure message. The original failure becomes the cause."""
    rule: RuleLike
    message: str

    def __post_init__(self):
        require_callable("rule", self.rule)

    @property
    def constraint_name(self) -> str:
        return describe(self.rule)

    def validate(self, value: Any) -> Result[None, Failure]:
        if (result := self.rule(value)).is_ok(): return result
        return Err(Failure(self.message, causes=(result.error,)))


@dataclass(frozen=True, slots=True)
class Custom(Rule):
    """Rule from a plain function.

    The function may return a Result, or a bool where False means failure.
    Exceptions raised by the function are reported as failures.

    Usage:
        even = Custom(lambda n: n % 2 == 0, name="even")
    """
    fn: Callable[[Any], Result[None, Failure] | bool]
    name: str = "custom"

    def __post_init__(self):
        require_callable("fn", self.fn)

    @property
    def constraint_name(self) -> str:
        return self.name

    def validate(self, value: Any) -> Result[None, Failure]:
        try:
            outcome = self.fn(value)
        except Exception as e:
            return Err(custom_raised(self.name, e))
        if isinstance(outcome, (Ok, Err)): return outcome
        return ensure(bool(outcome), custom_rejected(value, self.name))


def custom(name: str) -> Callable[[Callable[[Any], Result[None, Failure] | bool]], Custom]:
    """Decorator to create a rule from a function.

    Usage:
        @custom("even")
        def is_even(n: int) -> bool:
            return n % 2 == 0
    """
    return lambda fn: Custom(fn, name=name)
