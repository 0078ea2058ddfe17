"""Compositional Rules

Rules check one value and return Ok(None) or Err(Failure). Primitives cover
bounds, ranges, enumerations and patterns; combinators build larger rules
from smaller ones.

Usage:
    from rulecheck.errors import Err
    from rulecheck.validation import ChainAny, RangeInclusive

    port = ChainAny(RangeInclusive(10, 16), RangeInclusive(56, 67))
    match port(20):
        case Err(failure):
            print(failure.message)
"""
from .base import Rule, RuleLike, describe

from .rules import (
    Min,
    Max,
    RangeInclusive,
    Enum,
    Regex,
    compile_pattern,
    clear_pattern_cache,
)

from .combinators import (
    ChainAll,
    ChainAny,
    SliceValidator,
    WithMessage,
    Custom,
    custom,
)

__all__ = [
    "Rule",
    "RuleLike",
    "describe",
    # Primitives
    "Min",
    "Max",
    "RangeInclusive",
    "Enum",
    "Regex",
    "compile_pattern",
    "clear_pattern_cache",
    # Combinators
    "ChainAll",
    "ChainAny",
    "SliceValidator",
    "WithMessage",
    "Custom",
    "custom",
]
