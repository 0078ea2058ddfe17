"""rulecheck: composable validation rules.

    from rulecheck import ChainAll, Min, Max, Regex

    rule = ChainAll(Min(1), Max(65535))
    rule(8080)   # Ok(value=None)
    rule(0)      # Err(error=Failure(message='0 is less than minimum 1', causes=()))
"""
from rulecheck.config import Settings, get_settings
from rulecheck.errors import (
    Result,
    Ok,
    Err,
    Failure,
    ValidationError,
    DomainConstraintError,
    ensure,
)
from rulecheck.logging import configure_logging, get_logger
from rulecheck.validation import (
    Rule,
    Min,
    Max,
    RangeInclusive,
    Enum,
    Regex,
    ChainAll,
    ChainAny,
    SliceValidator,
    WithMessage,
    Custom,
    custom,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "Result",
    "Ok",
    "Err",
    "Failure",
    "ValidationError",
    "DomainConstraintError",
    "ensure",
    "configure_logging",
    "get_logger",
    "Rule",
    "Min",
    "Max",
    "RangeInclusive",
    "Enum",
    "Regex",
    "ChainAll",
    "ChainAny",
    "SliceValidator",
    "WithMessage",
    "Custom",
    "custom",
]
