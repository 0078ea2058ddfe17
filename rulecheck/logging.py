"""Structured Logging for rulecheck

structlog setup shared by the library:
- Colored, human-readable console output for development
- JSON output for log aggregation
- Context propagation through contextvars

Library loggers are structlog wrappers around stdlib loggers under
`rulecheck`, with their own processor chain. Global structlog configuration
and the root logger are never touched. Until `configure_logging` is called the
`rulecheck` logger only carries a NullHandler, so events reach the host
application's handlers (if any) through normal propagation and nothing is
printed otherwise.
"""
import logging
import sys

import structlog
from structlog.types import Processor

from rulecheck.config import get_settings

LOGGER_NAME = "rulecheck"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_shared_processors() -> list[Processor]:
    """Processors used in both console and JSON configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Attach a rendering handler to the `rulecheck` stdlib logger.

    Only the library's own logger is changed: its handlers are replaced and
    propagation is turned off. structlog's global configuration is left as the
    host application set it.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to RULECHECK_LOG_LEVEL.
        json_logs: If True, output JSON. If False, console output. Defaults to RULECHECK_LOG_JSON.
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAME)
    lib_logger.handlers = [handler]
    lib_logger.setLevel(log_level)
    lib_logger.propagate = False


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the stdlib logger `name`.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *get_shared_processors(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


class LoggerRegistry:
    """Registry of loggers for the library's domains."""

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        if name not in cls._loggers:
            cls._loggers[name] = get_logger(f"{LOGGER_NAME}.{name}")
        return cls._loggers[name]


def rule_logger() -> structlog.stdlib.BoundLogger:
    """Logger for rule application events."""
    return LoggerRegistry.get("rules")
