"""Structured logging configuration with structlog.

One call at startup decides how the voting process's log entries are
rendered:

- production: one JSON object per line, tracebacks as structured dicts
- development: colored console output
- test: plain console output, no ANSI colors

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "warning",
        "event": "phase_check_failed",
        "service": "VotingProcessService",
        "operation": "set_vote",
        "correlation_id": "uuid",
        ...additional context
    }

Usage:
    from ballot_workflow.infrastructure.observability import configure_structlog

    configure_structlog(environment="production", log_level="INFO")
"""

import logging
import os
from typing import TextIO, cast

import structlog
from structlog.typing import Processor

from ballot_workflow.application.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _resolve_log_level(level_name: str | None = None) -> int:
    """Map a level name to a logging level.

    Args:
        level_name: Explicit name; LOG_LEVEL, then INFO, when omitted.
            Unknown names resolve to INFO.
    """
    if level_name is None:
        level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_processors(environment: str = "production") -> list[Processor]:
    """Processor chain for an environment, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if environment == "production":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=environment == "development")
        )
    return processors


def configure_structlog(
    environment: str = "production",
    log_level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the process.

    Args:
        environment: production, development or test.
        log_level: Minimum level name; defaults to the LOG_LEVEL variable.
        stream: Output stream; standard output when omitted.
    """
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(
            _resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
