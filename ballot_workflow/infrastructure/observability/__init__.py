"""Observability infrastructure for structured logging.

Usage:
    from ballot_workflow.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from ballot_workflow.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
)

__all__: list[str] = ["build_processors", "configure_structlog"]
