"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from ballot_workflow.config.observability_config import ObservabilityConfig
from ballot_workflow.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_logging(config: ObservabilityConfig | None = None) -> ObservabilityConfig:
    """Configure structlog from config, or from the environment when omitted.

    Returns:
        The configuration that was applied.
    """
    if config is None:
        config = ObservabilityConfig.from_environment()
    _configure_structlog(environment=config.environment, log_level=config.log_level)
    return config


__all__ = ["configure_logging"]
