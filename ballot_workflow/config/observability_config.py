"""Observability configuration.

This module defines configuration for structured logging with environment
variable overrides. The voting process itself has no configuration
surface; these settings only govern how its activity is logged.

Environment Variables:
- BALLOT_ENVIRONMENT: 'production' (JSON logs) or 'development' (console logs)
  (default: production)
- LOG_LEVEL: Minimum log level name (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENT_ENV = "BALLOT_ENVIRONMENT"
LOG_LEVEL_ENV = "LOG_LEVEL"

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development", "test"})
VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def _get_choice_env(key: str, default: str, choices: frozenset[str]) -> str:
    """Get an environment variable restricted to a set of choices.

    Args:
        key: Environment variable name.
        default: Default value if not set or not a valid choice.
        choices: Accepted values (compared after normalization).

    Returns:
        The normalized value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    value = value.strip()
    for choice in choices:
        if choice.lower() == value.lower():
            return choice
    return default


@dataclass(frozen=True)
class ObservabilityConfig:
    """Configuration for structured logging.

    Attributes:
        environment: 'production' renders JSON, otherwise console output.
        log_level: Minimum level name, e.g. INFO.
    """

    environment: str = "production"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

    @classmethod
    def from_environment(cls) -> ObservabilityConfig:
        """Create config from environment variables with defaults.

        Missing or invalid values fall back to the defaults.
        """
        return cls(
            environment=_get_choice_env(
                ENVIRONMENT_ENV, "production", VALID_ENVIRONMENTS
            ),
            log_level=_get_choice_env(LOG_LEVEL_ENV, "INFO", VALID_LOG_LEVELS),
        )


# Default configuration for production
DEFAULT_OBSERVABILITY_CONFIG = ObservabilityConfig()

# Console output at DEBUG for local development
DEVELOPMENT_OBSERVABILITY_CONFIG = ObservabilityConfig(
    environment="development",
    log_level="DEBUG",
)
