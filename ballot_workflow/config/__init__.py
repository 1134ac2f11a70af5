"""Configuration module for the ballot workflow.

Available Configurations:
- ObservabilityConfig: Structured logging output and level
"""

from ballot_workflow.config.observability_config import (
    DEFAULT_OBSERVABILITY_CONFIG,
    DEVELOPMENT_OBSERVABILITY_CONFIG,
    ObservabilityConfig,
)

__all__ = [
    "ObservabilityConfig",
    "DEFAULT_OBSERVABILITY_CONFIG",
    "DEVELOPMENT_OBSERVABILITY_CONFIG",
]
