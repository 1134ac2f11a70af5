"""Unit tests for structured logging configuration.

Tests the processor chain per environment and the rendered output format.
"""

import io
import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from ballot_workflow.application.observability.correlation import (
    correlation_scope,
)
from ballot_workflow.infrastructure.observability.logging import (
    _resolve_log_level,
    build_processors,
    configure_structlog,
)


class TestBuildProcessors:
    """Tests for the per-environment processor chain."""

    def test_production_renders_json_with_structured_tracebacks(self) -> None:
        processors = build_processors("production")

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.dict_tracebacks in processors

    @pytest.mark.parametrize("environment", ["development", "test"])
    def test_other_environments_render_console(self, environment: str) -> None:
        processors = build_processors(environment)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_defaults_to_production(self) -> None:
        assert isinstance(build_processors()[-1], structlog.processors.JSONRenderer)


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_applies_processor_chain(self) -> None:
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_output_structure(self) -> None:
        stream = io.StringIO()
        configure_structlog(environment="production", log_level="INFO", stream=stream)

        with correlation_scope("test-json-output"):
            structlog.get_logger().info("test_event", custom_field="value")

        entry = json.loads(stream.getvalue().strip())
        assert entry["event"] == "test_event"
        assert entry["level"] == "info"
        assert entry["timestamp"].endswith("Z")
        assert entry["correlation_id"] == "test-json-output"
        assert entry["custom_field"] == "value"

    def test_below_level_filtered(self) -> None:
        stream = io.StringIO()
        configure_structlog(environment="production", log_level="WARNING", stream=stream)

        structlog.get_logger().info("hidden_event")
        structlog.get_logger().warning("shown_event")

        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown_event"]

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production", log_level="INFO")

        structlog.get_logger().info("stdout_event")

        assert json.loads(capsys.readouterr().out)["event"] == "stdout_event"


class TestLogLevelResolution:
    """Tests for log level resolution."""

    def test_default_is_info(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _resolve_log_level() == logging.INFO

    def test_environment_variable(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert _resolve_log_level() == logging.DEBUG

    def test_explicit_level_wins(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert _resolve_log_level("ERROR") == logging.ERROR

    def test_unknown_name_falls_back_to_info(self) -> None:
        assert _resolve_log_level("LOUD") == logging.INFO
