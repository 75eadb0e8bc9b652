"""Tests for the logging module."""

from __future__ import annotations

import structlog

from obsidian_notes.infrastructure.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def teardown_method(self) -> None:
        """Restore structlog defaults after each test."""
        structlog.reset_defaults()

    def test_console_renderer_by_default(self) -> None:
        """Should render human-readable console output."""
        configure_logging()

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self) -> None:
        """json_logs should switch to the JSON renderer."""
        configure_logging(json_logs=True)

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.processors.format_exc_info in processors
