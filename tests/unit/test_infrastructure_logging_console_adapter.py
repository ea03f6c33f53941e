"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- Logging methods pass message and context through
- Error details extraction
- Context binding
- Renderer and level selection from settings
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from story_spoiler.core.config import Settings
from story_spoiler.core.enums import Environment
from story_spoiler.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_logging,
)

STRUCTLOG_PATH = "story_spoiler.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("story_case_passed", case="create", duration_ms=150)

            mock_logger.info.assert_called_once_with(
                "story_case_passed",
                case="create",
                duration_ms=150,
            )

    def test_warning_logs_message_with_context(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.warning("story_case_failed", reason="Expected status 201, got 500")

            mock_logger.warning.assert_called_once_with(
                "story_case_failed", reason="Expected status 201, got 500"
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("story_session_failed", error=ValueError("bad token"))

            mock_logger.error.assert_called_once_with(
                "story_session_failed",
                error_type="ValueError",
                error_message="bad token",
            )

    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(case="edit")
            bound.debug("story_api_request_completed")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(case="edit")
            bound_logger.debug.assert_called_once_with("story_api_request_completed")


@pytest.mark.unit
class TestConfigureLogging:
    """Test configure_logging wiring from settings."""

    def test_json_renderer_in_ci(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            configure_logging(Settings(environment=Environment.CI, log_level="WARNING"))

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()
            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )

    def test_console_renderer_in_development(self):
        with patch(STRUCTLOG_PATH) as mock_structlog:
            configure_logging(Settings(environment=Environment.DEVELOPMENT))

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()
