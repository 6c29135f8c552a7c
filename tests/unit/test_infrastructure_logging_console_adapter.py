"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward to structlog
- Exception details flattened into context
- Context binding returns a new adapter
- Renderer selection (JSON vs console)
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        """Test info() logs message with structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("password_reset_initiated", user_id="123")

            mock_logger.info.assert_called_once_with(
                "password_reset_initiated", user_id="123"
            )

    def test_warning_logs_message_with_context(self):
        """Test warning() logs message with structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.warning("password_reset_failed", reason="otp_invalid")

            mock_logger.warning.assert_called_once_with(
                "password_reset_failed", reason="otp_invalid"
            )

    def test_error_flattens_exception(self):
        """Test error() adds error_type and error_message."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("email_delivery_failed", error=TimeoutError("slow"), host="smtp")

            mock_logger.error.assert_called_once_with(
                "email_delivery_failed",
                host="smtp",
                error_type="TimeoutError",
                error_message="slow",
            )

    def test_critical_without_exception(self):
        """Test critical() without error adds nothing."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("database_unreachable")

            mock_logger.critical.assert_called_once_with("database_unreachable")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        """Test bind() wraps the bound structlog logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="abc")
            bound.info("hello")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="abc")
            bound_logger.info.assert_called_once_with("hello")

    def test_with_context_is_alias_for_bind(self):
        """Test with_context() delegates to bind()."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(user_id="1")

            mock_logger.bind.assert_called_once_with(user_id="1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer selection."""

    def test_json_renderer_when_requested(self):
        """Test use_json=True configures JSONRenderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        """Test development output uses ConsoleRenderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()
