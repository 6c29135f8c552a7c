"""Unit tests for LoggingEventHandler.

Tests cover:
- Each password reset event logged at the right level
- Structured fields present
- Failure events logged at WARNING with stage and reason
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest
from uuid_extensions import uuid7

from src.domain.events.password_reset_events import (
    PasswordResetCompleted,
    PasswordResetFailed,
    PasswordResetInitiated,
    PasswordResetOTPSent,
    PasswordResetOTPVerified,
)
from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)
from tests.utils.fakes import FIXED_NOW


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test structured logging of reset events."""

    @pytest.mark.asyncio
    async def test_initiated_logged_at_info(self):
        """Test PasswordResetInitiated -> info."""
        logger = Mock()
        handler = LoggingEventHandler(logger=logger)
        user_id = uuid7()

        await handler.handle_password_reset_initiated(
            PasswordResetInitiated(
                occurred_at=FIXED_NOW, user_id=user_id, email="user@example.com"
            )
        )

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args == ("password_reset_initiated",)
        assert kwargs["user_id"] == str(user_id)
        assert kwargs["occurred_at"] == FIXED_NOW.isoformat()

    @pytest.mark.asyncio
    async def test_otp_sent_logs_expiry(self):
        """Test PasswordResetOTPSent -> info with expires_at."""
        logger = Mock()
        handler = LoggingEventHandler(logger=logger)
        expires_at = FIXED_NOW + timedelta(minutes=15)

        await handler.handle_password_reset_otp_sent(
            PasswordResetOTPSent(user_id=uuid7(), expires_at=expires_at)
        )

        args, kwargs = logger.info.call_args
        assert args == ("password_reset_otp_sent",)
        assert kwargs["expires_at"] == expires_at.isoformat()

    @pytest.mark.asyncio
    async def test_otp_verified_logged_at_info(self):
        """Test PasswordResetOTPVerified -> info."""
        logger = Mock()
        handler = LoggingEventHandler(logger=logger)

        await handler.handle_password_reset_otp_verified(
            PasswordResetOTPVerified(user_id=uuid7())
        )

        assert logger.info.call_args[0] == ("password_reset_otp_verified",)

    @pytest.mark.asyncio
    async def test_completed_logged_at_info(self):
        """Test PasswordResetCompleted -> info."""
        logger = Mock()
        handler = LoggingEventHandler(logger=logger)

        await handler.handle_password_reset_completed(
            PasswordResetCompleted(user_id=uuid7(), email="user@example.com")
        )

        assert logger.info.call_args[0] == ("password_reset_completed",)

    @pytest.mark.asyncio
    async def test_failed_logged_at_warning(self):
        """Test PasswordResetFailed -> warning with stage and reason."""
        logger = Mock()
        handler = LoggingEventHandler(logger=logger)

        await handler.handle_password_reset_failed(
            PasswordResetFailed(stage="verify_otp", reason="otp_expired")
        )

        logger.info.assert_not_called()
        args, kwargs = logger.warning.call_args
        assert args == ("password_reset_failed",)
        assert kwargs["stage"] == "verify_otp"
        assert kwargs["reason"] == "otp_expired"
        assert kwargs["user_id"] is None
