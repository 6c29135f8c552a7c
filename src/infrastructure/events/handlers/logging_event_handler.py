"""Logging event handler for password reset events.

Log Levels:
    - INFO: successful steps
    - WARNING: PasswordResetFailed

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - user_id: UUID (when available)
    - stage / reason: for failures

Reset tokens and one-time codes are never logged.

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(
    ...     PasswordResetCompleted,
    ...     logging_handler.handle_password_reset_completed,
    ... )
"""

from src.domain.events.password_reset_events import (
    PasswordResetCompleted,
    PasswordResetFailed,
    PasswordResetInitiated,
    PasswordResetOTPSent,
    PasswordResetOTPVerified,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of password reset events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    async def handle_password_reset_initiated(
        self,
        event: PasswordResetInitiated,
    ) -> None:
        """Log reset token issuance (INFO level)."""
        self._logger.info(
            "password_reset_initiated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )

    async def handle_password_reset_otp_sent(
        self,
        event: PasswordResetOTPSent,
    ) -> None:
        """Log one-time code delivery (INFO level)."""
        self._logger.info(
            "password_reset_otp_sent",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
            expires_at=event.expires_at.isoformat(),
        )

    async def handle_password_reset_otp_verified(
        self,
        event: PasswordResetOTPVerified,
    ) -> None:
        """Log one-time code pre-check (INFO level)."""
        self._logger.info(
            "password_reset_otp_verified",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )

    async def handle_password_reset_completed(
        self,
        event: PasswordResetCompleted,
    ) -> None:
        """Log completed reset (INFO level)."""
        self._logger.info(
            "password_reset_completed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            user_id=str(event.user_id),
        )

    async def handle_password_reset_failed(
        self,
        event: PasswordResetFailed,
    ) -> None:
        """Log rejected reset step (WARNING level).

        Args:
            event: PasswordResetFailed event with stage and reason.
        """
        self._logger.warning(
            "password_reset_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            stage=event.stage,
            reason=event.reason,
            user_id=str(event.user_id) if event.user_id else None,
        )
