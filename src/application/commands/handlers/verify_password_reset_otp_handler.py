"""Verify Password Reset OTP handler.

Flow:
1. Resolve token to user (TOKEN_INVALID / TOKEN_EXPIRED)
2. Check code: issued -> not expired -> matches
3. Emit PasswordResetOTPVerified event
4. Return Success(True)

Non-destructive: the code stays valid for ResetPassword. No attempt
counter is kept.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.password_reset_commands import VerifyPasswordResetOTP
from src.application.services.password_reset_verifier import PasswordResetVerifier
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.password_reset_events import (
    PasswordResetFailed,
    PasswordResetOTPVerified,
)
from src.domain.protocols import ClockProtocol, EventBusProtocol

STAGE = "verify_otp"


class VerifyPasswordResetOTPHandler:
    """Handler for verify password reset OTP command."""

    def __init__(
        self,
        verifier: PasswordResetVerifier,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            verifier: Shared token and code checks.
            clock: Time source for event timestamps.
            event_bus: Event bus for publishing domain events.
        """
        self._verifier = verifier
        self._clock = clock
        self._event_bus = event_bus

    async def handle(self, cmd: VerifyPasswordResetOTP) -> Result[bool, DomainError]:
        """Handle verify password reset OTP command.

        Args:
            cmd: VerifyPasswordResetOTP command with token and code.

        Returns:
            Success(True) if the code is currently valid.
            Failure(ResetTokenError | PasswordResetError) otherwise.
        """
        # Step 1: Resolve token to user
        user_result = await self._verifier.resolve_user(cmd.token)
        if isinstance(user_result, Failure):
            await self._publish_failed_event(reason=user_result.error.code.value)
            return Failure(error=user_result.error)
        user = user_result.value

        # Step 2: Check code
        otp_result = self._verifier.check_otp(user, cmd.otp)
        if isinstance(otp_result, Failure):
            await self._publish_failed_event(
                reason=otp_result.error.code.value,
                user_id=user.id,
            )
            return Failure(error=otp_result.error)

        # Step 3: Emit event
        await self._event_bus.publish(
            PasswordResetOTPVerified(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                user_id=user.id,
            )
        )

        return Success(value=True)

    async def _publish_failed_event(
        self,
        reason: str,
        user_id: UUID | None = None,
    ) -> None:
        """Publish PasswordResetFailed event."""
        await self._event_bus.publish(
            PasswordResetFailed(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                stage=STAGE,
                reason=reason,
                user_id=user_id,
            )
        )
