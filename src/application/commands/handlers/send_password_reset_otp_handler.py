"""Send Password Reset OTP handler.

Flow:
1. Resolve token to user (TOKEN_INVALID / TOKEN_EXPIRED)
2. Draw a uniform 6-digit code
3. Hash code, persist hash + expiry (overwrites any previous code)
4. Email the plaintext code
5. Emit PasswordResetOTPSent event
6. Return Success(None)

On failure:
- Emit PasswordResetFailed event
- Return Failure(error)

A delivery failure leaves the freshly stored code in place; the user can
request another one.
"""

import secrets
from collections.abc import Callable
from datetime import timedelta
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.password_reset_commands import SendPasswordResetOTP
from src.application.services.password_reset_verifier import PasswordResetVerifier
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events.password_reset_events import (
    PasswordResetFailed,
    PasswordResetOTPSent,
)
from src.domain.protocols import (
    ClockProtocol,
    EmailProtocol,
    EventBusProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.value_objects import OneTimeCode

STAGE = "send_otp"


class SendPasswordResetOTPHandler:
    """Handler for send password reset OTP command.

    Concurrent calls for the same user race; the last write wins and only
    the most recently stored code is accepted afterwards.
    """

    def __init__(
        self,
        verifier: PasswordResetVerifier,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        email_service: EmailProtocol,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        otp_ttl: timedelta = timedelta(minutes=15),
        random_source: Callable[[], float] | None = None,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            verifier: Resolves the token to its user.
            user_repo: User repository for storing the code.
            password_service: Hasher for the code.
            email_service: Delivers the plaintext code.
            clock: Time source for the code expiry.
            event_bus: Event bus for publishing domain events.
            otp_ttl: One-time code lifetime.
            random_source: Callable returning floats in [0, 1). Defaults to
                the OS CSPRNG.
        """
        self._verifier = verifier
        self._user_repo = user_repo
        self._password_service = password_service
        self._email_service = email_service
        self._clock = clock
        self._event_bus = event_bus
        self._otp_ttl = otp_ttl
        self._random_source = random_source or secrets.SystemRandom().random

    async def handle(self, cmd: SendPasswordResetOTP) -> Result[None, DomainError]:
        """Handle send password reset OTP command.

        Args:
            cmd: SendPasswordResetOTP command with reset token.

        Returns:
            Success(None) once the code is stored and handed to email.
            Failure(ResetTokenError) for TOKEN_INVALID / TOKEN_EXPIRED.
            Failure(DomainError) with NOTIFICATION_FAILED if delivery failed.

        Side Effects:
            - Writes reset_otp_hash and reset_otp_expires_at.
            - Sends one email.
            - Publishes PasswordResetOTPSent/PasswordResetFailed event.
        """
        # Step 1: Resolve token to user
        user_result = await self._verifier.resolve_user(cmd.token)
        if isinstance(user_result, Failure):
            await self._publish_failed_event(reason=user_result.error.code.value)
            return Failure(error=user_result.error)
        user = user_result.value

        # Step 2: Draw code
        code = OneTimeCode.generate(self._random_source)

        # Step 3: Hash and persist with expiry
        otp_hash = self._password_service.hash_password(code.value)
        expires_at = self._clock.now() + self._otp_ttl
        await self._user_repo.save_reset_otp(user.id, otp_hash, expires_at)

        # Step 4: Email plaintext code
        send_result = await self._email_service.send_password_reset_otp(
            to_email=user.email,
            code=code.value,
            expires_in_minutes=int(self._otp_ttl.total_seconds() // 60),
        )
        if isinstance(send_result, Failure):
            await self._publish_failed_event(
                reason=send_result.error.code.value,
                user_id=user.id,
            )
            return Failure(error=send_result.error)

        # Step 5: Emit event
        await self._event_bus.publish(
            PasswordResetOTPSent(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                user_id=user.id,
                expires_at=expires_at,
            )
        )

        # Step 6: Return Success
        return Success(value=None)

    async def _publish_failed_event(
        self,
        reason: str,
        user_id: UUID | None = None,
    ) -> None:
        """Publish PasswordResetFailed event.

        Args:
            reason: Error code value.
            user_id: User involved, if the token was resolved.
        """
        await self._event_bus.publish(
            PasswordResetFailed(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                stage=STAGE,
                reason=reason,
                user_id=user_id,
            )
        )
