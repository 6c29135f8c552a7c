"""Reset Password handler.

Flow:
1. Resolve token to user (TOKEN_INVALID / TOKEN_EXPIRED)
2. Check code: issued -> not expired -> matches
3. Validate new password strength
4. Hash new password
5. Conditional update: swap password, clear reset state, only while the
   stored code hash is still the one just validated
6. Emit PasswordResetCompleted event
7. Return Success(None)

On failure:
- Emit PasswordResetFailed event
- Return Failure(error)

No mutation happens before steps 1-3 pass.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.password_reset_commands import ResetPassword
from src.application.services.password_reset_verifier import PasswordResetVerifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import PasswordResetError
from src.domain.events.password_reset_events import (
    PasswordResetCompleted,
    PasswordResetFailed,
)
from src.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.validators import validate_strong_password

STAGE = "reset_password"


class ResetPasswordHandler:
    """Handler for reset password command."""

    def __init__(
        self,
        verifier: PasswordResetVerifier,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            verifier: Shared token and code checks.
            user_repo: User repository for the final update.
            password_service: Hasher for the new password.
            clock: Time source for event timestamps.
            event_bus: Event bus for publishing domain events.
        """
        self._verifier = verifier
        self._user_repo = user_repo
        self._password_service = password_service
        self._clock = clock
        self._event_bus = event_bus

    async def handle(self, cmd: ResetPassword) -> Result[None, DomainError]:
        """Handle reset password command.

        Args:
            cmd: ResetPassword command with token, code and new password.

        Returns:
            Success(None) once the password is replaced.
            Failure(ResetTokenError | PasswordResetError) from the checks.
            Failure(ValidationError) with PASSWORD_TOO_WEAK.
            Failure(PasswordResetError) if the code changed between validation
                and update: OTP_INVALID when a newer code was stored,
                OTP_NOT_GENERATED when a new reset cleared it.

        Side Effects:
            - Updates password_hash, clears reset_token and reset_otp_*.
            - Publishes PasswordResetCompleted/PasswordResetFailed event.
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
        observed_otp_hash = otp_result.value

        # Step 3: Validate new password
        try:
            validate_strong_password(cmd.new_password)
        except ValueError as e:
            await self._publish_failed_event(
                reason=ErrorCode.PASSWORD_TOO_WEAK.value,
                user_id=user.id,
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_TOO_WEAK,
                    message=str(e),
                    field="new_password",
                )
            )

        # Step 4: Hash new password
        password_hash = self._password_service.hash_password(cmd.new_password)

        # Step 5: Conditional update keyed on the validated code hash
        updated = await self._user_repo.complete_password_reset(
            user_id=user.id,
            expected_otp_hash=observed_otp_hash,
            new_password_hash=password_hash,
        )
        if not updated:
            error = await self._stale_code_error(user.id)
            await self._publish_failed_event(
                reason=error.code.value,
                user_id=user.id,
            )
            return Failure(error=error)

        # Step 6: Emit event
        await self._event_bus.publish(
            PasswordResetCompleted(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                user_id=user.id,
                email=user.email,
            )
        )

        # Step 7: Return Success
        return Success(value=None)

    async def _stale_code_error(self, user_id: UUID) -> PasswordResetError:
        """Classify a conditional update that matched no row.

        Args:
            user_id: User whose reset was attempted.

        Returns:
            OTP_NOT_GENERATED if the pending code is gone, OTP_INVALID if it
            was replaced by a newer one.
        """
        current = await self._user_repo.find_by_id(user_id)
        if current is None or not current.has_pending_otp():
            return PasswordResetError(
                code=ErrorCode.OTP_NOT_GENERATED,
                message="No OTP has been generated for this reset",
            )
        return PasswordResetError(
            code=ErrorCode.OTP_INVALID,
            message="Invalid OTP",
        )

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
