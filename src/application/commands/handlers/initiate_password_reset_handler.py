"""Initiate Password Reset handler.

Flow:
1. Look up user by email
2. Issue signed reset token ({id, email}, 1 hour)
3. Record token, clear any pending one-time code (single write)
4. Emit PasswordResetInitiated event
5. Return Success(token)

On failure:
- Emit PasswordResetFailed event
- Return Failure(NotFoundError)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import timedelta

from uuid_extensions import uuid7

from src.application.commands.password_reset_commands import InitiatePasswordReset
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.events.password_reset_events import (
    PasswordResetFailed,
    PasswordResetInitiated,
)
from src.domain.protocols import (
    ClockProtocol,
    EventBusProtocol,
    ResetTokenCodecProtocol,
    ResetTokenPayload,
    UserRepository,
)

STAGE = "initiate"


class InitiatePasswordResetHandler:
    """Handler for initiate password reset command.

    Unlike a link-based reset, the caller is told when the email is
    unknown (USER_NOT_FOUND).
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_codec: ResetTokenCodecProtocol,
        clock: ClockProtocol,
        event_bus: EventBusProtocol,
        token_ttl: timedelta = timedelta(hours=1),
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for lookup and token bookkeeping.
            token_codec: Signs the reset token.
            clock: Time source for event timestamps.
            event_bus: Event bus for publishing domain events.
            token_ttl: Reset token lifetime.
        """
        self._user_repo = user_repo
        self._token_codec = token_codec
        self._clock = clock
        self._event_bus = event_bus
        self._token_ttl = token_ttl

    async def handle(self, cmd: InitiatePasswordReset) -> Result[str, NotFoundError]:
        """Handle initiate password reset command.

        Args:
            cmd: InitiatePasswordReset command with email.

        Returns:
            Success(token) with the signed reset token.
            Failure(NotFoundError) if no user has this email.

        Side Effects:
            - Writes reset_token and clears reset_otp_* on the user.
            - Publishes PasswordResetInitiated/PasswordResetFailed event.
        """
        # Step 1: Look up user by email
        user = await self._user_repo.find_by_email(cmd.email)

        if user is None:
            await self._event_bus.publish(
                PasswordResetFailed(
                    event_id=uuid7(),
                    occurred_at=self._clock.now(),
                    stage=STAGE,
                    reason=ErrorCode.USER_NOT_FOUND.value,
                )
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=cmd.email,
                )
            )

        # Step 2: Issue token
        token = self._token_codec.issue(
            ResetTokenPayload(user_id=user.id, email=user.email),
            self._token_ttl,
        )

        # Step 3: Record token, clear previous one-time code
        await self._user_repo.start_password_reset(user.id, token)

        # Step 4: Emit event
        await self._event_bus.publish(
            PasswordResetInitiated(
                event_id=uuid7(),
                occurred_at=self._clock.now(),
                user_id=user.id,
                email=user.email,
            )
        )

        # Step 5: Return token
        return Success(value=token)
