"""Password reset handler dependency factories.

Request-scoped handler instances, one per reset operation. Each receives a
UserRepository bound to the request's database session.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_clock,
    get_db_session,
    get_email_service,
    get_password_service,
    get_reset_token_codec,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.initiate_password_reset_handler import (
        InitiatePasswordResetHandler,
    )
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.application.commands.handlers.send_password_reset_otp_handler import (
        SendPasswordResetOTPHandler,
    )
    from src.application.commands.handlers.verify_password_reset_otp_handler import (
        VerifyPasswordResetOTPHandler,
    )
    from src.application.services.password_reset_verifier import (
        PasswordResetVerifier,
    )
    from src.infrastructure.persistence.repositories import UserRepository


def _build_verifier(user_repo: "UserRepository") -> "PasswordResetVerifier":
    from src.application.services.password_reset_verifier import (
        PasswordResetVerifier,
    )

    return PasswordResetVerifier(
        user_repo=user_repo,
        token_codec=get_reset_token_codec(),
        password_service=get_password_service(),
        clock=get_clock(),
    )


async def get_initiate_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "InitiatePasswordResetHandler":
    """Get InitiatePasswordReset command handler (request-scoped).

    Returns:
        InitiatePasswordResetHandler instance.
    """
    from src.application.commands.handlers.initiate_password_reset_handler import (
        InitiatePasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return InitiatePasswordResetHandler(
        user_repo=UserRepository(session=session),
        token_codec=get_reset_token_codec(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        token_ttl=timedelta(minutes=settings.password_reset_token_expire_minutes),
    )


async def get_send_password_reset_otp_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SendPasswordResetOTPHandler":
    """Get SendPasswordResetOTP command handler (request-scoped).

    Returns:
        SendPasswordResetOTPHandler instance.
    """
    from src.application.commands.handlers.send_password_reset_otp_handler import (
        SendPasswordResetOTPHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    user_repo = UserRepository(session=session)

    return SendPasswordResetOTPHandler(
        verifier=_build_verifier(user_repo),
        user_repo=user_repo,
        password_service=get_password_service(),
        email_service=get_email_service(),
        clock=get_clock(),
        event_bus=get_event_bus(),
        otp_ttl=timedelta(minutes=settings.password_reset_otp_expire_minutes),
    )


async def get_verify_password_reset_otp_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyPasswordResetOTPHandler":
    """Get VerifyPasswordResetOTP command handler (request-scoped).

    Returns:
        VerifyPasswordResetOTPHandler instance.
    """
    from src.application.commands.handlers.verify_password_reset_otp_handler import (
        VerifyPasswordResetOTPHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    return VerifyPasswordResetOTPHandler(
        verifier=_build_verifier(UserRepository(session=session)),
        clock=get_clock(),
        event_bus=get_event_bus(),
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped).

    Returns:
        ResetPasswordHandler instance.
    """
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.infrastructure.persistence.repositories import UserRepository

    user_repo = UserRepository(session=session)

    return ResetPasswordHandler(
        verifier=_build_verifier(user_repo),
        user_repo=user_repo,
        password_service=get_password_service(),
        clock=get_clock(),
        event_bus=get_event_bus(),
    )
