"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Clock (system UTC)
- Database (PostgreSQL / SQLite)
- Password hashing (bcrypt)
- Reset tokens (JWT)
- Email (stub/SMTP)
- Logging (console)
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.clock_protocol import ClockProtocol
    from src.domain.protocols.email_protocol import EmailProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.reset_token_codec_protocol import (
        ResetTokenCodecProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get clock singleton (app-scoped).

    Returns:
        SystemClock returning UTC datetimes.
    """
    from src.infrastructure.clock.system_clock import SystemClock

    return SystemClock()


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Hashes both account passwords and one-time codes.

    Returns:
        BcryptPasswordService with cost factor from settings.
    """
    from src.infrastructure.security.bcrypt_password_service import (
        BcryptPasswordService,
    )

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_reset_token_codec() -> "ResetTokenCodecProtocol":
    """Get reset token codec singleton (app-scoped).

    Secret key and clock are injected here; nothing reads them globally.

    Returns:
        JWTResetTokenService.

    Raises:
        ValueError: If SECRET_KEY is shorter than 32 bytes.
    """
    from src.infrastructure.security.jwt_reset_token_service import (
        JWTResetTokenService,
    )

    return JWTResetTokenService(
        secret_key=settings.secret_key,
        clock=get_clock(),
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Container owns factory logic - decides which adapter based on ENVIRONMENT:
        - production: SmtpEmailService (settings require SMTP_HOST)
        - development, testing, ci: StubEmailService (logs to console)

    Returns:
        Email service implementing EmailProtocol.
    """
    from src.infrastructure.email import SmtpEmailService, StubEmailService

    if settings.is_production:
        return SmtpEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            mail_from=settings.mail_from,
            logger=get_logger(),
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout_seconds=settings.smtp_timeout_seconds,
        )
    return StubEmailService(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
