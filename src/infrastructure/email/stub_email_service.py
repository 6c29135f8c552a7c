"""Stub email service (development/testing).

Writes the email to the structured log instead of sending it, so the code
can be copied from the console during local development.
"""

from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import (
    PASSWORD_RESET_OTP_SUBJECT,
    render_password_reset_otp,
)


class StubEmailService:
    """EmailProtocol implementation that logs instead of sending.

    Attributes:
        sent: Messages "sent" so far as (to_email, subject, body) tuples.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize stub email service.

        Args:
            logger: Logger receiving the rendered email.
        """
        self._logger = logger
        self.sent: list[tuple[str, str, str]] = []

    async def send_password_reset_otp(
        self,
        to_email: str,
        code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        """Log the one-time code email.

        Args:
            to_email: Recipient email address.
            code: Plaintext code.
            expires_in_minutes: Code lifetime.

        Returns:
            Success(None) always.
        """
        body = render_password_reset_otp(code, expires_in_minutes)
        self.sent.append((to_email, PASSWORD_RESET_OTP_SUBJECT, body))
        self._logger.info(
            "stub_email_sent",
            to_email=to_email,
            subject=PASSWORD_RESET_OTP_SUBJECT,
            body=body,
        )
        return Success(value=None)
