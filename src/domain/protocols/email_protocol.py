"""EmailProtocol - Port for email service implementations.

Defines the interface for delivering password reset one-time codes.
Infrastructure layer provides concrete implementations (StubEmailService,
SmtpEmailService).
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        send_password_reset_otp: Deliver the plaintext one-time code
    """

    async def send_password_reset_otp(
        self,
        to_email: str,
        code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        """Send a password reset one-time code to the user.

        Args:
            to_email: Recipient email address.
            code: Plaintext 6-digit code (never the hash).
            expires_in_minutes: Code lifetime, shown to the user.

        Returns:
            Success(None) once handed to the transport.
            Failure(DomainError) with NOTIFICATION_FAILED if delivery failed.

        Example:
            >>> result = await email_service.send_password_reset_otp(
            ...     to_email="user@example.com",
            ...     code="550000",
            ...     expires_in_minutes=15,
            ... )
        """
        ...
