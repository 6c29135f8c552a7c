"""SMTP email service (production).

Sends mail through an SMTP relay. smtplib is blocking, so the transaction
runs in a worker thread via asyncio.to_thread.

Delivery failures (refused recipients, auth errors, timeouts, connection
errors) are returned as ExternalServiceError with NOTIFICATION_FAILED.
Nothing is retried.
"""

import asyncio
import smtplib
from email.message import EmailMessage

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import (
    PASSWORD_RESET_OTP_SUBJECT,
    render_password_reset_otp,
)
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import ExternalServiceError

SERVICE_NAME = "smtp"


class SmtpEmailService:
    """EmailProtocol implementation backed by smtplib."""

    def __init__(
        self,
        *,
        host: str,
        port: int,
        mail_from: str,
        logger: LoggerProtocol,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize SMTP email service.

        Args:
            host: SMTP server host.
            port: SMTP server port.
            mail_from: From header.
            logger: Logger for delivery failures.
            username: Login user (empty = no login).
            password: Login password.
            use_tls: Upgrade with STARTTLS before login.
            timeout_seconds: Socket timeout.
        """
        self._host = host
        self._port = port
        self._mail_from = mail_from
        self._logger = logger
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout_seconds = timeout_seconds

    async def send_password_reset_otp(
        self,
        to_email: str,
        code: str,
        expires_in_minutes: int,
    ) -> Result[None, DomainError]:
        """Send the one-time code email.

        Args:
            to_email: Recipient email address.
            code: Plaintext code.
            expires_in_minutes: Code lifetime.

        Returns:
            Success(None) once the relay accepted the message.
            Failure(ExternalServiceError) with NOTIFICATION_FAILED otherwise.
        """
        message = EmailMessage()
        message["Subject"] = PASSWORD_RESET_OTP_SUBJECT
        message["From"] = self._mail_from
        message["To"] = to_email
        message.set_content(render_password_reset_otp(code, expires_in_minutes))

        try:
            await asyncio.to_thread(self._send_sync, message)
        except TimeoutError as e:
            return self._failure(e, InfrastructureErrorCode.EXTERNAL_SERVICE_TIMEOUT)
        except smtplib.SMTPException as e:
            return self._failure(e, InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR)
        except OSError as e:
            return self._failure(e, InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE)

        return Success(value=None)

    def _send_sync(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout_seconds) as server:
            if self._use_tls:
                server.starttls()
            if self._username:
                server.login(self._username, self._password)
            server.send_message(message)

    def _failure(
        self,
        error: Exception,
        infrastructure_code: InfrastructureErrorCode,
    ) -> Failure[DomainError]:
        self._logger.error(
            "email_delivery_failed",
            error=error,
            service_name=SERVICE_NAME,
            smtp_host=self._host,
        )
        return Failure(
            error=ExternalServiceError(
                code=ErrorCode.NOTIFICATION_FAILED,
                message="Failed to send OTP email",
                infrastructure_code=infrastructure_code,
                service_name=SERVICE_NAME,
                details={"error_type": type(error).__name__},
            )
        )
