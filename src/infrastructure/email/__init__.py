"""Email service implementations.

This package contains email service adapters:
- StubEmailService: Structured-log delivery for development/testing
- SmtpEmailService: SMTP relay for production
"""

from src.infrastructure.email.smtp_email_service import SmtpEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SmtpEmailService",
    "StubEmailService",
]
