"""Commands (CQRS write operations)."""

from src.application.commands.password_reset_commands import (
    InitiatePasswordReset,
    ResetPassword,
    SendPasswordResetOTP,
    VerifyPasswordResetOTP,
)

__all__ = [
    "InitiatePasswordReset",
    "ResetPassword",
    "SendPasswordResetOTP",
    "VerifyPasswordResetOTP",
]
