"""Domain-specific error types."""

from src.domain.errors.password_reset_error import PasswordResetError
from src.domain.errors.reset_token_error import ResetTokenError

__all__ = [
    "PasswordResetError",
    "ResetTokenError",
]
