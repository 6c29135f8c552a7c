"""Password reset error types.

Used when the one-time code gating the final password change is missing,
stale or wrong.

Usage:
    from src.domain.errors import PasswordResetError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=PasswordResetError(
        code=ErrorCode.OTP_EXPIRED,
        message="OTP has expired",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordResetError(DomainError):
    """One-time code check failure.

    Attributes:
        code: ErrorCode enum (OTP_NOT_GENERATED, OTP_EXPIRED, OTP_INVALID).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError
