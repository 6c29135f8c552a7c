"""Reset token error types.

Returned by the reset token codec when a token cannot be trusted. Signing
library exceptions are mapped to exactly one of two codes so callers never
see library-specific types.

Usage:
    from src.domain.errors import ResetTokenError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ResetTokenError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Password reset token has expired",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ResetTokenError(DomainError):
    """Reset token rejected.

    Attributes:
        code: TOKEN_INVALID (bad signature, malformed, unknown user) or
            TOKEN_EXPIRED (signature valid, expiry passed).
        message: Human-readable message.
        details: Additional context.
    """

    pass  # Inherits all fields from DomainError
