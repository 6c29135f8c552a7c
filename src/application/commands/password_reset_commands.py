"""Password reset commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Flow:
    InitiatePasswordReset -> SendPasswordResetOTP
        -> VerifyPasswordResetOTP (optional pre-check) -> ResetPassword
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class InitiatePasswordReset:
    """Start a password reset for an account.

    Issues a signed reset token and clears any pending one-time code.

    Attributes:
        email: User's email address (normalized to lowercase by the API).

    Example:
        >>> command = InitiatePasswordReset(email="user@example.com")
        >>> result = await handler.handle(command)
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class SendPasswordResetOTP:
    """Generate a one-time code and email it to the token's owner.

    Attributes:
        token: Reset token returned by InitiatePasswordReset.
    """

    token: str


@dataclass(frozen=True, kw_only=True)
class VerifyPasswordResetOTP:
    """Check a one-time code without consuming it.

    Attributes:
        token: Reset token.
        otp: Code received by email.
    """

    token: str
    otp: str


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Replace the password once token and one-time code check out.

    Attributes:
        token: Reset token.
        otp: Code received by email.
        new_password: New plaintext password (strength checked, then hashed).

    Example:
        >>> command = ResetPassword(
        ...     token=token,
        ...     otp="550000",
        ...     new_password="NewPass1!",
        ... )
        >>> result = await handler.handle(command)
    """

    token: str
    otp: str
    new_password: str
