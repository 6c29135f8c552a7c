"""Password reset domain events.

One event per successful step plus a single failure event carrying the
stage that failed:

- PasswordResetInitiated: reset token issued (step 1)
- PasswordResetOTPSent: one-time code stored and delivered (step 2)
- PasswordResetOTPVerified: code pre-checked without consuming it
- PasswordResetCompleted: password replaced, reset state cleared (step 3)
- PasswordResetFailed: any step rejected

Handlers:
- LoggingEventHandler: ALL events

Events never carry reset tokens or one-time codes.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class PasswordResetInitiated(DomainEvent):
    """Reset token issued for a known user.

    Attributes:
        user_id: User requesting reset.
        email: User's email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetOTPSent(DomainEvent):
    """One-time code hashed, persisted and handed to the email gateway.

    Attributes:
        user_id: User receiving the code.
        expires_at: When the code stops being accepted.
    """

    user_id: UUID
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class PasswordResetOTPVerified(DomainEvent):
    """One-time code pre-checked successfully (not consumed).

    Attributes:
        user_id: User whose code matched.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class PasswordResetCompleted(DomainEvent):
    """Password replaced and all reset state cleared.

    Attributes:
        user_id: User whose password was reset.
        email: User's email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetFailed(DomainEvent):
    """A password reset step was rejected.

    Attributes:
        stage: Step that failed ("initiate", "send_otp", "verify_otp",
            "reset_password").
        reason: Error code value (e.g., "otp_expired").
        user_id: User involved, when the token could be resolved.
    """

    stage: str
    reason: str
    user_id: UUID | None = None
