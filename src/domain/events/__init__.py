"""Domain events for the password-reset workflow."""

from src.domain.events.base_event import DomainEvent
from src.domain.events.password_reset_events import (
    PasswordResetCompleted,
    PasswordResetFailed,
    PasswordResetInitiated,
    PasswordResetOTPSent,
    PasswordResetOTPVerified,
)

__all__ = [
    "DomainEvent",
    "PasswordResetCompleted",
    "PasswordResetFailed",
    "PasswordResetInitiated",
    "PasswordResetOTPSent",
    "PasswordResetOTPVerified",
]
