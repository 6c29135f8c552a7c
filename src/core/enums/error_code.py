"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, PASSWORD_*)
- Resource errors (*_NOT_FOUND)
- Reset token errors (TOKEN_*)
- One-time code errors (OTP_*)
- Delivery errors (NOTIFICATION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_WEAK = "password_too_weak"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Reset token errors
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"

    # One-time code errors
    OTP_NOT_GENERATED = "otp_not_generated"
    OTP_EXPIRED = "otp_expired"
    OTP_INVALID = "otp_invalid"

    # Delivery errors
    NOTIFICATION_FAILED = "notification_failed"
