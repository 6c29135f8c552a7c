"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.

Usage:
    from src.domain.types import Email, ResetToken, OTPInput

    class PasswordResetTokenCreate(BaseModel):
        email: Email  # Validation included!
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import validate_email

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with validation and normalization (lowercase)."""

ResetToken = Annotated[
    str,
    Field(
        min_length=1,
        max_length=2048,
        description="Password reset token issued by POST /password-reset-tokens",
    ),
]
"""Opaque reset token. Trust is decided by the codec, not by shape."""

OTPInput = Annotated[
    str,
    Field(
        min_length=1,
        max_length=32,
        description="One-time code received by email",
        examples=["550000"],
    ),
]
"""User-supplied one-time code. A wrong shape is reported as a wrong code."""

NewPassword = Annotated[
    str,
    Field(
        min_length=1,
        max_length=128,
        description="New password (strength checked after the code is verified)",
        examples=["NewPass1!"],
    ),
]
"""New password. Strength is enforced by the reset handler, not the schema."""
