"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import PasswordResetTokenCreateRequest
"""

from src.schemas.password_reset_schemas import (
    # Reset token
    PasswordResetTokenCreateRequest,
    PasswordResetTokenCreateResponse,
    # One-time code
    PasswordResetOTPCreateRequest,
    PasswordResetOTPCreateResponse,
    PasswordResetOTPVerificationCreateRequest,
    PasswordResetOTPVerificationCreateResponse,
    # Password reset
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
)

__all__ = [
    "PasswordResetTokenCreateRequest",
    "PasswordResetTokenCreateResponse",
    "PasswordResetOTPCreateRequest",
    "PasswordResetOTPCreateResponse",
    "PasswordResetOTPVerificationCreateRequest",
    "PasswordResetOTPVerificationCreateResponse",
    "PasswordResetCreateRequest",
    "PasswordResetCreateResponse",
]
