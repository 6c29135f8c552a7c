"""Password reset request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

RESTful Endpoints (100% resource-based):
    POST /api/v1/password-reset-tokens             - Create reset token (request)
    POST /api/v1/password-reset-otps               - Create one-time code (send)
    POST /api/v1/password-reset-otp-verifications  - Create verification (check code)
    POST /api/v1/password-resets                   - Create reset (execute)
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import Email, NewPassword, OTPInput, ResetToken


# =============================================================================
# Reset Token
# =============================================================================


class PasswordResetTokenCreateRequest(BaseModel):
    """Request schema for password reset token creation.

    POST /api/v1/password-reset-tokens
    Returns: 201 Created
    """

    email: Email


class PasswordResetTokenCreateResponse(BaseModel):
    """Response schema for password reset token (201 Created)."""

    token: str = Field(..., description="Signed password reset token")
    message: str = Field(
        default="Password reset initiated. Please check your email for next steps.",
        description="Success message",
    )


# =============================================================================
# One-Time Code
# =============================================================================


class PasswordResetOTPCreateRequest(BaseModel):
    """Request schema for one-time code delivery.

    POST /api/v1/password-reset-otps
    Returns: 201 Created
    """

    token: ResetToken


class PasswordResetOTPCreateResponse(BaseModel):
    """Response schema for one-time code delivery (201 Created)."""

    message: str = Field(
        default="OTP has been sent to your email",
        description="Success message",
    )


class PasswordResetOTPVerificationCreateRequest(BaseModel):
    """Request schema for one-time code verification.

    POST /api/v1/password-reset-otp-verifications
    Returns: 200 OK
    """

    token: ResetToken
    otp: OTPInput


class PasswordResetOTPVerificationCreateResponse(BaseModel):
    """Response schema for one-time code verification (200 OK)."""

    valid: bool = Field(default=True, description="Whether the code matched")
    message: str = Field(
        default="OTP verified successfully",
        description="Success message",
    )


# =============================================================================
# Password Reset
# =============================================================================


class PasswordResetCreateRequest(BaseModel):
    """Request schema for password reset execution.

    POST /api/v1/password-resets
    Returns: 201 Created
    """

    token: ResetToken
    otp: OTPInput
    new_password: NewPassword

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "otp": "550000",
                "new_password": "NewPass1!",
            }
        }
    )


class PasswordResetCreateResponse(BaseModel):
    """Response schema for password reset (201 Created)."""

    message: str = Field(
        default="Password has been reset successfully",
        description="Success message",
    )
