"""Password resets resource routers.

RESTful endpoints for the four steps of a password reset.

Endpoints:
    POST /api/v1/password-reset-tokens            - Create reset token (start reset)
    POST /api/v1/password-reset-otps              - Create one-time code (email it)
    POST /api/v1/password-reset-otp-verifications - Create verification (check code)
    POST /api/v1/password-resets                  - Create password reset (execute)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.initiate_password_reset_handler import (
    InitiatePasswordResetHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.send_password_reset_otp_handler import (
    SendPasswordResetOTPHandler,
)
from src.application.commands.handlers.verify_password_reset_otp_handler import (
    VerifyPasswordResetOTPHandler,
)
from src.application.commands.password_reset_commands import (
    InitiatePasswordReset,
    ResetPassword,
    SendPasswordResetOTP,
    VerifyPasswordResetOTP,
)
from src.core.container import (
    get_initiate_password_reset_handler,
    get_reset_password_handler,
    get_send_password_reset_otp_handler,
    get_verify_password_reset_otp_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from src.schemas.password_reset_schemas import (
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetOTPCreateRequest,
    PasswordResetOTPCreateResponse,
    PasswordResetOTPVerificationCreateRequest,
    PasswordResetOTPVerificationCreateResponse,
    PasswordResetTokenCreateRequest,
    PasswordResetTokenCreateResponse,
)

password_reset_tokens_router = APIRouter(
    prefix="/password-reset-tokens",
    tags=["Password Reset Tokens"],
)

password_reset_otps_router = APIRouter(
    prefix="/password-reset-otps",
    tags=["Password Reset OTPs"],
)

password_reset_otp_verifications_router = APIRouter(
    prefix="/password-reset-otp-verifications",
    tags=["Password Reset OTPs"],
)

password_resets_router = APIRouter(
    prefix="/password-resets",
    tags=["Password Resets"],
)

_TOKEN_ERRORS = {
    401: {"description": "Reset token invalid or expired", "model": ProblemDetails},
}

_OTP_ERRORS = {
    **_TOKEN_ERRORS,
    400: {"description": "OTP missing, expired or wrong", "model": ProblemDetails},
}


@password_reset_tokens_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetTokenCreateResponse,
    responses={
        201: {
            "description": "Reset token issued",
            "model": PasswordResetTokenCreateResponse,
        },
        404: {"description": "No account for this email", "model": ProblemDetails},
    },
    summary="Create password reset token",
    description="Start a password reset for an email address and return the reset token.",
)
async def create_password_reset_token(
    request: Request,
    data: PasswordResetTokenCreateRequest,
    handler: InitiatePasswordResetHandler = Depends(
        get_initiate_password_reset_handler
    ),
) -> PasswordResetTokenCreateResponse | JSONResponse:
    """Create password reset token (start reset).

    POST /api/v1/password-reset-tokens → 201 Created

    Args:
        request: FastAPI request object.
        data: Reset token request (email, already lowercased).
        handler: Initiate password reset handler (injected).

    Returns:
        PasswordResetTokenCreateResponse on success (201 Created).
        JSONResponse with problem details on failure (404).
    """
    result = await handler.handle(InitiatePasswordReset(email=data.email))

    match result:
        case Success(value=token):
            return PasswordResetTokenCreateResponse(token=token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@password_reset_otps_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetOTPCreateResponse,
    responses={
        201: {
            "description": "One-time code emailed",
            "model": PasswordResetOTPCreateResponse,
        },
        **_TOKEN_ERRORS,
        502: {"description": "Email delivery failed", "model": ProblemDetails},
    },
    summary="Create password reset OTP",
    description="Generate a new one-time code for the reset and email it. "
    "Any previously issued code stops working.",
)
async def create_password_reset_otp(
    request: Request,
    data: PasswordResetOTPCreateRequest,
    handler: SendPasswordResetOTPHandler = Depends(
        get_send_password_reset_otp_handler
    ),
) -> PasswordResetOTPCreateResponse | JSONResponse:
    """Create password reset OTP (email a fresh code).

    POST /api/v1/password-reset-otps → 201 Created

    Args:
        request: FastAPI request object.
        data: OTP request (token).
        handler: Send password reset OTP handler (injected).

    Returns:
        PasswordResetOTPCreateResponse on success (201 Created).
        JSONResponse with problem details on failure (401/502).
    """
    result = await handler.handle(SendPasswordResetOTP(token=data.token))

    match result:
        case Success(value=_):
            return PasswordResetOTPCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@password_reset_otp_verifications_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetOTPVerificationCreateResponse,
    responses={
        200: {
            "description": "One-time code is valid",
            "model": PasswordResetOTPVerificationCreateResponse,
        },
        **_OTP_ERRORS,
    },
    summary="Create password reset OTP verification",
    description="Check a one-time code without consuming it.",
)
async def create_password_reset_otp_verification(
    request: Request,
    data: PasswordResetOTPVerificationCreateRequest,
    handler: VerifyPasswordResetOTPHandler = Depends(
        get_verify_password_reset_otp_handler
    ),
) -> PasswordResetOTPVerificationCreateResponse | JSONResponse:
    """Create password reset OTP verification (check code).

    POST /api/v1/password-reset-otp-verifications → 200 OK

    Args:
        request: FastAPI request object.
        data: Verification request (token, otp).
        handler: Verify password reset OTP handler (injected).

    Returns:
        PasswordResetOTPVerificationCreateResponse on success (200 OK).
        JSONResponse with problem details on failure (400/401).
    """
    result = await handler.handle(
        VerifyPasswordResetOTP(token=data.token, otp=data.otp)
    )

    match result:
        case Success(value=valid):
            return PasswordResetOTPVerificationCreateResponse(valid=valid)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )


@password_resets_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetCreateResponse,
    responses={
        201: {
            "description": "Password reset successfully",
            "model": PasswordResetCreateResponse,
        },
        **_OTP_ERRORS,
    },
    summary="Create password reset",
    description="Replace the password using the reset token and a valid one-time code. "
    "The code is consumed.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    """Create password reset (execute reset).

    POST /api/v1/password-resets → 201 Created

    Args:
        request: FastAPI request object.
        data: Reset request (token, otp, new_password).
        handler: Reset password handler (injected).

    Returns:
        PasswordResetCreateResponse on success (201 Created).
        JSONResponse with problem details on failure (400/401).
    """
    command = ResetPassword(
        token=data.token,
        otp=data.otp,
        new_password=data.new_password,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=_):
            return PasswordResetCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id(),
            )
