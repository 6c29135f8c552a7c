"""Error response builder for RFC 7807 Problem Details.

Turns the DomainError carried by a handler's Failure into a JSON response
with the HTTP status its error code maps to.

Status mapping:
    USER_NOT_FOUND                         -> 404
    TOKEN_INVALID, TOKEN_EXPIRED           -> 401
    OTP_NOT_GENERATED, OTP_EXPIRED,
    OTP_INVALID, PASSWORD_TOO_WEAK         -> 400
    NOTIFICATION_FAILED                    -> 502
    anything else                          -> 500

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.OTP_NOT_GENERATED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OTP_EXPIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OTP_INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_TOO_WEAK: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOTIFICATION_FAILED: status.HTTP_502_BAD_GATEWAY,
}

_TITLE_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.USER_NOT_FOUND: "User Not Found",
    ErrorCode.TOKEN_INVALID: "Invalid Reset Token",
    ErrorCode.TOKEN_EXPIRED: "Reset Token Expired",
    ErrorCode.OTP_NOT_GENERATED: "OTP Not Generated",
    ErrorCode.OTP_EXPIRED: "OTP Expired",
    ErrorCode.OTP_INVALID: "Invalid OTP",
    ErrorCode.PASSWORD_TOO_WEAK: "Validation Failed",
    ErrorCode.INVALID_EMAIL: "Validation Failed",
    ErrorCode.VALIDATION_FAILED: "Validation Failed",
    ErrorCode.NOTIFICATION_FAILED: "Email Delivery Failed",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = PasswordResetError(
        ...     code=ErrorCode.OTP_EXPIRED,
        ...     message="OTP has expired",
        ... )
        >>> response = ErrorResponseBuilder.from_domain_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
        >>> response.status_code
        400
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Error carried by the handler's Failure.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        # Field-specific errors for validation failures
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers={"X-Trace-Id": trace_id} if trace_id else None,
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.TOKEN_EXPIRED)
            401
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ErrorCode) -> str:
        """Get human-readable title for error code."""
        return _TITLE_BY_CODE.get(code, "Internal Server Error")
