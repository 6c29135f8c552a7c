"""Common error classes used across layers.

Error Types:
- ValidationError: Input validation failures (e.g. password policy)
- NotFoundError: Resource not found (e.g. no user for an email)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORD_TOO_WEAK,
        message="Password must contain digit",
        field="new_password",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (User, ...).
        resource_id: Identifier that was looked up (id or email).
        details: Additional context.
    """

    resource_type: str
    resource_id: str
