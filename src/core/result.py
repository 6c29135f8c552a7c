"""Result types for railway-oriented programming.

Operations that can fail in an expected way (wrong OTP, expired token,
unknown email) return a Result instead of raising. Callers branch on the
variant, so every failure path is explicit and testable.

Usage:
    result = await handler.handle(VerifyPasswordResetOTP(token=token, otp="550000"))
    match result:
        case Success(value=valid):
            ...
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
