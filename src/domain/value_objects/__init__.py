"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.one_time_code import OTP_LENGTH, OneTimeCode

__all__ = [
    "OTP_LENGTH",
    "OneTimeCode",
]
