"""One-time code value object.

Six-digit numeric code emailed to the user during a password reset. Only
its hash is ever stored.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

OTP_LENGTH = 6
_LOWEST = 100_000
_SPAN = 900_000


@dataclass(frozen=True)
class OneTimeCode:
    """Six-digit numeric one-time code.

    Attributes:
        value: Zero-padded string of exactly 6 digits.

    Raises:
        ValueError: If value is not 6 ASCII digits.

    Example:
        >>> OneTimeCode.generate(lambda: 0.5)
        OneTimeCode('550000')
    """

    value: str

    def __post_init__(self) -> None:
        """Validate code shape.

        Raises:
            ValueError: If value is not exactly 6 ASCII digits.
        """
        if len(self.value) != OTP_LENGTH or not self.value.isascii() or not self.value.isdigit():
            raise ValueError(f"One-time code must be {OTP_LENGTH} digits")

    @classmethod
    def generate(cls, random_source: Callable[[], float]) -> "OneTimeCode":
        """Draw a uniform code in [100000, 999999].

        Args:
            random_source: Callable returning a float in [0, 1).

        Returns:
            OneTimeCode: Freshly drawn code.
        """
        r = random_source()
        number = math.floor(_LOWEST + r * _SPAN)
        return cls(str(number).zfill(OTP_LENGTH))

    def __str__(self) -> str:
        """Return the plaintext code."""
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"OneTimeCode('{self.value}')"
