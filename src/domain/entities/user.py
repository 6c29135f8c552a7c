"""User domain entity for password reset.

Pure business logic, no framework dependencies.

Reset State:
    - reset_token: Last issued reset token (traceability only; the
      signature is authoritative)
    - reset_otp_hash / reset_otp_expires_at: Pending one-time code. Both
      null or both set; never one without the other.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User domain entity with password reset business rules.

    Business Rules:
        - A one-time code is pending only when hash AND expiry are set
        - A code is usable strictly before its expiry (now < expires_at)
        - Issuing a new code overwrites any previous one
        - Completing a reset clears token and code state together

    Attributes:
        id: Unique user identifier
        email: User email address (unique, lowercase)
        password_hash: Bcrypt hashed password (never plaintext)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
        reset_token: Last issued reset token, if any
        reset_otp_hash: Bcrypt hash of the pending one-time code
        reset_otp_expires_at: Expiry of the pending one-time code (UTC)

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     password_hash="$2b$10$...",
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.has_pending_otp()
        False
    """

    id: UUID
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    # Password reset state
    reset_token: str | None = None
    reset_otp_hash: str | None = None
    reset_otp_expires_at: datetime | None = None

    def has_pending_otp(self) -> bool:
        """Check whether a one-time code has been issued and not consumed.

        Returns:
            bool: True if both hash and expiry are recorded.
        """
        return self.reset_otp_hash is not None and self.reset_otp_expires_at is not None

    def is_otp_expired(self, now: datetime) -> bool:
        """Check whether the pending one-time code has expired.

        Args:
            now: Current time from the injected clock.

        Returns:
            bool: True if ``now >= reset_otp_expires_at``. A missing expiry
            counts as expired.
        """
        if self.reset_otp_expires_at is None:
            return True
        return now >= self.reset_otp_expires_at
