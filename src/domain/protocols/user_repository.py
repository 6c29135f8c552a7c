"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Only the reads and writes the password reset flow needs. Each write is a
    single UPDATE so per-row atomicity of the backing store is enough; no
    in-process locks are taken.

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email
        start_password_reset: Record issued token, clear one-time code
        save_reset_otp: Store a new one-time code (last write wins)
        complete_password_reset: Conditional password swap
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Email comparison is case-insensitive.

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def start_password_reset(self, user_id: UUID, reset_token: str) -> None:
        """Record the issued reset token and clear any pending one-time code.

        Args:
            user_id: User starting the reset.
            reset_token: Token just issued (traceability only).
        """
        ...

    async def save_reset_otp(
        self,
        user_id: UUID,
        otp_hash: str,
        expires_at: datetime,
    ) -> None:
        """Store a one-time code hash and expiry together.

        Unconditionally overwrites any previous code.

        Args:
            user_id: User receiving the code.
            otp_hash: Hash of the plaintext code.
            expires_at: When the code stops being accepted.
        """
        ...

    async def complete_password_reset(
        self,
        user_id: UUID,
        expected_otp_hash: str,
        new_password_hash: str,
    ) -> bool:
        """Swap the password and clear all reset state in one update.

        The update applies only where ``reset_otp_hash`` still equals
        ``expected_otp_hash``, so a code issued after validation is never
        cleared with stale expectations.

        Args:
            user_id: User resetting their password.
            expected_otp_hash: Hash observed when the code was validated.
            new_password_hash: Hash of the new password.

        Returns:
            True if the row was updated, False if the code changed meanwhile.
        """
        ...
