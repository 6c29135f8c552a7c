"""Password hashing protocol for domain layer.

This protocol defines the interface for hashing and verification of
secrets at rest. The same primitive hashes account passwords and emailed
one-time codes.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost (default 10)

    Usage:
        password_hash = self._password_service.hash_password("NewPass1!")
        is_valid = self._password_service.verify_password("550000", otp_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext secret.

        Args:
            password: Plaintext password or one-time code.

        Returns:
            Salted hash string (bcrypt format: $2b$10$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext secret against a hash.

        Args:
            password: Plaintext to verify.
            password_hash: Stored hash.

        Returns:
            True if plaintext matches hash, False otherwise.

        Note:
            - Constant-time comparison (prevents timing attacks)
            - Returns False for invalid hash format (no exceptions)
        """
        ...
