"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt. The same
instance hashes account passwords and emailed one-time codes.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Bcrypt with cost factor 10 by default (~60ms per hash)
    - Random salt per hash
    - Constant-time comparison on verify

Performance:
    Cost factor is logarithmic: each +1 doubles computation time.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("NewPass1!")
        is_valid = password_service.verify_password("NewPass1!", password_hash)
    """

    def __init__(self, cost_factor: int = 10) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 10).

        Raises:
            ValueError: If cost factor is below 10 or above 20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext secret using bcrypt.

        Args:
            password: Plaintext password or one-time code.

        Returns:
            Hashed string (bcrypt format: $2b$10$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService()
            >>> service.hash_password("550000") != service.hash_password("550000")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(self._encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext secret against a bcrypt hash.

        Args:
            password: Plaintext to verify.
            password_hash: Stored hash.

        Returns:
            True if plaintext matches hash, False otherwise.

        Raises:
            ValueError: If the stored hash is not a bcrypt hash.
        """
        # bcrypt.checkpw does constant-time comparison
        return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
