"""Security adapters (hashing, reset tokens)."""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_reset_token_service import JWTResetTokenService

__all__ = [
    "BcryptPasswordService",
    "JWTResetTokenService",
]
