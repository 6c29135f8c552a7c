"""JWT reset token service (adapter).

This service implements the ResetTokenCodecProtocol using PyJWT with
HMAC-SHA256.

Architecture:
    - Implements ResetTokenCodecProtocol (no inheritance required)
    - Secret and clock injected at construction (no module globals)
    - PyJWT exceptions mapped to TOKEN_INVALID / TOKEN_EXPIRED

Claims:
    sub: user id (UUID string)
    email: user email at issue time
    iat: issued-at (epoch seconds, injected clock)
    exp: expiry (epoch seconds, injected clock)

No random claims (no jti): a fixed key and clock yield the same token.
Expiry is checked against the injected clock, not PyJWT's wall clock.
"""

import math
from datetime import timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ResetTokenError
from src.domain.protocols import ClockProtocol, ResetTokenPayload

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class JWTResetTokenService:
    """Password reset token signing and verification service.

    Usage:
        from src.core.container import get_reset_token_codec

        codec = get_reset_token_codec()
        token = codec.issue(ResetTokenPayload(user_id=uid, email=email),
                            timedelta(hours=1))
        result = codec.verify(token)
    """

    def __init__(
        self,
        secret_key: str,
        clock: ClockProtocol,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT reset token service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            clock: Time source for iat/exp.
            algorithm: HMAC algorithm (default: HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._clock = clock
        self._algorithm = algorithm

    def issue(self, payload: ResetTokenPayload, ttl: timedelta) -> str:
        """Sign a reset token.

        Args:
            payload: User id and email to encode.
            ttl: Lifetime from now.

        Returns:
            JWT string (header.payload.signature).
        """
        now = self._clock.now()
        expires_at = now + ttl

        claims = {
            "sub": str(payload.user_id),
            "email": payload.email,
            "iat": int(now.timestamp()),
            # Rounded up so the token never expires before now + ttl
            "exp": math.ceil(expires_at.timestamp()),
        }

        token: str = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        return token

    def verify(self, token: str) -> Result[ResetTokenPayload, ResetTokenError]:
        """Validate signature and expiry and decode the payload.

        Args:
            token: JWT string.

        Returns:
            Success(ResetTokenPayload) if signature valid and unexpired.
            Failure(ResetTokenError) with TOKEN_INVALID or TOKEN_EXPIRED.
        """
        try:
            claims: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": REQUIRED_CLAIMS,
                },
            )
        except InvalidTokenError:
            return self._invalid()

        exp = claims["exp"]
        email = claims["email"]
        if isinstance(exp, bool) or not isinstance(exp, int | float):
            return self._invalid()
        if not isinstance(email, str) or not email:
            return self._invalid()
        try:
            user_id = UUID(str(claims["sub"]))
        except ValueError:
            return self._invalid()

        if self._clock.now().timestamp() >= exp:
            return Failure(
                error=ResetTokenError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Password reset token has expired",
                )
            )

        return Success(value=ResetTokenPayload(user_id=user_id, email=email))

    @staticmethod
    def _invalid() -> Failure[ResetTokenError]:
        return Failure(
            error=ResetTokenError(
                code=ErrorCode.TOKEN_INVALID,
                message="Invalid password reset token",
            )
        )
