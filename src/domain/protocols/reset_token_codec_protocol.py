"""Reset token codec protocol for domain layer.

The reset token is a stateless, signed credential. Possession of a validly
signed, unexpired token is the proof that the holder started a reset for
the encoded account; nothing is looked up in storage to trust it.

Architecture:
    - Domain defines protocol (port) and the decoded payload type
    - Infrastructure implements adapter (JWTResetTokenService)
    - Library exceptions never cross this boundary
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.errors import ResetTokenError


@dataclass(frozen=True, slots=True, kw_only=True)
class ResetTokenPayload:
    """Identity carried by a reset token.

    Attributes:
        user_id: Account the token was issued for.
        email: Account email at issue time.
    """

    user_id: UUID
    email: str


class ResetTokenCodecProtocol(Protocol):
    """Sign and verify password reset tokens.

    Implementations:
        - JWTResetTokenService: HS256 JWT (PyJWT)

    Usage:
        token = codec.issue(ResetTokenPayload(user_id=u.id, email=u.email),
                            timedelta(hours=1))
        match codec.verify(token):
            case Success(value=payload):
                ...
            case Failure(error=error):
                ...  # TOKEN_INVALID or TOKEN_EXPIRED
    """

    def issue(self, payload: ResetTokenPayload, ttl: timedelta) -> str:
        """Sign a token carrying ``payload`` that expires after ``ttl``.

        Deterministic for a fixed signing key and clock.

        Args:
            payload: Identity to encode.
            ttl: Lifetime from now.

        Returns:
            Signed token string.
        """
        ...

    def verify(self, token: str) -> Result[ResetTokenPayload, ResetTokenError]:
        """Check signature and expiry and decode the payload.

        Args:
            token: Opaque token string from the client.

        Returns:
            Success(ResetTokenPayload) if trusted.
            Failure(ResetTokenError) with TOKEN_INVALID (bad signature,
            malformed, missing claims) or TOKEN_EXPIRED (signature valid,
            ``now >= exp``).
        """
        ...
