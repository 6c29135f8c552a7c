"""Password reset verification service.

Centralizes the checks shared by the OTP-sending, OTP-verifying and
password-resetting handlers so the error ordering lives in one place.

Verification chain (each step short-circuits):
    1. Token signature/claims  -> TOKEN_INVALID
    2. Token expiry            -> TOKEN_EXPIRED
    3. Token owner exists      -> TOKEN_INVALID
    4. Code issued             -> OTP_NOT_GENERATED
    5. Code expiry             -> OTP_EXPIRED (before any hash comparison)
    6. Code matches hash       -> OTP_INVALID

Usage:
    verifier = PasswordResetVerifier(user_repo, token_codec, password_service, clock)

    user_result = await verifier.resolve_user(token)
    otp_result = verifier.check_otp(user, otp)
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import PasswordResetError, ResetTokenError
from src.domain.protocols import (
    ClockProtocol,
    PasswordHashingProtocol,
    ResetTokenCodecProtocol,
    UserRepository,
)


class PasswordResetVerifier:
    """Resolve reset tokens to users and check pending one-time codes.

    Dependencies (injected via constructor):
        - UserRepository: For token owner lookup
        - ResetTokenCodecProtocol: For token signature and expiry
        - PasswordHashingProtocol: For constant-time code comparison
        - ClockProtocol: For code expiry
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_codec: ResetTokenCodecProtocol,
        password_service: PasswordHashingProtocol,
        clock: ClockProtocol,
    ) -> None:
        """Initialize verifier with dependencies.

        Args:
            user_repo: User repository for owner lookup.
            token_codec: Reset token codec.
            password_service: Hasher used for the one-time code.
            clock: Time source for expiry checks.
        """
        self._user_repo = user_repo
        self._token_codec = token_codec
        self._password_service = password_service
        self._clock = clock

    async def resolve_user(self, token: str) -> Result[User, ResetTokenError]:
        """Decode token and load the user it was issued for.

        A missing user is reported as an invalid token rather than a
        distinct error so callers cannot probe which accounts exist.

        Args:
            token: Reset token from the client.

        Returns:
            Success(User): Token trusted and owner exists.
            Failure(ResetTokenError): TOKEN_INVALID or TOKEN_EXPIRED.
        """
        verify_result = self._token_codec.verify(token)
        if isinstance(verify_result, Failure):
            return Failure(error=verify_result.error)

        user = await self._user_repo.find_by_id(verify_result.value.user_id)
        if user is None:
            return Failure(
                error=ResetTokenError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid password reset token",
                )
            )

        return Success(value=user)

    def check_otp(self, user: User, otp: str) -> Result[str, PasswordResetError]:
        """Check a one-time code against the user's pending code.

        Args:
            user: Token owner, freshly loaded.
            otp: Plaintext code supplied by the client.

        Returns:
            Success(str): The stored code hash that matched, for use as the
                expected value of a conditional update.
            Failure(PasswordResetError): OTP_NOT_GENERATED, OTP_EXPIRED or
                OTP_INVALID.
        """
        otp_hash = user.reset_otp_hash
        if otp_hash is None or not user.has_pending_otp():
            return Failure(
                error=PasswordResetError(
                    code=ErrorCode.OTP_NOT_GENERATED,
                    message="No OTP has been generated for this reset",
                )
            )

        # Expired codes are never compared
        if user.is_otp_expired(self._clock.now()):
            return Failure(
                error=PasswordResetError(
                    code=ErrorCode.OTP_EXPIRED,
                    message="OTP has expired",
                )
            )

        if not self._password_service.verify_password(otp, otp_hash):
            return Failure(
                error=PasswordResetError(
                    code=ErrorCode.OTP_INVALID,
                    message="Invalid OTP",
                )
            )

        return Success(value=otp_hash)
