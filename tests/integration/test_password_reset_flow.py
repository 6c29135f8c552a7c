"""End-to-end password reset flow through the real handlers.

Real bcrypt, PyJWT and SQLite; only time, randomness and the email
transport are pinned. The midpoint random source always draws "550000".

Tests cover:
- Full happy path: token -> code -> verify -> reset -> login with new password
- Wrong code, expired code, replaced code
- Expired token wins over every code check
- Consumed code cannot be reused
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from src.application.commands.handlers.initiate_password_reset_handler import (
    InitiatePasswordResetHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.send_password_reset_otp_handler import (
    SendPasswordResetOTPHandler,
)
from src.application.commands.handlers.verify_password_reset_otp_handler import (
    VerifyPasswordResetOTPHandler,
)
from src.application.commands.password_reset_commands import (
    InitiatePasswordReset,
    ResetPassword,
    SendPasswordResetOTP,
    VerifyPasswordResetOTP,
)
from src.application.services.password_reset_verifier import PasswordResetVerifier
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.email.stub_email_service import StubEmailService
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.persistence.repositories import UserRepository
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_reset_token_service import JWTResetTokenService
from tests.utils.fakes import FIXED_NOW, TEST_SECRET_KEY, make_user

MIDPOINT_CODE = "550000"
OLD_PASSWORD = "OldPass1!"
NEW_PASSWORD = "NewPass1!"


class ResetFlow:
    """The four handlers wired to one repository, clock and mailbox."""

    def __init__(self, session, clock, random_source=lambda: 0.5):
        self.clock = clock
        self.user_repo = UserRepository(session=session)
        self.password_service = BcryptPasswordService(cost_factor=10)
        self.email_service = StubEmailService(logger=Mock())
        event_bus = InMemoryEventBus(logger=Mock())
        verifier = PasswordResetVerifier(
            user_repo=self.user_repo,
            token_codec=JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock),
            password_service=self.password_service,
            clock=clock,
        )

        self.initiate = InitiatePasswordResetHandler(
            user_repo=self.user_repo,
            token_codec=JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock),
            clock=clock,
            event_bus=event_bus,
        )
        self.send_otp = SendPasswordResetOTPHandler(
            verifier=verifier,
            user_repo=self.user_repo,
            password_service=self.password_service,
            email_service=self.email_service,
            clock=clock,
            event_bus=event_bus,
            random_source=random_source,
        )
        self.verify_otp = VerifyPasswordResetOTPHandler(
            verifier=verifier,
            clock=clock,
            event_bus=event_bus,
        )
        self.reset = ResetPasswordHandler(
            verifier=verifier,
            user_repo=self.user_repo,
            password_service=self.password_service,
            clock=clock,
            event_bus=event_bus,
        )

    async def create_user(self, email="user@example.com"):
        user = make_user(
            email=email,
            password_hash=self.password_service.hash_password(OLD_PASSWORD),
        )
        await self.user_repo.save(user)
        return user

    async def start(self, email="user@example.com") -> str:
        result = await self.initiate.handle(InitiatePasswordReset(email=email))
        assert isinstance(result, Success)
        return result.value

    async def start_with_code(self, email="user@example.com") -> str:
        token = await self.start(email)
        result = await self.send_otp.handle(SendPasswordResetOTP(token=token))
        assert isinstance(result, Success)
        return token


@pytest.mark.integration
class TestHappyPath:
    """Test a complete reset."""

    async def test_full_reset(self, database, clock):
        """Test initiate, send, verify, reset then old password stops working."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            user = await flow.create_user()

            token = await flow.start()
            send_result = await flow.send_otp.handle(SendPasswordResetOTP(token=token))
            stored = await flow.user_repo.find_by_id(user.id)

            verify_result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )
            reset_result = await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password=NEW_PASSWORD)
            )
            final = await flow.user_repo.find_by_id(user.id)

        assert send_result == Success(value=None)
        assert stored.reset_token == token
        assert stored.reset_otp_expires_at == FIXED_NOW + timedelta(minutes=15)
        assert stored.reset_otp_hash != MIDPOINT_CODE
        assert flow.password_service.verify_password(
            MIDPOINT_CODE, stored.reset_otp_hash
        )

        to_email, _, body = flow.email_service.sent[0]
        assert to_email == "user@example.com"
        assert MIDPOINT_CODE in body

        assert verify_result == Success(value=True)
        assert reset_result == Success(value=None)
        assert flow.password_service.verify_password(NEW_PASSWORD, final.password_hash)
        assert not flow.password_service.verify_password(
            OLD_PASSWORD, final.password_hash
        )
        assert final.reset_token is None
        assert final.reset_otp_hash is None
        assert final.reset_otp_expires_at is None

    async def test_verify_does_not_consume_code(self, database, clock):
        """Test repeated verification keeps the code usable."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            first = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )
            second = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )

        assert first == second == Success(value=True)

    async def test_email_lookup_ignores_case(self, database, clock):
        """Test initiate finds the account regardless of email case."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user(email="user@example.com")

            result = await flow.initiate.handle(
                InitiatePasswordReset(email="USER@EXAMPLE.COM")
            )

        assert isinstance(result, Success)


@pytest.mark.integration
class TestCodeFailures:
    """Test code rejections through the real stack."""

    async def test_unknown_email(self, database, clock):
        """Test USER_NOT_FOUND for an email with no account."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)

            result = await flow.initiate.handle(
                InitiatePasswordReset(email="nobody@example.com")
            )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND

    async def test_wrong_code(self, database, clock):
        """Test wrong code is OTP_INVALID and leaves the password alone."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            user = await flow.create_user()
            token = await flow.start_with_code()

            verify_result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp="000000")
            )
            reset_result = await flow.reset.handle(
                ResetPassword(token=token, otp="000000", new_password=NEW_PASSWORD)
            )
            final = await flow.user_repo.find_by_id(user.id)

        assert verify_result.error.code == ErrorCode.OTP_INVALID
        assert reset_result.error.code == ErrorCode.OTP_INVALID
        assert flow.password_service.verify_password(OLD_PASSWORD, final.password_hash)
        assert final.reset_otp_hash is not None

    async def test_code_before_sending(self, database, clock):
        """Test OTP_NOT_GENERATED when no code was issued."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start()

            result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )

        assert result.error.code == ErrorCode.OTP_NOT_GENERATED

    async def test_expired_code(self, database, clock):
        """Test OTP_EXPIRED once the 15 minute window passes."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            clock.advance(timedelta(minutes=15, seconds=1))
            result = await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password=NEW_PASSWORD)
            )

        assert result.error.code == ErrorCode.OTP_EXPIRED

    async def test_expired_code_reported_even_when_wrong(self, database, clock):
        """Test expiry is reported before the code is compared."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            clock.advance(timedelta(minutes=20))
            result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp="000000")
            )

        assert result.error.code == ErrorCode.OTP_EXPIRED

    async def test_weak_password_keeps_code(self, database, clock):
        """Test PASSWORD_TOO_WEAK does not consume the code."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            weak = await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password="weak")
            )
            strong = await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password=NEW_PASSWORD)
            )

        assert weak.error.code == ErrorCode.PASSWORD_TOO_WEAK
        assert strong == Success(value=None)


@pytest.mark.integration
class TestTokenPrecedence:
    """Test token failures win over code checks."""

    async def test_expired_token_wins(self, database, clock):
        """Test TOKEN_EXPIRED even with an expired, wrong code."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            clock.advance(timedelta(hours=1))
            verify_result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp="000000")
            )
            send_result = await flow.send_otp.handle(SendPasswordResetOTP(token=token))

        assert verify_result.error.code == ErrorCode.TOKEN_EXPIRED
        assert send_result.error.code == ErrorCode.TOKEN_EXPIRED
        assert len(flow.email_service.sent) == 1

    async def test_tampered_token(self, database, clock):
        """Test TOKEN_INVALID for a modified token."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()

            result = await flow.reset.handle(
                ResetPassword(
                    token=token[:-2] + ("AA" if token[-2:] != "AA" else "BB"),
                    otp=MIDPOINT_CODE,
                    new_password=NEW_PASSWORD,
                )
            )

        assert result.error.code == ErrorCode.TOKEN_INVALID


@pytest.mark.integration
class TestCodeReplacement:
    """Test a new code invalidates the previous one."""

    async def test_resend_replaces_code(self, database, clock):
        """Test the first code stops working after a resend."""
        draws = iter([0.5, 0.25])
        async with database.get_session() as session:
            flow = ResetFlow(session, clock, random_source=lambda: next(draws))
            await flow.create_user()
            token = await flow.start_with_code()
            await flow.send_otp.handle(SendPasswordResetOTP(token=token))

            old_code = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )
            new_code = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp="325000")
            )

        assert "325000" in flow.email_service.sent[1][2]
        assert old_code.error.code == ErrorCode.OTP_INVALID
        assert new_code == Success(value=True)

    async def test_new_token_clears_code(self, database, clock):
        """Test initiating again drops the pending code."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            await flow.start_with_code()
            clock.advance(timedelta(seconds=1))
            second_token = await flow.start()

            result = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=second_token, otp=MIDPOINT_CODE)
            )

        assert result.error.code == ErrorCode.OTP_NOT_GENERATED


@pytest.mark.integration
class TestCodeConsumption:
    """Test a code is single use."""

    async def test_code_consumed_by_reset(self, database, clock):
        """Test OTP_NOT_GENERATED after a successful reset."""
        async with database.get_session() as session:
            flow = ResetFlow(session, clock)
            await flow.create_user()
            token = await flow.start_with_code()
            await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password=NEW_PASSWORD)
            )

            verify_again = await flow.verify_otp.handle(
                VerifyPasswordResetOTP(token=token, otp=MIDPOINT_CODE)
            )
            reset_again = await flow.reset.handle(
                ResetPassword(token=token, otp=MIDPOINT_CODE, new_password="Another1!")
            )

        assert verify_again.error.code == ErrorCode.OTP_NOT_GENERATED
        assert reset_again.error.code == ErrorCode.OTP_NOT_GENERATED
