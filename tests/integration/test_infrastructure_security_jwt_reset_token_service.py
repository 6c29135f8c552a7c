"""Integration tests for JWTResetTokenService (real PyJWT).

Tests cover:
- Round trip returns the same {id, email}
- Expiry reported as TOKEN_EXPIRED, never TOKEN_INVALID
- Tampered, foreign-key and malformed tokens are TOKEN_INVALID
- Determinism for a fixed key and clock
"""

from datetime import timedelta

import jwt
import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.protocols import ResetTokenPayload
from src.infrastructure.security.jwt_reset_token_service import JWTResetTokenService
from tests.utils.fakes import FIXED_NOW, TEST_SECRET_KEY, FixedClock

ONE_HOUR = timedelta(hours=1)


def _payload():
    return ResetTokenPayload(user_id=uuid7(), email="user@example.com")


@pytest.mark.integration
class TestTokenRoundTrip:
    """Test issue/verify round trip."""

    def test_verify_returns_issued_payload(self, clock):
        """Test verify(issue(p, 1h)) == p on the same clock."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        payload = _payload()

        result = codec.verify(codec.issue(payload, ONE_HOUR))

        assert result == Success(value=payload)

    def test_token_claims(self, clock):
        """Test token carries sub, email, iat and exp."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        payload = _payload()

        token = codec.issue(payload, ONE_HOUR)
        claims = jwt.decode(token, options={"verify_signature": False})

        assert claims == {
            "sub": str(payload.user_id),
            "email": "user@example.com",
            "iat": int(FIXED_NOW.timestamp()),
            "exp": int((FIXED_NOW + ONE_HOUR).timestamp()),
        }

    def test_same_input_same_token(self, clock):
        """Test fixed key and clock give identical tokens."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        payload = _payload()

        assert codec.issue(payload, ONE_HOUR) == codec.issue(payload, ONE_HOUR)


@pytest.mark.integration
class TestTokenExpiry:
    """Test expiry against the injected clock."""

    def test_valid_just_before_expiry(self, clock):
        """Test token still verifies one second before exp."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = codec.issue(_payload(), ONE_HOUR)

        clock.advance(ONE_HOUR - timedelta(seconds=1))

        assert isinstance(codec.verify(token), Success)

    def test_sub_second_issue_time_lives_full_ttl(self):
        """Test a token issued mid-second is still valid exactly one hour later."""
        clock = FixedClock(FIXED_NOW + timedelta(milliseconds=400))
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = codec.issue(_payload(), ONE_HOUR)

        claims = jwt.decode(token, options={"verify_signature": False})
        clock.advance(ONE_HOUR)

        assert claims["exp"] == int(FIXED_NOW.timestamp()) + 3601
        assert isinstance(codec.verify(token), Success)

    @pytest.mark.parametrize("elapsed", [ONE_HOUR, ONE_HOUR + timedelta(seconds=1)])
    def test_expired(self, clock, elapsed):
        """Test TOKEN_EXPIRED at and after exp."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = codec.issue(_payload(), ONE_HOUR)

        clock.advance(elapsed)
        result = codec.verify(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED


@pytest.mark.integration
class TestTokenTampering:
    """Test invalid tokens."""

    def test_tampered_signature(self, clock):
        """Test flipping the signature invalidates the token."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        header, body, signature = codec.issue(_payload(), ONE_HOUR).split(".")
        tampered = f"{header}.{body}.{signature[::-1]}"

        result = codec.verify(tampered)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_foreign_key(self, clock):
        """Test a token signed with another key is TOKEN_INVALID."""
        issuer = JWTResetTokenService(secret_key="another-secret-key-" + "y" * 32, clock=clock)
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)

        result = codec.verify(issuer.issue(_payload(), ONE_HOUR))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_expired_foreign_token_is_invalid_not_expired(self, clock):
        """Test signature failure wins over expiry."""
        issuer = JWTResetTokenService(secret_key="another-secret-key-" + "y" * 32, clock=clock)
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = issuer.issue(_payload(), ONE_HOUR)

        clock.advance(timedelta(hours=2))
        result = codec.verify(token)

        assert result.error.code == ErrorCode.TOKEN_INVALID

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed(self, clock, token):
        """Test non-JWT input is TOKEN_INVALID."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)

        result = codec.verify(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_missing_email_claim(self, clock):
        """Test a correctly signed token without email is TOKEN_INVALID."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = jwt.encode(
            {
                "sub": str(uuid7()),
                "iat": int(FIXED_NOW.timestamp()),
                "exp": int((FIXED_NOW + ONE_HOUR).timestamp()),
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        result = codec.verify(token)

        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_non_uuid_subject(self, clock):
        """Test a subject that is not a UUID is TOKEN_INVALID."""
        codec = JWTResetTokenService(secret_key=TEST_SECRET_KEY, clock=clock)
        token = jwt.encode(
            {
                "sub": "5",
                "email": "user@example.com",
                "iat": int(FIXED_NOW.timestamp()),
                "exp": int((FIXED_NOW + ONE_HOUR).timestamp()),
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        result = codec.verify(token)

        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_short_secret_rejected(self, clock):
        """Test secrets under 32 bytes are refused at construction."""
        with pytest.raises(ValueError, match="32 bytes"):
            JWTResetTokenService(secret_key="short", clock=clock)
