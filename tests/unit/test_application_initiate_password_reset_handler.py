"""Unit tests for InitiatePasswordResetHandler.

Tests cover:
- Token issued for the looked-up user with the configured lifetime
- Token recorded and pending code cleared in one repository call
- Unknown email returns USER_NOT_FOUND
- Event publishing (Initiated, Failed)
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.handlers.initiate_password_reset_handler import (
    InitiatePasswordResetHandler,
)
from src.application.commands.password_reset_commands import InitiatePasswordReset
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.events.password_reset_events import (
    PasswordResetFailed,
    PasswordResetInitiated,
)
from src.domain.protocols import ResetTokenPayload
from tests.utils.fakes import FIXED_NOW, FixedClock, make_user


def _build_handler(user=None):
    user_repo = AsyncMock()
    user_repo.find_by_email.return_value = user

    token_codec = Mock()
    token_codec.issue.return_value = "signed.reset.token"

    event_bus = AsyncMock()

    handler = InitiatePasswordResetHandler(
        user_repo=user_repo,
        token_codec=token_codec,
        clock=FixedClock(),
        event_bus=event_bus,
    )
    return handler, user_repo, token_codec, event_bus


@pytest.mark.unit
class TestInitiatePasswordResetSuccess:
    """Test successful reset initiation."""

    @pytest.mark.asyncio
    async def test_returns_signed_token(self):
        """Test Success carries the issued token."""
        handler, _, _, _ = _build_handler(user=make_user())

        result = await handler.handle(InitiatePasswordReset(email="user@example.com"))

        assert result == Success(value="signed.reset.token")

    @pytest.mark.asyncio
    async def test_issues_token_for_user_identity(self):
        """Test token payload is {id, email} with a one hour lifetime."""
        user = make_user()
        handler, _, token_codec, _ = _build_handler(user=user)

        await handler.handle(InitiatePasswordReset(email="user@example.com"))

        token_codec.issue.assert_called_once_with(
            ResetTokenPayload(user_id=user.id, email="user@example.com"),
            timedelta(hours=1),
        )

    @pytest.mark.asyncio
    async def test_records_token_and_clears_code(self):
        """Test single repository write for the new reset."""
        user = make_user()
        handler, user_repo, _, _ = _build_handler(user=user)

        await handler.handle(InitiatePasswordReset(email="user@example.com"))

        user_repo.start_password_reset.assert_called_once_with(
            user.id, "signed.reset.token"
        )

    @pytest.mark.asyncio
    async def test_publishes_initiated_event(self):
        """Test PasswordResetInitiated is published with clock time."""
        user = make_user()
        handler, _, _, event_bus = _build_handler(user=user)

        await handler.handle(InitiatePasswordReset(email="user@example.com"))

        event_bus.publish.assert_called_once()
        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, PasswordResetInitiated)
        assert event.user_id == user.id
        assert event.email == "user@example.com"
        assert event.occurred_at == FIXED_NOW


@pytest.mark.unit
class TestInitiatePasswordResetFailure:
    """Test reset initiation for unknown emails."""

    @pytest.mark.asyncio
    async def test_unknown_email_returns_user_not_found(self):
        """Test USER_NOT_FOUND is returned, nothing written."""
        handler, user_repo, token_codec, _ = _build_handler(user=None)

        result = await handler.handle(InitiatePasswordReset(email="ghost@example.com"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        assert result.error.resource_type == "User"
        assert result.error.resource_id == "ghost@example.com"
        token_codec.issue.assert_not_called()
        user_repo.start_password_reset.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_email_publishes_failed_event(self):
        """Test PasswordResetFailed carries stage and reason."""
        handler, _, _, event_bus = _build_handler(user=None)

        await handler.handle(InitiatePasswordReset(email="ghost@example.com"))

        event = event_bus.publish.call_args[0][0]
        assert isinstance(event, PasswordResetFailed)
        assert event.stage == "initiate"
        assert event.reason == "user_not_found"
        assert event.user_id is None
