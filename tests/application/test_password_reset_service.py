"""
Test suite for PasswordResetService.

System role: Verification of forgot/reset password flows
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import bcrypt
import pytest

from budhhub.application.services.password_reset_service import PasswordResetService
from budhhub.boundary.cache.token_store import TokenStore
from budhhub.boundary.db.CRUD.user_crud import user_crud
from budhhub.boundary.email.smtp_mailer import SMTPMailer
from budhhub.core.exceptions import InvalidRequestError, NotFoundError


@pytest.fixture
def mock_tokens():
    tokens = AsyncMock(spec=TokenStore)
    tokens.save_reset_token.return_value = datetime.now(timezone.utc) + timedelta(hours=1)
    tokens.get_reset_token.return_value = None
    return tokens


@pytest.fixture
def mock_mailer():
    return AsyncMock(spec=SMTPMailer)


@pytest.fixture
def reset_service(test_async_db, mock_tokens, mock_mailer) -> PasswordResetService:
    return PasswordResetService(
        db=test_async_db,
        tokens=mock_tokens,
        mailer=mock_mailer,
        app_url="https://budhhub.example/",
    )


class TestRequestReset:
    """Test suite for PasswordResetService.request_reset()."""

    @pytest.mark.asyncio
    async def test_request_reset_should_store_token_and_email_link(
        self, reset_service, make_user, mock_tokens, mock_mailer
    ) -> None:
        # Arrange
        await make_user(email="ada@example.com")

        # Act
        await reset_service.request_reset("ADA@example.com")

        # Assert
        email, token, ttl = mock_tokens.save_reset_token.await_args.args
        assert email == "ada@example.com"
        assert len(token) == 64
        assert ttl == 3600
        to, subject, html, text = mock_mailer.send.await_args.args
        assert to == "ada@example.com"
        assert f"https://budhhub.example/auth/reset-password?token={token}" in text

    @pytest.mark.asyncio
    async def test_request_reset_should_raise_for_unknown_email(
        self, reset_service, mock_mailer
    ) -> None:
        with pytest.raises(NotFoundError, match="No account found"):
            await reset_service.request_reset("ghost@example.com")
        mock_mailer.send.assert_not_awaited()


class TestValidateToken:
    """Test suite for PasswordResetService.validate_token()."""

    @pytest.mark.asyncio
    async def test_validate_token_should_require_token(self, reset_service) -> None:
        with pytest.raises(InvalidRequestError, match="Token is required"):
            await reset_service.validate_token(None)

    @pytest.mark.asyncio
    async def test_validate_token_should_reject_unknown_token(self, reset_service) -> None:
        with pytest.raises(InvalidRequestError, match="Invalid or expired token"):
            await reset_service.validate_token("deadbeef")

    @pytest.mark.asyncio
    async def test_validate_token_should_accept_live_token(
        self, reset_service, mock_tokens
    ) -> None:
        mock_tokens.get_reset_token.return_value = {"email": "a@example.com", "expires": None}

        assert await reset_service.validate_token("abc") is True


class TestResetPassword:
    """Test suite for PasswordResetService.reset_password()."""

    @pytest.mark.asyncio
    async def test_reset_password_should_hash_and_consume_token(
        self, reset_service, make_user, mock_tokens, test_async_db
    ) -> None:
        # Arrange
        user = await make_user(email="ada@example.com")
        mock_tokens.get_reset_token.return_value = {"email": "ada@example.com", "expires": None}

        # Act
        await reset_service.reset_password("abc", "Str0ngPass")

        # Assert
        stored = await user_crud.get_by_id(test_async_db, user.id)
        assert bcrypt.checkpw(b"Str0ngPass", stored.password_hash.encode())
        mock_tokens.delete_reset_token.assert_awaited_once_with("abc")

    @pytest.mark.asyncio
    async def test_reset_password_should_list_strength_errors(
        self, reset_service, mock_tokens
    ) -> None:
        with pytest.raises(InvalidRequestError) as exc_info:
            await reset_service.reset_password("abc", "short")

        assert exc_info.value.message == "Password does not meet requirements"
        assert "Password must be at least 8 characters long" in exc_info.value.errors
        assert "Password must contain at least one number" in exc_info.value.errors
        mock_tokens.get_reset_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reset_password_should_reject_expired_token(self, reset_service) -> None:
        with pytest.raises(InvalidRequestError, match="Invalid or expired token"):
            await reset_service.reset_password("abc", "Str0ngPass")
