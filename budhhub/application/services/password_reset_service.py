"""
Password reset service orchestrator.

Issues single-use reset tokens kept in Redis, emails the reset link and
swaps in a new bcrypt hash when the token is redeemed.

Dependencies: budhhub.boundary.cache, budhhub.boundary.email, bcrypt
System role: Password reset use case orchestration
"""

import logging
import secrets
from datetime import datetime
from urllib.parse import quote, urlparse

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.cache.token_store import TokenStore
from budhhub.boundary.db.CRUD.user_crud import user_crud
from budhhub.boundary.email.smtp_mailer import SMTPMailer
from budhhub.boundary.email.templates import password_reset_email
from budhhub.core.exceptions import InvalidRequestError, NotFoundError
from budhhub.core.passwords import hash_password, password_strength_errors

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


class PasswordResetService:
    """Forgot-password and reset-password flows."""

    def __init__(
        self,
        db: AsyncSession,
        tokens: TokenStore,
        mailer: SMTPMailer,
        app_url: str,
        token_ttl: int = 3600,
    ) -> None:
        """
        Initialize password reset service.

        Args:
            db: Async SQLAlchemy session
            tokens: Reset token store
            mailer: Outgoing email sender
            app_url: Frontend base URL for the emailed link
            token_ttl: Token lifetime in seconds
        """
        self.db = db
        self.tokens = tokens
        self.mailer = mailer
        self.app_url = app_url.rstrip("/")
        self.token_ttl = token_ttl

    async def request_reset(self, email: str) -> datetime:
        """
        Issue a reset token and email the link.

        Returns:
            datetime: Token expiry

        Raises:
            NotFoundError: No account uses this email
            EmailDeliveryError: The email could not be sent
        """
        user = await user_crud.get_by_email(self.db, email)
        if user is None:
            raise NotFoundError("User", message="No account found with this email address.")

        token = secrets.token_hex(TOKEN_BYTES)
        expires = await self.tokens.save_reset_token(user.email, token, self.token_ttl)

        reset_url = f"{self.app_url}/auth/reset-password?token={quote(token)}"
        host = urlparse(self.app_url).netloc or self.app_url
        subject, html, text = password_reset_email(reset_url, host, user.email)
        await self.mailer.send(user.email, subject, html, text)

        logger.info("Password reset requested", extra={"user_id": str(user.id)})
        return expires

    async def validate_token(self, token: str | None) -> bool:
        """
        Raises:
            InvalidRequestError: Token missing, unknown or expired
        """
        if not token:
            raise InvalidRequestError("Token is required")
        if await self.tokens.get_reset_token(token) is None:
            raise InvalidRequestError("Invalid or expired token")
        return True

    async def reset_password(self, token: str, password: str) -> None:
        """
        Redeem a reset token.

        The token is deleted after a successful reset so it cannot be reused.

        Raises:
            InvalidRequestError: Weak password, or token unknown/expired
            NotFoundError: The account behind the token is gone
        """
        errors = password_strength_errors(password)
        if errors:
            raise InvalidRequestError("Password does not meet requirements", errors=errors)

        record = await self.tokens.get_reset_token(token)
        if record is None:
            raise InvalidRequestError("Invalid or expired token")

        user = await user_crud.get_by_email(self.db, record["email"])
        if user is None:
            await self.tokens.delete_reset_token(token)
            raise NotFoundError("User")

        await user_crud.update(self.db, user, password_hash=hash_password(password))
        await self.db.commit()
        await self.tokens.delete_reset_token(token)

        logger.info("Password reset completed", extra={"user_id": str(user.id)})
