"""
Password reset token storage.

Tokens live in Redis under ``password_reset:{token}`` with a TTL equal to
their lifetime, so expiry is enforced by Redis itself.

Dependencies: redis
System role: Single-use reset token persistence
"""

import json
import logging
from datetime import datetime, timedelta, timezone

from redis.asyncio import Redis

logger = logging.getLogger(__name__)

RESET_TOKEN_PREFIX = "password_reset"


def reset_token_key(token: str) -> str:
    return f"{RESET_TOKEN_PREFIX}:{token}"


class TokenStore:
    """Redis-backed store for password reset tokens."""

    def __init__(self, client: Redis | None) -> None:
        self._client = client

    async def save_reset_token(self, email: str, token: str, ttl_seconds: int) -> datetime:
        """
        Store a reset token for ``email``.

        Args:
            email: Account email the token resets
            token: Random hex token
            ttl_seconds: Token lifetime

        Returns:
            datetime: Expiry time (UTC)
        """
        expires = datetime.now(timezone.utc) + timedelta(seconds=ttl_seconds)
        if self._client is None:
            logger.warning("Redis not configured; reset token was not stored")
            return expires
        payload = json.dumps({"email": email, "expires": expires.isoformat()})
        await self._client.set(reset_token_key(token), payload, ex=ttl_seconds)
        return expires

    async def get_reset_token(self, token: str) -> dict | None:
        """
        Look up a reset token.

        Returns:
            dict | None: {"email", "expires"} if the token is live, else None
        """
        if self._client is None:
            return None
        raw = await self._client.get(reset_token_key(token))
        if raw is None:
            return None
        data = json.loads(raw)
        expires = datetime.fromisoformat(data["expires"])
        if expires <= datetime.now(timezone.utc):
            await self.delete_reset_token(token)
            return None
        return {"email": data["email"], "expires": expires}

    async def delete_reset_token(self, token: str) -> None:
        if self._client is None:
            return
        await self._client.delete(reset_token_key(token))
