"""
Test suite for the seed script.

System role: Verification of idempotent account seeding
"""

import bcrypt
import pytest

from budhhub.core.roles import UserRole
from budhhub.scripts.seed import ensure_user


class TestEnsureUser:
    """Test suite for ensure_user()."""

    @pytest.mark.asyncio
    async def test_ensure_user_should_create_verified_account(self, test_async_db) -> None:
        user = await ensure_user(
            test_async_db, "admin@example.com", "Admin@1234", "Admin", UserRole.ADMIN
        )

        assert user.role == UserRole.ADMIN
        assert user.email_verified is not None
        assert bcrypt.checkpw(b"Admin@1234", user.password_hash.encode())

    @pytest.mark.asyncio
    async def test_ensure_user_should_skip_existing_email(self, test_async_db, make_user) -> None:
        await make_user(UserRole.LEARNER, email="admin@example.com")

        result = await ensure_user(
            test_async_db, "admin@example.com", "Admin@1234", "Admin", UserRole.ADMIN
        )

        assert result is None
