"""
Development data seeding script.

Creates the admin and instructor accounts configured by SeedSettings.
Accounts that already exist are left untouched.

Dependencies: sqlalchemy, bcrypt, budhhub.configs
System role: Local environment bootstrap

Usage:
    python -m budhhub.scripts.seed
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.base import utcnow
from budhhub.boundary.db.connection import get_async_engine, get_async_session_factory
from budhhub.boundary.db.CRUD.user_crud import user_crud
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.configs import get_settings
from budhhub.core.passwords import hash_password
from budhhub.core.roles import UserRole
from budhhub.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def ensure_user(
    db: AsyncSession,
    email: str,
    password: str,
    name: str,
    role: UserRole,
) -> UserModel | None:
    """
    Create a verified account unless one already uses ``email``.

    Returns:
        UserModel | None: Created user, None if it already existed
    """
    if await user_crud.get_by_email(db, email) is not None:
        logger.info("Seed user already exists, skipping", extra={"email": email})
        return None

    user = await user_crud.create(
        db,
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=role,
        email_verified=utcnow(),
    )
    logger.info("Seed user created", extra={"email": email, "role": role.value})
    return user


async def seed() -> None:
    """Create the configured admin and instructor accounts."""
    seed_settings = get_settings().seed
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        await ensure_user(
            db,
            seed_settings.admin_email,
            seed_settings.admin_password,
            seed_settings.admin_name,
            UserRole.ADMIN,
        )
        await ensure_user(
            db,
            seed_settings.instructor_email,
            seed_settings.instructor_password,
            seed_settings.instructor_name,
            UserRole.INSTRUCTOR,
        )
        await db.commit()
    await get_async_engine().dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed())
