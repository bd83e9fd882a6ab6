"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, storage/cache doubles, row factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from budhhub.boundary.cache.redis_cache import RedisCache
from budhhub.boundary.storage.object_storage_client import ObjectStorageClient
from budhhub.core.roles import UserRole


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    import budhhub.boundary.db.models  # noqa: F401
    from budhhub.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def mock_storage():
    """
    Create mock ObjectStorageClient.

    Returns:
        MagicMock: Storage double with deterministic URLs
    """
    storage = MagicMock(spec=ObjectStorageClient)
    storage.upload_url_expiry = 600
    storage.delete_quietly.return_value = True
    storage.get_public_url.side_effect = lambda key: f"https://cdn.example.com/{key}"
    storage.get_access_url.side_effect = lambda key: f"https://signed.example.com/{key}"
    return storage


@pytest.fixture
def mock_cache():
    """
    Create mock RedisCache that always misses.

    Returns:
        AsyncMock: Cache double
    """
    cache = AsyncMock(spec=RedisCache)
    cache.get.return_value = None
    cache.set.return_value = True
    return cache


@pytest.fixture
def make_user(test_async_db):
    """Factory for persisted users."""
    from budhhub.boundary.db.CRUD.user_crud import user_crud

    counter = {"n": 0}

    async def _make_user(role: UserRole = UserRole.LEARNER, email: str | None = None, **fields):
        counter["n"] += 1
        user = await user_crud.create(
            test_async_db,
            email=email or f"user{counter['n']}@example.com",
            name=fields.pop("name", f"User {counter['n']}"),
            role=role,
            **fields,
        )
        await test_async_db.commit()
        return user

    return _make_user


@pytest.fixture
def make_course(test_async_db):
    """Factory for persisted courses."""
    from budhhub.boundary.db.CRUD.course_crud import course_crud

    async def _make_course(instructor, title: str = "Course", is_published: bool = False, **fields):
        course = await course_crud.create(
            test_async_db,
            instructor_id=instructor.id,
            title=title,
            is_published=is_published,
            price=fields.pop("price", Decimal("0")),
            total_lessons=fields.pop("total_lessons", 0),
            **fields,
        )
        await test_async_db.commit()
        return course

    return _make_course


@pytest.fixture
def make_module(test_async_db):
    """Factory for persisted modules."""
    from budhhub.boundary.db.CRUD.module_crud import module_crud

    async def _make_module(course, title: str = "Module", ord: int = 0):
        module = await module_crud.create(test_async_db, course_id=course.id, title=title, ord=ord)
        await test_async_db.commit()
        return module

    return _make_module


@pytest.fixture
def make_lesson(test_async_db):
    """Factory for persisted lessons; keeps the course's total_lessons in step."""
    from budhhub.boundary.db.CRUD.course_crud import course_crud
    from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud

    async def _make_lesson(module, title: str = "Lesson", ord: int = 0, **fields):
        lesson = await lesson_crud.create(
            test_async_db,
            module_id=module.id,
            title=title,
            ord=ord,
            **fields,
        )
        await course_crud.recount_lessons(test_async_db, module.course_id)
        await test_async_db.commit()
        return lesson

    return _make_lesson
