"""
Integration tests for catalog queries and lesson counting.

System role: Verification of CourseCRUD and EnrollmentCRUD queries
"""

import warnings

import pytest
from sqlalchemy.exc import SAWarning

from budhhub.boundary.db.CRUD.course_crud import course_crud
from budhhub.boundary.db.CRUD.enrollment_crud import enrollment_crud, lesson_progress_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.models.course_model import CourseDifficulty
from budhhub.core.roles import UserRole


class TestSearchPublished:
    """Test suite for CourseCRUD.search_published()."""

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_over_title_and_description(
        self, make_user, make_course, test_async_db
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        await make_course(instructor, title="Rust for Pythonistas", is_published=True)
        await make_course(instructor, title="Go", description="PYTHON interop", is_published=True)
        await make_course(instructor, title="Hidden python", is_published=False)
        await make_course(instructor, title="Baking", is_published=True)

        courses, total = await course_crud.search_published(
            test_async_db, search="python", sort="title"
        )

        assert total == 2
        assert [c.title for c in courses] == ["Go", "Rust for Pythonistas"]

    @pytest.mark.asyncio
    async def test_filters_by_difficulty(self, make_user, make_course, test_async_db) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        await make_course(
            instructor, title="Easy", difficulty=CourseDifficulty.BEGINNER, is_published=True
        )
        await make_course(
            instructor, title="Hard", difficulty=CourseDifficulty.ADVANCED, is_published=True
        )

        courses, total = await course_crud.search_published(
            test_async_db, difficulty=CourseDifficulty.ADVANCED
        )

        assert (total, [c.title for c in courses]) == (1, ["Hard"])


class TestPublishedFacets:
    """Test suite for CourseCRUD.get_published_facets()."""

    @pytest.mark.asyncio
    async def test_facets_are_distinct_and_warning_free(
        self, make_user, make_course, test_async_db
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        for title in ("A", "B"):
            await make_course(
                instructor,
                title=title,
                category="Code",
                difficulty=CourseDifficulty.BEGINNER,
                is_published=True,
            )
        await make_course(instructor, category="Art", difficulty=CourseDifficulty.ADVANCED)

        with warnings.catch_warnings():
            warnings.simplefilter("error", SAWarning)
            categories, difficulties = await course_crud.get_published_facets(test_async_db)

        assert categories == ["Code"]
        assert difficulties == ["Beginner"]


class TestRecountLessons:
    """Test suite for CourseCRUD.recount_lessons()."""

    @pytest.mark.asyncio
    async def test_recount_counts_lessons_across_modules(
        self, make_user, make_course, make_module, make_lesson, test_async_db
    ) -> None:
        # Arrange
        instructor = await make_user(UserRole.INSTRUCTOR)
        course = await make_course(instructor)
        first = await make_module(course)
        second = await make_module(course, ord=1)
        await make_lesson(first)
        await make_lesson(second)
        doomed = await make_lesson(second, ord=1)

        # Act
        await lesson_crud.delete_by_ids(test_async_db, [doomed.id])
        await course_crud.recount_lessons(test_async_db, course.id)
        await test_async_db.commit()

        # Assert
        await test_async_db.refresh(course)
        assert course.total_lessons == 2
        assert await lesson_crud.count_by_course(test_async_db, course.id) == 2


class TestLessonProgress:
    """Test suite for LessonProgressCRUD."""

    @pytest.mark.asyncio
    async def test_mark_completed_creates_row_when_missing(
        self, make_user, make_course, make_module, make_lesson, test_async_db
    ) -> None:
        instructor = await make_user(UserRole.INSTRUCTOR)
        learner = await make_user()
        course = await make_course(instructor, is_published=True)
        lesson = await make_lesson(await make_module(course))
        enrollment = await enrollment_crud.create(
            test_async_db, course_id=course.id, learner_id=learner.id
        )

        await lesson_progress_crud.mark_completed(test_async_db, enrollment.id, lesson.id)

        assert await lesson_progress_crud.completed_count(test_async_db, enrollment.id) == 1
        assert await lesson_progress_crud.completed_lesson_ids(test_async_db, enrollment.id) == {
            lesson.id
        }
