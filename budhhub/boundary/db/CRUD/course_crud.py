"""
Course CRUD operations.

Provides course persistence plus the catalog queries: filtered/paginated
listing of published courses, facet extraction, and the lesson recount
that keeps ``total_lessons`` in sync.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.course_model import CourseModel
from budhhub.boundary.db.models.lesson_model import LessonModel
from budhhub.boundary.db.models.module_model import ModuleModel

CATALOG_SORTS = {
    "newest": (CourseModel.created_at.desc(), CourseModel.id),
    "oldest": (CourseModel.created_at.asc(), CourseModel.id),
    "title": (CourseModel.title.asc(), CourseModel.id),
}


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with instructor listings and published catalog queries.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def list_by_instructor(
        self,
        session: AsyncSession,
        instructor_id: UUID,
    ) -> Sequence[CourseModel]:
        """
        Retrieve all courses owned by an instructor, newest first.

        Args:
            session: Async database session
            instructor_id: Owning user UUID

        Returns:
            Sequence of CourseModel instances
        """
        stmt = (
            select(CourseModel)
            .where(CourseModel.instructor_id == instructor_id)
            .order_by(CourseModel.created_at.desc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search_published(
        self,
        session: AsyncSession,
        *,
        category: str | None = None,
        difficulty: str | None = None,
        search: str | None = None,
        sort: str = "newest",
        limit: int = 12,
        offset: int = 0,
    ) -> tuple[Sequence[CourseModel], int]:
        """
        Page through published courses matching the catalog filters.

        Args:
            session: Async database session
            category: Exact category match
            difficulty: Exact difficulty match
            search: Case-insensitive substring of title or description
            sort: "newest", "oldest" or "title"
            limit: Page size
            offset: Rows to skip

        Returns:
            tuple: (courses on this page, total matching count)
        """
        criteria = [CourseModel.is_published.is_(True)]
        if category:
            criteria.append(CourseModel.category == category)
        if difficulty:
            criteria.append(CourseModel.difficulty == difficulty)
        if search:
            pattern = f"%{search}%"
            criteria.append(
                or_(
                    CourseModel.title.ilike(pattern),
                    CourseModel.description.ilike(pattern),
                )
            )

        total = await self.count(session, *criteria)

        stmt = (
            select(CourseModel)
            .where(*criteria)
            .order_by(*CATALOG_SORTS.get(sort, CATALOG_SORTS["newest"]))
            .limit(limit)
            .offset(offset)
        )
        result = await session.execute(stmt)
        return result.scalars().all(), total

    async def get_published_facets(
        self,
        session: AsyncSession,
    ) -> tuple[list[str], list[str]]:
        """
        Collect distinct categories and difficulties of published courses.

        Returns:
            tuple: (sorted categories, sorted difficulty values)
        """
        published = CourseModel.is_published.is_(True)

        categories = await session.execute(
            select(CourseModel.category)
            .where(published, CourseModel.category.is_not(None))
            .distinct()
        )
        difficulties = await session.execute(
            select(CourseModel.difficulty)
            .where(published, CourseModel.difficulty.is_not(None))
            .distinct()
        )
        return (
            sorted(c for c in categories.scalars().all() if c),
            sorted(getattr(d, "value", d) for d in difficulties.scalars().all()),
        )

    async def recount_lessons(self, session: AsyncSession, course_id: UUID) -> None:
        """
        Recompute ``total_lessons`` in a single UPDATE.

        The count runs as a correlated subquery, so concurrent lesson writes
        cannot interleave between reading and writing the counter.

        Args:
            session: Async database session
            course_id: Course UUID
        """
        lesson_count = (
            select(func.count(LessonModel.id))
            .join(ModuleModel, LessonModel.module_id == ModuleModel.id)
            .where(ModuleModel.course_id == course_id)
            .scalar_subquery()
        )
        stmt = (
            update(CourseModel)
            .where(CourseModel.id == course_id)
            .values(total_lessons=lesson_count)
            .execution_options(synchronize_session=False)
        )
        await session.execute(stmt)

    async def delete_course(self, session: AsyncSession, course_id: UUID) -> bool:
        """Delete the course row itself; children must be removed first."""
        stmt = delete(CourseModel).where(CourseModel.id == course_id)
        result = await session.execute(stmt)
        return result.rowcount > 0


course_crud = CourseCRUD()
