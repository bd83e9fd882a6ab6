"""
Public course catalog.

Lists published courses with filtering, search, sorting and pagination,
annotates each with the caller's enrollment, and serves course details
subject to visibility rules.

Dependencies: budhhub.boundary.db.CRUD, budhhub.boundary.cache
System role: Catalog use case orchestration
"""

import logging
import math
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.cache.redis_cache import CATALOG_FILTERS_KEY, RedisCache
from budhhub.boundary.db.CRUD.course_crud import CATALOG_SORTS, course_crud
from budhhub.boundary.db.CRUD.enrollment_crud import enrollment_crud
from budhhub.boundary.db.CRUD.lesson_crud import lesson_crud
from budhhub.boundary.db.CRUD.module_crud import module_crud
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.core.exceptions import NotFoundError, PermissionDeniedError
from budhhub.core.permissions import can_view_course

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50


def clamp_pagination(page: int | None, limit: int | None) -> tuple[int, int]:
    """
    Normalize paging parameters.

    Returns:
        tuple[int, int]: (page >= 1, 1 <= limit <= 50)
    """
    page = max(1, page or 1)
    limit = DEFAULT_PAGE_SIZE if limit is None else min(MAX_PAGE_SIZE, max(1, limit))
    return page, limit


class CatalogService:
    """Read-only access to published courses."""

    def __init__(
        self,
        db: AsyncSession,
        cache: RedisCache,
        filters_ttl: int = 300,
    ) -> None:
        """
        Args:
            db: Async SQLAlchemy session
            cache: Cache for facet values
            filters_ttl: Seconds the facet values stay cached
        """
        self.db = db
        self.cache = cache
        self.filters_ttl = filters_ttl

    async def get_filters(self) -> dict[str, list[str]]:
        """
        Distinct categories and difficulties of published courses.

        Returns:
            dict: {"categories": [...], "difficulties": [...]}
        """
        cached = await self.cache.get(CATALOG_FILTERS_KEY)
        if cached is not None:
            return cached

        categories, difficulties = await course_crud.get_published_facets(self.db)
        filters = {"categories": categories, "difficulties": difficulties}
        await self.cache.set(CATALOG_FILTERS_KEY, filters, ttl=self.filters_ttl)
        return filters

    async def list_published_courses(
        self,
        user: UserModel | None = None,
        page: int | None = 1,
        limit: int | None = DEFAULT_PAGE_SIZE,
        category: str | None = None,
        difficulty: str | None = None,
        search: str | None = None,
        sort: str | None = "newest",
    ) -> dict:
        """
        Page through the published catalog.

        Args:
            user: Caller, None for anonymous browsing
            page: 1-based page number
            limit: Page size, clamped to 1-50
            category: Category filter
            difficulty: Difficulty filter
            search: Title/description search term
            sort: "newest" (default), "oldest" or "title"

        Returns:
            dict: {"items": [{"course", "is_enrolled"}], "pagination", "filters"}
        """
        page, limit = clamp_pagination(page, limit)
        sort = sort if sort in CATALOG_SORTS else "newest"
        search = search.strip() if search else None

        courses, total = await course_crud.search_published(
            self.db,
            category=category or None,
            difficulty=difficulty or None,
            search=search or None,
            sort=sort,
            limit=limit,
            offset=(page - 1) * limit,
        )

        enrolled: set[UUID] = set()
        if user is not None:
            enrolled = await enrollment_crud.enrolled_course_ids(
                self.db, user.id, [course.id for course in courses]
            )

        total_pages = math.ceil(total / limit) if total else 0
        logger.info(
            "Catalog listed",
            extra={"page": page, "limit": limit, "total_count": total, "sort": sort},
        )
        return {
            "items": [
                {"course": course, "is_enrolled": course.id in enrolled}
                for course in courses
            ],
            "pagination": {
                "page": page,
                "limit": limit,
                "total_count": total,
                "total_pages": total_pages,
                "has_next": page < total_pages,
                "has_prev": page > 1,
            },
            "filters": await self.get_filters(),
        }

    async def get_course_detail(self, course_id: UUID, user: UserModel | None) -> dict:
        """
        Course with modules and lessons, if the caller may view it.

        Returns:
            dict: {"course", "modules", "lessons"}

        Raises:
            NotFoundError: Course does not exist
            PermissionDeniedError: Course is unpublished and not the caller's
        """
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("Course", course_id)
        if not can_view_course(user, course):
            raise PermissionDeniedError(
                "You do not have permission to view this course",
                details={"course_id": str(course_id)},
            )

        modules = await module_crud.list_by_course(self.db, course_id)
        lessons = await lesson_crud.list_by_course(self.db, course_id)
        return {"course": course, "modules": modules, "lessons": lessons}
