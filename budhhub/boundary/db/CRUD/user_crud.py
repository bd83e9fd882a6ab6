"""
User CRUD operations.

Dependencies: sqlalchemy, budhhub.boundary.db.models
System role: User persistence operations
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.base_crud import BaseCRUD
from budhhub.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        """
        Look up a user by email, case-insensitively.

        Args:
            session: Async database session
            email: Email address

        Returns:
            UserModel if found, None otherwise
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
        result = await session.execute(stmt)
        return result.scalars().first()


user_crud = UserCRUD()
