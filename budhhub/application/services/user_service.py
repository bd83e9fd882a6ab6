"""
User service orchestrator.

Maps verified bearer-token identities onto ``users`` rows and handles
onboarding (role and profile selection).

Dependencies: budhhub.boundary.db.CRUD
System role: Identity mirroring and onboarding
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from budhhub.boundary.db.CRUD.user_crud import user_crud
from budhhub.boundary.db.models.user_model import UserModel
from budhhub.core.exceptions import AuthenticationError
from budhhub.core.roles import UserRole

logger = logging.getLogger(__name__)


def _parse_uuid(value: str | None) -> UUID | None:
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


class UserService:
    """User lookups and onboarding."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def resolve_identity(self, claims: dict) -> UserModel:
        """
        Resolve token claims to a user row, creating one on first sight.

        Lookup order is ``sub`` as a user id, then ``email``. Unknown
        identities carrying an email are provisioned as LEARNER.

        Args:
            claims: Verified token claims (sub, email, name, picture)

        Returns:
            UserModel: Caller's row

        Raises:
            AuthenticationError: Claims identify nobody
        """
        user_id = _parse_uuid(claims.get("sub"))
        if user_id is not None:
            user = await user_crud.get_by_id(self.db, user_id)
            if user is not None:
                return user

        email = claims.get("email")
        if not email:
            raise AuthenticationError()

        user = await user_crud.get_by_email(self.db, email)
        if user is not None:
            return user

        user = await user_crud.create(
            self.db,
            email=email.strip().lower(),
            name=claims.get("name"),
            image=claims.get("picture"),
            role=UserRole.LEARNER,
        )
        await self.db.commit()
        logger.info("User provisioned from token", extra={"user_id": str(user.id)})
        return user

    async def complete_onboarding(
        self,
        user: UserModel,
        role: str,
        name: str,
        bio: str | None = None,
    ) -> UserModel:
        """
        Store the role and profile chosen during onboarding.

        Args:
            user: Caller
            role: "INSTRUCTOR" or "LEARNER"
            name: Display name
            bio: Optional profile text

        Returns:
            UserModel: Updated user
        """
        user = await user_crud.update(
            self.db,
            user,
            role=UserRole(role),
            name=name,
            bio=bio,
        )
        await self.db.commit()

        logger.info(
            "User onboarded",
            extra={"user_id": str(user.id), "role": user.role.value},
        )
        return user
