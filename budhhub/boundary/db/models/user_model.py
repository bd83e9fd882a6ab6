"""
User ORM model.

Mirrors identities issued by the authentication provider and carries the
platform role used for authorization.

Dependencies: sqlalchemy, budhhub.boundary.db.base, budhhub.core.roles
System role: User persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from budhhub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from budhhub.core.roles import UserRole


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Unique email address
        email_verified: When the provider verified the address
        image: Avatar URL
        password_hash: bcrypt hash, None for magic-link-only accounts
        bio: Short profile text set during onboarding
        role: ADMIN, INSTRUCTOR or LEARNER (default LEARNER)
    """

    __tablename__ = "users"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    email_verified: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=32),
        nullable=False,
        default=UserRole.LEARNER,
    )
