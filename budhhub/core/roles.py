"""
User roles and role hierarchy.

Dependencies: None (pure domain layer)
System role: Role definitions shared by ORM models and permission checks
"""

import enum


class UserRole(str, enum.Enum):
    """Platform roles, highest privilege first."""

    ADMIN = "ADMIN"
    INSTRUCTOR = "INSTRUCTOR"
    LEARNER = "LEARNER"


ROLE_HIERARCHY: dict[UserRole, int] = {
    UserRole.ADMIN: 3,
    UserRole.INSTRUCTOR: 2,
    UserRole.LEARNER: 1,
}


def role_level(role: UserRole | str | None) -> int:
    """
    Resolve a role to its hierarchy level.

    Unknown or missing roles are treated as LEARNER.
    """
    try:
        return ROLE_HIERARCHY[UserRole(role)]
    except ValueError:
        return ROLE_HIERARCHY[UserRole.LEARNER]
