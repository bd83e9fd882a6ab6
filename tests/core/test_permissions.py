"""
Test suite for role hierarchy and course access rules.

System role: Verification of authorization predicates
"""

import uuid
from types import SimpleNamespace

import pytest

from budhhub.core.permissions import (
    can_edit_course,
    can_view_course,
    has_role,
    has_role_or_above,
    is_instructor_or_above,
)
from budhhub.core.roles import UserRole, role_level


def _user(role: UserRole) -> SimpleNamespace:
    return SimpleNamespace(id=uuid.uuid4(), role=role)


def _course(instructor_id: uuid.UUID, is_published: bool = False) -> SimpleNamespace:
    return SimpleNamespace(instructor_id=instructor_id, is_published=is_published)


class TestRoleHierarchy:
    """Test suite for role levels."""

    @pytest.mark.parametrize(
        "role,required,expected",
        [
            (UserRole.ADMIN, UserRole.INSTRUCTOR, True),
            (UserRole.INSTRUCTOR, UserRole.INSTRUCTOR, True),
            (UserRole.LEARNER, UserRole.INSTRUCTOR, False),
            (UserRole.INSTRUCTOR, UserRole.ADMIN, False),
        ],
    )
    def test_has_role_or_above(self, role, required, expected) -> None:
        assert has_role_or_above(_user(role), required) is expected

    def test_unknown_role_should_rank_as_learner(self) -> None:
        assert role_level("SUPERUSER") == role_level(UserRole.LEARNER)

    def test_anonymous_user_has_no_role(self) -> None:
        assert has_role(None, UserRole.LEARNER) is False
        assert is_instructor_or_above(None) is False


class TestCourseAccess:
    """Test suite for can_edit_course() and can_view_course()."""

    def test_only_owner_can_edit(self) -> None:
        owner = _user(UserRole.INSTRUCTOR)
        admin = _user(UserRole.ADMIN)
        course = _course(owner.id)

        assert can_edit_course(owner, course) is True
        assert can_edit_course(admin, course) is False
        assert can_edit_course(None, course) is False

    def test_published_course_is_public(self) -> None:
        course = _course(uuid.uuid4(), is_published=True)

        assert can_view_course(None, course) is True
        assert can_view_course(_user(UserRole.LEARNER), course) is True

    def test_draft_is_limited_to_owner_and_admin(self) -> None:
        owner = _user(UserRole.INSTRUCTOR)
        course = _course(owner.id)

        assert can_view_course(owner, course) is True
        assert can_view_course(_user(UserRole.ADMIN), course) is True
        assert can_view_course(_user(UserRole.INSTRUCTOR), course) is False
        assert can_view_course(None, course) is False
