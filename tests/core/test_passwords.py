"""
Test suite for password hashing and strength rules.

System role: Verification of credential helpers
"""

import bcrypt
import pytest

from budhhub.core.passwords import hash_password, password_strength_errors


class TestPasswordHashing:
    """Test suite for hash_password()."""

    def test_hash_should_match_only_the_hashed_password(self) -> None:
        hashed = hash_password("Secr3tPass")

        assert hashed != "Secr3tPass"
        assert bcrypt.checkpw(b"Secr3tPass", hashed.encode())
        assert not bcrypt.checkpw(b"secr3tpass", hashed.encode())

    def test_hash_should_use_fresh_salt(self) -> None:
        assert hash_password("Secr3tPass") != hash_password("Secr3tPass")


class TestPasswordStrength:
    """Test suite for password_strength_errors()."""

    def test_strong_password_has_no_errors(self) -> None:
        assert password_strength_errors("Str0ngPass") == []

    @pytest.mark.parametrize(
        "password,expected_error",
        [
            ("Sh0rt", "Password must be at least 8 characters long"),
            ("lowercase1", "Password must contain at least one uppercase letter"),
            ("UPPERCASE1", "Password must contain at least one lowercase letter"),
            ("NoDigitsHere", "Password must contain at least one number"),
        ],
    )
    def test_weak_password_reports_rule(self, password, expected_error) -> None:
        assert expected_error in password_strength_errors(password)
