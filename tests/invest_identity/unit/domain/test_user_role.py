"""Tests for the UserRole value object and its authorization rules."""

import pytest

from invest_identity.domain.user import UserRole
from invest_identity.exceptions import ErrorKind, InvalidUserRoleError


class TestUserRoleParsing:
    """Test parsing raw role strings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("user", UserRole.USER), ("admin", UserRole.ADMIN)],
    )
    def test_accepts_known_roles(self, raw, expected):
        assert UserRole.from_string(raw) is expected

    @pytest.mark.parametrize(
        "raw",
        ["", "User", "ADMIN", " admin", "admin ", "root", "superuser"],
    )
    def test_rejects_anything_else(self, raw):
        """Only exact lowercase names are roles."""
        with pytest.raises(InvalidUserRoleError) as exc_info:
            UserRole.from_string(raw)

        assert exc_info.value.kind == ErrorKind.USER_ROLE_INVALID
        assert exc_info.value.details == {"role": raw}

    @pytest.mark.parametrize("raw", [None, 1, b"user"])
    def test_rejects_non_strings(self, raw):
        with pytest.raises(TypeError, match="must be a string"):
            UserRole.from_string(raw)  # type: ignore[arg-type]

    def test_role_is_string_compatible(self):
        assert UserRole.ADMIN == "admin"
        assert UserRole.USER.value == "user"


class TestUserRoleGrants:
    """Test role-based authorization rules."""

    def test_admin_grants_every_role(self):
        assert UserRole.ADMIN.grants(UserRole.ADMIN)
        assert UserRole.ADMIN.grants(UserRole.USER)

    def test_user_grants_only_user(self):
        assert UserRole.USER.grants(UserRole.USER)
        assert not UserRole.USER.grants(UserRole.ADMIN)
