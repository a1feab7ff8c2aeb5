from enum import Enum

from invest_identity.exceptions import InvalidUserRoleError


class UserRole(str, Enum):
    """User roles (who will be admin and who not)."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def from_string(cls, value: str) -> "UserRole":
        """Parse a raw role, accepting only the exact lowercase names."""
        if not isinstance(value, str):
            msg = "User role must be a string"
            raise TypeError(msg)
        for role in cls:
            if role.value == value:
                return role
        raise InvalidUserRoleError(value)

    def grants(self, required: "UserRole") -> bool:
        """Admins are granted every role, users only their own."""
        if self is UserRole.ADMIN:
            return True
        return self is required
