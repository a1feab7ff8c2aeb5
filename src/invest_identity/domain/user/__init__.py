"""User domain manages user identity only.

This domain handles:
- Value objects for every identity field (id, name, role, passwords)
- User aggregate (creation and reconstruction from persisted fields)
- Role-based authorization rules

Sessions and tokens are issued by the consumers of this package.
"""

from invest_identity.domain.user.aggregates import User
from invest_identity.domain.user.value_objects import (
    DEFAULT_PASSWORD_POLICY,
    USER_NAME_MAX_LENGTH,
    ClientMetadata,
    HashedPassword,
    Password,
    PasswordPolicy,
    UserId,
    UserName,
    UserRole,
)

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "USER_NAME_MAX_LENGTH",
    "ClientMetadata",
    "HashedPassword",
    "Password",
    "PasswordPolicy",
    "User",
    "UserId",
    "UserName",
    "UserRole",
]
