"""Invest Identity - validated identity values and credential checks.

This package handles:
- Value objects for user identity (id, name, role, passwords, client metadata)
- User aggregate creation and reconstruction from persisted records
- Password hashing and verification (bcrypt)
- Role-based authorization

Sessions and tokens are issued by consumers of this package.
"""

from invest_identity.application.services import AuthenticationService
from invest_identity.domain.user import (
    DEFAULT_PASSWORD_POLICY,
    USER_NAME_MAX_LENGTH,
    ClientMetadata,
    HashedPassword,
    Password,
    PasswordPolicy,
    User,
    UserId,
    UserName,
    UserRole,
)
from invest_identity.exceptions import (
    ErrorKind,
    IdentityError,
    InsufficientRoleError,
    InvalidCredentialsError,
    InvalidHashedPasswordError,
    InvalidUserIdError,
    InvalidUserNameError,
    InvalidUserRoleError,
    PasswordHashingError,
    UserReconstructionError,
    WeakPasswordError,
)
from invest_identity.schemas import CreateUserRequest, LoginRequest, UserSchema
from invest_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
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
    # Exceptions
    "ErrorKind",
    "IdentityError",
    "InsufficientRoleError",
    "InvalidCredentialsError",
    "InvalidHashedPasswordError",
    "InvalidUserIdError",
    "InvalidUserNameError",
    "InvalidUserRoleError",
    "PasswordHashingError",
    "UserReconstructionError",
    "WeakPasswordError",
    # Schemas
    "CreateUserRequest",
    "LoginRequest",
    "UserSchema",
    # Services
    "PasswordHashingService",
    # Application Services
    "AuthenticationService",
]
