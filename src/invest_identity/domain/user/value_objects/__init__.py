"""Value objects for the user domain having identity concerns only."""

from invest_identity.domain.user.value_objects.client_metadata import ClientMetadata
from invest_identity.domain.user.value_objects.hashed_password import HashedPassword
from invest_identity.domain.user.value_objects.password import (
    DEFAULT_PASSWORD_POLICY,
    Password,
    PasswordPolicy,
)
from invest_identity.domain.user.value_objects.user_id import UserId
from invest_identity.domain.user.value_objects.user_name import (
    USER_NAME_MAX_LENGTH,
    UserName,
)
from invest_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "USER_NAME_MAX_LENGTH",
    "ClientMetadata",
    "HashedPassword",
    "Password",
    "PasswordPolicy",
    "UserId",
    "UserName",
    "UserRole",
]
