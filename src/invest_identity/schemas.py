"""Identity schemas for the boundary with the transport layer.

Requests arrive as raw strings and are only turned into domain values by
the application service; responses expose no credential material.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, SecretStr

if TYPE_CHECKING:
    from invest_identity.domain.user import User


class CreateUserRequest(BaseModel):
    """Raw payload for creating a user."""

    model_config = ConfigDict(frozen=True)

    name: str
    password: SecretStr
    role: str = "user"


class LoginRequest(BaseModel):
    """Raw payload for logging in."""

    model_config = ConfigDict(frozen=True)

    name: str
    password: SecretStr


class UserSchema(BaseModel):
    """Public view of a user, as returned to clients."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> UserSchema:
        return cls(
            id=user.id.value if user.id is not None else None,
            name=user.name.value,
            role=user.role.value,
        )
