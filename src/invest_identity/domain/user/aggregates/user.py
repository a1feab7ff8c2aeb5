"""User aggregate for identity concerns only."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Union

from invest_identity.domain.user.value_objects import (
    HashedPassword,
    Password,
    UserId,
    UserName,
    UserRole,
)
from invest_identity.exceptions import (
    IdentityError,
    InsufficientRoleError,
    UserReconstructionError,
)

if TYPE_CHECKING:
    from invest_identity.services import PasswordHashingService


class User:
    """
    User aggregate root.

    Immutable once constructed: every field is exposed read-only and any
    change produces a new aggregate. A freshly created user has no id
    until the persistence layer assigns one.
    """

    __slots__ = ("_id", "_name", "_hashed_password", "_role")

    def __init__(
        self,
        name: UserName,
        hashed_password: HashedPassword,
        role: UserRole,
        id: UserId | None = None,
    ):
        self._id = id
        self._name = name
        self._hashed_password = hashed_password
        self._role = role

    @property
    def id(self) -> UserId | None:
        return self._id

    @property
    def name(self) -> UserName:
        return self._name

    @property
    def hashed_password(self) -> HashedPassword:
        return self._hashed_password

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def with_id(self, id: UserId) -> User:
        return User(self._name, self._hashed_password, self._role, id=id)

    def with_role(self, role: UserRole) -> User:
        return User(self._name, self._hashed_password, role, id=self._id)

    def with_hashed_password(self, hashed_password: HashedPassword) -> User:
        return User(self._name, hashed_password, self._role, id=self._id)

    def verify_password(
        self,
        password: Union[str, Password],
        hasher: PasswordHashingService,
    ) -> None:
        """Verify a password against this user's stored hash.

        Raises
        ------
        InvalidCredentialsError
            If the password does not match
        """
        hasher.verify(password, self._hashed_password)

    def ensure_role(self, required: UserRole) -> None:
        """Raise InsufficientRoleError unless this user's role grants ``required``."""
        if not self._role.grants(required):
            raise InsufficientRoleError(self._role.value, required.value)

    @classmethod
    def create(
        cls,
        name: UserName,
        hashed_password: HashedPassword,
        role: UserRole = UserRole.USER,
    ) -> User:
        return cls(name=name, hashed_password=hashed_password, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        hashed_password: str,
        role: str,
    ) -> User:
        """Rebuild a user from persisted or otherwise untrusted fields.

        Every field is validated again, in the order id, name, hashed
        password, role. The first failure stops evaluation.

        Raises
        ------
        UserReconstructionError
            Wrapping the first validation error, with the same kind and
            the failing field name
        TypeError
            If a field has the wrong raw type
        """
        user_id = _validate_field("id", UserId, id)
        user_name = _validate_field("name", UserName, name)
        user_hashed_password = _validate_field(
            "hashed_password", HashedPassword.from_string, hashed_password
        )
        user_role = _validate_field("role", UserRole.from_string, role)
        return cls(
            id=user_id,
            name=user_name,
            hashed_password=user_hashed_password,
            role=user_role,
        )

    def __setattr__(self, key: str, value: Any) -> None:
        if hasattr(self, key):
            msg = f"User is immutable, cannot set {key!r}"
            raise AttributeError(msg)
        super().__setattr__(key, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name.value!r}, role={self._role.value})"


def _validate_field(field: str, validator: Callable[[Any], Any], raw: Any) -> Any:
    try:
        return validator(raw)
    except IdentityError as e:
        raise UserReconstructionError(field, e) from e
