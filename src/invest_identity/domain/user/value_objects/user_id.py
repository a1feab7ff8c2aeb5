"""User id value object."""

from dataclasses import dataclass

from invest_identity.exceptions import ErrorKind, InvalidUserIdError


@dataclass(frozen=True)
class UserId:
    """Value object representing a persisted user's numeric id.

    Ids are unsigned and assigned by the persistence layer; zero means
    "not assigned" there and is therefore rejected here.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = "User id must be an integer"
            raise TypeError(msg)

        if self.value == 0:
            msg = "User id: must not be zero"
            raise InvalidUserIdError(msg, ErrorKind.USER_ID_ZERO)

        if self.value < 0:
            msg = "User id: must not be negative"
            raise InvalidUserIdError(msg, ErrorKind.USER_ID_NEGATIVE)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
