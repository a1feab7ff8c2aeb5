"""User name value object."""

from dataclasses import dataclass

from invest_identity.exceptions import ErrorKind, InvalidUserNameError

USER_NAME_MAX_LENGTH = 32


@dataclass(frozen=True)
class UserName:
    """Value object representing a user's display name.

    The text is kept exactly as given. Length is counted in characters
    (code points), not bytes.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "User name must be a string"
            raise TypeError(msg)

        if not self.value:
            msg = "User name: must not be empty"
            raise InvalidUserNameError(msg, ErrorKind.USER_NAME_EMPTY)

        if len(self.value) > USER_NAME_MAX_LENGTH:
            msg = (
                f"User name: must not be longer than "
                f"{USER_NAME_MAX_LENGTH} characters"
            )
            raise InvalidUserNameError(msg, ErrorKind.USER_NAME_TOO_LONG)

    def __str__(self) -> str:
        return self.value
