"""Plaintext password value object and the policy it is validated against.

The policy is an ordinary value passed into the password constructor, so
deployments can swap it (e.g. from settings) without module-level state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from invest_identity.exceptions import ErrorKind, WeakPasswordError

if TYPE_CHECKING:
    from invest_config.settings import Settings

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16
# bcrypt only reads the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72

# Printable ASCII without space (0x21-0x7E)
PASSWORD_CHARACTERS = re.compile(r"[\x21-\x7e]+")
PASSWORD_MUST_INCLUDE = (
    re.compile(r"[A-Za-z]"),
    re.compile(r"[0-9]"),
    re.compile(r"[!-/:-@\[-`{-~]"),
)


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a plaintext password has to satisfy.

    Attributes
    ----------
    min_length
        Minimum number of characters
    max_length
        Maximum number of characters, at most PASSWORD_MAX_BYTES
    allowed_characters
        Pattern the whole password must match
    required_characters
        Patterns of which each must match somewhere in the password
    """

    min_length: int = PASSWORD_MIN_LENGTH
    max_length: int = PASSWORD_MAX_LENGTH
    allowed_characters: re.Pattern[str] = PASSWORD_CHARACTERS
    required_characters: tuple[re.Pattern[str], ...] = PASSWORD_MUST_INCLUDE

    def __post_init__(self) -> None:
        if self.min_length < 1 or self.max_length < self.min_length:
            msg = (
                f"Invalid password length bounds: "
                f"{self.min_length}..{self.max_length}"
            )
            raise ValueError(msg)

        if self.max_length > PASSWORD_MAX_BYTES:
            msg = f"Password max length must not exceed {PASSWORD_MAX_BYTES}"
            raise ValueError(msg)

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordPolicy:
        return cls(
            min_length=settings.password_min_length,
            max_length=settings.password_max_length,
        )

    def validate(self, password: str) -> None:
        """Validate a raw password against this policy.

        Checks run in a fixed order and stop at the first violation:
        empty, too short, too long (characters, then UTF-8 bytes),
        disallowed characters, missing character classes.

        Raises
        ------
        WeakPasswordError
            If the password violates the policy
        """
        if not password:
            msg = "Password: must not be empty"
            raise WeakPasswordError(msg, ErrorKind.PASSWORD_EMPTY)

        if len(password) < self.min_length:
            msg = f"Password: must be at least {self.min_length} characters"
            raise WeakPasswordError(msg, ErrorKind.PASSWORD_TOO_SHORT)

        if len(password) > self.max_length:
            msg = f"Password: must not be longer than {self.max_length} characters"
            raise WeakPasswordError(msg, ErrorKind.PASSWORD_TOO_LONG)

        if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            msg = f"Password: must not be longer than {PASSWORD_MAX_BYTES} bytes"
            raise WeakPasswordError(msg, ErrorKind.PASSWORD_TOO_LONG)

        if not self.allowed_characters.fullmatch(password):
            msg = "Password: contains characters that are not allowed"
            raise WeakPasswordError(msg, ErrorKind.PASSWORD_POLICY_VIOLATION)

        for expected in self.required_characters:
            if not expected.search(password):
                msg = "Password: must contain a letter, a digit and a symbol"
                raise WeakPasswordError(msg, ErrorKind.PASSWORD_POLICY_VIOLATION)

    def parse(self, password: str) -> Password:
        return Password(password, policy=self)


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


@dataclass(frozen=True)
class Password:
    """
    Value object wrapping a validated plaintext password.

    Only lives for the duration of a login or registration. The value is
    masked in every string representation and only accessible via
    explicit get_value() call.
    """

    _value: str
    policy: PasswordPolicy = field(
        default=DEFAULT_PASSWORD_POLICY,
        repr=False,
        compare=False,
    )

    def __post_init__(self) -> None:
        if not isinstance(self._value, str):
            msg = "Password value must be a string"
            raise TypeError(msg)
        self.policy.validate(self._value)

    def get_value(self) -> str:
        return self._value

    def encode(self) -> bytes:
        return self._value.encode("utf-8")

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "Password(*****)"
