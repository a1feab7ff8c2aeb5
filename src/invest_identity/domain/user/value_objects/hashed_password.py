"""Stored password hash value object."""

from __future__ import annotations

from dataclasses import dataclass

from invest_identity.exceptions import InvalidHashedPasswordError


@dataclass(frozen=True, eq=False)
class HashedPassword:
    """
    Opaque one-way hash of a password, as stored.

    Hashes are salted, so two hashes of the same password differ. They
    are never compared by value; use PasswordHashingService.verify().
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            msg = "Hashed password value must be bytes"
            raise TypeError(msg)

        if not self.value:
            raise InvalidHashedPasswordError

    @classmethod
    def from_string(cls, value: str) -> HashedPassword:
        """Create from the text form used by persistence."""
        if not isinstance(value, str):
            msg = "Hashed password must be a string"
            raise TypeError(msg)
        return cls(value.encode("utf-8"))

    def decode(self) -> str:
        return self.value.decode("utf-8")

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "HashedPassword(*****)"
