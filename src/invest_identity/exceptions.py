"""Identity and authentication exceptions.

Every error raised by the invest_identity package is an ``IdentityError``
tagged with a stable ``ErrorKind``. Wrapping errors keep the kind and chain
the original exception, so callers can still ask "is this the empty-name
error" after an error has been annotated with more context.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Stable error kinds for programmatic handling.

    These values are part of the public contract. Should not be changed.
    """

    # User id
    USER_ID_ZERO = "USER_ID_ZERO"
    USER_ID_NEGATIVE = "USER_ID_NEGATIVE"

    # User name
    USER_NAME_EMPTY = "USER_NAME_EMPTY"
    USER_NAME_TOO_LONG = "USER_NAME_TOO_LONG"

    # Role
    USER_ROLE_INVALID = "USER_ROLE_INVALID"
    ROLE_FORBIDDEN = "ROLE_FORBIDDEN"

    # Plaintext password
    PASSWORD_EMPTY = "PASSWORD_EMPTY"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
    PASSWORD_TOO_LONG = "PASSWORD_TOO_LONG"
    PASSWORD_POLICY_VIOLATION = "PASSWORD_POLICY_VIOLATION"

    # Hashed password
    HASHED_PASSWORD_EMPTY = "HASHED_PASSWORD_EMPTY"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    HASHING_FAILED = "HASHING_FAILED"


class IdentityError(Exception):
    """Base exception for all identity errors.

    Attributes
    ----------
    message
        Human-readable error message (never contains secrets)
    kind
        Stable error kind for programmatic handling
    details
        Optional additional context such as the failing field
    cause
        The underlying error this one wraps, if any
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.details = details or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def has_kind(self, kind: ErrorKind) -> bool:
        """Check this error and every error it wraps for ``kind``."""
        current: BaseException | None = self
        while current is not None:
            if isinstance(current, IdentityError) and current.kind == kind:
                return True
            current = current.__cause__
        return False

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"kind={self.kind.value!r}, "
            f"details={self.details!r})"
        )


class InvalidUserIdError(IdentityError, ValueError):
    """Raised when a user id is zero or negative."""


class InvalidUserNameError(IdentityError, ValueError):
    """Raised when a user name is empty or too long."""


class InvalidUserRoleError(IdentityError, ValueError):
    """Raised when a role is not one of the known roles."""

    def __init__(self, role: str):
        super().__init__(
            f"User role: invalid type {role!r}",
            ErrorKind.USER_ROLE_INVALID,
            details={"role": role},
        )


class WeakPasswordError(IdentityError, ValueError):
    """Raised when a password doesn't meet the password policy."""


class InvalidHashedPasswordError(IdentityError, ValueError):
    """Raised when a stored password hash is empty."""

    def __init__(self, message: str = "Hashed password: must not be empty"):
        super().__init__(message, ErrorKind.HASHED_PASSWORD_EMPTY)


class InvalidCredentialsError(IdentityError):
    """Raised when a password does not match the stored hash."""

    def __init__(
        self,
        message: str = "Invalid user name or password",
        cause: BaseException | None = None,
    ):
        super().__init__(message, ErrorKind.PASSWORD_MISMATCH, cause=cause)


class PasswordHashingError(IdentityError):
    """Raised when the hash function itself fails. Not recoverable."""

    def __init__(self, cause: BaseException):
        super().__init__(
            "Password hashing failed",
            ErrorKind.HASHING_FAILED,
            cause=cause,
        )


class InsufficientRoleError(IdentityError):
    """Raised when a user's role does not grant the required role."""

    def __init__(self, actual: str, required: str):
        super().__init__(
            f"Role {actual!r} does not grant {required!r}",
            ErrorKind.ROLE_FORBIDDEN,
            details={"actual": actual, "required": required},
        )


class UserReconstructionError(IdentityError, ValueError):
    """Raised when a persisted user record fails validation.

    Carries the kind of the original error plus the name of the field that
    was rejected. The original error is available as ``cause``.
    """

    def __init__(self, field: str, cause: IdentityError):
        super().__init__(
            f"Cannot reconstruct user: {field}: {cause.message}",
            cause.kind,
            details={"field": field},
            cause=cause,
        )
        self.field = field
