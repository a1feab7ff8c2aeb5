"""Password hashing service using bcrypt.

Provides salted one-way hashing and verification of passwords with a
configurable work factor.
"""

from typing import Union

import bcrypt

from invest_identity.domain.user.value_objects import (
    DEFAULT_PASSWORD_POLICY,
    HashedPassword,
    Password,
    PasswordPolicy,
)
from invest_identity.exceptions import InvalidCredentialsError, PasswordHashingError

MIN_ROUNDS = 4
MAX_ROUNDS = 31


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Hashes are salted, so the only way to check a password against a
    stored hash is ``verify``.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hashed = service.hash("Secur3!ty")
    >>> service.verify("Secur3!ty", hashed)
    >>> service.verify("wrongpass1!", hashed)
    Traceback (most recent call last):
    ...
    invest_identity.exceptions.InvalidCredentialsError: Invalid user name or password
    """

    DEFAULT_ROUNDS = 10

    def __init__(
        self,
        rounds: int = DEFAULT_ROUNDS,
        policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Higher values
            are more secure but slower.
        policy
            Policy applied to plaintext passwords given as strings
        """
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            msg = f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}"
            raise ValueError(msg)
        self._rounds = rounds
        self._policy = policy

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: Union[str, Password]) -> HashedPassword:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The password to hash. Strings are validated against the
            service's policy first.

        Returns
        -------
        The bcrypt hash

        Raises
        ------
        WeakPasswordError
            If a string password doesn't meet the policy
        PasswordHashingError
            If bcrypt itself fails
        """
        if not isinstance(password, Password):
            password = self._policy.parse(password)

        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(password.encode(), salt)
        except ValueError as e:
            raise PasswordHashingError(e) from e
        return HashedPassword(hashed)

    def verify(
        self,
        password: Union[str, Password],
        password_hash: HashedPassword,
    ) -> None:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Raises
        ------
        InvalidCredentialsError
            If the password does not match or the hash is malformed
        """
        raw = password.get_value() if isinstance(password, Password) else password
        try:
            matches = bcrypt.checkpw(raw.encode("utf-8"), password_hash.value)
        except ValueError as e:
            # Invalid hash format
            raise InvalidCredentialsError(cause=e) from e

        if not matches:
            raise InvalidCredentialsError

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets the service's policy.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self._policy.validate(password)

    def needs_rehash(self, password_hash: HashedPassword) -> bool:
        """Check if a password hash needs to be rehashed.

        This is useful when upgrading the work factor. After changing
        the rounds setting, existing hashes can be identified for
        rehashing on next login.
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.decode().split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except ValueError:
            pass
        return True
