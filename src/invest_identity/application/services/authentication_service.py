"""Authentication service: registration, credential checks and authorization."""

from __future__ import annotations

import logging

from invest_config.settings import Settings, get_settings
from invest_identity.domain.user import (
    DEFAULT_PASSWORD_POLICY,
    PasswordPolicy,
    User,
    UserName,
    UserRole,
)
from invest_identity.exceptions import (
    InsufficientRoleError,
    InvalidCredentialsError,
    UserReconstructionError,
    WeakPasswordError,
)
from invest_identity.schemas import CreateUserRequest
from invest_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Turns raw identity input into validated users and checks credentials.

    Session and token issuance happen in the caller once a user has been
    authenticated.
    """

    def __init__(
        self,
        password_service: PasswordHashingService,
        policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
    ):
        self._password_service = password_service
        self._policy = policy

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AuthenticationService:
        settings = settings or get_settings()
        policy = PasswordPolicy.from_settings(settings)
        password_service = PasswordHashingService(
            rounds=settings.password_hash_rounds,
            policy=policy,
        )
        return cls(password_service, policy)

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def register(self, name: str, password: str, role: str = "user") -> User:
        """Validate raw registration input and build a fresh user.

        Fields are validated in the order name, password, role. The
        returned user has no id yet.

        Raises
        ------
        InvalidUserNameError
            If the name is empty or too long
        WeakPasswordError
            If the password violates the policy
        InvalidUserRoleError
            If the role is unknown
        """
        user_name = UserName(name)
        plaintext = self._policy.parse(password)
        user_role = UserRole.from_string(role)

        user = User.create(
            name=user_name,
            hashed_password=self._password_service.hash(plaintext),
            role=user_role,
        )
        logger.info("Registered user %s with role %s", user_name, user_role.value)
        return user

    def register_from_request(self, request: CreateUserRequest) -> User:
        return self.register(
            name=request.name,
            password=request.password.get_secret_value(),
            role=request.role,
        )

    def authenticate(self, user: User, password: str) -> User:
        """Check ``password`` against the user's stored hash.

        A password that could never have been set (policy violation) is
        reported the same way as a wrong one.

        Raises
        ------
        InvalidCredentialsError
            If the password is malformed or does not match
        """
        try:
            plaintext = self._policy.parse(password)
        except WeakPasswordError as e:
            logger.info("Rejected login for %s: malformed password", user.name)
            raise InvalidCredentialsError(cause=e) from e

        try:
            user.verify_password(plaintext, self._password_service)
        except InvalidCredentialsError:
            logger.info("Rejected login for %s: password mismatch", user.name)
            raise

        if self._password_service.needs_rehash(user.hashed_password):
            logger.debug("Stored hash for %s uses an outdated work factor", user.name)
        return user

    def rehash_if_needed(self, user: User, password: str) -> User:
        """Return the user with a fresh hash if its work factor is outdated.

        The password is authenticated against the stored hash first, so
        only the user's own password can ever be rehashed.

        Raises
        ------
        InvalidCredentialsError
            If the password is malformed or does not match
        """
        self.authenticate(user, password)

        if not self._password_service.needs_rehash(user.hashed_password):
            return user
        logger.info("Rehashing password of %s with the current work factor", user.name)
        return user.with_hashed_password(self._password_service.hash(password))

    def load_user(self, id: int, name: str, hashed_password: str, role: str) -> User:
        """Rebuild a user from a persisted record.

        Raises
        ------
        UserReconstructionError
            If any persisted field fails validation
        """
        try:
            return User.reconstitute(
                id=id,
                name=name,
                hashed_password=hashed_password,
                role=role,
            )
        except UserReconstructionError as e:
            logger.warning(
                "Rejected persisted user record %s: field %s (%s)",
                id,
                e.field,
                e.kind.value,
            )
            raise

    def authorize(self, user: User, required: UserRole) -> None:
        """Raise InsufficientRoleError unless the user holds ``required``."""
        try:
            user.ensure_role(required)
        except InsufficientRoleError:
            logger.warning(
                "User %s with role %s denied %s access",
                user.name,
                user.role.value,
                required.value,
            )
            raise
