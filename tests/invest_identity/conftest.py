"""
Pytest configuration for invest_identity tests.

Hashing uses the lowest bcrypt work factor to keep the suite fast.
"""

import pytest

from invest_identity.domain.user import (
    HashedPassword,
    Password,
    User,
    UserName,
    UserRole,
)
from invest_identity.services import PasswordHashingService

TEST_ROUNDS = 4
TEST_PASSWORD = "Secur3!ty"  # NOQA: S105


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Hashing service with a fast work factor."""
    return PasswordHashingService(rounds=TEST_ROUNDS)


@pytest.fixture
def hashed_password(password_service: PasswordHashingService) -> HashedPassword:
    """Hash of TEST_PASSWORD."""
    return password_service.hash(Password(TEST_PASSWORD))


@pytest.fixture
def test_user(hashed_password: HashedPassword) -> User:
    """Create a standard, not yet persisted test user."""
    return User.create(UserName("alice"), hashed_password, UserRole.USER)


@pytest.fixture
def admin_user(hashed_password: HashedPassword) -> User:
    """Create an admin test user."""
    return User.create(UserName("root"), hashed_password, UserRole.ADMIN)
