"""Tests for the bcrypt password hashing service."""

from unittest.mock import patch

import pytest

from invest_identity.domain.user import HashedPassword, Password, PasswordPolicy
from invest_identity.exceptions import (
    ErrorKind,
    InvalidCredentialsError,
    PasswordHashingError,
    WeakPasswordError,
)
from invest_identity.services import PasswordHashingService
from tests.invest_identity.conftest import TEST_PASSWORD, TEST_ROUNDS


class TestPasswordHashing:
    """Test hashing plaintext passwords."""

    def test_hash_produces_bcrypt_hash(self, password_service):
        hashed = password_service.hash(Password(TEST_PASSWORD))

        assert isinstance(hashed, HashedPassword)
        assert hashed.decode().startswith(f"$2b${TEST_ROUNDS:02d}$")
        assert TEST_PASSWORD not in hashed.decode()

    def test_hash_is_salted(self, password_service):
        """Hashing the same password twice gives different hashes."""
        first = password_service.hash(TEST_PASSWORD)
        second = password_service.hash(TEST_PASSWORD)

        assert first.value != second.value
        password_service.verify(TEST_PASSWORD, first)
        password_service.verify(TEST_PASSWORD, second)

    def test_hash_validates_strings(self, password_service):
        with pytest.raises(WeakPasswordError) as exc_info:
            password_service.hash("short")

        assert exc_info.value.kind == ErrorKind.PASSWORD_TOO_SHORT

    def test_hash_uses_service_policy(self):
        service = PasswordHashingService(
            rounds=TEST_ROUNDS,
            policy=PasswordPolicy(min_length=20, max_length=30),
        )

        with pytest.raises(WeakPasswordError):
            service.hash(TEST_PASSWORD)

    def test_hash_failure_is_propagated(self, password_service):
        """A failing hash function never yields an empty hash."""
        with patch(
            "invest_identity.services.password_service.bcrypt.hashpw",
            side_effect=ValueError("entropy source exhausted"),
        ):
            with pytest.raises(PasswordHashingError) as exc_info:
                password_service.hash(TEST_PASSWORD)

        assert exc_info.value.kind == ErrorKind.HASHING_FAILED
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rejects_invalid_rounds(self, rounds):
        with pytest.raises(ValueError, match="rounds must be between"):
            PasswordHashingService(rounds=rounds)

    def test_default_rounds(self):
        assert PasswordHashingService().rounds == 10

    @pytest.mark.slow
    def test_default_work_factor_roundtrip(self):
        service = PasswordHashingService()

        hashed = service.hash(TEST_PASSWORD)

        assert hashed.decode().startswith("$2b$10$")
        service.verify(TEST_PASSWORD, hashed)


class TestPasswordVerification:
    """Test verifying passwords against stored hashes."""

    def test_verify_correct_password(self, password_service, hashed_password):
        password_service.verify(TEST_PASSWORD, hashed_password)
        password_service.verify(Password(TEST_PASSWORD), hashed_password)

    @pytest.mark.parametrize(
        "candidate",
        ["wrongpass1!", "secur3!ty", "Secur3!ty ", "", "Secur3!t"],
    )
    def test_verify_wrong_password(self, password_service, hashed_password, candidate):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            password_service.verify(candidate, hashed_password)

        assert exc_info.value.kind == ErrorKind.PASSWORD_MISMATCH
        assert exc_info.value.cause is None

    def test_verify_malformed_hash(self, password_service):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            password_service.verify(
                TEST_PASSWORD, HashedPassword.from_string("not-a-bcrypt-hash")
            )

        assert isinstance(exc_info.value.cause, ValueError)

    def test_verify_against_other_work_factor(self, hashed_password):
        """Verification reads the cost from the stored hash."""
        PasswordHashingService(rounds=5).verify(TEST_PASSWORD, hashed_password)


class TestStrengthAndRehash:
    """Strength validation and work factor upgrades."""

    def test_validate_strength(self, password_service):
        password_service.validate_strength(TEST_PASSWORD)

        with pytest.raises(WeakPasswordError):
            password_service.validate_strength("abcdefgh")

    def test_needs_rehash_same_rounds(self, password_service, hashed_password):
        assert password_service.needs_rehash(hashed_password) is False

    def test_needs_rehash_other_rounds(self, hashed_password):
        assert PasswordHashingService(rounds=5).needs_rehash(hashed_password) is True

    def test_needs_rehash_unparseable(self, password_service):
        assert password_service.needs_rehash(HashedPassword(b"garbage")) is True
        assert password_service.needs_rehash(HashedPassword(b"$2b$xx$abc")) is True
