"""Identity services - password hashing."""

from invest_identity.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
