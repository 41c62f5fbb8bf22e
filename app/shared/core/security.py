"""
Security utilities for password hashing and verification.
Passwords are never stored or returned in clear text; only bcrypt hashes
reach the database.
"""

import logging
from functools import lru_cache

from passlib.context import CryptContext

from ..config.settings import get_settings

logger = logging.getLogger(__name__)


class SecurityManager:
    """Password hashing backed by a passlib bcrypt context."""

    def __init__(self, bcrypt_rounds: int = 12):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=bcrypt_rounds,
        )

    def get_password_hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        hashed = self.pwd_context.hash(password)
        logger.debug("Password hashed successfully")
        return hashed

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            plain_password: Plain text password
            hashed_password: Stored hashed password

        Returns:
            bool: True if password matches
        """
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.error(f"Password verification error: {e}")
            return False


@lru_cache()
def get_security_manager() -> SecurityManager:
    """Get the security manager configured from settings."""
    return SecurityManager(bcrypt_rounds=get_settings().BCRYPT_ROUNDS)


def get_password_hash(password: str) -> str:
    """Hash password using bcrypt."""
    return get_security_manager().get_password_hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return get_security_manager().verify_password(plain_password, hashed_password)
