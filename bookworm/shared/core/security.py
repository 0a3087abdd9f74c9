"""
Password hashing capability and its passlib-backed implementation.

Domain services depend only on ``PasswordEncoder``; the concrete
``PasslibPasswordEncoder`` wraps a bcrypt ``CryptContext`` and converts any
library failure into the domain's hashing/verification errors.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional

from passlib.context import CryptContext

from ..config.settings import Settings, get_settings
from .exceptions import PasswordEncryptionError, PasswordVerificationError

logger = logging.getLogger(__name__)


class PasswordEncoder(ABC):
    """
    Credential hashing collaborator.

    ``encrypt`` may raise PasswordEncryptionError, ``matches`` may raise
    PasswordVerificationError. A plain mismatch is ``False``, never an error.
    """

    @abstractmethod
    def encrypt(self, raw_password: str) -> str:
        """Hash a raw password."""
        pass

    @abstractmethod
    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Check a raw password against a stored hash."""
        pass


class PasslibPasswordEncoder(PasswordEncoder):
    """
    bcrypt password encoder built on passlib.
    Handles hashing and verification with domain error translation.
    """

    def __init__(self, settings: Optional[Settings] = None, context: Optional[CryptContext] = None):
        self.settings = settings or get_settings()
        self.pwd_context = context or CryptContext(**self.settings.get_password_hashing_config())

    def encrypt(self, raw_password: str) -> str:
        """
        Hash password using the configured scheme.

        Args:
            raw_password: Plain text password

        Returns:
            str: Hashed password

        Raises:
            PasswordEncryptionError: If the hashing backend fails
        """
        try:
            hashed = self.pwd_context.hash(raw_password)
            logger.debug("Password hashed successfully")
            return hashed
        except Exception as e:
            logger.error(f"Password hashing failed: {type(e).__name__}")
            raise PasswordEncryptionError(
                "An error occurred while encrypting the password",
                details={"scheme": self.settings.PASSWORD_HASH_SCHEME}
            ) from e

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            raw_password: Plain text password
            encoded_password: Stored hashed password

        Returns:
            bool: True if password matches

        Raises:
            PasswordVerificationError: If the hash is unreadable or the backend fails
        """
        try:
            is_valid = self.pwd_context.verify(raw_password, encoded_password)
        except Exception as e:
            logger.error(f"Password verification error: {type(e).__name__}")
            raise PasswordVerificationError(
                "An error occurred while verifying the password"
            ) from e

        if is_valid:
            logger.debug("Password verification successful")
        else:
            logger.debug("Password verification failed")
        return is_valid

    def needs_update(self, encoded_password: str) -> bool:
        """True when the stored hash uses outdated parameters and should be rehashed."""
        return self.pwd_context.needs_update(encoded_password)


@lru_cache()
def get_password_encoder() -> PasswordEncoder:
    """
    Get cached password encoder instance.

    Returns:
        PasswordEncoder: Singleton passlib encoder built from settings
    """
    return PasslibPasswordEncoder()
