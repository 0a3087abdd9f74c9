# 📄 File: bookworm/modules/user_management/domain/value_objects/password.py
# 🧭 Purpose (Layman Explanation):
# A password that has either passed the strength rules or is already safely scrambled (hashed).
# 🧪 Purpose (Technical Summary):
# Immutable Password value object. Raw values are checked against the full policy and every
# violation is reported at once; hashed values are accepted as-is and flagged as encrypted.
# 🔗 Dependencies:
# dataclasses, shared validators, shared exceptions, PasswordEncoder capability
# 🔄 Connected Modules / Calls From:
# User model, UserDomainService

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bookworm.shared.core.exceptions import (
    EmptyPasswordError,
    InvalidPasswordFormatError,
    PasswordEncryptionError,
)
from bookworm.shared.utils.validators import validate_password

if TYPE_CHECKING:
    from bookworm.shared.core.security import PasswordEncoder


@dataclass(frozen=True)
class Password:
    """
    Password value object.

    Use ``Password.of`` for plaintext and ``Password.of_encrypted`` to
    rehydrate a stored hash. The raw value never appears in ``repr``/``str``.
    """

    value: str = field(repr=False)
    encrypted: bool = False

    def __post_init__(self) -> None:
        if self.encrypted:
            if self.value is None or not str(self.value).strip():
                raise PasswordEncryptionError("Encrypted password is required")
            return

        result = validate_password(self.value)
        if result.is_valid:
            return
        if result.rule == 'required':
            raise EmptyPasswordError(result.first_error)
        raise InvalidPasswordFormatError(result.errors)

    @classmethod
    def of(cls, raw_password: str) -> "Password":
        """Create a password from plaintext, enforcing the complete policy."""
        return cls(raw_password)

    @classmethod
    def of_encrypted(cls, encrypted_value: str) -> "Password":
        """Wrap an already-hashed value. No policy checks are applied."""
        return cls(encrypted_value, encrypted=True)

    @staticmethod
    def is_valid(raw_password: str) -> bool:
        """Run the full policy and report the outcome instead of raising."""
        return validate_password(raw_password).is_valid

    def encrypt(self, encoder: "PasswordEncoder") -> "Password":
        """Hash this raw password, returning a new encrypted instance."""
        if self.encrypted:
            return self
        return Password.of_encrypted(encoder.encrypt(self.value))

    def matches(self, raw_password: str, encoder: "PasswordEncoder") -> bool:
        """Check a raw password against this stored hash."""
        if not self.encrypted:
            return self.value == raw_password
        return encoder.matches(raw_password, self.value)

    def __str__(self) -> str:
        return "[ENCRYPTED]" if self.encrypted else "[RAW]"

    def __repr__(self) -> str:
        return f"Password({self})"
