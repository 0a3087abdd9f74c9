# 📄 File: bookworm/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a library member or librarian is - their name, email, scrambled password and role.
# 🧪 Purpose (Technical Summary):
# User domain model composed of validated value objects. Password changes produce a new copy
# carrying the new hash; the stored credential must always be an encrypted Password.
# 🔗 Dependencies:
# pydantic, enum, user value objects
# 🔄 Connected Modules / Calls From:
# UserDomainService, UserRepository implementations, Book model (registered_by)

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, InstanceOf, field_validator

from ..value_objects.email import Email
from ..value_objects.full_name import FullName
from ..value_objects.password import Password


class UserRole(str, Enum):
    """User role enumeration"""
    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """User status enumeration"""
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DEACTIVATED = "deactivated"


class User(BaseModel):
    """
    User domain model.

    Identity (``id``) is assigned by storage; a freshly registered user
    has ``id=None`` until saved.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    name: InstanceOf[FullName]
    email: InstanceOf[Email]
    password: InstanceOf[Password]
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE

    @field_validator('password')
    @classmethod
    def validate_password_encrypted(cls, v: Password) -> Password:
        """A user only ever stores a hashed credential."""
        if not v.encrypted:
            raise ValueError('User password must be stored encrypted')
        return v

    @classmethod
    def create(
        cls,
        last_name: str,
        first_name: str,
        email: str,
        encrypted_password: str,
        role: UserRole = UserRole.USER
    ) -> "User":
        """
        Create a user from raw field values and an already-hashed password.

        Raises:
            NameException / EmailException: if a value object rejects its input
            PasswordEncryptionError: if the hash is blank
        """
        return cls(
            name=FullName.of(last_name, first_name),
            email=Email.of(email),
            password=Password.of_encrypted(encrypted_password),
            role=role,
        )

    def with_encrypted_password(self, encrypted_password: str) -> "User":
        """Copy of this user carrying a new hashed password; every other field is unchanged."""
        return self.model_copy(update={"password": Password.of_encrypted(encrypted_password)})

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert user to dictionary. The credential is never included.
        """
        return {
            "id": self.id,
            "last_name": self.name.last_name.value,
            "first_name": self.name.first_name.value,
            "full_name": self.name.full_name,
            "email": self.email.value,
            "role": self.role.value,
            "status": self.status.value,
        }

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email.masked()!r}, role={self.role.value!r})"
