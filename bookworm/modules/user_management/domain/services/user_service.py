# 📄 File: bookworm/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business logic for managing library accounts - signing people up with a
# strong password and letting them change it when they prove they know the old one.
# 🧪 Purpose (Technical Summary):
# Domain service implementing user registration and password change over the UserRepository and
# PasswordEncoder capabilities; password policy always runs on the raw value before hashing.
# 🔗 Dependencies:
# User domain model, user value objects, UserRepository, PasswordEncoder, shared exceptions/logging
# 🔄 Connected Modules / Calls From:
# Application command handlers, authentication services, tests

from bookworm.shared.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from bookworm.shared.core.security import PasswordEncoder
from bookworm.shared.utils.logging import get_logger

from ..models.user import User, UserRole
from ..repositories.user_repository import UserRepository
from ..value_objects.email import Email
from ..value_objects.full_name import FullName
from ..value_objects.password import Password

logger = get_logger(__name__)


class UserDomainService:
    """
    Domain service for user account business logic.

    Value object and hashing failures propagate to the caller unchanged.
    """

    def __init__(self, user_repository: UserRepository, password_encoder: PasswordEncoder):
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register_user(
        self,
        last_name: str,
        first_name: str,
        email: str,
        raw_password: str,
        role: UserRole = UserRole.USER
    ) -> User:
        """
        Register a new user account.

        Args:
            last_name: Family name (1-20 characters)
            first_name: Given name (2-30 characters)
            email: Email address
            raw_password: Plaintext password, checked against the full policy
            role: Account role

        Returns:
            User: The persisted user with an encrypted password

        Raises:
            EmptyPasswordError / InvalidPasswordFormatError: On password policy failure
            NameException / EmailException: On invalid name or email
            DuplicateEmailError: If the email is already registered
            PasswordEncryptionError: If hashing fails
        """
        password = Password.of(raw_password)
        name = FullName.of(last_name, first_name)
        email_address = Email.of(email)

        if self.user_repository.exists_by_email(email_address):
            logger.warning("Registration rejected: email already registered", extra={
                "email": email_address.masked(),
            })
            raise DuplicateEmailError(details={"email": email_address.masked()})

        user = User(
            name=name,
            email=email_address,
            password=password.encrypt(self.password_encoder),
            role=role,
        )
        saved = self.user_repository.save(user)

        logger.log_business_event("user_registered", extra={
            "user_id": saved.id,
            "email": email_address.masked(),
            "role": role.value,
        })
        return saved

    def register_admin(self, last_name: str, first_name: str, email: str, raw_password: str) -> User:
        """Register a user with the ADMIN role."""
        return self.register_user(last_name, first_name, email, raw_password, role=UserRole.ADMIN)

    # =========================================================================
    # CREDENTIALS
    # =========================================================================

    def change_password(self, user_id: int, current_password: str, new_password: str) -> User:
        """
        Replace a user's password after verifying the current one.

        The current password is verified before the new one is looked at, so a
        wrong current password fails with InvalidCredentialsError even when the
        new password would also break the policy. A missing current password is a
        mismatch and never reaches the encoder.

        Returns:
            User: The persisted copy carrying the new hash

        Raises:
            UserNotFoundError: If the user does not exist
            InvalidCredentialsError: If ``current_password`` does not match
            EmptyPasswordError / InvalidPasswordFormatError: On new password policy failure
            PasswordEncryptionError / PasswordVerificationError: On hashing failures
        """
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not current_password or not user.password.matches(current_password, self.password_encoder):
            logger.warning("Password change rejected: current password mismatch", extra={
                "user_id": user_id,
            })
            raise InvalidCredentialsError()

        encrypted = Password.of(new_password).encrypt(self.password_encoder)
        saved = self.user_repository.save(user.with_encrypted_password(encrypted.value))

        logger.log_business_event("password_changed", extra={"user_id": user_id})
        return saved
