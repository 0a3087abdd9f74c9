# 📄 File: bookworm/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save and find user information without specifying the actual database technology
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for User entities following Repository pattern and dependency inversion principle
# 🔗 Dependencies:
# Domain models (User), Email value object, typing, abc
# 🔄 Connected Modules / Calls From:
# UserDomainService, infrastructure implementations, tests

from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import User
from ..value_objects.email import Email


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Defines the contract for User data persistence following the Repository pattern.
    This interface abstracts data access from business logic, enabling:
    - Dependency inversion (domain doesn't depend on infrastructure)
    - Easy testing with in-memory implementations
    - Support for multiple storage backends
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def exists_by_email(self, email: Email) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Validated email to check

        Returns:
            True if a user owns the address
        """
        pass

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Insert or update a user.

        Args:
            user: User entity to persist

        Returns:
            Persisted User entity with generated fields populated
        """
        pass
