# 📄 File: bookworm/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core user data model - what we store about a library member
# 🧪 Purpose (Technical Summary):
# Package initialization for domain models containing the User entity with its enums
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, catalog Book model

from .user import (
    User,
    UserRole,
    UserStatus
)

__all__ = [
    "User",
    "UserRole",
    "UserStatus",
]
