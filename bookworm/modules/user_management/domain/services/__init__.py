# 📄 File: bookworm/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the business logic services that handle account operations like registration and password changes
# 🧪 Purpose (Technical Summary):
# Package initialization for domain services implementing core user account business logic
# 🔗 Dependencies:
# Domain models, value objects, repositories, password encoder
# 🔄 Connected Modules / Calls From:
# Application layer, authentication flows, tests

from .user_service import UserDomainService

__all__ = [
    "UserDomainService"
]
