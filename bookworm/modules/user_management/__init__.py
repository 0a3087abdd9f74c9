# 📄 File: bookworm/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the membership system that handles library accounts, names, emails and passwords
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module following domain-driven design
# 🔗 Dependencies:
# bookworm.shared.core, pydantic, passlib
# 🔄 Connected Modules / Calls From:
# Catalog module (registering user on books), application layers

"""
User Management Module

- User registration with password policy enforcement
- Password change with current-password verification
- Email, password and name value objects
"""
