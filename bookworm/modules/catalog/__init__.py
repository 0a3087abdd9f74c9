# 📄 File: bookworm/modules/catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the book catalog - which books the library owns and how many copies of each
# 🧪 Purpose (Technical Summary):
# Package initialization for the catalog module following domain-driven design
# 🔗 Dependencies:
# bookworm.shared.core, bookworm.modules.user_management, pydantic
# 🔄 Connected Modules / Calls From:
# Lending flows, admin tooling

"""
Catalog Module

- Book registration with duplicate detection and stock merge
- Update and deletion guards
- Stock queries
"""
