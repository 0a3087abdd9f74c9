# 📄 File: bookworm/modules/catalog/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the catalog rules for adding, renaming and removing books
# 🧪 Purpose (Technical Summary):
# Package initialization for catalog domain services
# 🔗 Dependencies:
# Book model, value objects, BookRepository
# 🔄 Connected Modules / Calls From:
# Application layer, tests

from .book_service import BookCatalogService

__all__ = [
    "BookCatalogService"
]
