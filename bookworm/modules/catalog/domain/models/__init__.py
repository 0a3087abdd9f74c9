"""
Catalog Domain Models

Models:
- Book: catalog entry identified by (title, language, type) for duplicate detection
- BookStatus: lending state of a book
"""

from .book import Book, BookStatus

__all__ = [
    "Book",
    "BookStatus",
]
