# 📄 File: bookworm/modules/catalog/domain/repositories/book_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for finding and saving books without saying which database is used.
# 🧪 Purpose (Technical Summary):
# Repository interface for Book entities following the Repository pattern and dependency
# inversion; the catalog rules depend only on this capability.
# 🔗 Dependencies:
# Book model, catalog value objects, abc, typing
# 🔄 Connected Modules / Calls From:
# BookCatalogService, infrastructure implementations, tests

from abc import ABC, abstractmethod
from typing import Optional

from ..models.book import Book
from ..value_objects.book_language import BookLanguage
from ..value_objects.book_title import BookTitle
from ..value_objects.book_type import BookType


class BookRepository(ABC):
    """
    Repository interface for Book entity data access operations.

    Implementation Notes:
    - Methods return domain entities (Book), not database models
    - Reads issued after a ``save`` in the same call sequence must see it
    - ``BookCatalogService.register`` is a find-then-write sequence. Two
      concurrent registrations of the same (title, language, type) can both
      miss the lookup and insert twice, or both read the same stock and lose
      an increment. Implementations must either enforce uniqueness on
      (title, language, type) and treat a conflicting insert as a merge to
      retry, or run the whole registration inside one serializing
      transaction (for example using ``Book.version`` as an optimistic lock).
      This layer does not guard against the race itself.
    """

    @abstractmethod
    def find_same_book(
        self,
        title: BookTitle,
        language: BookLanguage,
        book_type: BookType
    ) -> Optional[Book]:
        """
        Find the book sharing the (title, language, type) triple.

        Returns:
            Book if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_id(self, book_id: int) -> Optional[Book]:
        """
        Get book by ID.

        Returns:
            Book entity if found, None otherwise
        """
        pass

    @abstractmethod
    def save(self, book: Book) -> Book:
        """
        Insert or update a book.

        Args:
            book: Book entity to persist (``id`` is None for a new book)

        Returns:
            Persisted Book entity with storage-generated fields populated
        """
        pass
