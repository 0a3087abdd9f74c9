# 📄 File: bookworm/modules/catalog/domain/services/book_service.py
# 🧭 Purpose (Layman Explanation):
# The catalog rules: adding a book that's already on the shelf just adds copies, renaming a book
# can't clash with another book, and books that are out on loan can't be removed.
# 🧪 Purpose (Technical Summary):
# Domain service implementing duplicate detection and merge on registration, update conflict checks,
# deletion guards and stock queries over the BookRepository capability.
# 🔗 Dependencies:
# Book model, catalog value objects, BookRepository, shared settings/exceptions/logging
# 🔄 Connected Modules / Calls From:
# Application command handlers, admin tooling, tests

from typing import Optional, Union

from bookworm.modules.lending.domain.value_objects.loan_quantity import LoanQuantity
from bookworm.modules.user_management.domain.models.user import User
from bookworm.shared.config.settings import Settings, get_settings
from bookworm.shared.core.exceptions import (
    BookDeletionNotAllowedError,
    BookNotFoundError,
    DuplicateBookError,
    InvalidLoanQuantityError,
)
from bookworm.shared.utils.logging import get_logger

from ..models.book import Book
from ..repositories.book_repository import BookRepository
from ..value_objects.book_language import BookLanguage
from ..value_objects.book_quantity import BookQuantity
from ..value_objects.book_title import BookTitle
from ..value_objects.book_type import BookType

logger = get_logger(__name__)


def _coerce(value_type, value):
    """Pass value objects through; build one from a plain value."""
    if isinstance(value, value_type):
        return value
    return value_type.of(value)


class BookCatalogService:
    """
    Domain service for book catalog business rules.

    Every operation re-reads the book through the repository before acting;
    nothing is cached between calls. Value object failures propagate unchanged.
    """

    def __init__(self, book_repository: BookRepository, settings: Optional[Settings] = None):
        self.book_repository = book_repository
        self.settings = settings or get_settings()

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(
        self,
        title: Union[BookTitle, str],
        language: Union[BookLanguage, str],
        book_type: Union[BookType, str],
        quantity: Union[BookQuantity, int],
        registered_by: User
    ) -> Book:
        """
        Register a book, merging into an existing one with the same identity.

        If a book with the same (title, language, type) exists its stock grows
        by ``quantity``; otherwise a new AVAILABLE book is created. Exactly one
        ``save`` is issued either way.

        Returns:
            Book: The persisted (merged or new) book

        Raises:
            BookValidationError: If any field is invalid
            BookBusinessError: If the registering user is missing
        """
        title = _coerce(BookTitle, title)
        language = _coerce(BookLanguage, language)
        book_type = _coerce(BookType, book_type)
        quantity = _coerce(BookQuantity, quantity)

        existing = self.book_repository.find_same_book(title, language, book_type)
        if existing is not None:
            merged = existing.add_stock(quantity.value)
            saved = self.book_repository.save(merged)
            logger.log_business_event("book_merged", extra={
                "book_id": saved.id,
                "added_quantity": quantity.value,
                "total_quantity": saved.quantity.value,
            })
            return saved

        book = Book.create(title, language, book_type, quantity, registered_by)
        saved = self.book_repository.save(book)
        logger.log_business_event("book_registered", extra={
            "book_id": saved.id,
            "title": title.value,
            "language": language.value,
            "book_type": book_type.value,
            "quantity": quantity.value,
        })
        return saved

    # =========================================================================
    # UPDATE / DELETION GUARDS
    # =========================================================================

    def validate_update(
        self,
        book_id: int,
        new_title: Union[BookTitle, str],
        new_language: Union[BookLanguage, str],
        new_type: Union[BookType, str]
    ) -> None:
        """
        Check that changing a book's identity does not collide with another book.

        Raises:
            BookNotFoundError: If ``book_id`` does not exist
            DuplicateBookError: If a different book already owns the new triple
        """
        book = self._get_book(book_id)

        new_title = _coerce(BookTitle, new_title)
        new_language = _coerce(BookLanguage, new_language)
        new_type = _coerce(BookType, new_type)

        if book.is_same_book(new_title, new_language, new_type):
            return

        other = self.book_repository.find_same_book(new_title, new_language, new_type)
        if other is not None and other.id != book_id:
            logger.warning("Book update rejected: identity conflict", extra={
                "book_id": book_id,
                "existing_book_id": other.id,
            })
            raise DuplicateBookError(
                new_title.value,
                new_language.value,
                new_type.value,
                existing_book_id=other.id
            )

    def validate_deletion(self, book_id: int) -> None:
        """
        Check that a book may be removed.

        Only the status is inspected; a book with no copy on loan or held
        is deletable.

        Raises:
            BookNotFoundError: If ``book_id`` does not exist
            BookDeletionNotAllowedError: If the book is BORROWED or RESERVED
        """
        book = self._get_book(book_id)
        # TODO: also refuse when active loan records reference the book once lending persists loans
        if not book.status.is_operational():
            logger.warning("Book deletion refused", extra={
                "book_id": book_id,
                "status": book.status.value,
            })
            raise BookDeletionNotAllowedError(book_id, book.status.value)

    # =========================================================================
    # STOCK QUERIES
    # =========================================================================

    def can_borrow(self, book_id: int, requested_quantity: Union[LoanQuantity, int, None]) -> bool:
        """
        Whether ``requested_quantity`` copies can be lent right now.

        A missing or non-positive quantity is simply not borrowable.

        Raises:
            BookNotFoundError: If ``book_id`` does not exist
            InvalidLoanQuantityError: If the quantity is not an integer
        """
        book = self._get_book(book_id)
        if isinstance(requested_quantity, LoanQuantity):
            requested_quantity = requested_quantity.value
        if requested_quantity is None:
            return False
        if isinstance(requested_quantity, bool) or not isinstance(requested_quantity, int):
            raise InvalidLoanQuantityError(
                f"Loan quantity must be an integer, got {type(requested_quantity).__name__}",
                details={"value": str(requested_quantity)}
            )
        return book.can_borrow(requested_quantity)

    def is_low_stock(self, book: Book, threshold: Optional[int] = None) -> bool:
        """Quantity at or below ``threshold`` (defaults to LOW_STOCK_THRESHOLD)."""
        if threshold is None:
            threshold = self.settings.LOW_STOCK_THRESHOLD
        return book.quantity.value <= threshold

    def _get_book(self, book_id: int) -> Book:
        book = self.book_repository.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book
