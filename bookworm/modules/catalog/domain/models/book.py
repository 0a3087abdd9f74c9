# 📄 File: bookworm/modules/catalog/domain/models/book.py
# 🧭 Purpose (Layman Explanation):
# Defines what a book in the catalog is - its title, language, kind, how many copies we have,
# and whether it can currently be lent out.
# 🧪 Purpose (Technical Summary):
# Book domain model and BookStatus enumeration. Stock changes return new copies so callers
# always write back a derived value; (title, language, type) is the duplicate identity.
# 🔗 Dependencies:
# pydantic, enum, catalog value objects, User model
# 🔄 Connected Modules / Calls From:
# BookCatalogService, BookRepository implementations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, InstanceOf

from bookworm.modules.user_management.domain.models.user import User
from bookworm.shared.core.exceptions import (
    BookBusinessError,
    BookNotAvailableError,
    InsufficientStockError,
)

from ..value_objects.book_language import BookLanguage
from ..value_objects.book_quantity import BookQuantity
from ..value_objects.book_title import BookTitle
from ..value_objects.book_type import BookType


class BookStatus(str, Enum):
    """Book status enumeration"""
    AVAILABLE = "available"           # Can be borrowed or reserved
    BORROWED = "borrowed"             # Every copy is on loan
    RESERVED = "reserved"             # Held for a reservation
    MAINTENANCE = "maintenance"       # Temporarily out for repair
    LOST = "lost"
    DAMAGED = "damaged"

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]

    def can_borrow(self) -> bool:
        return self == BookStatus.AVAILABLE

    def can_reserve(self) -> bool:
        return self in (BookStatus.AVAILABLE, BookStatus.BORROWED)

    def is_operational(self) -> bool:
        """True when no copy is on loan or held, so the book may be removed."""
        return self not in (BookStatus.BORROWED, BookStatus.RESERVED)

    def is_problematic(self) -> bool:
        return self in (BookStatus.LOST, BookStatus.DAMAGED)


_STATUS_DESCRIPTIONS = {
    BookStatus.AVAILABLE: "Available for loan and reservation",
    BookStatus.BORROWED: "All copies are on loan",
    BookStatus.RESERVED: "Held for a reservation",
    BookStatus.MAINTENANCE: "Temporarily unavailable for maintenance",
    BookStatus.LOST: "Lost",
    BookStatus.DAMAGED: "Damaged",
}


class Book(BaseModel):
    """
    Book domain model.

    Identity for duplicate detection is the (title, language, book_type)
    triple, not the title alone. ``id`` is assigned by storage.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    title: InstanceOf[BookTitle]
    language: InstanceOf[BookLanguage]
    book_type: InstanceOf[BookType]
    quantity: InstanceOf[BookQuantity]
    status: BookStatus = BookStatus.AVAILABLE
    registered_by: User
    version: int = 0

    @classmethod
    def create(
        cls,
        title: BookTitle,
        language: BookLanguage,
        book_type: BookType,
        quantity: BookQuantity,
        registered_by: User
    ) -> "Book":
        """
        Create a new, not yet persisted book in AVAILABLE status.

        Raises:
            BookBusinessError: If the registering user is missing
        """
        if registered_by is None:
            raise BookBusinessError("Registering user is required")

        return cls(
            title=title,
            language=language,
            book_type=book_type,
            quantity=quantity,
            status=BookStatus.AVAILABLE,
            registered_by=registered_by,
        )

    # Stock operations return updated copies

    def add_stock(self, amount: int) -> "Book":
        """Add copies; a BORROWED book becomes AVAILABLE again once it has stock."""
        quantity = self.quantity.increase(amount)
        status = self.status
        if status == BookStatus.BORROWED and quantity.has_stock():
            status = BookStatus.AVAILABLE
        return self.model_copy(update={"quantity": quantity, "status": status})

    def borrow_stock(self, amount: int) -> "Book":
        """
        Take copies out on loan; the book becomes BORROWED when none remain.

        Raises:
            BookNotAvailableError: If the status does not allow lending
            InsufficientStockError: If fewer than ``amount`` copies are in stock
            BookValidationError: If ``amount`` is not positive
        """
        if not self.status.can_borrow():
            raise BookNotAvailableError(
                f"Book is not available for loan: {self.status.value}",
                details={"book_id": self.id, "status": self.status.value}
            )
        if amount is not None and not self.quantity.has_stock(amount):
            raise InsufficientStockError(
                requested=amount,
                available=self.quantity.value,
                status=self.status.value
            )
        quantity = self.quantity.decrease(amount)
        status = self.status if quantity.has_stock() else BookStatus.BORROWED
        return self.model_copy(update={"quantity": quantity, "status": status})

    def return_stock(self, amount: int) -> "Book":
        """Bring copies back from loan."""
        return self.add_stock(amount)

    def change_status(self, new_status: BookStatus) -> "Book":
        if new_status is None:
            raise BookBusinessError("Book status is required")
        return self.model_copy(update={"status": BookStatus(new_status)})

    def update_info(
        self,
        title: Optional[BookTitle] = None,
        language: Optional[BookLanguage] = None,
        book_type: Optional[BookType] = None,
        quantity: Optional[BookQuantity] = None
    ) -> "Book":
        """Copy with the given attributes replaced; ``None`` keeps the current value."""
        update = {
            key: value
            for key, value in (
                ("title", title),
                ("language", language),
                ("book_type", book_type),
                ("quantity", quantity),
            )
            if value is not None
        }
        return self.model_copy(update=update)

    # Queries

    def can_borrow(self, amount: Optional[int]) -> bool:
        """AVAILABLE status and at least ``amount`` copies in stock."""
        if amount is None or amount <= 0:
            return False
        return self.status.can_borrow() and self.quantity.has_stock(amount)

    def is_available(self) -> bool:
        return self.status.can_borrow() and self.quantity.has_stock()

    def is_same_book(self, title: BookTitle, language: BookLanguage, book_type: BookType) -> bool:
        return (
            self.title == title
            and self.language == language
            and self.book_type == book_type
        )

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id!r}, title={self.title.value!r}, language={self.language.value!r}, "
            f"type={self.book_type.value!r}, quantity={self.quantity.value}, status={self.status.value!r})"
        )
