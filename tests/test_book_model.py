import pytest

from bookworm.modules.catalog.domain.models.book import Book, BookStatus
from bookworm.modules.catalog.domain.value_objects.book_language import BookLanguage
from bookworm.modules.catalog.domain.value_objects.book_quantity import BookQuantity
from bookworm.modules.catalog.domain.value_objects.book_title import BookTitle
from bookworm.modules.catalog.domain.value_objects.book_type import BookType
from bookworm.shared.core.exceptions import (
    BookBusinessError,
    BookNotAvailableError,
    BookValidationError,
    InsufficientStockError,
)


def make_book(admin_user, quantity=3, status=BookStatus.AVAILABLE):
    book = Book.create(
        BookTitle("Dune"),
        BookLanguage("ENGLISH"),
        BookType("FICTION"),
        BookQuantity(quantity),
        admin_user,
    )
    return book.change_status(status)


def test_create_starts_available(admin_user):
    book = make_book(admin_user)

    assert book.id is None
    assert book.status == BookStatus.AVAILABLE
    assert book.registered_by == admin_user
    assert book.version == 0


def test_create_requires_registering_user():
    with pytest.raises(BookBusinessError):
        Book.create(
            BookTitle("Dune"),
            BookLanguage("ENGLISH"),
            BookType("FICTION"),
            BookQuantity(1),
            None,
        )


def test_add_stock_returns_copy(admin_user):
    book = make_book(admin_user, quantity=3)

    updated = book.add_stock(2)

    assert updated.quantity.value == 5
    assert book.quantity.value == 3


def test_borrow_down_to_zero_marks_borrowed(admin_user):
    book = make_book(admin_user, quantity=2)

    partly = book.borrow_stock(1)
    empty = partly.borrow_stock(1)

    assert partly.status == BookStatus.AVAILABLE
    assert empty.quantity.value == 0
    assert empty.status == BookStatus.BORROWED


def test_return_stock_makes_borrowed_book_available(admin_user):
    empty = make_book(admin_user, quantity=1).borrow_stock(1)

    returned = empty.return_stock(1)

    assert returned.status == BookStatus.AVAILABLE
    assert returned.quantity.value == 1


def test_borrow_more_than_stock_fails(admin_user):
    book = make_book(admin_user, quantity=1)

    with pytest.raises(InsufficientStockError) as exc_info:
        book.borrow_stock(2)

    assert exc_info.value.details["available"] == 1


def test_borrow_from_unavailable_status_fails(admin_user):
    book = make_book(admin_user, status=BookStatus.MAINTENANCE)

    with pytest.raises(BookNotAvailableError) as exc_info:
        book.borrow_stock(1)

    assert exc_info.value.error_code == "BOOK_NOT_AVAILABLE"
    assert exc_info.value.details["status"] == "maintenance"


def test_borrow_non_positive_amount_fails(admin_user):
    book = make_book(admin_user)

    with pytest.raises(BookValidationError):
        book.borrow_stock(0)


@pytest.mark.parametrize("amount, expected", [
    (1, True),
    (3, True),
    (4, False),
    (0, False),
    (-1, False),
    (None, False),
])
def test_can_borrow(admin_user, amount, expected):
    assert make_book(admin_user, quantity=3).can_borrow(amount) is expected


def test_is_available(admin_user):
    assert make_book(admin_user).is_available() is True
    assert make_book(admin_user, quantity=0).is_available() is False
    assert make_book(admin_user, status=BookStatus.RESERVED).is_available() is False


def test_is_same_book_uses_full_triple(admin_user):
    book = make_book(admin_user)

    assert book.is_same_book(BookTitle("Dune"), BookLanguage("english"), BookType("fiction"))
    assert not book.is_same_book(BookTitle("Dune"), BookLanguage("KOREAN"), BookType("FICTION"))
    assert not book.is_same_book(BookTitle("Dune"), BookLanguage("ENGLISH"), BookType("COMIC"))


def test_update_info_keeps_unset_fields(admin_user):
    book = make_book(admin_user)

    updated = book.update_info(title=BookTitle("Dune Messiah"))

    assert updated.title.value == "Dune Messiah"
    assert updated.language == book.language
    assert updated.quantity == book.quantity


def test_change_status_requires_value(admin_user):
    with pytest.raises(BookBusinessError):
        make_book(admin_user).change_status(None)


@pytest.mark.parametrize("status, operational", [
    (BookStatus.AVAILABLE, True),
    (BookStatus.MAINTENANCE, True),
    (BookStatus.LOST, True),
    (BookStatus.DAMAGED, True),
    (BookStatus.BORROWED, False),
    (BookStatus.RESERVED, False),
])
def test_status_is_operational(status, operational):
    assert status.is_operational() is operational


def test_status_predicates():
    assert BookStatus.AVAILABLE.can_borrow() is True
    assert BookStatus.BORROWED.can_borrow() is False
    assert BookStatus.BORROWED.can_reserve() is True
    assert BookStatus.LOST.is_problematic() is True
    assert BookStatus.AVAILABLE.description == "Available for loan and reservation"


def test_book_rejects_raw_strings_for_value_fields(admin_user):
    with pytest.raises(ValueError):
        Book(
            title="Dune",
            language=BookLanguage("ENGLISH"),
            book_type=BookType("FICTION"),
            quantity=BookQuantity(1),
            registered_by=admin_user,
        )
