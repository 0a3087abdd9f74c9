import pytest

from bookworm.modules.catalog.domain.models.book import Book, BookStatus
from bookworm.modules.catalog.domain.services.book_service import BookCatalogService
from bookworm.modules.catalog.domain.value_objects.book_language import BookLanguage
from bookworm.modules.catalog.domain.value_objects.book_quantity import BookQuantity
from bookworm.modules.catalog.domain.value_objects.book_title import BookTitle
from bookworm.modules.catalog.domain.value_objects.book_type import BookType
from bookworm.modules.lending.domain.value_objects.loan_quantity import LoanQuantity
from bookworm.shared.core.exceptions import (
    BookBusinessError,
    BookDeletionNotAllowedError,
    BookNotFoundError,
    BookValidationError,
    DuplicateBookError,
    InvalidLoanQuantityError,
)


@pytest.fixture
def service(book_repository, settings):
    return BookCatalogService(book_repository, settings=settings)


def seed(repository, admin_user, book_id, title, language="ENGLISH", book_type="FICTION",
         quantity=3, status=BookStatus.AVAILABLE):
    book = Book(
        id=book_id,
        title=BookTitle(title),
        language=BookLanguage(language),
        book_type=BookType(book_type),
        quantity=BookQuantity(quantity),
        status=status,
        registered_by=admin_user,
    )
    return repository.add(book)


# =========================================================================
# register
# =========================================================================

def test_register_new_book(service, book_repository, admin_user):
    book = service.register("Dune", "ENGLISH", "FICTION", 3, admin_user)

    assert book.id == 1
    assert book.quantity.value == 3
    assert book.status == BookStatus.AVAILABLE
    assert book.registered_by == admin_user
    assert len(book_repository.saved) == 1


def test_register_same_triple_merges_stock(service, book_repository, admin_user):
    first = service.register("Dune", "ENGLISH", "FICTION", 3, admin_user)
    second = service.register("Dune", "ENGLISH", "FICTION", 2, admin_user)

    assert second.id == first.id
    assert second.quantity.value == 5
    assert len(book_repository.books) == 1
    assert len(book_repository.saved) == 2


def test_register_normalizes_before_matching(service, book_repository, admin_user):
    service.register("Dune", "ENGLISH", "FICTION", 3, admin_user)
    merged = service.register(" Dune ", "english", "fiction", 1, admin_user)

    assert merged.quantity.value == 4
    assert len(book_repository.books) == 1


def test_register_accepts_value_objects(service, admin_user):
    book = service.register(
        BookTitle("Dune"),
        BookLanguage("ENGLISH"),
        BookType("FICTION"),
        BookQuantity(2),
        admin_user,
    )

    assert book.quantity == BookQuantity(2)


@pytest.mark.parametrize("language, book_type", [
    ("KOREAN", "FICTION"),
    ("ENGLISH", "COMIC"),
])
def test_register_different_language_or_type_creates_new_book(service, book_repository, admin_user,
                                                               language, book_type):
    service.register("Dune", "ENGLISH", "FICTION", 3, admin_user)
    other = service.register("Dune", language, book_type, 1, admin_user)

    assert other.id == 2
    assert len(book_repository.books) == 2


def test_register_merge_revives_borrowed_book(service, book_repository, admin_user):
    seed(book_repository, admin_user, 5, "Dune", quantity=0, status=BookStatus.BORROWED)

    merged = service.register("Dune", "ENGLISH", "FICTION", 1, admin_user)

    assert merged.id == 5
    assert merged.status == BookStatus.AVAILABLE


def test_register_invalid_value_saves_nothing(service, book_repository, admin_user):
    with pytest.raises(BookValidationError):
        service.register("", "ENGLISH", "FICTION", 1, admin_user)

    assert book_repository.saved == []


def test_register_without_user_fails(service, book_repository):
    with pytest.raises(BookBusinessError):
        service.register("Dune", "ENGLISH", "FICTION", 1, None)

    assert book_repository.saved == []


def test_register_propagates_storage_failure(admin_user, settings):
    class FailingRepository:
        def find_same_book(self, title, language, book_type):
            return None

        def save(self, book):
            raise RuntimeError("storage down")

    service = BookCatalogService(FailingRepository(), settings=settings)

    with pytest.raises(RuntimeError):
        service.register("Dune", "ENGLISH", "FICTION", 1, admin_user)


# =========================================================================
# validate_update
# =========================================================================

def test_validate_update_own_triple_is_noop(service, book_repository, admin_user):
    seed(book_repository, admin_user, 7, "Dune")
    seed(book_repository, admin_user, 9, "Emma")

    service.validate_update(7, "Dune", "ENGLISH", "FICTION")

    assert book_repository.saved == []


def test_validate_update_conflicting_triple_fails(service, book_repository, admin_user):
    seed(book_repository, admin_user, 7, "Dune")
    seed(book_repository, admin_user, 9, "Emma")

    with pytest.raises(DuplicateBookError) as exc_info:
        service.validate_update(7, "Emma", "ENGLISH", "FICTION")

    assert exc_info.value.details["existing_book_id"] == 9


def test_validate_update_free_triple_succeeds(service, book_repository, admin_user):
    seed(book_repository, admin_user, 7, "Dune")
    seed(book_repository, admin_user, 9, "Emma")

    service.validate_update(7, "Dune Messiah", "ENGLISH", "FICTION")
    service.validate_update(7, "Emma", "KOREAN", "FICTION")


def test_validate_update_missing_book(service):
    with pytest.raises(BookNotFoundError):
        service.validate_update(404, "Dune", "ENGLISH", "FICTION")


# =========================================================================
# validate_deletion
# =========================================================================

@pytest.mark.parametrize("status", [BookStatus.BORROWED, BookStatus.RESERVED])
def test_validate_deletion_refuses_lent_or_held(service, book_repository, admin_user, status):
    seed(book_repository, admin_user, 3, "Dune", status=status)

    with pytest.raises(BookDeletionNotAllowedError) as exc_info:
        service.validate_deletion(3)

    assert exc_info.value.details == {"book_id": 3, "status": status.value}


@pytest.mark.parametrize("status", [
    BookStatus.AVAILABLE,
    BookStatus.MAINTENANCE,
    BookStatus.LOST,
    BookStatus.DAMAGED,
])
def test_validate_deletion_allows_operational(service, book_repository, admin_user, status):
    seed(book_repository, admin_user, 3, "Dune", status=status)

    service.validate_deletion(3)


def test_validate_deletion_missing_book(service):
    with pytest.raises(BookNotFoundError):
        service.validate_deletion(1)


# =========================================================================
# can_borrow / is_low_stock
# =========================================================================

@pytest.mark.parametrize("requested, expected", [(1, True), (3, True), (4, False), (0, False)])
def test_can_borrow(service, book_repository, admin_user, requested, expected):
    seed(book_repository, admin_user, 1, "Dune", quantity=3)

    assert service.can_borrow(1, requested) is expected


def test_can_borrow_unavailable_status(service, book_repository, admin_user):
    seed(book_repository, admin_user, 1, "Dune", quantity=3, status=BookStatus.MAINTENANCE)

    assert service.can_borrow(1, 1) is False


def test_can_borrow_accepts_loan_quantity(service, book_repository, admin_user):
    seed(book_repository, admin_user, 1, "Dune", quantity=3)

    assert service.can_borrow(1, LoanQuantity.of(2)) is True
    assert service.can_borrow(1, None) is False


@pytest.mark.parametrize("requested", [3.9, 1.0, "2", True])
def test_can_borrow_rejects_non_integer_quantity(service, book_repository, admin_user, requested):
    seed(book_repository, admin_user, 1, "Dune", quantity=3)

    with pytest.raises(InvalidLoanQuantityError):
        service.can_borrow(1, requested)


def test_can_borrow_missing_book(service):
    with pytest.raises(BookNotFoundError):
        service.can_borrow(1, 1)


def test_is_low_stock(service, book_repository, admin_user):
    low = seed(book_repository, admin_user, 1, "Dune", quantity=2)
    plenty = seed(book_repository, admin_user, 2, "Emma", quantity=3)

    assert service.is_low_stock(low) is True
    assert service.is_low_stock(plenty) is False
    assert service.is_low_stock(plenty, threshold=3) is True
    assert service.is_low_stock(low, threshold=1) is False
