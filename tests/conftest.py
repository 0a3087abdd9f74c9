"""
Shared fixtures: in-memory repositories, a deterministic password encoder
and a fixed clock.
"""

from datetime import date
from typing import Dict, List, Optional

import pytest

from bookworm.modules.catalog.domain.models.book import Book
from bookworm.modules.catalog.domain.repositories.book_repository import BookRepository
from bookworm.modules.user_management.domain.models.user import User, UserRole
from bookworm.modules.user_management.domain.repositories.user_repository import UserRepository
from bookworm.modules.user_management.domain.value_objects.email import Email
from bookworm.shared.config.settings import Settings, get_settings
from bookworm.shared.core.clock import FixedClock
from bookworm.shared.core.exceptions import PasswordEncryptionError
from bookworm.shared.core.security import PasswordEncoder

TODAY = date(2024, 3, 15)


class InMemoryBookRepository(BookRepository):
    def __init__(self):
        self.books: Dict[int, Book] = {}
        self.saved: List[Book] = []
        self._next_id = 1

    def find_same_book(self, title, language, book_type) -> Optional[Book]:
        for book in self.books.values():
            if book.is_same_book(title, language, book_type):
                return book
        return None

    def find_by_id(self, book_id: int) -> Optional[Book]:
        return self.books.get(book_id)

    def save(self, book: Book) -> Book:
        if book.id is None:
            book = book.model_copy(update={"id": self._next_id})
            self._next_id += 1
        else:
            book = book.model_copy(update={"version": book.version + 1})
        self.books[book.id] = book
        self.saved.append(book)
        return book

    def add(self, book: Book) -> Book:
        """Seed a book with a chosen id without counting it as a save."""
        self.books[book.id] = book
        self._next_id = max(self._next_id, book.id + 1)
        return book


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: Dict[int, User] = {}
        self.saved: List[User] = []
        self._next_id = 1

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def exists_by_email(self, email: Email) -> bool:
        return any(user.email == email for user in self.users.values())

    def save(self, user: User) -> User:
        if user.id is None:
            user = user.model_copy(update={"id": self._next_id})
            self._next_id += 1
        self.users[user.id] = user
        self.saved.append(user)
        return user


class FakePasswordEncoder(PasswordEncoder):
    """Reversible 'hash' so tests can reason about stored values."""

    PREFIX = "hashed::"

    def __init__(self, fail_on_encrypt: bool = False):
        self.fail_on_encrypt = fail_on_encrypt
        self.encrypted: List[str] = []
        self.match_calls = 0

    def encrypt(self, raw_password: str) -> str:
        if self.fail_on_encrypt:
            raise PasswordEncryptionError("hashing backend unavailable")
        self.encrypted.append(raw_password)
        return f"{self.PREFIX}{raw_password}"

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        self.match_calls += 1
        return encoded_password == f"{self.PREFIX}{raw_password}"


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def settings():
    return Settings(ENVIRONMENT="test", LOW_STOCK_THRESHOLD=2, BCRYPT_ROUNDS=4)


@pytest.fixture
def policy(monkeypatch):
    """Override library policy settings through the environment."""
    def apply(**overrides):
        for key, value in overrides.items():
            monkeypatch.setenv(key, str(value))
        get_settings.cache_clear()

    yield apply
    get_settings.cache_clear()


@pytest.fixture
def book_repository():
    return InMemoryBookRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def password_encoder():
    return FakePasswordEncoder()


@pytest.fixture
def admin_user():
    return User.create(
        last_name="Kim",
        first_name="Minji",
        email="librarian@example.com",
        encrypted_password=f"{FakePasswordEncoder.PREFIX}Secret1!",
        role=UserRole.ADMIN,
    ).model_copy(update={"id": 1})
