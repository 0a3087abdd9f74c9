# 📄 File: bookworm/modules/catalog/domain/value_objects/book_title.py
# 🧭 Purpose (Layman Explanation):
# A book's title, trimmed and checked so it is never empty or absurdly long.
# 🧪 Purpose (Technical Summary):
# Immutable BookTitle value object (1..200 characters after trimming).
# 🔗 Dependencies:
# dataclasses, shared exceptions
# 🔄 Connected Modules / Calls From:
# Book model, BookCatalogService, BookRepository implementations

from dataclasses import dataclass
from typing import ClassVar

from bookworm.shared.core.exceptions import BookValidationError


@dataclass(frozen=True)
class BookTitle:
    value: str

    MAX_LENGTH: ClassVar[int] = 200

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, str) or not self.value.strip():
            raise BookValidationError("Book title is required", field="title")
        if len(self.value.strip()) > self.MAX_LENGTH:
            raise BookValidationError(
                f"Book title must not exceed {self.MAX_LENGTH} characters",
                field="title"
            )
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def of(cls, value: str) -> "BookTitle":
        return cls(value)

    def __str__(self) -> str:
        return self.value
