# 📄 File: bookworm/modules/catalog/domain/value_objects/book_type.py
# 🧭 Purpose (Layman Explanation):
# What kind of book this is (fiction, science, comic...), from a fixed list of shelves.
# 🧪 Purpose (Technical Summary):
# Immutable BookType value object; case-insensitive input, stored upper-case.
# 🔗 Dependencies:
# dataclasses, shared exceptions
# 🔄 Connected Modules / Calls From:
# Book model, BookCatalogService, BookRepository implementations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from bookworm.shared.core.exceptions import BookValidationError


@dataclass(frozen=True)
class BookType:
    value: str

    BOOK_TYPES: ClassVar[Tuple[str, ...]] = (
        "FICTION", "NON_FICTION", "SCIENCE", "TECHNOLOGY", "HISTORY",
        "BIOGRAPHY", "REFERENCE", "TEXTBOOK", "CHILDREN", "COMIC",
    )

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, str) or not self.value.strip():
            raise BookValidationError("Book type is required", field="type")
        normalized = self.value.strip().upper()
        if normalized not in self.BOOK_TYPES:
            raise BookValidationError(
                f"Unsupported book type: {self.value}. "
                f"Supported types: {', '.join(self.BOOK_TYPES)}",
                field="type",
                value=self.value
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: str) -> "BookType":
        return cls(value)

    def __str__(self) -> str:
        return self.value
