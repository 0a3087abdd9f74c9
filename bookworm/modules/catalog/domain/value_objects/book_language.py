# 📄 File: bookworm/modules/catalog/domain/value_objects/book_language.py
# 🧭 Purpose (Layman Explanation):
# The language a book is written in, limited to the languages the library stocks.
# 🧪 Purpose (Technical Summary):
# Immutable BookLanguage value object; case-insensitive input, stored upper-case.
# 🔗 Dependencies:
# dataclasses, shared exceptions
# 🔄 Connected Modules / Calls From:
# Book model, BookCatalogService, BookRepository implementations

from dataclasses import dataclass
from typing import ClassVar, Tuple

from bookworm.shared.core.exceptions import BookValidationError


@dataclass(frozen=True)
class BookLanguage:
    value: str

    SUPPORTED_LANGUAGES: ClassVar[Tuple[str, ...]] = (
        "KOREAN", "ENGLISH", "JAPANESE", "CHINESE", "SPANISH", "FRENCH", "GERMAN",
    )

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, str) or not self.value.strip():
            raise BookValidationError("Book language is required", field="language")
        normalized = self.value.strip().upper()
        if normalized not in self.SUPPORTED_LANGUAGES:
            raise BookValidationError(
                f"Unsupported language: {self.value}. "
                f"Supported languages: {', '.join(self.SUPPORTED_LANGUAGES)}",
                field="language",
                value=self.value
            )
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: str) -> "BookLanguage":
        return cls(value)

    def __str__(self) -> str:
        return self.value
