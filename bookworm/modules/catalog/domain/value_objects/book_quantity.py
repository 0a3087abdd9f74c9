# 📄 File: bookworm/modules/catalog/domain/value_objects/book_quantity.py
# 🧭 Purpose (Layman Explanation):
# How many copies of a book the library holds - never negative, never more than 9999.
# 🧪 Purpose (Technical Summary):
# Immutable BookQuantity value object with arithmetic that returns new instances.
# The ceiling is Settings.MAX_BOOK_QUANTITY, never above 9999.
# 🔗 Dependencies:
# dataclasses, shared settings, shared exceptions
# 🔄 Connected Modules / Calls From:
# Book model, BookCatalogService

from dataclasses import dataclass
from typing import ClassVar, Optional

from bookworm.shared.config.settings import get_settings
from bookworm.shared.core.exceptions import BookValidationError


@dataclass(frozen=True)
class BookQuantity:
    value: int

    MAX_QUANTITY: ClassVar[int] = 9999

    def __post_init__(self) -> None:
        if self.value is None:
            raise BookValidationError("Book quantity is required", field="quantity")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise BookValidationError("Book quantity must be an integer", field="quantity", value=self.value)
        if self.value < 0:
            raise BookValidationError("Book quantity must not be negative", field="quantity", value=self.value)
        limit = self.max_allowed()
        if self.value > limit:
            raise BookValidationError(
                f"Book quantity must not exceed {limit}",
                field="quantity",
                value=self.value
            )

    @classmethod
    def of(cls, value: int) -> "BookQuantity":
        return cls(value)

    @classmethod
    def max_allowed(cls) -> int:
        return min(cls.MAX_QUANTITY, get_settings().MAX_BOOK_QUANTITY)

    def increase(self, amount: int) -> "BookQuantity":
        if amount is None or amount <= 0:
            raise BookValidationError("Increase amount must be positive", field="quantity", value=amount)
        return BookQuantity(self.value + amount)

    def decrease(self, amount: int) -> "BookQuantity":
        if amount is None or amount <= 0:
            raise BookValidationError("Decrease amount must be positive", field="quantity", value=amount)
        if amount > self.value:
            raise BookValidationError(
                "Decrease amount must not exceed the current quantity",
                field="quantity",
                value=amount
            )
        return BookQuantity(self.value - amount)

    def has_stock(self, required: Optional[int] = None) -> bool:
        """Any stock at all, or at least ``required`` copies."""
        if required is None:
            return self.value > 0
        return self.value >= required

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
