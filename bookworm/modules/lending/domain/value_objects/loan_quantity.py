# 📄 File: bookworm/modules/lending/domain/value_objects/loan_quantity.py
# 🧭 Purpose (Layman Explanation):
# How many copies someone borrows at once - at least one, never more than the configured limit (five at most).
# 🧪 Purpose (Technical Summary):
# Immutable LoanQuantity value object bounded to 1..max_allowed() (Settings.MAX_LOAN_QUANTITY,
# never above 5).
# 🔗 Dependencies:
# dataclasses, shared settings, shared exceptions
# 🔄 Connected Modules / Calls From:
# Lending callers, BookCatalogService.can_borrow callers

from dataclasses import dataclass
from typing import ClassVar

from bookworm.shared.config.settings import get_settings
from bookworm.shared.core.exceptions import InvalidLoanQuantityError


@dataclass(frozen=True)
class LoanQuantity:
    """Number of copies borrowed in a single request."""

    value: int

    MAX_LOAN_QUANTITY: ClassVar[int] = 5

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidLoanQuantityError("Loan quantity is required")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidLoanQuantityError(
                f"Loan quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidLoanQuantityError(
                "Loan quantity must be at least 1",
                details={"value": self.value}
            )
        limit = self.max_allowed()
        if self.value > limit:
            raise InvalidLoanQuantityError(
                f"At most {limit} copies can be borrowed at once",
                details={"value": self.value, "max": limit}
            )

    @classmethod
    def of(cls, value: int) -> "LoanQuantity":
        return cls(value)

    @classmethod
    def max_allowed(cls) -> int:
        """Configured per-request ceiling; never above MAX_LOAN_QUANTITY."""
        return min(cls.MAX_LOAN_QUANTITY, get_settings().MAX_LOAN_QUANTITY)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
