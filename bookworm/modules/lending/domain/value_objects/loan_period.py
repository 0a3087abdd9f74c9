# 📄 File: bookworm/modules/lending/domain/value_objects/loan_period.py
# 🧭 Purpose (Layman Explanation):
# The dates of a loan - when it started and when the book is due back - plus questions like
# "is it late?" and "push the due date out by a few days".
# 🧪 Purpose (Technical Summary):
# Immutable LoanPeriod value object. Construction is checked against an injected Clock;
# extension returns a new period and never mutates. Default length and extension ceiling
# come from Settings.
# 🔗 Dependencies:
# dataclasses, datetime, shared clock, shared settings, shared exceptions
# 🔄 Connected Modules / Calls From:
# Lending callers and schedulers

from dataclasses import InitVar, dataclass
from datetime import date, timedelta
from typing import ClassVar, Optional

from bookworm.shared.config.settings import get_settings
from bookworm.shared.core.clock import Clock
from bookworm.shared.core.exceptions import InvalidLoanExtensionError, InvalidLoanPeriodError


@dataclass(frozen=True)
class LoanPeriod:
    """
    Loan start date and due date.

    Invariants:
    - both dates are present
    - the due date is not before the loan date
    - the loan date is not before the clock's today at construction;
      ``extend`` keeps the original loan date, which may lie in the past by then

    Date-relative facts (days until due, overdue) take the clock as an
    argument so they stay deterministic.
    """

    loan_date: date
    due_date: date
    clock: InitVar[Optional[Clock]] = None

    DEFAULT_LOAN_DAYS: ClassVar[int] = 14
    MAX_EXTENSION_DAYS: ClassVar[int] = 14

    def __post_init__(self, clock: Optional[Clock]) -> None:
        self._check_dates(self.loan_date, self.due_date)
        if clock is None:
            raise InvalidLoanPeriodError("A clock is required to validate the loan date")
        today = clock.today()
        if self.loan_date < today:
            raise InvalidLoanPeriodError(
                "Loan date must not be in the past",
                details={"loan_date": self.loan_date.isoformat(), "today": today.isoformat()}
            )

    @staticmethod
    def _check_dates(loan_date: date, due_date: date) -> None:
        if loan_date is None:
            raise InvalidLoanPeriodError("Loan date is required")
        if due_date is None:
            raise InvalidLoanPeriodError("Due date is required")
        if due_date < loan_date:
            raise InvalidLoanPeriodError(
                "Due date must not be before the loan date",
                details={
                    "loan_date": loan_date.isoformat(),
                    "due_date": due_date.isoformat(),
                }
            )

    @classmethod
    def _extended(cls, loan_date: date, due_date: date) -> "LoanPeriod":
        # Extending keeps a loan date that may have passed, so skip the clock check.
        cls._check_dates(loan_date, due_date)
        period = object.__new__(cls)
        object.__setattr__(period, "loan_date", loan_date)
        object.__setattr__(period, "due_date", due_date)
        return period

    @classmethod
    def of(cls, loan_date: date, due_date: date, clock: Clock) -> "LoanPeriod":
        """Create a period from explicit dates, rejecting a loan date in the past."""
        return cls(loan_date, due_date, clock)

    @classmethod
    def of_days(cls, days: int, clock: Clock) -> "LoanPeriod":
        """Create a period starting today and lasting ``days`` days."""
        if days is None or days <= 0:
            raise InvalidLoanPeriodError(
                "Loan period must be at least 1 day",
                details={"days": days}
            )
        today = clock.today()
        return cls.of(today, today + timedelta(days=days), clock)

    @classmethod
    def create_default(cls, clock: Clock, days: Optional[int] = None) -> "LoanPeriod":
        """Create the standard period starting today (DEFAULT_LOAN_PERIOD_DAYS unless given)."""
        if days is None:
            days = get_settings().DEFAULT_LOAN_PERIOD_DAYS
        return cls.of_days(days, clock)

    @classmethod
    def max_extension_days(cls) -> int:
        """Configured extension ceiling; never above MAX_EXTENSION_DAYS."""
        return min(cls.MAX_EXTENSION_DAYS, get_settings().MAX_EXTENSION_DAYS)

    def extend(self, days: int) -> "LoanPeriod":
        """
        Push the due date forward by ``days`` (1..max_extension_days()).

        Returns:
            A new LoanPeriod; the loan date is unchanged.
        """
        if days is None or days <= 0:
            raise InvalidLoanExtensionError(
                "Extension must be at least 1 day",
                details={"days": days}
            )
        limit = self.max_extension_days()
        if days > limit:
            raise InvalidLoanExtensionError(
                f"A loan can be extended by at most {limit} days",
                details={"days": days, "max": limit}
            )
        return LoanPeriod._extended(self.loan_date, self.due_date + timedelta(days=days))

    def days_until_due(self, clock: Clock) -> int:
        """Days from today to the due date; negative once overdue."""
        return (self.due_date - clock.today()).days

    @property
    def total_loan_days(self) -> int:
        return (self.due_date - self.loan_date).days

    def is_overdue(self, clock: Clock) -> bool:
        return clock.today() > self.due_date

    def overdue_days(self, clock: Clock) -> int:
        if not self.is_overdue(clock):
            return 0
        return (clock.today() - self.due_date).days

    def __str__(self) -> str:
        return f"LoanPeriod(loan_date={self.loan_date}, due_date={self.due_date})"
