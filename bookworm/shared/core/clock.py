# 📄 File: bookworm/shared/core/clock.py
# 🧭 Purpose (Layman Explanation):
# Tells the library rules what "today" is, so loan dates can be checked - and lets tests
# pretend it is any day they like.
# 🧪 Purpose (Technical Summary):
# Injectable clock capability with a system implementation and a fixed implementation
# for deterministic loan-period validation.
# 🔗 Dependencies:
# abc, datetime
# 🔄 Connected Modules / Calls From:
# LoanPeriod value object, tests

from abc import ABC, abstractmethod
from datetime import date, datetime, time, tzinfo
from typing import Optional, Union


class Clock(ABC):
    """Source of the current date and time."""

    @abstractmethod
    def now(self) -> datetime:
        """Current date and time."""
        pass

    def today(self) -> date:
        """Current calendar date."""
        return self.now().date()


class SystemClock(Clock):
    """Reads the system clock, optionally in a fixed timezone."""

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock(Clock):
    """Always returns the same instant. Used to make date rules deterministic."""

    def __init__(self, current: Union[date, datetime]):
        if isinstance(current, datetime):
            self.current = current
        else:
            self.current = datetime.combine(current, time.min)

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()
