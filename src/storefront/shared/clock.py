"""Source of "today" for date-dependent rules.

Sale expiry and order shipment both compare against the current date. The
registry takes a clock so tests can pin the date instead of reading the wall
clock.
"""

from abc import ABC, abstractmethod
from datetime import date, timedelta


class Clock(ABC):
    """Abstract source of the current date."""

    @abstractmethod
    def today(self) -> date: ...


class SystemClock(Clock):
    """Reads today's date from the local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock(Clock):
    """Always reports the same date."""

    def __init__(self, current: date):
        self.current = current

    def today(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> None:
        self.current = self.current + timedelta(days=days)
