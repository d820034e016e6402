"""A simplified in-game calendar of twelve thirty-day months."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
_NUMBER = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1
_U8_MAX = 255


class DateError(ValueError):
    """Raised for an invalid or unparsable game date."""

    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    PARSE_ERROR = "parse_error"

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or reason)
        self.reason = reason


class Weekday(Enum):
    """Day of the week; the calendar starts on a Monday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True, order=True)
class GameDate:
    """A date on the game calendar."""

    year: int
    month: int
    day: int

    DAYS_PER_MONTH: ClassVar[int] = 30
    MONTHS_PER_YEAR: ClassVar[int] = 12
    DAYS_PER_YEAR: ClassVar[int] = 360

    def __post_init__(self) -> None:
        if not 1 <= self.month <= self.MONTHS_PER_YEAR:
            raise DateError(DateError.INVALID_MONTH, f"invalid month: {self.month}")
        if not 1 <= self.day <= self.DAYS_PER_MONTH:
            raise DateError(DateError.INVALID_DAY, f"invalid day: {self.day}")

    def to_day_index(self) -> int:
        """Number of days since day 1 of year 0."""
        return (
            self.year * self.DAYS_PER_YEAR
            + (self.month - 1) * self.DAYS_PER_MONTH
            + (self.day - 1)
        )

    @classmethod
    def from_day_index(cls, days: int) -> GameDate:
        """Inverse of :meth:`to_day_index`."""
        if days < 0:
            raise ValueError(f"day index must not be negative: {days}")
        year, rest = divmod(days, cls.DAYS_PER_YEAR)
        month, day = divmod(rest, cls.DAYS_PER_MONTH)
        return cls(year, month + 1, day + 1)

    def weekday(self) -> int:
        """Weekday number, 0 being Monday."""
        return self.to_day_index() % 7

    def weekday_name(self) -> str:
        return _WEEKDAY_NAMES[self.weekday()]

    def weekday_enum(self) -> Weekday:
        return Weekday(self.weekday())

    def month_name(self) -> str:
        return _MONTH_NAMES[self.month - 1]

    def add_days(self, days: int) -> GameDate:
        """Shift by ``days``; dates before the calendar start clamp to it."""
        return GameDate.from_day_index(max(self.to_day_index() + days, 0))

    def days_between(self, other: GameDate) -> int:
        """Days from this date to ``other`` (negative if ``other`` is earlier)."""
        return other.to_day_index() - self.to_day_index()

    @classmethod
    def start_of_year(cls, year: int) -> GameDate:
        return cls(year, 1, 1)

    @classmethod
    def end_of_year(cls, year: int) -> GameDate:
        return cls(year, 12, 30)

    def is_same_day(self, other: GameDate) -> bool:
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)

    @classmethod
    def parse(cls, text: str) -> GameDate:
        """Parse ``YEAR-MONTH-DAY``."""
        parts = text.split("-")
        if len(parts) != 3 or not all(_NUMBER.fullmatch(part) for part in parts):
            raise DateError(DateError.PARSE_ERROR, f"cannot parse date: {text!r}")
        year, month, day = (int(part) for part in parts)
        if year > _U32_MAX or month > _U8_MAX or day > _U8_MAX:
            raise DateError(DateError.PARSE_ERROR, f"cannot parse date: {text!r}")
        return cls(year, month, day)

    def __str__(self) -> str:
        return f"{self.month_name()} {self.day}, Year {self.year} ({self.weekday_name()})"