"""Minimal Gregorian (Roman) calendar support for Conway's method.

Dates are plain civil (year, month, day) triples. There is no time of day,
so nothing here depends on timezones or DST.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import InvalidDateError, InvalidEnumError

JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE = 1, 2, 3, 4, 5, 6
JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER = 7, 8, 9, 10, 11, 12

# English names; calendar.month_name follows the process locale.
MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


def is_leap_year(year):
    return calendar.isleap(year)


def month_length(year, month):
    """Number of days in the given Gregorian month."""
    if not 1 <= month <= 12:
        raise InvalidEnumError(month, kind='Gregorian month')
    return calendar.monthrange(year, month)[1]


def height(day, month):
    """Conway's "height" of a day: day + month, with Jan/Feb counted as 13/14.

    The year doesn't matter, e.g. height(18, MARCH) == 21 and
    height(18, JANUARY) == 31.
    """
    if not 1 <= month <= 12:
        raise InvalidEnumError(month, kind='Gregorian month')
    h = day + month
    if month <= FEBRUARY:
        h += 12
    return h


def previous_month(year, month):
    """(year, month) of the month before, wrapping January to December."""
    if month == JANUARY:
        return year - 1, DECEMBER
    return year, month - 1


@dataclass(frozen=True, order=True)
class GregorianDate:
    year: int
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidDateError(f"No month {self.month} in the Gregorian calendar")
        if not 1 <= self.day <= month_length(self.year, self.month):
            raise InvalidDateError(
                f"{MONTH_NAMES[self.month - 1]} {self.year} has no day {self.day}")

    @classmethod
    def from_date(cls, d: date) -> GregorianDate:
        return cls(d.year, d.month, d.day)

    @classmethod
    def parse(cls, text: str) -> GregorianDate:
        """Parse a YYYY-MM-DD string."""
        try:
            d = datetime.strptime(text.strip(), '%Y-%m-%d').date()
        except ValueError as e:
            raise InvalidDateError(f"Not a YYYY-MM-DD date: {text!r}") from e
        return cls.from_date(d)

    @classmethod
    def today(cls) -> GregorianDate:
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def height(self) -> int:
        return height(self.day, self.month)

    @property
    def weekday(self) -> int:
        """Monday is 0 and Sunday is 6, as in datetime."""
        return self.to_date().weekday()

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def __str__(self):
        return f"{self.day} {MONTH_NAMES[self.month - 1]} {self.year}"


def normalize(year, month, day) -> GregorianDate:
    """Build a valid date from components that may be out of range.

    Months carry into years first, then days carry across months in either
    direction: normalize(2016, 8, 64) is 3 October 2016, normalize(2016, 13, 1)
    is 1 January 2017 and normalize(2016, 3, 0) is 29 February 2016.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    d = date(year, month, 1) + timedelta(days=day - 1)
    return GregorianDate.from_date(d)
