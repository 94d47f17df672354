"""Hebrew/Gregorian calendar conversion using Conway's method."""

from .converter import date_window, from_hebrew_date, to_hebrew_date
from .errors import (
    CalendarError,
    ConsistencyError,
    InvalidDateError,
    InvalidEnumError,
    RangeError,
)
from .hebrew_dates import get_current_hebrew_year, get_hebrew_year_start_end
from .hebrew_year import HebrewYearResult, hebrew_year
from .hebrewcal import (
    HebrewDate,
    HebrewMonth,
    HebrewYear,
    Quality,
    hebrew_month_length,
    hebrew_year_length,
)
from .romancal import GregorianDate, height, normalize
from .rosh_hashannah import RHResult, rosh_hashannah

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "ConsistencyError",
    "GregorianDate",
    "HebrewDate",
    "HebrewMonth",
    "HebrewYear",
    "HebrewYearResult",
    "InvalidDateError",
    "InvalidEnumError",
    "Quality",
    "RHResult",
    "RangeError",
    "date_window",
    "from_hebrew_date",
    "get_current_hebrew_year",
    "get_hebrew_year_start_end",
    "hebrew_month_length",
    "hebrew_year",
    "hebrew_year_length",
    "height",
    "normalize",
    "rosh_hashannah",
    "to_hebrew_date",
]
