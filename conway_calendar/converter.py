"""Gregorian <-> Hebrew date conversion by Conway's height method.

Each Gregorian month is partnered with one Hebrew month whose days are
counted from a boundary height (HE, SHE or IT) of the governing Hebrew year.
Going Gregorian -> Hebrew, the date is "stretched" back into earlier
Gregorian months until its height clears the partner's boundary, then any
overflow is "shrunk" forward into the following Hebrew months.
"""

from __future__ import annotations

import logging
from datetime import date as _date, timedelta

from . import config
from .errors import ConsistencyError, InvalidDateError, InvalidEnumError, RangeError
from .hebrewcal import SPRING_MONTHS, HebrewDate, HebrewMonth, height_ordinal
from .hebrew_year import HebrewYearResult, hebrew_year
from .romancal import (
    APRIL, AUGUST, DECEMBER, FEBRUARY, JANUARY, JULY, JUNE, MARCH, MAY,
    NOVEMBER, OCTOBER, SEPTEMBER, GregorianDate, height, month_length,
    normalize, previous_month,
)
from .rosh_hashannah import rosh_hashannah

logger = logging.getLogger(__name__)

MAX_STRETCH = 12

_PARTNERS = {
    SEPTEMBER: HebrewMonth.MARCHESHVAN,
    OCTOBER: HebrewMonth.KISLEV,
    NOVEMBER: HebrewMonth.TEVET,
    DECEMBER: HebrewMonth.SHEVAT,
    MARCH: HebrewMonth.NISSAN,
    APRIL: HebrewMonth.IYAR,
    MAY: HebrewMonth.SIVAN,
    JUNE: HebrewMonth.TAMUZ,
    JULY: HebrewMonth.AV,
}

# Shrinking out of these would leave the year or cross into Nissan.
_NO_SHRINK = frozenset({HebrewMonth.ELUL, HebrewMonth.ADAR, HebrewMonth.ADAR_II})


def _partner(month, year: HebrewYearResult, august: HebrewMonth):
    """(Hebrew month, boundary height) partnered with a Gregorian month."""
    if month == AUGUST:
        partner = august
    elif month == JANUARY:
        partner = HebrewMonth.ADAR_I if year.leap else HebrewMonth.ADAR
    elif month == FEBRUARY:
        partner = HebrewMonth.ADAR_II if year.leap else HebrewMonth.ADAR
    else:
        try:
            partner = _PARTNERS[month]
        except KeyError:
            raise InvalidEnumError(month, kind='Gregorian month') from None
    return partner, year.boundary(partner)


def date_window():
    """First and last Gregorian dates (inclusive) that can be converted.

    These are 1 Tishrei of the first supported Hebrew year and 29 Elul of the
    last one.
    """
    first = rosh_hashannah(config.MIN_YEAR).rosh_hashannah
    end = rosh_hashannah(config.MAX_YEAR).rosh_hashannah
    return first, GregorianDate.from_date(end.to_date() - timedelta(days=1))


def to_hebrew_date(date: GregorianDate) -> HebrewDate:
    """Convert a Gregorian date, e.g. 25 December 2016 -> 25 Kislev 5777."""
    if isinstance(date, _date):
        date = GregorianDate.from_date(date)

    first, last = date_window()
    if not first <= date <= last:
        raise RangeError(date, first, last, kind='date')

    rh = rosh_hashannah(date.year)
    if date >= rh.rosh_hashannah:
        governing, august = hebrew_year(rh.upcoming_year), HebrewMonth.TISHREI
    else:
        governing, august = hebrew_year(rh.outgoing_year), HebrewMonth.ELUL

    year, month, day = date.year, date.month, date.day
    h = height(day, month)
    partner, boundary = _partner(month, governing, august)

    steps = 0
    while boundary >= h:
        steps += 1
        if steps > MAX_STRETCH:
            raise ConsistencyError(
                "boundary search did not terminate", date=str(date),
                hebrew_year=governing.number, height=h, boundary=boundary)
        year, month = previous_month(year, month)
        day += month_length(year, month)
        h = height(day, month)
        partner, boundary = _partner(month, governing, august)

    hebrew_day = h - boundary
    hyear = governing.year
    while hebrew_day > hyear.month_length(partner):
        if partner in _NO_SHRINK:
            raise ConsistencyError(
                "day overflows the end of the month", date=str(date),
                hebrew_year=governing.number, month=str(partner), day=hebrew_day)
        hebrew_day -= hyear.month_length(partner)
        partner = hyear.next_month(partner)

    logger.debug("%s -> %d %s %d after %d stretch step(s)",
                 date, hebrew_day, partner, governing.number, steps)
    return HebrewDate(governing.number, partner, hebrew_day)


def from_hebrew_date(date: HebrewDate) -> GregorianDate:
    """Convert a Hebrew date, e.g. 1 Tishrei 5780 -> 30 September 2019."""
    governing = hebrew_year(date.year)
    hyear = governing.year
    if not hyear.has_month(date.month):
        raise InvalidDateError(f"{date.month} does not occur in {date.year}")
    if not 1 <= date.day <= hyear.month_length(date.month):
        raise InvalidDateError(f"{date.month} {date.year} has no day {date.day}")

    h = date.day + governing.boundary(date.month)
    ordinal = height_ordinal(date.month)
    month = (ordinal - 1) % 12 + 1
    year = governing.rosh_hashannah.year
    if date.month in SPRING_MONTHS:
        year += 1
    # Tevet/Shevat days past December carry into January here.
    return normalize(year, month, h - ordinal)
