"""Conway's computation of Rosh Hashannah for a Gregorian year.

Besides the date itself, every year yields three "boundary heights":

* IT  -- Nissan..Elul of the Hebrew year ending this September,
* HE  -- Tishrei..Kislev of the Hebrew year starting now,
* SHE -- Tevet..Adar of the Hebrew year ending this September.

A Hebrew date of height ``h`` in a month anchored on boundary ``B`` is day
``h - B`` of that month.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import asdict, dataclass
from functools import lru_cache

from . import config
from .errors import ConsistencyError, RangeError
from .romancal import SEPTEMBER, GregorianDate, is_leap_year, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RHResult:
    year: int                       # Gregorian year
    he: int
    she: int
    it: int
    rosh_hashannah: GregorianDate   # 1 Tishrei of upcoming_year
    outgoing_year: int              # Hebrew year ending before RH
    upcoming_year: int              # Hebrew year starting at RH
    outgoing_leap: bool
    upcoming_leap: bool
    gregorian_leap: bool
    molad_day: float                # September day (with fraction) of the molad
    postponement: int = 0           # days RH was moved off the molad day


def century_base(year):
    """Earliest possible RH (September day) for the century, before leap drift."""
    for first, last, base in config.CENTURY_BASE:
        if first <= year <= last:
            return base
    raise RangeError(year, config.MIN_YEAR, config.MAX_YEAR)


def metonic_position(year):
    """f: where the year sits in the 19-year cycle, scaled by 12 mod 19."""
    return (12 * (year % 19 + 1)) % 19


def molad_day(year):
    """September day, with fraction, of the molad of Tishrei (p. 5)."""
    f = metonic_position(year)
    b = century_base(year) + (year % 4) / 4.0  # "bissextile" time
    a = 1.5 * f  # "acrobatic" term, how far RH falls from the earliest possible
    c = f + 1.0
    d = (2.0 * (year - 1900) - 1.0) / 35.0
    e = (f + 1.0) / 760.0  # negligible for 1762-2168
    return a + b + (c - d - e) / 18.0


def _postponement(weekday, remainder, upcoming_leap, outgoing_leap):
    if weekday in (calendar.SUNDAY, calendar.WEDNESDAY, calendar.FRIDAY):
        return 1
    if weekday == calendar.TUESDAY and not upcoming_leap and remainder > config.TUESDAY_THRESHOLD:
        return 2
    if weekday == calendar.MONDAY and outgoing_leap and remainder > config.MONDAY_THRESHOLD:
        return 1
    return 0


def _in_range(value, bounds):
    low, high = bounds
    return low <= value <= high


def check_invariants(result: RHResult):
    """Raise ConsistencyError if any boundary height is out of its documented range."""
    problems = []
    if not _in_range(result.it, config.IT_RANGE):
        problems.append('IT out of range')
    if not _in_range(result.he, config.HE_RANGE):
        problems.append('HE out of range')
    if not _in_range(result.she, config.SHE_RANGE):
        if config.SHE_EXCEPTIONS.get(result.year) == result.she:
            logger.debug("SHE=%d allowed for %d", result.she, result.year)
        else:
            problems.append('SHE out of range')
    if result.it >= result.he:
        problems.append('IT not below HE')
    if result.it >= result.she:
        problems.append('IT not below SHE')
    if problems:
        fields = asdict(result)
        fields['rosh_hashannah'] = str(result.rosh_hashannah)
        raise ConsistencyError("; ".join(problems), **fields)


@lru_cache(maxsize=config.RH_CACHE_SIZE)
def rosh_hashannah(year: int) -> RHResult:
    """Compute Rosh Hashannah and the HE/SHE/IT heights for a Gregorian year."""
    if not config.MIN_YEAR <= year <= config.MAX_YEAR:
        raise RangeError(year, config.MIN_YEAR, config.MAX_YEAR)

    f = metonic_position(year)
    upcoming_leap = f <= 6
    outgoing_leap = 12 <= f <= 18
    gregorian_leap = is_leap_year(year)

    day_float = molad_day(year)
    day = int(day_float)  # truncate, never round
    remainder = day_float - day

    provisional = normalize(year, SEPTEMBER, day)
    postponement = _postponement(provisional.weekday, remainder, upcoming_leap, outgoing_leap)
    if postponement:
        logger.debug("RH %d postponed %d day(s) from %s", year, postponement, provisional)
    day += postponement

    # ref: p. 3
    it = day + 9
    he = it + 29
    she = it + 10
    if gregorian_leap:
        she += 1
    if not outgoing_leap:
        she += 30

    result = RHResult(
        year=year,
        he=he,
        she=she,
        it=it,
        rosh_hashannah=normalize(year, SEPTEMBER, day),
        outgoing_year=year + config.HEBREW_YEAR_OFFSET - 1,
        upcoming_year=year + config.HEBREW_YEAR_OFFSET,
        outgoing_leap=outgoing_leap,
        upcoming_leap=upcoming_leap,
        gregorian_leap=gregorian_leap,
        molad_day=day_float,
        postponement=postponement,
    )
    check_invariants(result)
    return result
