"""Per-Hebrew-year boundary heights, composed from two Rosh Hashannah results."""

from __future__ import annotations

from dataclasses import dataclass

from . import config
from .errors import ConsistencyError, InvalidEnumError, RangeError
from .hebrewcal import HebrewMonth, HebrewYear, Quality
from .romancal import GregorianDate
from .rosh_hashannah import rosh_hashannah

_HE_MONTHS = frozenset({HebrewMonth.TISHREI, HebrewMonth.MARCHESHVAN})
_SHE_MONTHS = frozenset({
    HebrewMonth.TEVET, HebrewMonth.SHEVAT,
    HebrewMonth.ADAR, HebrewMonth.ADAR_I, HebrewMonth.ADAR_II,
})
_IT_MONTHS = frozenset({
    HebrewMonth.NISSAN, HebrewMonth.IYAR, HebrewMonth.SIVAN,
    HebrewMonth.TAMUZ, HebrewMonth.AV, HebrewMonth.ELUL,
})


@dataclass(frozen=True)
class HebrewYearResult:
    number: int
    he: int
    she: int
    it: int
    rosh_hashannah: GregorianDate        # 1 Tishrei of this year
    next_rosh_hashannah: GregorianDate   # 1 Tishrei of the following year
    leap: bool
    quality: Quality

    @property
    def year(self) -> HebrewYear:
        return HebrewYear(self.number, self.leap, self.quality)

    def boundary(self, month: HebrewMonth) -> int:
        """Boundary height the given month's days are counted from."""
        if month in _HE_MONTHS:
            return self.he
        if month is HebrewMonth.KISLEV:
            return max(self.he, self.she)
        if month in _SHE_MONTHS:
            return self.she
        if month in _IT_MONTHS:
            return self.it
        raise InvalidEnumError(month)


def hebrew_year(number: int) -> HebrewYearResult:
    """HE/SHE/IT, leap flag and quality of Hebrew year `number`.

    HE comes from the Rosh Hashannah that opens the year, SHE and IT from the
    one that closes it.
    """
    if not config.MIN_HEBREW_YEAR <= number <= config.MAX_HEBREW_YEAR:
        raise RangeError(number, config.MIN_HEBREW_YEAR, config.MAX_HEBREW_YEAR,
                         kind='Hebrew year')
    g = number - config.HEBREW_YEAR_OFFSET
    opening = rosh_hashannah(g)
    closing = rosh_hashannah(g + 1)

    if (opening.upcoming_year != closing.outgoing_year
            or opening.upcoming_leap != closing.outgoing_leap):
        raise ConsistencyError(
            "Rosh Hashannah results disagree on the shared Hebrew year",
            year=number,
            opening_year=opening.upcoming_year,
            opening_leap=opening.upcoming_leap,
            closing_year=closing.outgoing_year,
            closing_leap=closing.outgoing_leap,
        )

    quality = closing.she - opening.he
    if quality not in (-1, 0, 1):
        raise ConsistencyError(
            "year quality out of range", year=number, he=opening.he, she=closing.she,
            quality=quality)

    return HebrewYearResult(
        number=number,
        he=opening.he,
        she=closing.she,
        it=closing.it,
        rosh_hashannah=opening.rosh_hashannah,
        next_rosh_hashannah=closing.rosh_hashannah,
        leap=opening.upcoming_leap,
        quality=Quality(quality),
    )
