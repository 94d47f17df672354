"""Hebrew calendar value types and month-length rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import InvalidEnumError


class HebrewMonth(Enum):
    NISSAN = 'Nissan'
    IYAR = 'Iyar'
    SIVAN = 'Sivan'
    TAMUZ = 'Tamuz'
    AV = 'Av'
    ELUL = 'Elul'
    TISHREI = 'Tishrei'
    MARCHESHVAN = 'Marcheshvan'
    KISLEV = 'Kislev'
    TEVET = 'Tevet'
    SHEVAT = 'Shevat'
    ADAR_I = 'Adar I'
    ADAR_II = 'Adar II'
    ADAR = 'Adar'  # the single Adar of a common year

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, name) -> HebrewMonth:
        """Look a month up by name, ignoring case, underscores and dashes."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidEnumError(name)
        key = re.sub(r'[\s_\-]+', ' ', name).strip().lower()
        month = _BY_NAME.get(key)
        if month is None:
            raise InvalidEnumError(name)
        return month


_BY_NAME = {m.value.lower(): m for m in HebrewMonth}
_BY_NAME.update({
    'nisan': HebrewMonth.NISSAN,
    'tammuz': HebrewMonth.TAMUZ,
    'cheshvan': HebrewMonth.MARCHESHVAN,
    'heshvan': HebrewMonth.MARCHESHVAN,
    'adar 1': HebrewMonth.ADAR_I,
    'adar 2': HebrewMonth.ADAR_II,
})

# Height ordinals: the Gregorian month (Jan/Feb as 13/14) each Hebrew month
# is partnered with. Tishrei and Elul are both 8, Adar shares 13 with Adar I.
# Kept apart from the enum on purpose; the enum has no arithmetic order.
HEIGHT_ORDINAL = {
    HebrewMonth.NISSAN: 3,
    HebrewMonth.IYAR: 4,
    HebrewMonth.SIVAN: 5,
    HebrewMonth.TAMUZ: 6,
    HebrewMonth.AV: 7,
    HebrewMonth.ELUL: 8,
    HebrewMonth.TISHREI: 8,
    HebrewMonth.MARCHESHVAN: 9,
    HebrewMonth.KISLEV: 10,
    HebrewMonth.TEVET: 11,
    HebrewMonth.SHEVAT: 12,
    HebrewMonth.ADAR_I: 13,
    HebrewMonth.ADAR_II: 14,
    HebrewMonth.ADAR: 13,
}

# Months falling in the civil year after the one Rosh Hashannah is in.
SPRING_MONTHS = frozenset({
    HebrewMonth.ADAR, HebrewMonth.ADAR_I, HebrewMonth.ADAR_II,
    HebrewMonth.NISSAN, HebrewMonth.IYAR, HebrewMonth.SIVAN,
    HebrewMonth.TAMUZ, HebrewMonth.AV, HebrewMonth.ELUL,
})

_FIXED_LENGTHS = {
    HebrewMonth.NISSAN: 30,
    HebrewMonth.IYAR: 29,
    HebrewMonth.SIVAN: 30,
    HebrewMonth.TAMUZ: 29,
    HebrewMonth.AV: 30,
    HebrewMonth.ELUL: 29,
    HebrewMonth.TISHREI: 30,
    HebrewMonth.TEVET: 29,
    HebrewMonth.SHEVAT: 30,
    HebrewMonth.ADAR_I: 30,
    HebrewMonth.ADAR_II: 29,
    HebrewMonth.ADAR: 29,
}

_COMMON_MONTHS = (
    HebrewMonth.TISHREI, HebrewMonth.MARCHESHVAN, HebrewMonth.KISLEV,
    HebrewMonth.TEVET, HebrewMonth.SHEVAT, HebrewMonth.ADAR,
    HebrewMonth.NISSAN, HebrewMonth.IYAR, HebrewMonth.SIVAN,
    HebrewMonth.TAMUZ, HebrewMonth.AV, HebrewMonth.ELUL,
)
_LEAP_MONTHS = (
    _COMMON_MONTHS[:5] + (HebrewMonth.ADAR_I, HebrewMonth.ADAR_II) + _COMMON_MONTHS[6:]
)


def height_ordinal(month) -> int:
    try:
        return HEIGHT_ORDINAL[month]
    except (KeyError, TypeError):
        raise InvalidEnumError(month) from None


class Quality(IntEnum):
    DEFICIENT = -1
    REGULAR = 0
    ABUNDANT = 1


@dataclass(frozen=True)
class HebrewYear:
    number: int
    leap: bool
    quality: Quality = Quality.REGULAR

    def length(self) -> int:
        days = 354 + int(self.quality)
        if self.leap:
            days += 30
        return days

    def month_length(self, month) -> int:
        if month is HebrewMonth.MARCHESHVAN:
            return 30 if self.quality == Quality.ABUNDANT else 29
        if month is HebrewMonth.KISLEV:
            return 29 if self.quality == Quality.DEFICIENT else 30
        try:
            return _FIXED_LENGTHS[month]
        except (KeyError, TypeError):
            raise InvalidEnumError(month) from None

    def months(self):
        """The year's months in order, Tishrei first."""
        return _LEAP_MONTHS if self.leap else _COMMON_MONTHS

    def has_month(self, month) -> bool:
        return month in self.months()

    def next_month(self, month) -> HebrewMonth:
        """Month following `month`; Elul wraps to Tishrei, the Adars to Nissan."""
        months = self.months()
        if month is HebrewMonth.ELUL:
            return HebrewMonth.TISHREI
        if month not in months:
            raise InvalidEnumError(month)
        return months[months.index(month) + 1]

    def __str__(self):
        return f"{self.number}"


@dataclass(frozen=True)
class HebrewDate:
    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self):
        if not isinstance(self.month, HebrewMonth):
            raise InvalidEnumError(self.month)

    def __str__(self):
        return f"{self.day} {self.month} {self.year}"


def hebrew_year_length(year: HebrewYear) -> int:
    """Days in the year: 353-355, or 383-385 in a leap year."""
    return year.length()


def hebrew_month_length(year: HebrewYear, month: HebrewMonth) -> int:
    return year.month_length(month)
