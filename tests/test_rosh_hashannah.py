from __future__ import annotations

import calendar
import dataclasses

import pytest

from conway_calendar import GregorianDate, RangeError, rosh_hashannah
from conway_calendar import config
from conway_calendar.errors import ConsistencyError
from conway_calendar.rosh_hashannah import check_invariants, metonic_position

# Cover a 19-year cycle; ref: p. 3 for 2019.
RH_TABLE = [
    (2018, 9, 10, 5779),
    (2019, 9, 30, 5780),
    (2020, 9, 19, 5781),
    (2021, 9, 7, 5782),
    (2022, 9, 26, 5783),
    (2023, 9, 16, 5784),
    (2024, 10, 3, 5785),
    (2025, 9, 23, 5786),
    (2026, 9, 12, 5787),
    (2027, 10, 2, 5788),
    (2028, 9, 21, 5789),
    (2029, 9, 10, 5790),
    (2030, 9, 28, 5791),
    (2031, 9, 18, 5792),
    (2032, 9, 6, 5793),
    (2033, 9, 24, 5794),
    (2034, 9, 14, 5795),
    (2035, 10, 4, 5796),
    (2036, 9, 22, 5797),
]


@pytest.mark.parametrize("year,month,day,hebrew_year", RH_TABLE)
def test_rosh_hashannah_table(year: int, month: int, day: int, hebrew_year: int) -> None:
    rh = rosh_hashannah(year)
    assert rh.rosh_hashannah == GregorianDate(year, month, day)
    assert rh.upcoming_year == hebrew_year
    assert rh.outgoing_year == hebrew_year - 1


def test_boundaries_for_2016() -> None:
    rh = rosh_hashannah(2016)
    assert (rh.he, rh.she, rh.it) == (71, 53, 42)
    assert rh.rosh_hashannah == GregorianDate(2016, 10, 3)
    assert rh.gregorian_leap is True
    assert rh.outgoing_leap is True  # 5776
    assert rh.upcoming_leap is False  # 5777


def test_molad_day_is_truncated_not_rounded() -> None:
    # The molad falls at September 29.76; rounding would give the 30th and
    # skip the Sunday postponement.
    rh = rosh_hashannah(2019)
    assert int(rh.molad_day) == 29
    assert rh.molad_day - 29 > 0.5
    assert rh.postponement == 1


def test_sunday_wednesday_friday_postponement() -> None:
    # 18 September 2020 is a Friday
    rh = rosh_hashannah(2020)
    assert int(rh.molad_day) == 18
    assert rh.postponement == 1


def test_tuesday_postponement() -> None:
    # Provisional Tuesday 19 September 2028, common year, remainder .65
    rh = rosh_hashannah(2028)
    assert int(rh.molad_day) == 19
    assert rh.upcoming_leap is False
    assert rh.postponement == 2
    assert rh.rosh_hashannah == GregorianDate(2028, 9, 21)


def test_tuesday_below_threshold_stays() -> None:
    rh = rosh_hashannah(2025)
    assert rh.rosh_hashannah.weekday == calendar.TUESDAY
    assert rh.postponement == 0


def test_monday_postponement() -> None:
    # Provisional Monday 3 October 2005 after leap year 5765, remainder .97
    rh = rosh_hashannah(2005)
    assert rh.outgoing_leap is True
    assert rh.postponement == 1
    assert rh.rosh_hashannah == GregorianDate(2005, 10, 4)


def test_monday_without_leap_stays() -> None:
    rh = rosh_hashannah(2018)
    assert rh.rosh_hashannah.weekday == calendar.MONDAY
    assert rh.postponement == 0


@pytest.mark.parametrize(
    "year,upcoming,outgoing",
    [(2019, False, True), (2021, True, False), (2016, False, True), (2023, True, False)],
)
def test_leap_flags(year: int, upcoming: bool, outgoing: bool) -> None:
    rh = rosh_hashannah(year)
    assert (rh.upcoming_leap, rh.outgoing_leap) == (upcoming, outgoing)


def test_metonic_position() -> None:
    assert metonic_position(2019) == 15
    assert metonic_position(2016) == 17
    assert metonic_position(2021) == 1


def test_never_on_sunday_wednesday_or_friday() -> None:
    for year in range(config.MIN_YEAR, config.MAX_YEAR + 1):
        weekday = rosh_hashannah(year).rosh_hashannah.weekday
        assert weekday not in (calendar.SUNDAY, calendar.WEDNESDAY, calendar.FRIDAY), year


def test_boundary_invariants() -> None:
    for year in range(config.MIN_YEAR, config.MAX_YEAR + 1):
        rh = rosh_hashannah(year)
        assert 12 <= rh.it <= 44, year
        assert 41 <= rh.he <= 73, year
        if year == 2196:
            assert rh.she == 74
        else:
            assert 41 <= rh.she <= 73, year
        assert rh.it < rh.he and rh.it < rh.she


def test_documented_she_exception() -> None:
    rh = rosh_hashannah(2196)
    assert rh.she == 74
    assert rh.rosh_hashannah == GregorianDate(2196, 9, 24)


def test_check_invariants_reports_fields() -> None:
    good = rosh_hashannah(2019)
    bad = dataclasses.replace(good, she=80)
    with pytest.raises(ConsistencyError) as excinfo:
        check_invariants(bad)
    assert excinfo.value.fields["she"] == 80
    assert excinfo.value.fields["rosh_hashannah"] == "30 September 2019"
    assert "SHE out of range" in str(excinfo.value)


def test_she_exception_is_year_specific() -> None:
    bad = dataclasses.replace(rosh_hashannah(2019), she=74)
    with pytest.raises(ConsistencyError):
        check_invariants(bad)


def test_check_invariants_collects_every_problem() -> None:
    bad = dataclasses.replace(rosh_hashannah(2016), he=75, it=60)
    with pytest.raises(ConsistencyError) as excinfo:
        check_invariants(bad)
    message = str(excinfo.value)
    for problem in ("IT out of range", "HE out of range", "IT not below SHE"):
        assert problem in message
    assert "IT not below HE" not in message
    assert excinfo.value.fields["year"] == 2016


@pytest.mark.parametrize("year", [config.MIN_YEAR - 1, config.MAX_YEAR + 1, 1500, 2399, 0])
def test_outside_window(year: int) -> None:
    with pytest.raises(RangeError) as excinfo:
        rosh_hashannah(year)
    assert excinfo.value.value == year
    assert (excinfo.value.low, excinfo.value.high) == (config.MIN_YEAR, config.MAX_YEAR)
    assert isinstance(excinfo.value, ValueError)


def test_window_edges_compute() -> None:
    assert rosh_hashannah(config.MIN_YEAR).year == config.MIN_YEAR
    assert rosh_hashannah(config.MAX_YEAR).year == config.MAX_YEAR


def test_results_are_memoized() -> None:
    assert rosh_hashannah(2019) is rosh_hashannah(2019)


def test_matches_convertdate() -> None:
    hebrew = pytest.importorskip("convertdate.hebrew")
    # The correction terms are exact over this span.
    for year in range(1762, 2169):
        rh = rosh_hashannah(year)
        gy, gm, gd = hebrew.to_gregorian(year + 3761, 7, 1)
        assert rh.rosh_hashannah == GregorianDate(gy, gm, gd), year
