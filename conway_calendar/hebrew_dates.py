# hebrew_dates.py
from datetime import timedelta

from .converter import to_hebrew_date
from .hebrew_year import hebrew_year
from .romancal import GregorianDate


def get_current_hebrew_year(today=None):
    """Returns the Hebrew year `today` falls in (e.g. 5787 for 19 October 2026)"""
    today = today or GregorianDate.today()
    return to_hebrew_date(today).year


def get_hebrew_year_start_end(number):
    """Returns (start_date, end_date) of a Hebrew year as YYYY-MM-DD strings"""
    year = hebrew_year(number)
    # 1 Tishrei of the given Hebrew year
    start_date = year.rosh_hashannah.isoformat()
    # day before 1 Tishrei of the next Hebrew year
    end = year.next_rosh_hashannah.to_date() - timedelta(days=1)
    return start_date, end.strftime('%Y-%m-%d')
