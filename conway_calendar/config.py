# config.py
import os

# ─── SUPPORTED WINDOW ───
# Rosh Hashannah years over which every derived Hebrew year is consistent.
# RH 1761 lands two days late, and from 2214 on HE or SHE overflows.
MIN_YEAR = 1762
MAX_YEAR = 2213

# Hebrew year that begins in Gregorian year Y is Y + HEBREW_YEAR_OFFSET.
HEBREW_YEAR_OFFSET = 3761

# A Hebrew year needs the Rosh Hashannah that opens it and the one that closes it.
MIN_HEBREW_YEAR = MIN_YEAR + HEBREW_YEAR_OFFSET
MAX_HEBREW_YEAR = MAX_YEAR + HEBREW_YEAR_OFFSET - 1

# ─── ROSH HASHANNAH ARITHMETIC ───
# (first year, last year, earliest possible RH as a September day)
CENTURY_BASE = (
    (1500, 1699, 3.0),
    (1700, 1799, 4.0),
    (1800, 1899, 5.0),
    (1900, 2099, 6.0),
    (2100, 2199, 7.0),
    (2200, 2299, 8.0),
    (2300, 2399, 9.0),
)

# Fraction of a day past the truncated molad day that triggers the
# Tuesday (+2) and Monday (+1) postponements.
TUESDAY_THRESHOLD = 0.633
MONDAY_THRESHOLD = 0.898

# ─── INVARIANTS ───
IT_RANGE = (12, 44)
HE_RANGE = (41, 73)
SHE_RANGE = (41, 73)
# RH year -> SHE value known to fall outside SHE_RANGE
SHE_EXCEPTIONS = {2196: 74}

# ─── RUNTIME ───
RH_CACHE_SIZE = int(os.environ.get('CONWAY_RH_CACHE_SIZE', '1024'))
LOG_LEVEL = os.environ.get('CONWAY_LOG_LEVEL', 'INFO').upper()
