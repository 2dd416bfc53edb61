from __future__ import annotations
from datetime import date

from leapcal.engines.gregorian import leap_abs_date, leap_abs_from

# date(1, 1, 1).toordinal() == 1, while 0001-01-01 is absolute day 366.
ORDINAL_OFFSET = 365

# JDN of 0000-01-01 (absolute day 0). J2000.0 civil date 2000-01-01 is JDN 2451545.
JDN_OFFSET = 1721060


def to_absolute(d: date) -> int:
    """Absolute day number of a standard library date."""
    return leap_abs_from(d.year, d.month, d.day)


def from_absolute(n: int) -> date:
    """
    Standard library date for absolute day `n`.
    Raises ValueError outside the years 1..9999 that datetime supports.
    """
    return leap_abs_date(n).to_date()


def to_ordinal(n: int) -> int:
    """Absolute day number -> proleptic ordinal as used by date.toordinal()."""
    return n - ORDINAL_OFFSET


def from_ordinal(ordinal: int) -> int:
    return ordinal + ORDINAL_OFFSET


def to_jdn(n: int) -> int:
    """Absolute day number -> Julian Day Number."""
    return n + JDN_OFFSET


def from_jdn(jdn: int) -> int:
    """Julian Day Number -> absolute day number."""
    return jdn - JDN_OFFSET


def weekday(n: int) -> int:
    """Day of week of absolute day `n`, Monday == 0 as in date.weekday()."""
    # ordinal 1 (0001-01-01) was a Monday
    return (to_ordinal(n) - 1) % 7
