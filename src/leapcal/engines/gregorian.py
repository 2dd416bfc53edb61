"""
leapcal.engines.gregorian
-------------------------
Proleptic Gregorian arithmetic on plain integers.

Three representations are tied together here:
  - (year, day) offsets, zero-based day of year;
  - (year, month, day) calendar dates;
  - absolute day numbers, counted from 0000-01-01 (absolute day 0).

Every conversion from an offset or a date goes through leap_off(), which is
the only place out-of-range inputs are resolved.
"""

from __future__ import annotations

import logging
from typing import Tuple

from leapcal.core.errors import NormalizationError
from leapcal.core.quo_mod import quo, quo_mod
from leapcal.core.types import CalendarDate, DayOffset

logger = logging.getLogger(__name__)

# Added to every leap_day(); places 0000-01-01 at absolute day 0.
# Cancels in any difference of two leap_day() calls.
EPOCH_ANCHOR = 1

# leap_off() iterations allowed before giving up; convergence takes at most
# two or three in practice.
MAX_NORMALIZE_ITERATIONS = 8

DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_BEFORE_MONTH: Tuple[int, ...] = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

FEBRUARY = 2


# ============================================================
# Years
# ============================================================

def is_leap(year: int) -> bool:
    """
    Divisible by four, except centuries, unless divisible by 400.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_add(year: int) -> int:
    """1 for a leap year, else 0. Used as an additive correction."""
    return 1 if is_leap(year) else 0


def days_in_year(year: int) -> int:
    return 365 + leap_add(year)


def leap_thru(year: int) -> int:
    """
    Leap days counted from year 0 through `year` by floor(y/4) - floor(y/100) + floor(y/400).

    Each term is floored on its own, which keeps the count right for
    negative years: leap_thru(-1) == -1 accounts for year 0 being a leap year.
    """
    return quo(year, 4) - quo(year, 100) + quo(year, 400)


def leap_day(year: int) -> int:
    """
    Absolute day number of 1 January of `year`.

      leap_day(year) = 365*year + leap_thru(year - 1) + EPOCH_ANCHOR
    """
    return year * 365 + leap_thru(year - 1) + EPOCH_ANCHOR


# 1900-01-01 as an absolute day number.
LEAP_MCM = leap_day(1900)


# ============================================================
# Offsets
# ============================================================

def leap_off(year: int, day: int) -> DayOffset:
    """
    Normalise a day offset relative to `year` into canonical form.

    Any integer `day` is accepted: negative offsets fall back into earlier
    years, offsets past the year end roll forward. Each pass jumps by whole
    years estimated from the current year's length, then rebases `day` by
    the exact day count between the two year starts. Crossing leap years can
    leave the estimate one day out, so a further pass may be needed.
    """
    days = days_in_year(year)
    n = 0
    while day < 0 or day >= days:
        n += 1
        if n > MAX_NORMALIZE_ITERATIONS:
            raise NormalizationError(
                f"leap_off did not converge after {MAX_NORMALIZE_ITERATIONS} iterations "
                f"(year={year}, day={day})"
            )
        year1 = year + quo(day, days)
        day += leap_day(year) - leap_day(year1)
        year = year1
        days = days_in_year(year)
    if n > 1:
        logger.debug("leap_off converged in %d iterations at year %d", n, year)
    return DayOffset(year, day)


# ============================================================
# Months
# ============================================================

def _fold_month(year: int, month: int) -> Tuple[int, int]:
    """Fold any month number into 1..12, carrying whole years into `year`."""
    qm = quo_mod(month - 1, 12)
    return year + qm.quo, qm.mod + 1


def days_in_month(year: int, month: int) -> int:
    """
    Length of `month` in `year`. Months outside 1..12 are folded first,
    so days_in_month(2023, 14) is February 2024.
    """
    year, month = _fold_month(year, month)
    days = DAYS_IN_MONTH[month - 1]
    if month == FEBRUARY:
        days += leap_add(year)
    return days


def day_of_year_of_month_start(year: int, month: int) -> int:
    """Zero-based day of year on which `month` starts, month folded as in days_in_month()."""
    year, month = _fold_month(year, month)
    day = DAYS_BEFORE_MONTH[month - 1]
    if month > FEBRUARY:
        day += leap_add(year)
    return day


# ============================================================
# Offsets <-> dates
# ============================================================

def leap_date(year: int, day: int) -> CalendarDate:
    """
    Calendar date for a (year, day) offset. The offset need not be canonical.
    """
    off = leap_off(year, day)
    day = off.day
    month = 1
    # day < days_in_year(off.year) after normalisation, so December always stops the scan
    while day >= days_in_month(off.year, month):
        day -= days_in_month(off.year, month)
        month += 1
    return CalendarDate(off.year, month, day + 1)


def leap_date_from_off(off: DayOffset) -> CalendarDate:
    return leap_date(off.year, off.day)


def leap_from(year: int, month: int, day: int) -> DayOffset:
    """
    Canonical day offset for a calendar date.

    Month and day may both be out of range: leap_from(2024, 0, 1) is
    1 December 2023 and leap_from(2024, 0, 0) is 30 November 2023.
    """
    year, month = _fold_month(year, month)
    return leap_off(year, day_of_year_of_month_start(year, month) + day - 1)


# ============================================================
# Absolute day numbers
# ============================================================

def leap_abs_date(n: int) -> CalendarDate:
    """Calendar date of absolute day `n`."""
    return leap_date(0, n)


def leap_abs_from(year: int, month: int, day: int) -> int:
    """Absolute day number of a calendar date."""
    off = leap_from(year, month, day)
    return leap_day(off.year) + off.day


def leap_abs_off(year: int, day: int) -> int:
    """Absolute day number of a (year, day) offset."""
    return leap_day(year) + day
