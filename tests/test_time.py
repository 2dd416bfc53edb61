# tests/test_time.py

import random
from datetime import date

import pytest

from leapcal import (
    CalendarDate,
    DayOffset,
    from_absolute,
    from_jdn,
    leap_abs_from,
    to_absolute,
    to_jdn,
    weekday,
)
from leapcal.core.time import from_ordinal, to_ordinal


def fliegel_van_flandern(d: date) -> int:
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def test_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to stay inside datetime
    for _ in range(10000):
        ordinal = random.randint(1, date.max.toordinal())
        d = date.fromordinal(ordinal)
        n = to_absolute(d)
        assert to_ordinal(n) == ordinal
        assert from_ordinal(ordinal) == n
        assert from_absolute(n) == d
        assert weekday(n) == d.weekday()
        assert to_jdn(n) == fliegel_van_flandern(d)
        assert from_jdn(to_jdn(n)) == n

def test_known_jdn():
    # J2000.0 civil date
    assert to_jdn(leap_abs_from(2000, 1, 1)) == 2451545
    assert to_jdn(leap_abs_from(1970, 1, 1)) == 2440588

def test_from_absolute_outside_datetime_range():
    with pytest.raises(ValueError):
        from_absolute(0)

def test_calendar_date_helpers():
    d = CalendarDate.from_date(date(2024, 2, 29))
    assert d == CalendarDate(2024, 2, 29)
    assert d.to_date() == date(2024, 2, 29)
    assert d.is_canonical
    assert not CalendarDate(2023, 2, 29).is_canonical
    assert not CalendarDate(2023, 13, 1).is_canonical
    assert DayOffset(2024, 365).is_canonical
    assert not DayOffset(2023, 365).is_canonical
    assert not DayOffset(2023, -1).is_canonical
    assert tuple(d) == (2024, 2, 29)
