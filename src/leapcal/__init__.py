"""leapcal public API.

Proleptic Gregorian calendar arithmetic on plain integers. Keep this surface
small: users should mostly interact with functions re-exported here.
"""

import logging

from .core.errors import LeapcalError, NormalizationError, QuoModZeroDivisionError
from .core.quo_mod import quo_mod
from .core.types import CalendarDate, DayOffset, QuoMod
from .engines.gregorian import (
    LEAP_MCM,
    is_leap,
    leap_add,
    days_in_year,
    leap_thru,
    leap_day,
    leap_off,
    days_in_month,
    day_of_year_of_month_start,
    leap_date,
    leap_date_from_off,
    leap_from,
    leap_abs_date,
    leap_abs_from,
    leap_abs_off,
)
from .core.time import to_absolute, from_absolute, to_ordinal, from_ordinal, to_jdn, from_jdn, weekday

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Descriptive aliases
floor_div_mod = quo_mod
day_of_year_start = leap_day
normalize_offset = leap_off
date_from_offset = leap_date
offset_from_date = leap_from
date_from_absolute = leap_abs_date
absolute_from_date = leap_abs_from

__all__ = [
    "LeapcalError",
    "NormalizationError",
    "QuoModZeroDivisionError",
    "QuoMod",
    "DayOffset",
    "CalendarDate",
    "LEAP_MCM",
    "quo_mod",
    "is_leap",
    "leap_add",
    "days_in_year",
    "leap_thru",
    "leap_day",
    "leap_off",
    "days_in_month",
    "day_of_year_of_month_start",
    "leap_date",
    "leap_date_from_off",
    "leap_from",
    "leap_abs_date",
    "leap_abs_from",
    "leap_abs_off",
    "to_absolute",
    "from_absolute",
    "to_ordinal",
    "from_ordinal",
    "to_jdn",
    "from_jdn",
    "weekday",
    "floor_div_mod",
    "day_of_year_start",
    "normalize_offset",
    "date_from_offset",
    "offset_from_date",
    "date_from_absolute",
    "absolute_from_date",
]
