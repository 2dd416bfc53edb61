from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterator

@dataclass(frozen=True)
class QuoMod:
    quo: int
    mod: int

    def __iter__(self) -> Iterator[int]:
        # allows `q, r = quo_mod(x, y)`
        yield self.quo
        yield self.mod

@dataclass(frozen=True)
class DayOffset:
    """Zero-based day within a year. Canonical when 0 <= day < days_in_year(year)."""
    year: int
    day: int

    @property
    def is_canonical(self) -> bool:
        from leapcal.engines.gregorian import days_in_year
        return 0 <= self.day < days_in_year(self.year)

    def __iter__(self) -> Iterator[int]:
        yield self.year
        yield self.day

@dataclass(frozen=True)
class CalendarDate:
    """Proleptic Gregorian year, one-based month and one-based day of month."""
    year: int
    month: int
    day: int

    @property
    def is_canonical(self) -> bool:
        from leapcal.engines.gregorian import days_in_month
        return 1 <= self.month <= 12 and 1 <= self.day <= days_in_month(self.year, self.month)

    def __iter__(self) -> Iterator[int]:
        yield self.year
        yield self.month
        yield self.day

    def to_date(self) -> date:
        """Standard library date; raises ValueError outside years 1..9999."""
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)
