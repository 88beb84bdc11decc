"""Calendar dates counted in days since 2200-01-01."""

import re
from dataclasses import dataclass
from typing import NamedTuple

__all__ = ["YMD", "Date"]

_ISO_RE = re.compile(r"(-?\d{4,})-(\d{2})-(\d{2})")


class YMD(NamedTuple):
    """A year, month and day triple."""

    year: int
    month: int
    day: int


def _days_from_civil(year: int, month: int, day: int) -> int:
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def _civil_from_days(z: int) -> YMD:
    z += 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + (3 if mp < 10 else -9)
    return YMD(year + (month <= 2), month, day)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


_EPOCH = _days_from_civil(2200, 1, 1)


@dataclass(frozen=True, order=True)
class Date:
    """A day on the proleptic Gregorian calendar; day 0 is 2200-01-01."""

    days_since_epoch: int = 0

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> "Date":
        """Build a date from calendar parts; raises ValueError when they are out of range."""
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        if not 1 <= day <= _days_in_month(year, month):
            raise ValueError(f"day out of range: {year:04d}-{month:02d}-{day}")
        return cls(_days_from_civil(year, month, day) - _EPOCH)

    @classmethod
    def parse_iso_ymd(cls, iso: str) -> "Date":
        """Parse ``YYYY-MM-DD``; raises ValueError on anything else."""
        match = _ISO_RE.fullmatch(iso.strip())
        if not match:
            raise ValueError(f"invalid ISO date (expected YYYY-MM-DD): {iso!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls.from_ymd(year, month, day)

    def add_days(self, delta: int) -> "Date":
        """Return the date ``delta`` days later (earlier when negative)."""
        return Date(self.days_since_epoch + delta)

    def to_ymd(self) -> YMD:
        """Return the calendar year, month and day."""
        return _civil_from_days(self.days_since_epoch + _EPOCH)

    def __str__(self) -> str:
        year, month, day = self.to_ymd()
        return f"{year:04d}-{month:02d}-{day:02d}"