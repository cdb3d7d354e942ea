from __future__ import annotations
from datetime import date, datetime
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import TIMEZONE

DateLike = Union[date, datetime]


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def weekday_index(d: date) -> int:
    """Day of week with 0=Sunday..6=Saturday."""
    return (to_jdn(d) + 1) % 7

def resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError as e:
        raise ValueError(f"Unknown timezone '{name}'") from e

def to_local_date(d: DateLike, tz: ZoneInfo | str = TIMEZONE) -> date:
    """
    Civil day of d in tz. Aware datetimes are converted first; naive
    datetimes and plain dates are taken as already local.
    """
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            zone = resolve_timezone(tz) if isinstance(tz, str) else tz
            d = d.astimezone(zone)
        return d.date()
    return d

def add_solar_year(d: date) -> date:
    """Same calendar day one year later (Feb 29 falls back to Feb 28)."""
    try:
        return d.replace(year=d.year + 1)
    except ValueError:
        return d.replace(year=d.year + 1, day=28)
