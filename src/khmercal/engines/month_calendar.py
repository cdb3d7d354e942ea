"""
khmercal.engines.month_calendar
-------------------------------
Day counts and month sequencing for the 12 ordinary months plus the two
intercalary "double Asadha" months.
"""

from __future__ import annotations

from datetime import date
from typing import Dict

from ..core.constants import LUNAR_MONTHS
from ..core.errors import UnknownMonthSlug
from ..core.types import LeapType
from .leap import protetin_leap

JESH = LUNAR_MONTHS["jesh"]
ASADHA = LUNAR_MONTHS["asadha"]
ADHIKA_FIRST = LUNAR_MONTHS["adhika_asadha_first"]
ADHIKA_SECOND = LUNAR_MONTHS["adhika_asadha_second"]

YEAR_DAYS: Dict[LeapType, int] = {
    LeapType.NORMAL: 354,
    LeapType.LEAP_DAY: 355,
    LeapType.LEAP_MONTH: 384,
}

# Unconditional successors; jesh is resolved per year
_SUCCESSOR: Dict[int, int] = {
    LUNAR_MONTHS["mekasira"]: LUNAR_MONTHS["pous"],
    LUNAR_MONTHS["pous"]: LUNAR_MONTHS["makha"],
    LUNAR_MONTHS["makha"]: LUNAR_MONTHS["phalgun"],
    LUNAR_MONTHS["phalgun"]: LUNAR_MONTHS["cetra"],
    LUNAR_MONTHS["cetra"]: LUNAR_MONTHS["visak"],
    LUNAR_MONTHS["visak"]: JESH,
    ADHIKA_FIRST: ADHIKA_SECOND,
    ADHIKA_SECOND: LUNAR_MONTHS["srapoan"],
    ASADHA: LUNAR_MONTHS["srapoan"],
    LUNAR_MONTHS["srapoan"]: LUNAR_MONTHS["bhadrapada"],
    LUNAR_MONTHS["bhadrapada"]: LUNAR_MONTHS["assuj"],
    LUNAR_MONTHS["assuj"]: LUNAR_MONTHS["kattik"],
    LUNAR_MONTHS["kattik"]: LUNAR_MONTHS["mekasira"],
}


def month_index(slug: str) -> int:
    key = slug.lower()
    if key not in LUNAR_MONTHS:
        raise UnknownMonthSlug(slug)
    return LUNAR_MONTHS[key]


def _check_index(m: int) -> None:
    if not (0 <= m < len(LUNAR_MONTHS)):
        raise ValueError(f"month index must be in 0..{len(LUNAR_MONTHS) - 1}, got {m}")


def days_in_year(be_year: int) -> int:
    return YEAR_DAYS[protetin_leap(be_year)]


def days_in_month(m: int, be_year: int) -> int:
    _check_index(m)
    if m == JESH and protetin_leap(be_year) is LeapType.LEAP_DAY:
        return 30
    if m in (ADHIKA_FIRST, ADHIKA_SECOND):
        return 30
    return 29 if m % 2 == 0 else 30


def next_month(m: int, be_year: int) -> int:
    _check_index(m)
    if m == JESH:
        return ADHIKA_FIRST if protetin_leap(be_year) is LeapType.LEAP_MONTH else ASADHA
    return _SUCCESSOR[m]


def months_of_year(be_year: int, start: int = LUNAR_MONTHS["mekasira"]) -> list[int]:
    """Month indices of one lunar year starting at `start`, in order."""
    out = [start]
    m = next_month(start, be_year)
    while m != start:
        out.append(m)
        m = next_month(m, be_year)
    return out


def estimate_be_year(d: date) -> int:
    """BE year whose tables apply to d while walking: +543 through April, +544 after."""
    return d.year + 543 if d.month <= 4 else d.year + 544
