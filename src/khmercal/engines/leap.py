"""
khmercal.engines.leap
---------------------
Leap classification. A year's class depends on its neighbours (Y-1, Y+1),
so nothing here is cached.

Raw (bodithey) classification:
  0 normal, 1 leap month, 2 leap day, 3 both.
Final (protetin) classification resolves 3 by deferring the leap day to the
following year.
"""

from __future__ import annotations

from ..core.types import LeapType
from .year_arithmetic import (
    avoman,
    bodithey,
    is_solar_leap_year,
    js_is_solar_leap_year,
    js_year_info,
)

BOTH = 3


def bodithey_leap(be_year: int) -> int:
    b = bodithey(be_year)
    b_next = bodithey(be_year + 1)
    av = avoman(be_year)

    leap_month = b >= 25 or b <= 5

    if is_solar_leap_year(be_year):
        leap_day = av <= 126
    else:
        # 137/0 tie-break: the year whose avoman is 0 takes the day instead
        leap_day = av <= 137 and avoman(be_year + 1) != 0

    if b == 25 and b_next == 5:
        leap_month = False
    if b == 24 and b_next == 6:
        leap_month = True

    if leap_month and leap_day:
        return BOTH
    if leap_month:
        return 1
    if leap_day:
        return 2
    return 0


def protetin_leap(be_year: int) -> LeapType:
    raw = bodithey_leap(be_year)
    if raw == BOTH:
        return LeapType.LEAP_MONTH
    if raw in (1, 2):
        return LeapType(raw)
    if bodithey_leap(be_year - 1) == BOTH:
        return LeapType.LEAP_DAY
    return LeapType.NORMAL


def is_leap_month_year(be_year: int) -> bool:
    return protetin_leap(be_year) is LeapType.LEAP_MONTH

def is_leap_day_year(be_year: int) -> bool:
    return protetin_leap(be_year) is LeapType.LEAP_DAY


# ---------------------------------------------------------
# Jolak-Sakaraj rules used by the Songkran engine
# ---------------------------------------------------------

def js_has_leap_month(js: int) -> bool:
    b = js_year_info(js).bodithey
    b_next = js_year_info(js + 1).bodithey
    if b == 25 and b_next == 5:
        return False
    return b > 24 or b < 6 or (b == 24 and b_next == 6)


def js_has_leap_day(js: int) -> bool:
    av = js_year_info(js).avoman
    av_next = js_year_info(js + 1).avoman
    av_prev = js_year_info(js - 1).avoman
    solar_leap = js_is_solar_leap_year(js)

    if solar_leap and av < 127:
        return True
    if av == 137 and av_next == 0:
        return False
    return (not solar_leap and av < 138) or (av_prev == 137 and av == 0)
