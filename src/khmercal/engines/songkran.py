"""
khmercal.engines.songkran
-------------------------
Sexagesimal sun-position arithmetic fixing the moment the sun enters Aries
(Maha Songkran), the number of Vonobot days and the lunar day of Leungsak.

All positions are carried as libda (1 reasey = 30 angsar, 1 angsar = 60
libda, a full circle = 12 reasey = 21600 libda).

Pipeline per trial day count ("sotin"):
    Matyom (average sun) -> PhalLumet (correction) -> Somphot (true sun)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..core.constants import LUNAR_MONTHS
from ..core.errors import InternalInvariantViolation
from ..core.types import (
    SolarNewYearDay,
    SolarPhol,
    SolarResidual,
    SolarSunInfo,
    YearInfo,
)
from .leap import js_has_leap_day, js_has_leap_month
from .year_arithmetic import js_is_solar_leap_year, js_year, js_year_info

log = logging.getLogger(__name__)

LIBDA_PER_REASEY = 30 * 60
LIBDA_PER_CIRCLE = 12 * LIBDA_PER_REASEY
# 2 reasey 20 angsar
LEFT_OVER_BASELINE = 2 * LIBDA_PER_REASEY + 20 * 60

PHOL_MULTIPLICITIES = (35, 32, 27, 22, 13, 5)
PHOL_CHHAYAS = (0, 35, 67, 94, 116, 129)


def split_libda(x: int) -> Tuple[int, int, int]:
    """libda -> (reasey, angsar, libda)."""
    return x // LIBDA_PER_REASEY, (x % LIBDA_PER_REASEY) // 60, x % 60


# ---------------------------------------------------------
# Matyom / PhalLumet / Somphot
# ---------------------------------------------------------

def sun_average_libda(sotin: int, previous: YearInfo) -> int:
    r2 = 800 * sotin + previous.kromathupul
    reasey = r2 // 24350
    r3 = r2 % 24350
    angsar = r3 // 811
    libda = (r3 % 811) // 14 - 3
    return LIBDA_PER_REASEY * reasey + 60 * angsar + libda


def sun_left_over(average_libda: int) -> int:
    left_over = average_libda - LEFT_OVER_BASELINE
    if average_libda < LEFT_OVER_BASELINE:
        left_over += LIBDA_PER_CIRCLE
    return left_over


def last_residual(kaen: int, left_over: int) -> SolarResidual:
    """Distance to the nearest equinox/solstice axis, by quadrant bucket."""
    if kaen in (0, 1, 2):
        value = left_over
    elif kaen in (3, 4, 5):
        value = 6 * LIBDA_PER_REASEY - left_over
    elif kaen in (6, 7, 8):
        value = left_over - 6 * LIBDA_PER_REASEY
    elif kaen in (9, 10, 11):
        value = LIBDA_PER_CIRCLE - left_over
    else:
        raise InternalInvariantViolation(f"kaen bucket {kaen} outside 0..11")
    return SolarResidual(*split_libda(value))


def phol(khan: int, pouichalip: int) -> SolarPhol:
    i = min(khan, 5)
    total = pouichalip * PHOL_MULTIPLICITIES[i] // 900 + PHOL_CHHAYAS[i]
    return SolarPhol(reasey=0, angsar=total // 60, libda=total % 60)


def sun_info(js: int, sotin: int) -> SolarSunInfo:
    average = sun_average_libda(sotin, js_year_info(js - 1))
    left_over = sun_left_over(average)
    kaen = left_over // LIBDA_PER_REASEY
    r = last_residual(kaen, left_over)

    if r.angsar >= 15:
        khan = 2 * r.reasey + 1
        pouichalip = 60 * (r.angsar - 15) + r.libda
    else:
        khan = 2 * r.reasey
        pouichalip = 60 * r.angsar + r.libda

    p = phol(khan, pouichalip)
    inauguration = average - p.as_libda() if kaen <= 5 else average + p.as_libda()
    return SolarSunInfo(
        average_libda=average,
        kaen=kaen,
        khan=khan,
        pouichalip=pouichalip,
        phol=p,
        inauguration_libda=inauguration,
    )


# ---------------------------------------------------------
# Sotins, New Year time and Vonobot
# ---------------------------------------------------------

def sotin_range(js: int) -> range:
    """Four trial day counts, shifted by one after a 366-day solar year."""
    return range(363, 367) if js_is_solar_leap_year(js - 1) else range(362, 366)


def sotins(js: int) -> List[SolarNewYearDay]:
    out = []
    for s in sotin_range(js):
        reasey, angsar, libda = split_libda(sun_info(js, s).inauguration_libda)
        out.append(SolarNewYearDay(sotin=s, reasey=reasey, angsar=angsar, libda=libda))
    return out


def new_year_time(days: List[SolarNewYearDay]) -> Tuple[int, int]:
    """
    Clock time of Maha Songkran from the sotin whose Somphot sits on degree 0.
    When the sun lands exactly on the boundary two sotins read degree 0; the
    later one is used.
    """
    zero = [d for d in days if d.angsar == 0]
    if not zero:
        raise InternalInvariantViolation(
            "no sotin with zero angsar: " + ", ".join(f"{d.sotin}={d.reasey}:{d.angsar}:{d.libda}" for d in days)
        )
    # more than one zero-degree sotin is not fatal here, unlike none: the later one fixes the time
    minutes = 24 * 60 - zero[-1].libda * 24
    return minutes // 60, minutes % 60


def vonobot_days(days: List[SolarNewYearDay]) -> int:
    """2 when two trial Somphots share a degree, else 1."""
    angsars = [d.angsar for d in days]
    return 2 if len(set(angsars)) < len(angsars) else 1


def duration_days(vonobot: int) -> int:
    return 4 if vonobot == 2 else 3


# ---------------------------------------------------------
# Leungsak
# ---------------------------------------------------------

def leungsak_lunar(js: int) -> Tuple[int, int]:
    """(day_index, month_index) of Leungsak, the last festival day."""
    b = js_year_info(js).bodithey
    if js_has_leap_month(js - 1) and js_has_leap_day(js - 1):
        b = (b + 1) % 30
    if b >= 6:
        return b - 1, LUNAR_MONTHS["cetra"]
    return b, LUNAR_MONTHS["visak"]


def leungsak_weekday(js: int) -> int:
    """Traditional weekday of Leungsak with 0=Saturday."""
    return (js_year_info(js).aharkun - 2) % 7


@dataclass(frozen=True)
class NewYearSnapshot:
    """Everything the sun arithmetic says about one Gregorian year."""
    gregorian_year: int
    js_year: int
    year_info: YearInfo
    has_solar_leap_day: bool
    has_leap_month: bool
    has_leap_day: bool
    sotins: Tuple[SolarNewYearDay, ...]
    time: Tuple[int, int]
    vonobot_days: int
    leungsak_lunar: Tuple[int, int]
    leungsak_weekday: int

    @property
    def duration(self) -> int:
        return duration_days(self.vonobot_days)


def snapshot(gregorian_year: int) -> NewYearSnapshot:
    js = js_year(gregorian_year)
    days = sotins(js)
    time = new_year_time(days)
    vonobot = vonobot_days(days)
    log.debug(
        "songkran %d (JS %d): sotins %s -> %02d:%02d, vonobot %d",
        gregorian_year, js,
        " ".join(f"{d.sotin}={d.reasey}:{d.angsar}:{d.libda}" for d in days),
        time[0], time[1], vonobot,
    )
    return NewYearSnapshot(
        gregorian_year=gregorian_year,
        js_year=js,
        year_info=js_year_info(js),
        has_solar_leap_day=js_is_solar_leap_year(js),
        has_leap_month=js_has_leap_month(js),
        has_leap_day=js_has_leap_day(js),
        sotins=tuple(days),
        time=time,
        vonobot_days=vonobot,
        leungsak_lunar=leungsak_lunar(js),
        leungsak_weekday=leungsak_weekday(js),
    )
