from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum
from typing import Any, Dict, List, Literal, Optional, Tuple

Phase = Literal["waxing", "waning"]

class LeapType(IntEnum):
    """Final (protetin) leap classification of a lunar year."""
    NORMAL = 0
    LEAP_MONTH = 1
    LEAP_DAY = 2

@dataclass(frozen=True)
class YearInfo:
    aharkun: int
    kromathupul: int
    avoman: int
    bodithey: int

@dataclass(frozen=True)
class LunarPosition:
    day_index: int    # 0..29
    month_index: int  # 0..13
    anchor_date: date

@dataclass(frozen=True)
class LunarDay:
    day: int  # 1..15
    phase: Phase

    @property
    def day_index(self) -> int:
        return self.day + 14 if self.phase == "waning" else self.day - 1

@dataclass(frozen=True)
class LunarDate:
    gregorian_date: date
    lunar_day: LunarDay
    month_slug: str
    buddhist_era_year: int
    animal_year_index: int
    era_year_index: int
    weekday_index: int  # 0=Sunday

    @property
    def day(self) -> int:
        return self.lunar_day.day

    @property
    def phase(self) -> Phase:
        return self.lunar_day.phase

@dataclass(frozen=True)
class NewYearAngel:
    day_of_week: int
    name: str
    jewelry: str
    flower: str
    food: str
    right_hand: str
    left_hand: str
    animal: str

# ---------------------------------------------------------
# Sexagesimal intermediates (1 reasey = 30 angsar, 1 angsar = 60 libda)
# ---------------------------------------------------------

@dataclass(frozen=True)
class SolarResidual:
    reasey: int
    angsar: int
    libda: int

@dataclass(frozen=True)
class SolarPhol:
    reasey: int
    angsar: int
    libda: int

    def as_libda(self) -> int:
        return 1800 * self.reasey + 60 * self.angsar + self.libda

@dataclass(frozen=True)
class SolarSunInfo:
    average_libda: int
    kaen: int
    khan: int
    pouichalip: int
    phol: SolarPhol
    inauguration_libda: int

@dataclass(frozen=True)
class SolarNewYearDay:
    sotin: int
    reasey: int
    angsar: int
    libda: int

@dataclass(frozen=True)
class KhmerNewYearInfo:
    songkran_date: date
    songkran_time: Tuple[int, int]
    vonobot_days: int
    leungsak_date: date
    duration: int
    day_of_week: int  # 0=Sunday
    angel: NewYearAngel
    leungsak_lunar: Tuple[int, int]  # (day_index, month_index)

    def all_dates(self) -> List[date]:
        return [self.songkran_date + timedelta(days=i) for i in range(self.duration)]

    def day_names(self) -> List[str]:
        return ["maha_songkran"] + ["vara_vanabat"] * (self.duration - 2) + ["vara_loeng_sak"]

    def angel_descent_time(self, *, khmer_digits: bool = False) -> str:
        hour, minute = self.songkran_time
        out = f"{hour:02d}:{minute:02d}"
        if khmer_digits:
            from .constants import to_khmer_numerals
            out = to_khmer_numerals(out)
        return out

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    calculator: str
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
