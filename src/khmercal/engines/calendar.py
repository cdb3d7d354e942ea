"""
khmercal.engines.calendar
-------------------------
The Orchestrator. Binds the position finder (lunar months and days) and the
Songkran engine (solar New Year) into civil-date conversions.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional

from ..attributes.angels import angel_for_day
from ..core.config import DEFAULT_CONFIG, CalculatorConfig
from ..core.constants import LUNAR_MONTHS, MOON_PHASE_SLUGS, lunar_month_slug
from ..core.errors import InternalInvariantViolation
from ..core.time import DateLike, resolve_timezone, to_local_date, weekday_index
from ..core.types import DayInfo, KhmerNewYearInfo, LunarDate, LunarDay, LunarPosition
from . import songkran
from .month_calendar import days_in_month, estimate_be_year, month_index, next_month
from .position import PositionFinder

log = logging.getLogger(__name__)

CETRA = LUNAR_MONTHS["cetra"]
PHALGUN = LUNAR_MONTHS["phalgun"]
VISAK = LUNAR_MONTHS["visak"]
VISAKHA_BOCHEA_DAY = 14

# Songkran is found by walking back from this civil day
NEW_YEAR_ANCHOR = (4, 17)


def phase_of(day_index: int) -> LunarDay:
    return LunarDay(day=day_index % 15 + 1, phase=MOON_PHASE_SLUGS[day_index // 15])


class LunisolarCalculator:
    """
    Solar <-> Khmer lunisolar conversions and Khmer New Year queries.

    Instances own a memoization cache of lunar positions; it is safe to share
    one instance between threads.
    """
    def __init__(self, config: CalculatorConfig = DEFAULT_CONFIG, *, name: str = "khmer"):
        self.name = name
        self.config = config
        self.tz = resolve_timezone(config.timezone)
        self.positions = PositionFinder(config)

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "config": self.config.__dict__, "cached_positions": len(self.positions)}

    # ---------------------------------------------------------
    # Positions
    # ---------------------------------------------------------

    def position(self, d: date) -> LunarPosition:
        return self.positions.find(d)

    def _cetra_ordinal(self, m: int, day_index: int, be_year: int) -> int:
        """Days from the first of cetra, using the year's real month lengths."""
        if m == CETRA:
            return day_index
        if m == PHALGUN:
            return day_index - days_in_month(PHALGUN, be_year)
        offset, k = 0, CETRA
        for _ in range(3):
            offset += days_in_month(k, be_year)
            k = next_month(k, be_year)
            if k == m:
                return offset + day_index
        raise InternalInvariantViolation(
            f"lunar month {lunar_month_slug(m)} is too far from cetra to anchor the New Year"
        )

    # ---------------------------------------------------------
    # Solar -> lunar
    # ---------------------------------------------------------

    def to_lunar(self, d: DateLike, timezone: Optional[str] = None) -> LunarDate:
        tz = resolve_timezone(timezone) if timezone else self.tz
        civil = to_local_date(d, tz)
        pos = self.position(civil)
        return LunarDate(
            gregorian_date=civil,
            lunar_day=phase_of(pos.day_index),
            month_slug=lunar_month_slug(pos.month_index),
            buddhist_era_year=self.buddhist_era_year(civil),
            animal_year_index=self.animal_year_index(civil),
            era_year_index=self.era_year_index(civil),
            weekday_index=weekday_index(civil),
        )

    def visakha_bochea(self, gregorian_year: int) -> date:
        """Full moon of visak in the given solar year."""
        return self.positions.scan(
            date(gregorian_year, 1, 1), self.config.visakha_scan_days, VISAK, VISAKHA_BOCHEA_DAY
        )

    def buddhist_era_year(self, d: date) -> int:
        return d.year + 544 if d > self.visakha_bochea(d.year) else d.year + 543

    def _new_year_be_year(self, d: date) -> int:
        return d.year + 544 if d >= self.get_khmer_new_year_date(d.year) else d.year + 543

    def animal_year_index(self, d: date) -> int:
        return (self._new_year_be_year(d) + 4) % 12

    def era_year_index(self, d: date) -> int:
        return (self._new_year_be_year(d) - 1182) % 10

    # ---------------------------------------------------------
    # Lunar -> solar
    # ---------------------------------------------------------

    def to_solar(self, gregorian_year: int, month_slug: str, phase_day: int, phase: str = "waxing") -> date:
        m = month_index(month_slug)
        day = max(1, min(15, int(phase_day)))
        day_index = 14 + day if phase.lower() == "waning" else day - 1
        return self.positions.locate(gregorian_year, m, day_index)

    # ---------------------------------------------------------
    # Khmer New Year
    # ---------------------------------------------------------

    def new_year_snapshot(self, gregorian_year: int) -> songkran.NewYearSnapshot:
        return songkran.snapshot(gregorian_year)

    def _songkran_date(self, snap: songkran.NewYearSnapshot) -> date:
        anchor = date(snap.gregorian_year, *NEW_YEAR_ANCHOR)
        pos = self.position(anchor)
        ls_day, ls_month = snap.leungsak_lunar
        be = estimate_be_year(anchor)
        diff = self._cetra_ordinal(pos.month_index, pos.day_index, be) - self._cetra_ordinal(ls_month, ls_day, be)
        return anchor - timedelta(days=diff + snap.duration - 1)

    def get_khmer_new_year_date(self, gregorian_year: int) -> date:
        return self._songkran_date(self.new_year_snapshot(gregorian_year))

    def get_khmer_new_year_info(self, gregorian_year: int) -> KhmerNewYearInfo:
        snap = self.new_year_snapshot(gregorian_year)
        start = self._songkran_date(snap)
        end = start + timedelta(days=snap.duration - 1)
        end_pos = self.position(end)
        dow = weekday_index(start)
        log.debug("khmer new year %d: %s .. %s (%d days)", gregorian_year, start, end, snap.duration)
        return KhmerNewYearInfo(
            songkran_date=start,
            songkran_time=snap.time,
            vonobot_days=snap.vonobot_days,
            leungsak_date=end,
            duration=snap.duration,
            day_of_week=dow,
            angel=angel_for_day(dow),
            leungsak_lunar=(end_pos.day_index, end_pos.month_index),
        )

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def day_info(self, d: DateLike, *, debug: bool = False) -> DayInfo:
        lunar = self.to_lunar(d)
        attrs = None
        if debug:
            pos = self.position(lunar.gregorian_date)
            attrs = {"day_index": pos.day_index, "month_index": pos.month_index}
        return DayInfo(civil_date=lunar.gregorian_date, calculator=self.name, lunar=lunar, attributes=attrs)

    def explain(self, d: DateLike) -> Dict[str, Any]:
        civil = to_local_date(d, self.tz)
        pos = self.position(civil)
        return {
            "date": civil,
            "position": pos,
            "estimated_be_year": estimate_be_year(civil),
            "visakha_bochea": self.visakha_bochea(civil.year),
            "khmer_new_year": self.get_khmer_new_year_date(civil.year),
            "lunar": self.to_lunar(civil),
        }
