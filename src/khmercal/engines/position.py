"""
khmercal.engines.position
-------------------------
Epoch-anchored search mapping a civil day to its lunar (month, day) position
and back.

The epoch is a civil date on which a known lunar month starts. From there the
walk steps by whole lunar years until the target's year is bracketed, then by
whole months; the residual offset is the day index (0..29).
"""

from __future__ import annotations

import logging
import threading
from datetime import date, timedelta
from typing import Dict

from ..core.config import CalculatorConfig
from ..core.constants import LUNAR_MONTHS
from ..core.errors import LunarDateNotFound
from ..core.time import add_solar_year
from ..core.types import LunarPosition
from .month_calendar import days_in_month, days_in_year, estimate_be_year, next_month

log = logging.getLogger(__name__)


class PositionFinder:
    """
    Memoized solar-day -> LunarPosition search. The cache is keyed by ISO date
    and guarded by a lock so one finder may be shared between threads.
    """
    def __init__(self, config: CalculatorConfig):
        self.config = config
        self.epoch = config.epoch
        self.epoch_month = LUNAR_MONTHS[config.epoch_month]
        self._cache: Dict[str, LunarPosition] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    # ---------------------------------------------------------
    # Forward: civil day -> position
    # ---------------------------------------------------------

    def find(self, target: date) -> LunarPosition:
        key = target.isoformat()
        with self._lock:
            hit = self._cache.get(key)
        if hit is not None:
            return hit

        if self.config.legacy_position_walk:
            cursor = self._year_cursor_legacy(target)
        else:
            cursor = self._year_cursor(target)

        month = self.epoch_month
        offset = (target - cursor).days
        while True:
            n = days_in_month(month, estimate_be_year(cursor))
            if offset < n:
                break
            cursor += timedelta(days=n)
            month = next_month(month, estimate_be_year(cursor))
            offset -= n

        pos = LunarPosition(day_index=offset, month_index=month, anchor_date=target)
        with self._lock:
            self._cache[key] = pos
        return pos

    def _year_cursor(self, target: date) -> date:
        """Start of the lunar year (epoch month, day 0) on or before target."""
        cursor = self.epoch
        steps = 0
        if target >= cursor:
            # Each step spans the lunar year being entered
            while True:
                n = days_in_year(estimate_be_year(add_solar_year(cursor)))
                if (target - cursor).days <= n:
                    break
                cursor += timedelta(days=n)
                steps += 1
        else:
            while cursor > target:
                cursor -= timedelta(days=days_in_year(estimate_be_year(cursor)))
                steps -= 1
        log.debug("position walk for %s: %+d lunar years to %s", target, steps, cursor)
        return cursor

    def _year_cursor_legacy(self, target: date) -> date:
        cursor = self.epoch
        if target < cursor:
            while True:
                prev = cursor - timedelta(days=days_in_year(estimate_be_year(cursor)))
                cursor = prev
                if target >= prev:
                    break
        else:
            while cursor < target:
                nxt = cursor + timedelta(days=days_in_year(estimate_be_year(cursor)))
                if nxt > target:
                    break
                cursor = nxt
        log.debug("legacy position walk for %s reached %s", target, cursor)
        return cursor

    # ---------------------------------------------------------
    # Inverse: (year, month, day index) -> civil day
    # ---------------------------------------------------------

    def locate(self, gregorian_year: int, month_index: int, day_index: int) -> date:
        """First civil day in the search window of gregorian_year with this position."""
        start = date(gregorian_year, 1, 1) - timedelta(days=self.config.to_solar_lead_days)
        for i in range(self.config.to_solar_span_days + 1):
            d = start + timedelta(days=i)
            pos = self.find(d)
            if pos.month_index == month_index and pos.day_index == day_index:
                return pos.anchor_date
        raise LunarDateNotFound(
            f"No day with month index {month_index}, day index {day_index} "
            f"in the search window of {gregorian_year}"
        )

    def scan(self, start: date, days: int, month_index: int, day_index: int) -> date:
        """First day in [start, start + days) with the given position."""
        for i in range(days):
            d = start + timedelta(days=i)
            pos = self.find(d)
            if pos.month_index == month_index and pos.day_index == day_index:
                return pos.anchor_date
        raise LunarDateNotFound(
            f"No day with month index {month_index}, day index {day_index} "
            f"within {days} days of {start}"
        )
