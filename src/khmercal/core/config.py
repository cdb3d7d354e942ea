# src/khmercal/core/config.py
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date

from .constants import LUNAR_MONTHS, TIMEZONE


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Configuration for one LunisolarCalculator instance.

    The epoch pairs a civil date with the lunar month that starts on it
    (day index 0). All windows are in days.
    """
    timezone: str = TIMEZONE

    epoch: date = date(1900, 1, 1)
    epoch_month: str = "pous"

    # Reverse search: scan from Jan 1 - lead through start + span (inclusive)
    to_solar_lead_days: int = 45
    to_solar_span_days: int = 445

    # Forward scan from Jan 1 looking for Visakha Bochea
    visakha_scan_days: int = 370

    # Step lunar years by the cursor's own year and apply the fixed
    # Songkran calibration corrections, as the first published port did.
    legacy_position_walk: bool = False

    def __post_init__(self) -> None:
        if self.epoch_month not in LUNAR_MONTHS:
            raise ValueError(f"epoch_month must be a lunar month slug, got '{self.epoch_month}'")
        if self.to_solar_lead_days < 0 or self.to_solar_span_days <= 0:
            raise ValueError("to_solar window must be non-negative lead and positive span")
        if self.visakha_scan_days <= 0:
            raise ValueError("visakha_scan_days must be positive")

    def tweak(self, **changes) -> "CalculatorConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = CalculatorConfig()
LEGACY_CONFIG = CalculatorConfig(legacy_position_walk=True)
