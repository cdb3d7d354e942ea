from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .types import DayInfo, KhmerNewYearInfo, LunarDate

class Calculator(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def to_lunar(self, d: date, timezone: str | None = None) -> LunarDate: ...
    def to_solar(self, gregorian_year: int, month_slug: str, phase_day: int, phase: str = "waxing") -> date: ...
    def get_khmer_new_year_date(self, gregorian_year: int) -> date: ...
    def get_khmer_new_year_info(self, gregorian_year: int) -> KhmerNewYearInfo: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class CalculatorRegistry:
    _calculators: Dict[str, Calculator]

    def get(self, name: str) -> Calculator:
        if name not in self._calculators:
            raise KeyError(f"Unknown calculator '{name}'. Available: {sorted(self._calculators)}")
        return self._calculators[name]

    def list(self) -> List[str]:
        return sorted(self._calculators.keys())

    def register(self, name: str, calculator: Calculator, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calculators):
            raise KeyError(f"Calculator '{name}' already exists. Use overwrite=True to replace.")
        self._calculators[name] = calculator
