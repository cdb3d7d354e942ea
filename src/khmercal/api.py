from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.config import CalculatorConfig
from .core.engine import Calculator, CalculatorRegistry
from .core.time import DateLike
from .core.types import DayInfo, KhmerNewYearInfo, LeapType, LunarDate, NewYearAngel, YearInfo
from .attributes.registry import compute_attributes
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .attributes.angels import angel_for_day
from .bootstrap import make_calculator as _make_calculator
from .engines import leap as _leap
from .engines import month_calendar as _months
from .engines import year_arithmetic as _years

_registry: Optional[CalculatorRegistry] = None

def set_registry(reg: CalculatorRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalculatorRegistry:
    if _registry is None:
        raise RuntimeError("Calculator registry not initialized")
    return _registry

def list_calculators() -> List[str]:
    return _reg().list()

def calculator_info(calculator: str) -> Dict[str, Any]:
    return _reg().get(calculator).info()

def make_calculator(config: CalculatorConfig, *, name: str = "custom") -> Calculator:
    return _make_calculator(config, name=name)

def register_calculator(name: str, calculator: Calculator, *, overwrite: bool = False) -> None:
    _reg().register(name, calculator, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_lunar(d: DateLike, *, timezone: Optional[str] = None, calculator: str = "khmer") -> LunarDate:
    return _reg().get(calculator).to_lunar(d, timezone)

def to_solar(
    gregorian_year: int,
    month_slug: str,
    phase_day: int,
    phase: str = "waxing",
    *,
    calculator: str = "khmer",
) -> date:
    return _reg().get(calculator).to_solar(gregorian_year, month_slug, phase_day, phase)

def day_info(
    d: DateLike,
    *,
    calculator: str = "khmer",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(calculator).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes, calculator=_reg().get(calculator))
        if info.attributes:
            attrs = {**info.attributes, **attrs}
        info = replace(info, attributes=attrs)
    return info

def explain(d: DateLike, *, calculator: str = "khmer") -> Dict[str, Any]:
    return _reg().get(calculator).explain(d)

# ============================================================
# Khmer New Year
# ============================================================

def get_khmer_new_year_date(gregorian_year: int, *, calculator: str = "khmer") -> date:
    return _reg().get(calculator).get_khmer_new_year_date(gregorian_year)

def get_khmer_new_year_info(gregorian_year: int, *, calculator: str = "khmer") -> KhmerNewYearInfo:
    return _reg().get(calculator).get_khmer_new_year_info(gregorian_year)

def new_year_angel(day_of_week: int) -> NewYearAngel:
    return angel_for_day(day_of_week)

# ============================================================
# Year-level tables (calculator independent)
# ============================================================

def year_info(be_year: int) -> YearInfo:
    return _years.year_info(be_year)

def leap_type(be_year: int) -> LeapType:
    return _leap.protetin_leap(be_year)

def days_in_year(be_year: int) -> int:
    return _months.days_in_year(be_year)

def days_in_month(month_slug: str, be_year: int) -> int:
    return _months.days_in_month(_months.month_index(month_slug), be_year)

def month_days(be_year: int) -> List[Dict[str, Any]]:
    """Months of one lunar year from mekasira with their lengths."""
    from .core.constants import lunar_month_slug
    return [
        {"month": lunar_month_slug(m), "month_index": m, "days": _months.days_in_month(m, be_year)}
        for m in _months.months_of_year(be_year)
    ]
