"""khmercal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_lunar,
    to_solar,
    day_info,
    explain,
    get_khmer_new_year_date,
    get_khmer_new_year_info,
    new_year_angel,
    list_calculators,
    calculator_info,
    make_calculator,
    register_calculator,
    days_in_year,
    days_in_month,
    leap_type,
    year_info,
    month_days,
)
from .core.config import CalculatorConfig
from .core.errors import (
    KhmerCalError,
    UnknownMonthSlug,
    LunarDateNotFound,
    InternalInvariantViolation,
)
from .core.types import DayInfo, KhmerNewYearInfo, LeapType, LunarDate, NewYearAngel
from .engines.calendar import LunisolarCalculator

__all__ = [
    "to_lunar",
    "to_solar",
    "day_info",
    "explain",
    "get_khmer_new_year_date",
    "get_khmer_new_year_info",
    "new_year_angel",
    "list_calculators",
    "calculator_info",
    "make_calculator",
    "register_calculator",
    "days_in_year",
    "days_in_month",
    "leap_type",
    "year_info",
    "month_days",
    "CalculatorConfig",
    "KhmerCalError",
    "UnknownMonthSlug",
    "LunarDateNotFound",
    "InternalInvariantViolation",
    "DayInfo",
    "KhmerNewYearInfo",
    "LeapType",
    "LunarDate",
    "NewYearAngel",
    "LunisolarCalculator",
]
