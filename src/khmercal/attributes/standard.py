from __future__ import annotations
from typing import Any, Dict

from ..core.constants import ANIMAL_YEAR_SLUGS, ERA_YEAR_SLUGS, SOLAR_MONTH_SLUGS, WEEKDAY_SLUGS, to_khmer_numerals
from .ceremonies import activities_for
from .registry import register_attribute

def weekday(info, calculator=None) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, the New Year angel order
    w = info.lunar.weekday_index
    return {"weekday": w, "weekday_slug": WEEKDAY_SLUGS[w]}

def zodiac(info, calculator=None) -> Dict[str, Any]:
    return {
        "animal_year": ANIMAL_YEAR_SLUGS[info.lunar.animal_year_index],
        "era_year": ERA_YEAR_SLUGS[info.lunar.era_year_index],
        "solar_month": SOLAR_MONTH_SLUGS[info.civil_date.month - 1],
    }

def khmer_numerals(info, calculator=None) -> Dict[str, Any]:
    return {
        "be_year_km": to_khmer_numerals(info.lunar.buddhist_era_year),
        "lunar_day_km": to_khmer_numerals(info.lunar.day),
    }

def new_year(info, calculator) -> Dict[str, Any]:
    if calculator is None:
        raise ValueError("the new_year attribute needs the calculator that produced the day")
    ny = calculator.get_khmer_new_year_info(info.civil_date.year)
    for d, name in zip(ny.all_dates(), ny.day_names()):
        if d == info.civil_date:
            return {"new_year_day": name, "new_year_activities": activities_for(name)}
    return {"new_year_day": None, "new_year_activities": {}}

register_attribute("weekday", weekday)
register_attribute("zodiac", zodiac)
register_attribute("khmer_numerals", khmer_numerals)
register_attribute("new_year", new_year)
