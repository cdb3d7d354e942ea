from __future__ import annotations
from typing import Dict, Tuple

from ..core.types import NewYearAngel

# day_of_week (0=Sunday): name, jewelry, flower, food, right hand, left hand, mount
_TABLE: Tuple[Tuple[str, str, str, str, str, str, str], ...] = (
    ("tungsa_tevy", "ruby_necklace", "pomegranate_flower", "fig_fruit", "disc_of_power", "shell", "garuda"),
    ("koreak_tevy", "pearls", "ankeabos_flower", "oil", "sword", "cane", "tiger"),
    ("reaksa_tevy", "precious_stones", "lotus_flower", "blood", "trident", "bow", "horse"),
    ("mondar_tevy", "cats_eye_gemstones", "fragrant_flower", "milk", "needle", "cane", "donkey"),
    ("keriny_tevy", "emerald", "mondea_flower", "beans_and_sesames", "harpoon", "gun", "elephant"),
    ("kemira_tevy", "precious_gems", "violet_flower", "banana", "sword", "mandolin", "water_buffalo"),
    ("mohurea_tevy", "sapphires", "trokeat_flower", "deer_meat", "disc_of_power", "trident", "peacock"),
)

ANGELS: Dict[int, NewYearAngel] = {
    day: NewYearAngel(day, *row) for day, row in enumerate(_TABLE)
}


def angel_for_day(day_of_week: int) -> NewYearAngel:
    if day_of_week not in ANGELS:
        raise ValueError(f"day_of_week must be in 0..6 (0=Sunday), got {day_of_week!r}")
    return ANGELS[day_of_week]


def all_angels() -> Tuple[NewYearAngel, ...]:
    return tuple(ANGELS[d] for d in range(7))
