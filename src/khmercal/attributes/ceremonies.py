from __future__ import annotations
from typing import Dict

# Activity keys per festival day, by time of day
DAY_ACTIVITIES: Dict[str, Dict[str, str]] = {
    "maha_songkran": {
        "morning": "food_offering_to_temple",
        "afternoon": "build_sand_hill",
        "evening": "offer_drinks_to_monks",
    },
    "vara_vanabat": {
        "morning": "give_to_parents",
        "afternoon": "sand_hill_prayer",
        "evening": "bangskole_ceremony",
    },
    "vara_loeng_sak": {
        "morning": "complete_sand_hill",
        "afternoon": "bathing_ceremony",
        "evening": "buddha_bathing",
    },
}

TRADITIONAL_GAMES: Dict[str, str] = {
    "chhoung": "chhoung_game",
    "teang_prot": "tug_of_war",
    "ongkunh": "ongkunh_game",
    "leak_konsaeng": "hide_and_seek",
    "donderm": "donderm_game",
    "sluk_chaue": "sluk_chaue_game",
}


def activities_for(day_name: str) -> Dict[str, str]:
    if day_name not in DAY_ACTIVITIES:
        raise KeyError(f"Unknown festival day '{day_name}'. Available: {sorted(DAY_ACTIVITIES)}")
    return dict(DAY_ACTIVITIES[day_name])
