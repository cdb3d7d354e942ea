"""Slug tables shared by the engines, attributes and CLI."""

from __future__ import annotations

from typing import Dict, Tuple

TIMEZONE = "Asia/Phnom_Penh"

LUNAR_MONTH_SLUGS: Tuple[str, ...] = (
    "mekasira",
    "pous",
    "makha",
    "phalgun",
    "cetra",
    "visak",
    "jesh",
    "asadha",
    "srapoan",
    "bhadrapada",
    "assuj",
    "kattik",
    "adhika_asadha_first",
    "adhika_asadha_second",
)
LUNAR_MONTHS: Dict[str, int] = {slug: i for i, slug in enumerate(LUNAR_MONTH_SLUGS)}

SOLAR_MONTH_SLUGS: Tuple[str, ...] = (
    "mekara",
    "kompheak",
    "mina",
    "mesa",
    "ousaphea",
    "mithona",
    "kakkada",
    "seha",
    "kakanya",
    "tula",
    "vicchika",
    "thnou",
)

ANIMAL_YEAR_SLUGS: Tuple[str, ...] = (
    "rat", "ox", "tiger", "rabbit", "dragon", "snake",
    "horse", "goat", "monkey", "rooster", "dog", "pig",
)

ERA_YEAR_SLUGS: Tuple[str, ...] = (
    "samriddhi_sak",
    "eka_sak",
    "dvi_sak",
    "tri_sak",
    "catur_sak",
    "pancha_sak",
    "sat_sak",
    "sapta_sak",
    "astha_sak",
    "nava_sak",
)

# 0=Sunday, matching the New Year angel table
WEEKDAY_SLUGS: Tuple[str, ...] = (
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
)

MOON_PHASE_SLUGS: Tuple[str, ...] = ("waxing", "waning")

KHMER_DIGITS: Dict[str, str] = {str(i): d for i, d in enumerate("០១២៣៤៥៦៧៨៩")}


def lunar_month_slug(index: int) -> str:
    return LUNAR_MONTH_SLUGS[index]


def to_khmer_numerals(value: int | str) -> str:
    """Replace ASCII digits with Khmer digits, leaving other characters alone."""
    return "".join(KHMER_DIGITS.get(ch, ch) for ch in str(value))
