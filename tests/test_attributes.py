# tests/test_attributes.py

from datetime import date

import pytest

import khmercal
from khmercal.attributes.registry import available_attributes, compute_attributes

ALL = ("weekday", "zodiac", "khmer_numerals", "new_year")


def test_standard_attributes_registered():
    assert set(ALL) <= set(available_attributes())


def test_new_year_day_attributes():
    info = khmercal.day_info(date(2025, 4, 14), attributes=ALL)
    a = info.attributes
    assert a["weekday"] == 1
    assert a["weekday_slug"] == "monday"
    assert a["animal_year"] == "snake"
    assert a["era_year"] == "sapta_sak"
    assert a["solar_month"] == "mesa"
    assert a["be_year_km"] == "២៥៦៨"
    assert a["lunar_day_km"] == "២"
    assert a["new_year_day"] == "maha_songkran"
    assert a["new_year_activities"]["morning"] == "food_offering_to_temple"


@pytest.mark.parametrize("d, name", [
    (date(2025, 4, 15), "vara_vanabat"),
    (date(2025, 4, 16), "vara_loeng_sak"),
    (date(2024, 4, 15), "vara_vanabat"),
    (date(2025, 4, 13), None),
    (date(2025, 12, 1), None),
])
def test_festival_day_names(d, name):
    info = khmercal.day_info(d, attributes=("new_year",))
    assert info.attributes["new_year_day"] == name


def test_previous_animal_before_new_year():
    info = khmercal.day_info(date(2025, 4, 13), attributes=("zodiac",))
    assert info.attributes["animal_year"] == "dragon"


def test_unknown_attribute():
    with pytest.raises(KeyError):
        khmercal.day_info(date(2025, 4, 14), attributes=("moon_sign",))


def test_new_year_needs_calculator():
    info = khmercal.day_info(date(2025, 4, 14))
    with pytest.raises(ValueError):
        compute_attributes(info, ("new_year",))
    # the others are plain functions of the day
    assert compute_attributes(info, ("weekday",)) == {"weekday": 1, "weekday_slug": "monday"}
