# tests/test_angels.py

import pytest

from khmercal.attributes.angels import all_angels, angel_for_day
from khmercal.attributes.ceremonies import DAY_ACTIVITIES, TRADITIONAL_GAMES, activities_for
from khmercal.core.constants import to_khmer_numerals


def test_angel_table():
    angels = all_angels()
    assert [a.day_of_week for a in angels] == list(range(7))
    assert angels[0].name == "tungsa_tevy"
    assert angels[0].animal == "garuda"
    assert angels[6].name == "mohurea_tevy"
    assert angels[6].food == "deer_meat"
    assert len({a.name for a in angels}) == 7


@pytest.mark.parametrize("bad", [-1, 7, 100])
def test_angel_out_of_range(bad):
    with pytest.raises(ValueError):
        angel_for_day(bad)


def test_ceremonies():
    assert set(DAY_ACTIVITIES) == {"maha_songkran", "vara_vanabat", "vara_loeng_sak"}
    for name in DAY_ACTIVITIES:
        assert set(activities_for(name)) == {"morning", "afternoon", "evening"}
    assert TRADITIONAL_GAMES["teang_prot"] == "tug_of_war"
    with pytest.raises(KeyError):
        activities_for("chaul_chnam")


def test_activities_are_copies():
    activities_for("maha_songkran")["morning"] = "nothing"
    assert activities_for("maha_songkran")["morning"] == "food_offering_to_temple"


def test_khmer_numerals():
    assert to_khmer_numerals(2568) == "២៥៦៨"
    assert to_khmer_numerals("04:48") == "០៤:៤៨"
