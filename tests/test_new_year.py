# tests/test_new_year.py

from collections import Counter
from datetime import date, timedelta

import pytest

import khmercal
from khmercal.core.config import DEFAULT_CONFIG, LEGACY_CONFIG
from khmercal.engines.calendar import LunisolarCalculator
from khmercal.engines.songkran import snapshot


@pytest.fixture(scope="module")
def calc():
    return LunisolarCalculator(DEFAULT_CONFIG)


FOUR_DAY_YEARS = {2024, 2028}


@pytest.mark.parametrize("year", range(2015, 2031))
def test_recent_new_years(calc, year):
    expected = date(year, 4, 13) if year in FOUR_DAY_YEARS else date(year, 4, 14)
    info = calc.get_khmer_new_year_info(year)
    assert info.songkran_date == expected
    assert info.duration == (4 if year in FOUR_DAY_YEARS else 3)
    assert info.leungsak_date == date(year, 4, 16)
    assert info.leungsak_lunar == snapshot(year).leungsak_lunar


def test_2025(calc):
    info = calc.get_khmer_new_year_info(2025)
    assert info.songkran_date == date(2025, 4, 14)
    assert info.songkran_time == (4, 48)
    assert info.vonobot_days == 1
    assert info.duration == 3
    assert info.day_of_week == 1
    assert info.angel.name == "koreak_tevy"
    assert info.leungsak_date == date(2025, 4, 16)
    assert info.leungsak_lunar == (18, 4)
    assert info.all_dates() == [date(2025, 4, 14), date(2025, 4, 15), date(2025, 4, 16)]
    assert info.day_names() == ["maha_songkran", "vara_vanabat", "vara_loeng_sak"]
    assert info.angel_descent_time() == "04:48"
    assert info.angel_descent_time(khmer_digits=True) == "០៤:៤៨"


def test_2024_four_days(calc):
    info = calc.get_khmer_new_year_info(2024)
    assert info.songkran_date == date(2024, 4, 13)
    assert info.songkran_time == (22, 24)
    assert info.vonobot_days == 2
    assert info.day_of_week == 6
    assert info.angel.name == "mohurea_tevy"
    assert info.day_names() == ["maha_songkran", "vara_vanabat", "vara_vanabat", "vara_loeng_sak"]


@pytest.mark.parametrize("year, d, hm, angel", [
    (2026, date(2026, 4, 14), (10, 48), "reaksa_tevy"),
    (2021, date(2021, 4, 14), (4, 0), "mondar_tevy"),
    (2000, date(2000, 4, 13), (16, 48), "keriny_tevy"),
    (1900, date(1900, 4, 13), (19, 36), None),
    (2100, date(2100, 4, 15), None, None),
])
def test_other_years(calc, year, d, hm, angel):
    info = calc.get_khmer_new_year_info(year)
    assert info.songkran_date == d
    if hm is not None:
        assert info.songkran_time == hm
    if angel is not None:
        assert info.angel.name == angel


def test_distribution_1900_2100(calc):
    days = Counter()
    for year in range(1900, 2101):
        info = calc.get_khmer_new_year_info(year)
        assert info.duration in (3, 4)
        assert info.leungsak_date == info.songkran_date + timedelta(days=info.duration - 1)
        assert info.leungsak_lunar == snapshot(year).leungsak_lunar
        days[(info.songkran_date.month, info.songkran_date.day)] += 1
    assert days == {(4, 14): 101, (4, 13): 79, (4, 15): 19, (4, 12): 2}


def test_every_registered_calculator_gives_published_dates():
    # cursor-year walk is opt-in only; it mislabels April by a month
    for name in khmercal.list_calculators():
        assert khmercal.get_khmer_new_year_date(2025, calculator=name) == date(2025, 4, 14)
        assert khmercal.to_lunar(date(2025, 4, 14), calculator=name).month_slug == "cetra"


def test_legacy_walk_not_registered():
    assert "legacy" not in khmercal.list_calculators()
    assert LEGACY_CONFIG.legacy_position_walk


def test_module_level_new_year():
    assert khmercal.get_khmer_new_year_date(2025) == date(2025, 4, 14)
    assert khmercal.get_khmer_new_year_info(2024).duration == 4
    assert khmercal.new_year_angel(1).animal == "tiger"
