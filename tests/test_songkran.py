# tests/test_songkran.py

import pytest

from khmercal.core.errors import InternalInvariantViolation
from khmercal.core.types import SolarNewYearDay
from khmercal.engines import songkran as sk


def test_sotin_range_follows_previous_solar_year():
    assert list(sk.sotin_range(1386)) == [363, 364, 365, 366]  # 2024
    assert list(sk.sotin_range(1387)) == [362, 363, 364, 365]  # 2025


def test_sotins_2025():
    assert sk.sotins(1387) == [
        SolarNewYearDay(362, 11, 29, 49),
        SolarNewYearDay(363, 12, 0, 48),
        SolarNewYearDay(364, 12, 1, 46),
        SolarNewYearDay(365, 12, 2, 44),
    ]


def test_sotins_2024_collide():
    days = sk.sotins(1386)
    assert [(d.reasey, d.angsar, d.libda) for d in days] == [
        (12, 0, 4), (12, 1, 3), (12, 2, 1), (12, 2, 59),
    ]
    assert sk.vonobot_days(days) == 2
    assert sk.new_year_time(days) == (22, 24)


@pytest.mark.parametrize("year, hm, vonobot", [
    (2025, (4, 48), 1),
    (2024, (22, 24), 2),
    (2026, (10, 48), 1),
    (2021, (4, 0), 1),
    (2016, (20, 0), 1),
    (2020, (20, 48), 1),
    (1900, (19, 36), 1),
    (2000, (16, 48), 1),
])
def test_snapshot_time_and_vonobot(year, hm, vonobot):
    snap = sk.snapshot(year)
    assert snap.time == hm
    assert snap.vonobot_days == vonobot
    assert snap.duration == (4 if vonobot == 2 else 3)


@pytest.mark.parametrize("year", [1974, 2032])
def test_two_zero_degree_sotins_take_the_later(year):
    days = sk.sotins(sk.js_year(year))
    assert [d.angsar for d in days].count(0) == 2
    # 12:00:00 and 12:00:59 -> the second wins
    assert sk.new_year_time(days) == (0, 24)
    assert sk.snapshot(year).duration == 4


def test_no_zero_degree_sotin_is_fatal():
    days = [SolarNewYearDay(362 + i, 12, i + 1, 10) for i in range(4)]
    with pytest.raises(InternalInvariantViolation):
        sk.new_year_time(days)


def test_residual_buckets():
    assert sk.last_residual(0, 1234).angsar == 1234 % 1800 // 60
    assert sk.last_residual(4, 9000) == sk.last_residual(1, 1800)
    with pytest.raises(InternalInvariantViolation):
        sk.last_residual(12, 0)


def test_left_over_wraps():
    assert sk.sun_left_over(4800) == 0
    assert sk.sun_left_over(4799) == 21599


def test_split_libda():
    assert sk.split_libda(21648) == (12, 0, 48)
    assert sk.split_libda(59) == (0, 0, 59)


def test_phol_caps_khan():
    assert sk.phol(7, 0) == sk.phol(5, 0)
    assert sk.phol(0, 900).as_libda() == 35


@pytest.mark.parametrize("year, expected", [
    (2015, (27, 4)),
    (2018, (1, 5)),
    (2021, (4, 5)),
    (2024, (7, 4)),
    (2025, (18, 4)),
    (2029, (3, 5)),
])
def test_leungsak_lunar(year, expected):
    assert sk.leungsak_lunar(sk.js_year(year)) == expected


def test_leungsak_weekday():
    assert [sk.leungsak_weekday(sk.js_year(y)) for y in (2024, 2025, 2026)] == [1, 2, 3]
