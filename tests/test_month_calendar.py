# tests/test_month_calendar.py

from datetime import date

import pytest

import khmercal
from khmercal.core.constants import LUNAR_MONTHS
from khmercal.core.errors import UnknownMonthSlug
from khmercal.engines.leap import is_leap_month_year
from khmercal.engines.month_calendar import (
    ADHIKA_FIRST,
    ADHIKA_SECOND,
    ASADHA,
    JESH,
    days_in_month,
    days_in_year,
    estimate_be_year,
    month_index,
    months_of_year,
    next_month,
)


def test_months_sum_to_year_length():
    for be in range(2400, 2700):
        assert sum(days_in_month(m, be) for m in months_of_year(be)) == days_in_year(be)


def test_leap_month_year_replaces_asadha():
    be = 1999 + 544
    assert is_leap_month_year(be)
    seq = months_of_year(be)
    assert ASADHA not in seq
    assert seq.index(ADHIKA_FIRST) == seq.index(JESH) + 1
    assert seq.index(ADHIKA_SECOND) == seq.index(ADHIKA_FIRST) + 1
    assert len(seq) == 13


def test_common_year_has_twelve_months():
    seq = months_of_year(2001 + 544)
    assert len(seq) == 12
    assert ADHIKA_FIRST not in seq and ADHIKA_SECOND not in seq
    assert next_month(JESH, 2001 + 544) == ASADHA


def test_month_lengths():
    be = 2001 + 544  # normal year
    assert days_in_month(LUNAR_MONTHS["mekasira"], be) == 29
    assert days_in_month(LUNAR_MONTHS["pous"], be) == 30
    assert days_in_month(JESH, be) == 29
    assert days_in_month(ADHIKA_FIRST, be) == 30
    assert days_in_month(ADHIKA_SECOND, be) == 30
    # leap-day year lengthens jesh
    assert days_in_month(JESH, 2000 + 544) == 30


def test_month_index_lookup():
    assert month_index("visak") == 5
    assert month_index("Cetra") == 4
    with pytest.raises(UnknownMonthSlug) as e:
        month_index("april")
    assert e.value.slug == "april"
    # also a KeyError for callers that treat slugs as mapping keys
    with pytest.raises(KeyError):
        month_index("")


def test_bad_month_index():
    with pytest.raises(ValueError):
        days_in_month(14, 2568)
    with pytest.raises(ValueError):
        next_month(-1, 2568)


def test_estimate_be_year():
    assert estimate_be_year(date(2025, 4, 30)) == 2568
    assert estimate_be_year(date(2025, 5, 1)) == 2569


def test_module_level_tables():
    assert khmercal.days_in_month("jesh", 2544) == 30
    assert khmercal.days_in_year(2544) == 355
    assert khmercal.leap_type(2543) is khmercal.LeapType.LEAP_MONTH
    rows = khmercal.month_days(2543)
    assert sum(r["days"] for r in rows) == 384
    assert rows[0]["month"] == "mekasira"
    assert khmercal.year_info(2544).aharkun == 929222
