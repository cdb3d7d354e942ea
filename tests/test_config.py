# tests/test_config.py

from datetime import date

import pytest

import khmercal
from khmercal.core.config import DEFAULT_CONFIG, LEGACY_CONFIG, CalculatorConfig
from khmercal.engines.calendar import LunisolarCalculator


def test_defaults():
    assert DEFAULT_CONFIG.timezone == "Asia/Phnom_Penh"
    assert DEFAULT_CONFIG.epoch == date(1900, 1, 1)
    assert DEFAULT_CONFIG.epoch_month == "pous"
    assert (DEFAULT_CONFIG.to_solar_lead_days, DEFAULT_CONFIG.to_solar_span_days) == (45, 445)
    assert not DEFAULT_CONFIG.legacy_position_walk
    assert LEGACY_CONFIG.legacy_position_walk


def test_tweak_returns_copy():
    c = DEFAULT_CONFIG.tweak(visakha_scan_days=400)
    assert c.visakha_scan_days == 400
    assert DEFAULT_CONFIG.visakha_scan_days == 370


@pytest.mark.parametrize("changes", [
    {"epoch_month": "april"},
    {"to_solar_lead_days": -1},
    {"to_solar_span_days": 0},
    {"visakha_scan_days": 0},
])
def test_validation(changes):
    with pytest.raises(ValueError):
        CalculatorConfig(**changes)


def test_unknown_timezone():
    with pytest.raises(ValueError):
        LunisolarCalculator(DEFAULT_CONFIG.tweak(timezone="Mars/Olympus_Mons"))


def test_registry():
    assert "khmer" in khmercal.list_calculators()
    assert "legacy" not in khmercal.list_calculators()
    assert khmercal.calculator_info("khmer")["name"] == "khmer"
    with pytest.raises(KeyError):
        khmercal.to_lunar(date(2025, 4, 14), calculator="nope")


def test_register_custom_calculator():
    calc = khmercal.make_calculator(DEFAULT_CONFIG.tweak(timezone="UTC"), name="utc")
    khmercal.register_calculator("utc-test", calc, overwrite=True)
    assert khmercal.to_lunar(date(2025, 4, 14), calculator="utc-test").month_slug == "cetra"
    with pytest.raises(KeyError):
        khmercal.register_calculator("utc-test", calc)
