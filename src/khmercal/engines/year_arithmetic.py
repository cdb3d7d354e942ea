"""
khmercal.engines.year_arithmetic
--------------------------------
Closed-form yearly quantities of the traditional Khmer reckoning.

Two year counts appear:
  - Buddhist Era (BE) years drive the lunar month tables.
  - Jolak-Sakaraj (JS) years, JS = AD + 544 - 1182, drive the
    Songkran sun-position arithmetic.
"""

from __future__ import annotations

from ..core.types import YearInfo

JS_OFFSET = 1182


def js_year(gregorian_year: int) -> int:
    return gregorian_year + 544 - JS_OFFSET


# ---------------------------------------------------------
# Buddhist Era forms
# ---------------------------------------------------------

def _solar_months(be_year: int) -> int:
    return be_year * 292207 + 499

def aharkun(be_year: int) -> int:
    return _solar_months(be_year) // 800 + 4

def kromathupul(be_year: int) -> int:
    return 800 - _solar_months(be_year) % 800

def avoman(be_year: int) -> int:
    return (11 * aharkun(be_year) + 25) % 692

def bodithey(be_year: int) -> int:
    a = aharkun(be_year)
    return ((11 * a + 25) // 692 + a + 29) % 30

def is_solar_leap_year(be_year: int) -> bool:
    """366-day solar year."""
    return kromathupul(be_year) <= 207

def year_info(be_year: int) -> YearInfo:
    return YearInfo(
        aharkun=aharkun(be_year),
        kromathupul=kromathupul(be_year),
        avoman=avoman(be_year),
        bodithey=bodithey(be_year),
    )


# ---------------------------------------------------------
# Jolak-Sakaraj forms (Songkran engine)
# ---------------------------------------------------------

def js_year_info(js: int) -> YearInfo:
    h = 292207 * js + 373
    ahk = h // 800 + 1
    a = 11 * ahk + 650
    return YearInfo(
        aharkun=ahk,
        kromathupul=800 - h % 800,
        avoman=a % 692,
        bodithey=(ahk + a // 692) % 30,
    )

def js_is_solar_leap_year(js: int) -> bool:
    return js_year_info(js).kromathupul <= 207
