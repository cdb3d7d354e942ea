# tests/test_cli.py

from khmercal.cli import main


def test_bare_date(capsys):
    assert main(["2025-04-14"]) == 0
    out = capsys.readouterr().out
    assert "2 waning cetra" in out
    assert "BE 2568" in out


def test_day_with_attributes(capsys):
    assert main(["day", "2025-04-14", "--attr", "zodiac"]) == 0
    out = capsys.readouterr().out
    assert "animal_year: snake" in out


def test_to_solar(capsys):
    assert main(["to-solar", "2025", "visak", "15"]) == 0
    assert capsys.readouterr().out.strip() == "2025-05-11"
    assert main(["to-solar", "2025", "cetra", "2", "--waning"]) == 0
    assert capsys.readouterr().out.strip() == "2025-04-14"


def test_to_solar_unknown_slug(capsys):
    assert main(["to-solar", "2025", "april", "1"]) == 1
    assert "Unknown lunar month slug" in capsys.readouterr().err


def test_new_year(capsys):
    assert main(["new-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "2025-04-14  04:48" in out
    assert "koreak_tevy" in out
    assert "2025-04-16  vara_loeng_sak" in out


def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "2024", "--to-year", "2025", "--calculators", "khmer"]) == 0
    out = capsys.readouterr().out
    assert "04-13" in out and "04-14" in out


def test_leap_years_summary(capsys):
    assert main(["diag", "leap-years", "--start-year", "1999", "--end-year", "2002", "--summary-only"]) == 0
    out = capsys.readouterr().out
    # BE 2543 and 2546 carry leap months
    assert "leap_month     2 / 4" in out


def test_log_level_before_bare_date(capsys):
    assert main(["--log-level", "DEBUG", "2025-04-14"]) == 0
    assert "2 waning cetra" in capsys.readouterr().out


def test_log_level_before_subcommand(capsys):
    assert main(["--log-level", "info", "to-solar", "2025", "visak", "15"]) == 0
    assert capsys.readouterr().out.strip() == "2025-05-11"


def test_new_years_default_calculators(capsys):
    assert main(["new-years", "--from-year", "2025", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out
    assert "04:48" in out and "04-14" in out
    assert "disagree" not in out


def test_pretty_month_lunar(capsys):
    assert main(["pretty-month", "--lunar", "2025", "visak"]) == 0
    out = capsys.readouterr().out
    assert "khmer lunar month  visak 2025" in out
    # visak waxing 1 .. waxing 15 (Visakha Bochea)
    assert "2025-04-27 .." in out
    assert "+15" in out and "05-11" in out


def test_pretty_month_gregorian(capsys):
    assert main(["pretty-month", "--greg", "2025", "4"]) == 0
    out = capsys.readouterr().out
    assert "khmer Gregorian month  2025-04" in out
    assert "ce-02" in out


def test_diag_round_trip(capsys):
    argv = ["diag", "round-trip", "--N", "20", "--start", "2024-01-01", "--end", "2026-12-31"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "Testing khmer ..." in out
    assert "All round-trip tests passed." in out
