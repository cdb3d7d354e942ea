from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(levelname)s %(name)s: %(message)s")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal day", description="Solar -> Khmer lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calculator", default="khmer")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = khmercal.day_info(
        _parse_ymd(args.date), calculator=args.calculator, attributes=tuple(args.attr), debug=args.debug
    )
    lunar = info.lunar
    print(f"{info.civil_date}  {lunar.day} {lunar.phase} {lunar.month_slug}  BE {lunar.buddhist_era_year}")
    if info.attributes:
        for k, v in info.attributes.items():
            print(f"  {k}: {v}")
    return 0


def cmd_to_solar(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal to-solar", description="Khmer lunar day -> solar date")
    p.add_argument("year", type=int, help="Gregorian year of the search window")
    p.add_argument("month", help="lunar month slug (e.g. visak)")
    p.add_argument("day", type=int, help="day within the phase, 1..15")
    p.add_argument("--waning", action="store_true", help="waning phase (default: waxing)")
    p.add_argument("--calculator", default="khmer")
    args = p.parse_args(argv)

    phase = "waning" if args.waning else "waxing"
    try:
        d = khmercal.to_solar(args.year, args.month, args.day, phase, calculator=args.calculator)
    except khmercal.KhmerCalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(d.isoformat())
    return 0


def cmd_new_year(argv: list[str]) -> int:
    import khmercal

    p = argparse.ArgumentParser(prog="khmercal new-year", description="Khmer New Year (Songkran) for one year")
    p.add_argument("year", type=int)
    p.add_argument("--calculator", default="khmer")
    p.add_argument("--khmer-digits", action="store_true", help="print the descent time in Khmer digits")
    args = p.parse_args(argv)

    info = khmercal.get_khmer_new_year_info(args.year, calculator=args.calculator)
    print(f"Maha Songkran : {info.songkran_date}  {info.angel_descent_time(khmer_digits=args.khmer_digits)}")
    print(f"Duration      : {info.duration} days (vonobot {info.vonobot_days})")
    for d, name in zip(info.all_dates(), info.day_names()):
        print(f"  {d}  {name}")
    print(f"Leungsak      : {info.leungsak_date}  lunar {info.leungsak_lunar}")
    a = info.angel
    print(f"Angel         : {a.name} (rides the {a.animal}; {a.flower}, {a.food})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # --log-level applies to every route, including the date shorthand
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--log-level", default="WARNING", type=str.upper, choices=_LOG_LEVELS)
    opts, argv = pre.parse_known_args(argv)
    _setup_logging(opts.log_level)

    # Shorthand: `khmercal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="khmercal", description="Khmer lunisolar calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", type=str.upper, choices=_LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Solar -> Khmer lunar day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--calculator", default="khmer")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("to-solar", help="Khmer lunar day -> solar date")
    sub.add_parser("new-year", help="Khmer New Year details for one year")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-years", "songkran-scatter", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.calculator != "khmer":
            day_argv += ["--calculator", args.calculator]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "to-solar":
        return cmd_to_solar(rest)

    if args.cmd == "new-year":
        return cmd_new_year(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("khmercal.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("khmercal.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-years": "khmercal.diagnostics.leap_years",
            "songkran-scatter": "khmercal.diagnostics.songkran_scatter",
            "round-trip": "khmercal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
