from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import khmercal


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.weekday() + 1) % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in cells:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def lunar_label(lunar) -> str:
    tag = "+" if lunar.phase == "waxing" else "-"
    return f"{tag}{lunar.day:02d}"


def lunar_month_calendar(calculator: str, year: int, slug: str) -> None:
    d0 = khmercal.to_solar(year, slug, 1, "waxing", calculator=calculator)
    cells = []
    d = d0
    while True:
        lunar = khmercal.to_lunar(d, calculator=calculator)
        if lunar.month_slug != slug:
            break
        cells.append((lunar_label(lunar), f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)
    d1 = d - timedelta(days=1)

    title = f"{calculator} lunar month  {slug} {year}  ({len(cells)} days, {d0} .. {d1})"
    print_grid(title, to_weeks(d0, cells))


def gregorian_month_calendar(calculator: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        lunar = khmercal.to_lunar(d, calculator=calculator)
        cells.append((f"{d.day:2d}", f"{lunar.month_slug[:2]}{lunar_label(lunar)}"))
        d += timedelta(days=1)

    title = f"{calculator} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, to_weeks(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--calculator", default="khmer", help="registered calculator name (default: khmer)")

    p.add_argument("--lunar", nargs=2, metavar=("YEAR", "SLUG"),
                   help="Lunar month to print: YEAR SLUG (e.g. 2025 visak)")

    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 4)")

    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(args.calculator, 2025, "visak")
        gregorian_month_calendar(args.calculator, gy=2025, gm=4)
        return 0

    if args.lunar:
        year, slug = args.lunar
        lunar_month_calendar(args.calculator, int(year), slug.lower())

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.calculator, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
