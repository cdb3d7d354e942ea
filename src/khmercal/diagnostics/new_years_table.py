from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import khmercal


DEFAULT_CALCULATORS: List[Tuple[str, str]] = [
    ("Khmer", "khmer"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calculators(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calculator list from CLI.
    Example:
      --calculators "Khmer=khmer,Walk=custom"
    If you pass just names, column titles will be capitalized names:
      --calculators "khmer"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, calc = it.split("=", 1)
            out.append((name.strip(), calc.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Khmer New Year (Maha Songkran) date table for one or more calculators."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calculators",
        type=str,
        default="",
        help='Comma list like "Khmer=khmer,Walk=custom" (default: khmer).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calculators = parse_calculators(args.calculators) if args.calculators else DEFAULT_CALCULATORS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # time and duration come from the sun arithmetic, shared by all calculators
    headers = ["Year", "Time", "Days"] + [name for name, _ in calculators]
    colw = [5, 5, 4] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[3:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    disagreements: list[tuple[int, list[str]]] = []

    for Y in range(Y0, Y1 + 1):
        first = khmercal.get_khmer_new_year_info(Y, calculator=calculators[0][1])
        row = [str(Y).ljust(colw[0]), first.angel_descent_time().ljust(colw[1]), str(first.duration).ljust(colw[2])]
        seen = []
        for (_, calc), w in zip(calculators, colw[3:]):
            d = khmercal.get_khmer_new_year_date(Y, calculator=calc)
            seen.append(fmt(d))
            row.append(fmt(d).ljust(w))
        if len(set(seen)) > 1:
            disagreements.append((Y, seen))
        print("  ".join(row))

    if len(calculators) > 1:
        print(f"\nYears where calculators disagree: {len(disagreements)}")
        for Y, seen in disagreements:
            print(f"{Y}  " + "  ".join(f"{name}={s}" for (name, _), s in zip(calculators, seen)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
