from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import khmercal


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calculators(s: str) -> List[str]:
    # "khmer,custom" -> ["khmer", "custom"]
    return [x.strip() for x in s.split(",") if x.strip()]


def in_unambiguous_window(d: date) -> bool:
    """
    to_solar returns the first match from mid-November of the previous year,
    so a late-year lunar day can resolve to its twin a year earlier.
    """
    return (d.month, d.day) <= (10, 31)


def roundtrip_test(
    calculator: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    tried = 0

    for _ in range(20 * N):
        if tried >= N:
            break
        d0 = random_date(start, end)
        if not in_unambiguous_window(d0):
            continue
        tried += 1

        lunar = khmercal.to_lunar(d0, calculator=calculator)
        back = khmercal.to_solar(d0.year, lunar.month_slug, lunar.day, lunar.phase, calculator=calculator)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("calculator:", calculator)
            print("d0:", d0)
            print("lunar:", lunar)
            print("back:", back)
            print("explain:", khmercal.explain(d0, calculator=calculator))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar.")
    p.add_argument("--calculators", type=str, default="khmer",
                   help="Comma-separated calculator list.")
    p.add_argument("--N", type=int, default=500, help="Trials per calculator.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calculator.")
    args = p.parse_args(argv)

    calculators = parse_calculators(args.calculators)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for calc in calculators:
        print(f"Testing {calc} ...")
        f = roundtrip_test(calc, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
