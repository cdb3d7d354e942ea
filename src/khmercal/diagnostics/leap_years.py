#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import khmercal
from khmercal.core.types import LeapType
from khmercal.engines.year_arithmetic import is_solar_leap_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "khmercal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "khmercal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    row: int
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


# rows from the bottom of the barcode
STYLES: Dict[str, Style] = {
    "leap_month": Style("Leap month (adhikameas)", 3, marker="s", size=80, hollow=False),
    "leap_day": Style("Leap day (chantrea thimeas)", 2, marker="o", size=70, hollow=True),
    "solar_leap": Style("366-day solar year (kromathupul <= 207)", 1, marker="^", size=60, hollow=True, color="tab:red"),
}


def classify(be_year: int) -> List[str]:
    out = []
    lt = khmercal.leap_type(be_year)
    if lt is LeapType.LEAP_MONTH:
        out.append("leap_month")
    elif lt is LeapType.LEAP_DAY:
        out.append("leap_day")
    if is_solar_leap_year(be_year):
        out.append("solar_leap")
    return out


def build_points(np, kind: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian years Y whose lunar year BE Y+544 has the given kind."""
    xs = [Y for Y in range(start_year, end_year + 1) if kind in classify(Y + 544)]
    return np.array(xs, dtype=int), np.full(len(xs), STYLES[kind].row, dtype=int)


def print_summary(start_year: int, end_year: int) -> None:
    counts = {k: 0 for k in STYLES}
    for Y in range(start_year, end_year + 1):
        for kind in classify(Y + 544):
            counts[kind] += 1
    n = end_year - start_year + 1
    for kind, c in counts.items():
        print(f"{kind:<11} {c:4d} / {n}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-month / leap-day barcode of the Khmer lunar years.")
    p.add_argument("--start-year", type=int, default=1990)
    p.add_argument("--end-year", type=int, default=2040)
    p.add_argument("--out", default="leap_years_barcode.png")
    p.add_argument("--title", default="Khmer lunar leap years")
    p.add_argument("--summary-only", action="store_true", help="Print counts and skip the plot.")
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print_summary(start_year, end_year)
    if args.summary_only:
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(16, 2.8))
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, len(STYLES) + 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    for x in np.arange(start_year - 0.5, end_year + 1.5, 1.0):
        ax.axvline(x, color="0.90", linewidth=0.5, zorder=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Gregorian year (lunar year BE = year + 544)")
    ax.set_yticks([st.row for st in STYLES.values()])
    ax.set_yticklabels([k for k in STYLES])

    for kind, st in STYLES.items():
        x, r = build_points(np, kind, start_year, end_year)
        if st.hollow:
            ax.scatter(x, r, s=st.size, marker=st.marker, facecolors="none", edgecolors=st.color,
                       linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
        else:
            ax.scatter(x, r, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
