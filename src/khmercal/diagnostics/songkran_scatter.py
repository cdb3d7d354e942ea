#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Tuple, Optional, List

import argparse

import khmercal


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


def day_of_april(d: date) -> int:
    """April 1 = 1; March dates come out zero or negative."""
    return (d - date(d.year, 4, 1)).days + 1


def hours_since_midnight(hm: Tuple[int, int]) -> float:
    return hm[0] + hm[1] / 60.0


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    linewidths: float = 0.0
    size: float = 16.0
    hollow: bool = False
    jitter: float = 0.0


def build_series(np, calculator: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        if metric == "april-day":
            y[i] = float(day_of_april(khmercal.get_khmer_new_year_date(int(Y), calculator=calculator)))
        elif metric == "april-day-time":
            info = khmercal.get_khmer_new_year_info(int(Y), calculator=calculator)
            y[i] = day_of_april(info.songkran_date) + hours_since_midnight(info.songkran_time) / 24.0
        else:
            raise ValueError("metric must be 'april-day' or 'april-day-time'")

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Maha Songkran dates across calculators.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--calculators", default="khmer", help="Comma list of registered calculators (default: khmer).")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="songkran_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("april-day", "april-day-time"),
        default="april-day",
        help="Y-axis metric (default: civil day of April).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    palette = ("tab:blue", "tab:orange", "tab:green", "tab:red")
    names = [x.strip() for x in args.calculators.split(",") if x.strip()]
    styles: Dict[str, Style] = {
        name: Style(name.capitalize(), palette[i % len(palette)], "o", linewidths=0.0 if i == 0 else 1.2,
                    size=14 if i == 0 else 30, hollow=i > 0, jitter=0.0)
        for i, name in enumerate(names)
    }

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of April (April 1 = 1)")
    ax.set_title("Maha Songkran across calculators")

    for calc, st in styles.items():
        x, y = build_series(np, calc, args.start_year, args.end_year, metric=args.metric)
        xj = x.astype(float) + st.jitter

        if st.hollow:
            ax.scatter(xj, y, s=st.size, marker=st.marker, facecolors="none", edgecolors=st.color,
                       linewidths=st.linewidths, alpha=0.60, label=st.label)
        else:
            ax.scatter(xj, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=st.linewidths, alpha=0.50, label=st.label)

        if args.show_trend:
            y_med = rolling_median(np, y, win=int(args.trend_win))
            ax.plot(x, y_med, color=st.color if not st.hollow else "0.30", linewidth=1.8, alpha=0.95)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
