"""Diagnostics package.

Light-weight tables run on the core install; plots need the `diagnostics`
extra (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "songkran_scatter"]
