"""Rate-time grids and accrual fractions for curve states."""

from .rate_grid import RateGrid, periodic_dates, taus_from_rate_times

__all__ = [
    "RateGrid",
    "periodic_dates",
    "taus_from_rate_times",
]
