"""Market-model curve states.

This package converts a discretized discount-factor curve into the rate
representations used as state variables by forward-rate market models:
simple forward rates, coterminal swap rates and constant-maturity swap rates,
each with incremental evaluation from a first valid index.

Key modules:
- rates: the discount-ratio transformations and their pure-function facade
- state: curve state on a rate-time grid with cached rate queries
- grid: rate times and accrual fractions from times or dates
- conventions: day count conventions
"""

from .grid import RateGrid, periodic_dates, taus_from_rate_times
from .rates import (
    CurveShapeError,
    CurveStateTransformer,
    SwapRateCurve,
    constant_maturity_from_discount_ratios,
    constant_maturity_rates,
    coterminal_from_discount_ratios,
    coterminal_rates,
    discount_ratios_from_forwards,
    forward_rates,
    forwards_from_discount_ratios,
)
from .state import CurveState, CurveStateError

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Transformations
    "CurveStateTransformer",
    "forward_rates",
    "coterminal_rates",
    "constant_maturity_rates",
    "forwards_from_discount_ratios",
    "discount_ratios_from_forwards",
    "coterminal_from_discount_ratios",
    "constant_maturity_from_discount_ratios",
    "SwapRateCurve",
    # Curve state
    "CurveState",
    # Grids
    "RateGrid",
    "periodic_dates",
    "taus_from_rate_times",
    # Exceptions
    "CurveShapeError",
    "CurveStateError",
]
