"""Discount ratios to forward, coterminal and constant-maturity swap rates.

Main APIs:
---------
Pure functions (return new arrays):
    - forward_rates
    - coterminal_rates
    - constant_maturity_rates
    - CurveStateTransformer

In-place functions (write into caller-owned buffers):
    - forwards_from_discount_ratios
    - discount_ratios_from_forwards
    - coterminal_from_discount_ratios
    - constant_maturity_from_discount_ratios
"""

from .constant_maturity import constant_maturity_from_discount_ratios
from .coterminal import coterminal_from_discount_ratios
from .forwards import discount_ratios_from_forwards, forwards_from_discount_ratios
from .transformer import (
    CurveStateTransformer,
    constant_maturity_rates,
    coterminal_rates,
    forward_rates,
)
from .types import SwapRateCurve
from .validation import CurveShapeError

__all__ = [
    # Facade
    "CurveStateTransformer",
    "forward_rates",
    "coterminal_rates",
    "constant_maturity_rates",
    # In-place
    "forwards_from_discount_ratios",
    "discount_ratios_from_forwards",
    "coterminal_from_discount_ratios",
    "constant_maturity_from_discount_ratios",
    # Types
    "SwapRateCurve",
    # Exceptions
    "CurveShapeError",
]
