"""Curve states for forward-rate market models."""

from .curve_state import CurveState, CurveStateError

__all__ = [
    "CurveState",
    "CurveStateError",
]
