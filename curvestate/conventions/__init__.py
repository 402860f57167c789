"""Market conventions used to build curve-state grids."""

from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    DAY_COUNT_CONVENTIONS,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)

__all__ = [
    "DayCountConvention",
    "get_day_count_convention",
    "DAY_COUNT_CONVENTIONS",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
]
