"""
Rate-time grids: the node times and accrual fractions a curve state lives on.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Sequence, Union

import numpy as np
from dateutil.relativedelta import relativedelta

from curvestate.config import DEFAULT_DAY_COUNT
from curvestate.conventions.daycount import (
    DayCountConvention,
    get_day_count_convention,
    to_date,
)
from curvestate.rates.validation import CurveShapeError

logger = logging.getLogger(__name__)


def taus_from_rate_times(rate_times: Sequence[float]) -> np.ndarray:
    """Accrual fractions between consecutive rate times.

    Raises:
        CurveShapeError: If fewer than two times are given or the times are
            not strictly increasing
    """
    times = np.asarray(rate_times, dtype=float)
    if times.ndim != 1 or times.size < 2:
        raise CurveShapeError(f"Need at least 2 rate times, got {times.size}")

    taus = np.diff(times)
    bad = np.flatnonzero(taus <= 0.0)
    if bad.size:
        i = int(bad[0])
        raise CurveShapeError(
            f"Rate times not strictly increasing: "
            f"t[{i}]={times[i]} >= t[{i + 1}]={times[i + 1]}"
        )
    return taus


def periodic_dates(start: date, periods: int, months: int) -> List[date]:
    """Unadjusted dates ``start, start + months, ...`` (``periods + 1`` dates).

    Months are added from ``start`` each time rather than chained, so a
    month-end start does not drift (31 Jan, 28 Feb, 31 Mar, ...).
    Business-day adjustment is left to the caller's calendar.
    """
    if periods < 0:
        raise ValueError(f"periods must be non-negative: {periods}")
    if months <= 0:
        raise ValueError(f"months must be positive: {months}")
    start = to_date(start)
    return [start + relativedelta(months=months * p) for p in range(periods + 1)]


@dataclass(frozen=True)
class RateGrid:
    """Curve node times and the accrual fractions between them.

    Attributes:
        rate_times: Node times in years (``n + 1`` values, strictly increasing)
        taus: Accrual fraction of each period (``n`` values)
    """

    rate_times: np.ndarray
    taus: np.ndarray

    def __post_init__(self):
        if len(self.taus) + 1 != len(self.rate_times):
            raise CurveShapeError(
                f"len(rate_times)={len(self.rate_times)} != "
                f"len(taus)+1={len(self.taus) + 1}"
            )
        taus_from_rate_times(self.rate_times)
        bad = np.flatnonzero(np.asarray(self.taus, dtype=float) <= 0.0)
        if bad.size:
            i = int(bad[0])
            raise CurveShapeError(
                f"Accrual fraction of period {i} must be positive: {self.taus[i]}"
            )

    @property
    def number_of_rates(self) -> int:
        return len(self.taus)

    @classmethod
    def from_times(cls, rate_times: Sequence[float]) -> "RateGrid":
        """Grid whose accrual fractions are the time differences."""
        taus = taus_from_rate_times(rate_times)
        return cls(rate_times=np.asarray(rate_times, dtype=float), taus=taus)

    @classmethod
    def from_dates(
        cls,
        reference_date: date,
        dates: Sequence[date],
        day_count: Union[str, DayCountConvention] = DEFAULT_DAY_COUNT,
    ) -> "RateGrid":
        """Grid built from node dates.

        Rate times are year fractions from ``reference_date`` and accrual
        fractions are year fractions between consecutive dates, both under
        ``day_count``.

        Raises:
            CurveShapeError: If the dates are not increasing, or the day count
                gives a zero accrual between consecutive dates (e.g. 30 and
                31 January under 30/360)
        """
        dcc = get_day_count_convention(day_count)
        times = np.array(
            [dcc.year_fraction(reference_date, d) for d in dates], dtype=float
        )
        taus = np.array(
            [dcc.year_fraction(start, end) for start, end in zip(dates[:-1], dates[1:])],
            dtype=float,
        )
        grid = cls(rate_times=times, taus=taus)
        logger.debug(
            "Built %s-period grid from %s to %s using %s",
            len(taus),
            to_date(dates[0]),
            to_date(dates[-1]),
            dcc,
        )
        return grid
