"""Constant-maturity swap rates and annuities from discount ratios."""

import logging
from typing import MutableSequence, Sequence

import numpy as np

from .validation import (
    check_discount_size,
    check_first_valid_index,
    check_same_size,
    check_spanning_forwards,
)

logger = logging.getLogger(__name__)


def constant_maturity_from_discount_ratios(
    spanning_forwards: int,
    first_valid_index: int,
    ds: Sequence[float],
    taus: Sequence[float],
    const_mat_swap_rates: MutableSequence[float],
    const_mat_swap_annuities: MutableSequence[float],
) -> None:
    """Fill constant-maturity swap rates and annuities for periods ``[k, n)``.

    The swap at index ``i`` spans ``spanning_forwards`` periods starting at
    ``i``, truncated at the end of the curve. The first annuity is summed
    directly; each following one slides the window by one period, dropping the
    discounted accrual that left it and adding the one that entered it::

        end        = i + spanning_forwards
        last       = min(end, n)
        annuity[i] = annuity[i-1] - taus[i-1] * ds[i]
                     (+ taus[end-1] * ds[end]   if end <= n)
        rate[i]    = (ds[i] - ds[last]) / annuity[i]

    Once a window is truncated by the end of the curve it only shrinks: the
    period leaving it is dropped and nothing enters. A zero
    ``spanning_forwards`` gives empty windows and NaN rates.

    Args:
        spanning_forwards: Number of periods in each swap
        first_valid_index: First index to compute
        ds: Discount ratios at the curve nodes (``n + 1`` values)
        taus: Accrual fractions of the periods (``n`` values)
        const_mat_swap_rates: Output buffer for the swap rates (``n`` values)
        const_mat_swap_annuities: Output buffer for the annuities (``n`` values)

    Raises:
        CurveShapeError: If the sizes are inconsistent or the width is negative
    """
    check_same_size("taus", taus, "const_mat_swap_rates", const_mat_swap_rates)
    check_same_size(
        "const_mat_swap_annuities",
        const_mat_swap_annuities,
        "const_mat_swap_rates",
        const_mat_swap_rates,
    )
    check_discount_size(ds, "const_mat_swap_rates", const_mat_swap_rates)
    check_spanning_forwards(spanning_forwards)
    n = len(const_mat_swap_rates)
    check_first_valid_index(first_valid_index, n)

    k = first_valid_index
    if k == n:
        return

    d = np.asarray(ds, dtype=float)
    t = np.asarray(taus, dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        last = min(k + spanning_forwards, n)
        annuity = np.float64(0.0)
        for j in range(k, last):
            annuity += t[j] * d[j + 1]
        const_mat_swap_annuities[k] = annuity
        const_mat_swap_rates[k] = (d[k] - d[last]) / annuity

        for i in range(k + 1, n):
            end = i + spanning_forwards
            last = min(end, n)
            annuity = annuity - t[i - 1] * d[i]
            if end <= n:
                annuity = annuity + t[end - 1] * d[end]
            const_mat_swap_annuities[i] = annuity
            const_mat_swap_rates[i] = (d[i] - d[last]) / annuity

    logger.debug(
        "Computed %s constant-maturity swap rates (span %s) from index %s",
        n - k,
        spanning_forwards,
        k,
    )
