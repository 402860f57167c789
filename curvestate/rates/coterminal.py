"""Coterminal swap rates and annuities from discount ratios."""

import logging
from typing import MutableSequence, Sequence

import numpy as np

from .validation import check_discount_size, check_first_valid_index, check_same_size

logger = logging.getLogger(__name__)


def coterminal_from_discount_ratios(
    first_valid_index: int,
    ds: Sequence[float],
    taus: Sequence[float],
    cot_swap_rates: MutableSequence[float],
    cot_swap_annuities: MutableSequence[float],
) -> None:
    """Fill coterminal swap rates and annuities for periods ``[k, n)``.

    The swap at index ``i`` runs from node ``i`` to the last node ``n``.
    Working backwards from the one-period swap at ``n - 1``, each longer swap
    adds one discounted accrual to the annuity of the shorter one::

        annuity[n-1] = taus[n-1] * ds[n]
        annuity[i]   = annuity[i+1] + taus[i] * ds[i+1]
        rate[i]      = (ds[i] - ds[n]) / annuity[i]

    The loop must run in decreasing index order.

    Args:
        first_valid_index: Last index (going backwards) to compute
        ds: Discount ratios at the curve nodes (``n + 1`` values)
        taus: Accrual fractions of the periods (``n`` values)
        cot_swap_rates: Output buffer for the swap rates (``n`` values)
        cot_swap_annuities: Output buffer for the annuities (``n`` values)

    Raises:
        CurveShapeError: If the sizes are inconsistent
    """
    check_same_size("taus", taus, "cot_swap_rates", cot_swap_rates)
    check_same_size("cot_swap_annuities", cot_swap_annuities, "cot_swap_rates", cot_swap_rates)
    check_discount_size(ds, "cot_swap_rates", cot_swap_rates)
    n = len(cot_swap_rates)
    check_first_valid_index(first_valid_index, n)

    if first_valid_index == n:
        return

    d = np.asarray(ds, dtype=float)
    t = np.asarray(taus, dtype=float)
    terminal = d[n]

    with np.errstate(divide="ignore", invalid="ignore"):
        annuity = t[n - 1] * terminal
        cot_swap_annuities[n - 1] = annuity
        cot_swap_rates[n - 1] = (d[n - 1] - terminal) / annuity

        for i in range(n - 2, first_valid_index - 1, -1):
            annuity = annuity + t[i] * d[i + 1]
            cot_swap_annuities[i] = annuity
            cot_swap_rates[i] = (d[i] - terminal) / annuity

    logger.debug(
        "Computed %s coterminal swap rates down to index %s",
        n - first_valid_index,
        first_valid_index,
    )
