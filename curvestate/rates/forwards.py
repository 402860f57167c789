"""Simple forward rates from discount ratios, and the inverse map."""

import logging
from typing import MutableSequence, Sequence

import numpy as np

from .validation import check_discount_size, check_first_valid_index, check_same_size

logger = logging.getLogger(__name__)


def forwards_from_discount_ratios(
    first_valid_index: int,
    ds: Sequence[float],
    taus: Sequence[float],
    fwds: MutableSequence[float],
) -> None:
    """Fill ``fwds[k:]`` with the simply compounded forwards implied by ``ds``.

    For every period ``i`` in ``[k, n)``::

        fwds[i] = (ds[i] - ds[i+1]) / (ds[i+1] * taus[i])

    Each forward depends only on its own pair of nodes, so the whole suffix is
    evaluated in one vectorised expression. Slots below ``first_valid_index``
    are neither read nor written.

    Args:
        first_valid_index: First period still to be computed
        ds: Discount ratios at the curve nodes (``n + 1`` values)
        taus: Accrual fractions of the periods (``n`` values)
        fwds: Output buffer for the forward rates (``n`` values)

    Raises:
        CurveShapeError: If the sizes are inconsistent
    """
    check_same_size("taus", taus, "fwds", fwds)
    check_discount_size(ds, "fwds", fwds)
    n = len(fwds)
    check_first_valid_index(first_valid_index, n)

    k = first_valid_index
    if k == n:
        return

    d = np.asarray(ds, dtype=float)
    t = np.asarray(taus, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        values = (d[k:n] - d[k + 1 : n + 1]) / (d[k + 1 : n + 1] * t[k:n])
    fwds[k:n] = values
    logger.debug("Computed %s forward rates from index %s", n - k, k)


def discount_ratios_from_forwards(
    first_valid_index: int,
    fwds: Sequence[float],
    taus: Sequence[float],
    ds: MutableSequence[float],
) -> None:
    """Rebuild ``ds[k+1:]`` from ``ds[k]`` and the forwards.

    Inverse of :func:`forwards_from_discount_ratios`::

        ds[i+1] = ds[i] / (1 + fwds[i] * taus[i])

    ``ds[first_valid_index]`` must already hold the anchor value. Each node
    depends on its predecessor, so this is a sequential loop.

    Args:
        first_valid_index: Node holding the anchor discount ratio
        fwds: Forward rates of the periods (``n`` values)
        taus: Accrual fractions of the periods (``n`` values)
        ds: Discount ratio buffer (``n + 1`` values), filled after the anchor

    Raises:
        CurveShapeError: If the sizes are inconsistent
    """
    check_same_size("taus", taus, "fwds", fwds)
    check_discount_size(ds, "fwds", fwds)
    n = len(fwds)
    check_first_valid_index(first_valid_index, n)

    f = np.asarray(fwds, dtype=float)
    t = np.asarray(taus, dtype=float)
    current = np.float64(ds[first_valid_index])
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(first_valid_index, n):
            current = current / (1.0 + f[i] * t[i])
            ds[i + 1] = current
