"""
Curve state for forward-rate market models.

A :class:`CurveState` holds the discount ratios of a curve on a fixed
rate-time grid at one simulation step, and serves forward, coterminal and
constant-maturity swap rates from them. Only the nodes from the first valid
index onwards are meaningful: earlier rates have already fixed.
"""

import logging
from typing import Dict, Optional, Sequence, Union

import numpy as np
import pandas as pd

from curvestate.config import DISCOUNT_RATIO_INCREASE_TOLERANCE, UNSET_VALUE
from curvestate.grid.rate_grid import RateGrid
from curvestate.rates.constant_maturity import constant_maturity_from_discount_ratios
from curvestate.rates.coterminal import coterminal_from_discount_ratios
from curvestate.rates.forwards import (
    discount_ratios_from_forwards,
    forwards_from_discount_ratios,
)
from curvestate.rates.types import SwapRateCurve
from curvestate.rates.validation import (
    check_discount_size,
    check_first_valid_index,
    check_same_size,
    check_spanning_forwards,
)

logger = logging.getLogger(__name__)


class CurveStateError(RuntimeError):
    """Raised when a curve state is queried before being set, or below its first valid index."""

    pass


class CurveState:
    """Discount ratios on a rate-time grid, with derived market rates.

    The state is set either from discount ratios or from forward rates. Forward
    rates are computed on every update; coterminal and constant-maturity
    vectors are computed on first request and cached until the next update.

    Annuities returned by the ``*_annuity`` methods are expressed in units of
    a numeraire bond: the raw annuity divided by the discount ratio of the
    numeraire node.
    """

    def __init__(self, grid: Union[RateGrid, Sequence[float]]):
        """
        Initialize an empty curve state.

        Args:
            grid: Rate-time grid, or the rate times themselves (at least two,
                strictly increasing)
        """
        if not isinstance(grid, RateGrid):
            grid = RateGrid.from_times(grid)
        self._grid = grid
        n = grid.number_of_rates

        self._first_valid_index = n
        self._discount_ratios = np.full(n + 1, UNSET_VALUE)
        self._forward_rates = np.full(n, UNSET_VALUE)
        self._is_set = False

        self._coterminal: Optional[SwapRateCurve] = None
        self._constant_maturity: Dict[int, SwapRateCurve] = {}

    # ------------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------------

    @property
    def number_of_rates(self) -> int:
        return self._grid.number_of_rates

    @property
    def rate_times(self) -> np.ndarray:
        return self._grid.rate_times

    @property
    def rate_taus(self) -> np.ndarray:
        return self._grid.taus

    @property
    def first_valid_index(self) -> int:
        return self._first_valid_index

    @property
    def is_set(self) -> bool:
        return self._is_set

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def set_on_discount_ratios(
        self, discount_ratios: Sequence[float], first_valid_index: int = 0
    ) -> None:
        """Set the state from discount ratios at every node.

        Only ``discount_ratios[first_valid_index:]`` is used.

        Raises:
            CurveShapeError: If there are not ``number_of_rates + 1`` ratios or
                the first valid index is out of range
            ValueError: If a used ratio is not strictly positive
        """
        check_discount_size(discount_ratios, "rate_taus", self.rate_taus)
        check_first_valid_index(first_valid_index, self.number_of_rates)

        ds = np.asarray(discount_ratios, dtype=float)
        k = first_valid_index
        for i in range(k, len(ds)):
            if not ds[i] > 0.0:
                raise ValueError(f"Discount ratio at node {i} must be positive: {ds[i]}")
        self._warn_if_increasing(ds, k)

        self._reset(k)
        self._discount_ratios[k:] = ds[k:]
        forwards_from_discount_ratios(
            k, self._discount_ratios, self.rate_taus, self._forward_rates
        )
        self._is_set = True

    def set_on_forward_rates(
        self, forward_rates: Sequence[float], first_valid_index: int = 0
    ) -> None:
        """Set the state from simple forward rates.

        Discount ratios are rebuilt relative to the first valid node, i.e.
        ``discount_ratio(first_valid_index, first_valid_index) == 1``.

        Raises:
            CurveShapeError: If there are not ``number_of_rates`` forwards or
                the first valid index is out of range
        """
        check_same_size("forward_rates", forward_rates, "rate_taus", self.rate_taus)
        check_first_valid_index(first_valid_index, self.number_of_rates)

        k = first_valid_index
        self._reset(k)
        self._forward_rates[k:] = np.asarray(forward_rates, dtype=float)[k:]
        self._discount_ratios[k] = 1.0
        discount_ratios_from_forwards(
            k, self._forward_rates, self.rate_taus, self._discount_ratios
        )
        self._is_set = True

    def _reset(self, first_valid_index: int) -> None:
        self._first_valid_index = first_valid_index
        self._discount_ratios.fill(UNSET_VALUE)
        self._forward_rates.fill(UNSET_VALUE)
        self._coterminal = None
        self._constant_maturity.clear()

    def _warn_if_increasing(self, ds: np.ndarray, first_valid_index: int) -> None:
        for i in range(first_valid_index + 1, len(ds)):
            increase = ds[i] - ds[i - 1]
            if increase > DISCOUNT_RATIO_INCREASE_TOLERANCE:
                logger.warning(
                    "Discount ratios increasing at node %s (increase = %.8f)",
                    i,
                    increase,
                )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _check_index(self, i: int, upper: int, what: str) -> None:
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        if not self._first_valid_index <= i < upper:
            raise CurveStateError(
                f"{what} index {i} outside valid range "
                f"[{self._first_valid_index}, {upper})"
            )

    def discount_ratio(self, i: int, j: int) -> float:
        """Ratio of the discount factors at nodes ``i`` and ``j``."""
        n_nodes = self.number_of_rates + 1
        self._check_index(i, n_nodes, "Node")
        self._check_index(j, n_nodes, "Node")
        return float(self._discount_ratios[i] / self._discount_ratios[j])

    def discount_ratios(self) -> np.ndarray:
        """Copy of the discount ratios; entries before the first valid index are NaN."""
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        return self._discount_ratios.copy()

    def forward_rate(self, i: int) -> float:
        self._check_index(i, self.number_of_rates, "Rate")
        return float(self._forward_rates[i])

    def forward_rates(self) -> np.ndarray:
        """Copy of the forward rates; entries before the first valid index are NaN."""
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        return self._forward_rates.copy()

    def _coterminal_curve(self) -> SwapRateCurve:
        if self._coterminal is None:
            n = self.number_of_rates
            rates = np.full(n, UNSET_VALUE)
            annuities = np.full(n, UNSET_VALUE)
            coterminal_from_discount_ratios(
                self._first_valid_index,
                self._discount_ratios,
                self.rate_taus,
                rates,
                annuities,
            )
            self._coterminal = SwapRateCurve(rates=rates, annuities=annuities)
        return self._coterminal

    def coterminal_swap_rate(self, i: int) -> float:
        self._check_index(i, self.number_of_rates, "Rate")
        return float(self._coterminal_curve().rates[i])

    def coterminal_swap_annuity(self, numeraire: int, i: int) -> float:
        """Annuity of the coterminal swap starting at ``i`` in numeraire units."""
        self._check_index(i, self.number_of_rates, "Rate")
        self._check_index(numeraire, self.number_of_rates + 1, "Numeraire")
        annuity = self._coterminal_curve().annuities[i]
        return float(annuity / self._discount_ratios[numeraire])

    def coterminal_swap_rates(self) -> SwapRateCurve:
        """Copy of the coterminal rates and annuities.

        Annuities are relative to the stored discount ratios.
        """
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        curve = self._coterminal_curve()
        return SwapRateCurve(rates=curve.rates.copy(), annuities=curve.annuities.copy())

    def _constant_maturity_curve(self, spanning_forwards: int) -> SwapRateCurve:
        curve = self._constant_maturity.get(spanning_forwards)
        if curve is None:
            n = self.number_of_rates
            rates = np.full(n, UNSET_VALUE)
            annuities = np.full(n, UNSET_VALUE)
            constant_maturity_from_discount_ratios(
                spanning_forwards,
                self._first_valid_index,
                self._discount_ratios,
                self.rate_taus,
                rates,
                annuities,
            )
            curve = SwapRateCurve(rates=rates, annuities=annuities)
            self._constant_maturity[spanning_forwards] = curve
        return curve

    def cm_swap_rate(self, i: int, spanning_forwards: int) -> float:
        check_spanning_forwards(spanning_forwards)
        self._check_index(i, self.number_of_rates, "Rate")
        return float(self._constant_maturity_curve(spanning_forwards).rates[i])

    def cm_swap_annuity(self, numeraire: int, i: int, spanning_forwards: int) -> float:
        """Annuity of the constant-maturity swap starting at ``i`` in numeraire units."""
        check_spanning_forwards(spanning_forwards)
        self._check_index(i, self.number_of_rates, "Rate")
        self._check_index(numeraire, self.number_of_rates + 1, "Numeraire")
        annuity = self._constant_maturity_curve(spanning_forwards).annuities[i]
        return float(annuity / self._discount_ratios[numeraire])

    def cm_swap_rates(self, spanning_forwards: int) -> SwapRateCurve:
        """Copy of the constant-maturity rates and annuities for a width.

        Annuities are relative to the stored discount ratios.
        """
        check_spanning_forwards(spanning_forwards)
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        curve = self._constant_maturity_curve(spanning_forwards)
        return SwapRateCurve(rates=curve.rates.copy(), annuities=curve.annuities.copy())

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def to_frame(self, spanning_forwards: Optional[int] = None) -> pd.DataFrame:
        """Tabular view of the state, one row per rate index.

        Columns: ``rate_time`` (period start), ``tau``, ``discount_ratio``
        (period start node), ``forward_rate``, ``coterminal_rate``,
        ``coterminal_annuity`` and, when ``spanning_forwards`` is given,
        ``cm_rate`` and ``cm_annuity``.
        """
        if not self._is_set:
            raise CurveStateError("Curve state has not been set")
        n = self.number_of_rates
        cot = self._coterminal_curve()
        data = {
            "rate_time": self.rate_times[:n],
            "tau": self.rate_taus,
            "discount_ratio": self._discount_ratios[:n],
            "forward_rate": self._forward_rates,
            "coterminal_rate": cot.rates,
            "coterminal_annuity": cot.annuities,
        }
        if spanning_forwards is not None:
            check_spanning_forwards(spanning_forwards)
            cms = self._constant_maturity_curve(spanning_forwards)
            data["cm_rate"] = cms.rates
            data["cm_annuity"] = cms.annuities
        frame = pd.DataFrame(data, index=pd.RangeIndex(n, name="rate_index"))
        return frame.copy()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(number_of_rates={self.number_of_rates}, "
            f"first_valid_index={self._first_valid_index}, is_set={self._is_set})"
        )
