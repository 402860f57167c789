"""Pure-function facade over the curve-state transformations.

The in-place functions in :mod:`forwards`, :mod:`coterminal` and
:mod:`constant_maturity` write into caller-owned buffers. This module
allocates the buffers itself and returns them, which is the natural form for
callers that do not recycle arrays between simulation steps.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from curvestate.config import UNSET_VALUE

from .constant_maturity import constant_maturity_from_discount_ratios
from .coterminal import coterminal_from_discount_ratios
from .forwards import forwards_from_discount_ratios
from .types import SwapRateCurve


@dataclass(frozen=True)
class CurveStateTransformer:
    """Stateless converter from discount ratios to market-rate representations.

    Slots below ``first_valid_index`` in the returned arrays hold
    ``fill_value`` (NaN by default), marking them as not computed.

    Examples:
        >>> transformer = CurveStateTransformer()
        >>> ds = [1.00, 0.99, 0.97, 0.94]
        >>> taus = [1.0, 1.0, 1.0]
        >>> cot = transformer.coterminal_rates(0, ds, taus)
        >>> round(float(cot.annuities[0]), 2)
        2.9
    """

    fill_value: float = UNSET_VALUE

    def _buffer(self, size: int) -> np.ndarray:
        return np.full(size, self.fill_value, dtype=float)

    def forward_rates(
        self,
        first_valid_index: int,
        discount_factors: Sequence[float],
        accrual_fractions: Sequence[float],
    ) -> np.ndarray:
        """Simple forward rates for each accrual period."""
        fwds = self._buffer(len(accrual_fractions))
        forwards_from_discount_ratios(
            first_valid_index, discount_factors, accrual_fractions, fwds
        )
        return fwds

    def coterminal_rates(
        self,
        first_valid_index: int,
        discount_factors: Sequence[float],
        accrual_fractions: Sequence[float],
    ) -> SwapRateCurve:
        """Coterminal swap rates and annuities."""
        rates = self._buffer(len(accrual_fractions))
        annuities = self._buffer(len(accrual_fractions))
        coterminal_from_discount_ratios(
            first_valid_index, discount_factors, accrual_fractions, rates, annuities
        )
        return SwapRateCurve(rates=rates, annuities=annuities)

    def constant_maturity_rates(
        self,
        spanning_forwards: int,
        first_valid_index: int,
        discount_factors: Sequence[float],
        accrual_fractions: Sequence[float],
    ) -> SwapRateCurve:
        """Constant-maturity swap rates and annuities for a window width."""
        rates = self._buffer(len(accrual_fractions))
        annuities = self._buffer(len(accrual_fractions))
        constant_maturity_from_discount_ratios(
            spanning_forwards,
            first_valid_index,
            discount_factors,
            accrual_fractions,
            rates,
            annuities,
        )
        return SwapRateCurve(rates=rates, annuities=annuities)


_DEFAULT_TRANSFORMER = CurveStateTransformer()


def forward_rates(
    first_valid_index: int,
    discount_factors: Sequence[float],
    accrual_fractions: Sequence[float],
) -> np.ndarray:
    """See :meth:`CurveStateTransformer.forward_rates`."""
    return _DEFAULT_TRANSFORMER.forward_rates(
        first_valid_index, discount_factors, accrual_fractions
    )


def coterminal_rates(
    first_valid_index: int,
    discount_factors: Sequence[float],
    accrual_fractions: Sequence[float],
) -> SwapRateCurve:
    """See :meth:`CurveStateTransformer.coterminal_rates`."""
    return _DEFAULT_TRANSFORMER.coterminal_rates(
        first_valid_index, discount_factors, accrual_fractions
    )


def constant_maturity_rates(
    spanning_forwards: int,
    first_valid_index: int,
    discount_factors: Sequence[float],
    accrual_fractions: Sequence[float],
) -> SwapRateCurve:
    """See :meth:`CurveStateTransformer.constant_maturity_rates`."""
    return _DEFAULT_TRANSFORMER.constant_maturity_rates(
        spanning_forwards, first_valid_index, discount_factors, accrual_fractions
    )
