"""Result types for the curve-state transformations."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class SwapRateCurve:
    """Par swap rates with the annuities they were divided by.

    Attributes:
        rates: Par swap rate per start index
        annuities: Sum of discounted accruals of the swap at each start index,
            in units of the discount ratios the rates were computed from
    """

    rates: np.ndarray
    annuities: np.ndarray

    def __iter__(self):
        # Allows ``rates, annuities = transformer.coterminal_rates(...)``
        yield self.rates
        yield self.annuities

    def __len__(self) -> int:
        return len(self.rates)
