"""Shared curves for the curve-state tests."""

import numpy as np
import pytest


@pytest.fixture
def small_curve():
    """Four-node annual curve used in the worked examples."""
    ds = [1.00, 0.99, 0.97, 0.94]
    taus = [1.0, 1.0, 1.0]
    return ds, taus


@pytest.fixture
def semiannual_curve():
    """Ten-year semi-annual curve from a gently upward sloping zero curve."""
    times = np.linspace(0.0, 10.0, 21)
    zeros = 0.02 + 0.015 * (1.0 - np.exp(-times / 3.0))
    ds = np.exp(-zeros * times)
    taus = np.diff(times)
    return ds, taus
