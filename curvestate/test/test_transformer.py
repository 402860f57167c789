"""Pure-function facade."""

import numpy as np
import pytest

import curvestate
from curvestate.rates import (
    CurveShapeError,
    CurveStateTransformer,
    SwapRateCurve,
    constant_maturity_rates,
    coterminal_rates,
    forward_rates,
)


def test_forward_rates_returns_new_array(small_curve):
    ds, taus = small_curve
    fwds = forward_rates(0, ds, taus)

    assert isinstance(fwds, np.ndarray)
    np.testing.assert_allclose(fwds, [1 / 0.99 - 1, 0.99 / 0.97 - 1, 0.97 / 0.94 - 1])


def test_unset_prefix_is_nan(small_curve):
    ds, taus = small_curve
    fwds = forward_rates(1, ds, taus)
    cot = coterminal_rates(2, ds, taus)

    assert np.isnan(fwds[0])
    assert np.all(np.isnan(cot.rates[:2]))
    assert np.all(np.isnan(cot.annuities[:2]))
    assert cot.annuities[2] == pytest.approx(0.94)


def test_custom_fill_value(small_curve):
    ds, taus = small_curve
    transformer = CurveStateTransformer(fill_value=0.0)
    cms = transformer.constant_maturity_rates(2, 1, ds, taus)
    assert cms.rates[0] == 0.0
    assert cms.annuities[0] == 0.0


def test_swap_rate_curve_unpacks(small_curve):
    ds, taus = small_curve
    result = coterminal_rates(0, ds, taus)
    rates, annuities = result

    assert isinstance(result, SwapRateCurve)
    assert len(result) == 3
    assert rates is result.rates
    assert annuities[0] == pytest.approx(2.90)


def test_constant_maturity_example(small_curve):
    ds, taus = small_curve
    rates, annuities = constant_maturity_rates(2, 0, ds, taus)
    assert annuities[0] == pytest.approx(1.96)
    assert rates[0] == pytest.approx(0.015306, abs=1e-6)


def test_inputs_are_not_modified(semiannual_curve):
    ds, taus = semiannual_curve
    ds_before, taus_before = ds.copy(), taus.copy()
    transformer = CurveStateTransformer()
    transformer.forward_rates(0, ds, taus)
    transformer.coterminal_rates(0, ds, taus)
    transformer.constant_maturity_rates(3, 0, ds, taus)

    np.testing.assert_array_equal(ds, ds_before)
    np.testing.assert_array_equal(taus, taus_before)


def test_repeated_calls_are_identical(semiannual_curve):
    ds, taus = semiannual_curve
    first = constant_maturity_rates(4, 2, ds, taus)
    second = constant_maturity_rates(4, 2, ds, taus)
    np.testing.assert_array_equal(first.rates, second.rates)
    np.testing.assert_array_equal(first.annuities, second.annuities)


def test_shape_error_propagates(small_curve):
    ds, _ = small_curve
    with pytest.raises(CurveShapeError):
        coterminal_rates(0, ds, [1.0, 1.0])


def test_top_level_exports():
    assert curvestate.forward_rates is forward_rates
    assert curvestate.CurveShapeError is CurveShapeError
    assert curvestate.__version__
