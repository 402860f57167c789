"""Constant-maturity swap rates and annuities."""

import math

import numpy as np
import pytest

from curvestate.rates import (
    CurveShapeError,
    constant_maturity_from_discount_ratios,
    coterminal_from_discount_ratios,
)


def _cms(spanning_forwards, first_valid_index, ds, taus, fill=np.nan):
    rates = np.full(len(taus), fill)
    annuities = np.full(len(taus), fill)
    constant_maturity_from_discount_ratios(
        spanning_forwards, first_valid_index, ds, taus, rates, annuities
    )
    return rates, annuities


def _brute_force(spanning_forwards, i, ds, taus):
    last = min(i + spanning_forwards, len(taus))
    annuity = sum(taus[j] * ds[j + 1] for j in range(i, last))
    return (ds[i] - ds[last]) / annuity, annuity


def test_worked_example(small_curve):
    ds, taus = small_curve
    rates, annuities = _cms(2, 0, ds, taus)

    assert annuities[0] == pytest.approx(1.96)
    assert rates[0] == pytest.approx(0.03 / 1.96)
    assert rates[0] == pytest.approx(0.01531, abs=1e-5)
    # the window [1, 3) ends exactly on the last node
    assert annuities[1] == pytest.approx(0.97 + 0.94)
    assert rates[1] == pytest.approx(0.05 / 1.91)
    # truncated to a single period
    assert annuities[2] == pytest.approx(0.94)
    assert rates[2] == pytest.approx(0.03 / 0.94)


@pytest.mark.parametrize("spanning_forwards", [1, 2, 4, 7, 20])
@pytest.mark.parametrize("first_valid_index", [0, 3, 12])
def test_sliding_window_matches_brute_force(
    semiannual_curve, spanning_forwards, first_valid_index
):
    ds, taus = semiannual_curve
    rates, annuities = _cms(spanning_forwards, first_valid_index, ds, taus)

    for i in range(first_valid_index, len(taus)):
        rate, annuity = _brute_force(spanning_forwards, i, ds, taus)
        assert annuities[i] == pytest.approx(annuity, rel=1e-12)
        assert rates[i] == pytest.approx(rate, rel=1e-10)


@pytest.mark.parametrize("first_valid_index", [0, 5, 19])
def test_full_window_is_coterminal(semiannual_curve, first_valid_index):
    ds, taus = semiannual_curve
    n = len(taus)
    cms_rates, cms_annuities = _cms(n - first_valid_index, first_valid_index, ds, taus)

    cot_rates = np.full(n, np.nan)
    cot_annuities = np.full(n, np.nan)
    coterminal_from_discount_ratios(first_valid_index, ds, taus, cot_rates, cot_annuities)

    assert cms_rates[first_valid_index] == pytest.approx(cot_rates[first_valid_index])
    assert cms_annuities[first_valid_index] == pytest.approx(
        cot_annuities[first_valid_index]
    )


def test_window_wider_than_curve_is_coterminal_everywhere(semiannual_curve):
    ds, taus = semiannual_curve
    n = len(taus)
    cms_rates, _ = _cms(n + 10, 0, ds, taus)

    cot_rates = np.empty(n)
    coterminal_from_discount_ratios(0, ds, taus, cot_rates, np.empty(n))
    np.testing.assert_allclose(cms_rates, cot_rates, rtol=1e-10)


def test_single_period_window_gives_forwards(small_curve):
    ds, taus = small_curve
    rates, _ = _cms(1, 0, ds, taus)
    expected = [ds[i] / ds[i + 1] - 1.0 for i in range(3)]
    np.testing.assert_allclose(rates, expected, rtol=1e-12)


def test_prefix_untouched(semiannual_curve):
    ds, taus = semiannual_curve
    rates, annuities = _cms(4, 6, ds, taus, fill=-1.0)
    np.testing.assert_array_equal(rates[:6], -1.0)
    np.testing.assert_array_equal(annuities[:6], -1.0)


def test_zero_width_propagates_nan(small_curve):
    ds, taus = small_curve
    rates, annuities = _cms(0, 0, ds, taus)
    assert all(math.isnan(r) for r in rates)
    np.testing.assert_allclose(annuities, 0.0, atol=1e-15)


def test_negative_width_rejected(small_curve):
    ds, taus = small_curve
    with pytest.raises(CurveShapeError, match="negative spanning forwards"):
        _cms(-1, 0, ds, taus)


def test_mismatched_sizes_fail_before_writing(small_curve):
    ds, taus = small_curve
    rates = np.full(3, 42.0)
    annuities = np.full(3, 42.0)
    with pytest.raises(CurveShapeError):
        constant_maturity_from_discount_ratios(2, 0, ds, taus[:2], rates, annuities)
    with pytest.raises(CurveShapeError):
        constant_maturity_from_discount_ratios(2, 0, ds[:3], taus, rates, annuities)
    np.testing.assert_array_equal(rates, 42.0)
    np.testing.assert_array_equal(annuities, 42.0)


def test_first_valid_index_at_end_writes_nothing(small_curve):
    ds, taus = small_curve
    rates, annuities = _cms(2, 3, ds, taus, fill=-1.0)
    np.testing.assert_array_equal(rates, -1.0)
    np.testing.assert_array_equal(annuities, -1.0)


@pytest.mark.parametrize("first_valid_index", [-1, 4])
def test_first_valid_index_out_of_range(small_curve, first_valid_index):
    ds, taus = small_curve
    rates = np.full(3, 42.0)
    annuities = np.full(3, 42.0)
    with pytest.raises(CurveShapeError, match="first valid index"):
        constant_maturity_from_discount_ratios(
            2, first_valid_index, ds, taus, rates, annuities
        )
    np.testing.assert_array_equal(rates, 42.0)
    np.testing.assert_array_equal(annuities, 42.0)
