"""Tests for the trapezoid sampler."""

import numpy as np
import pytest

from rombergkit.romberg.trapezoid import (
    accumulation_dtype,
    endpoint_half_sum,
    trapezoid_sum,
)
from rombergkit.utils.validate import InvalidInputError


@pytest.mark.parametrize("multiplier", [1, 2, 4])
def test_trapezoid_sum_exact_for_linear(multiplier):
    """Tests that the trapezoid rule is exact for a linear function at every stride."""
    x = np.linspace(0.0, 1.0, 5)
    y = 3.0 * x + 1.0
    est = trapezoid_sum(y, 0.25, multiplier)
    assert est == pytest.approx(2.5, rel=1e-15)


def test_trapezoid_sum_matches_explicit_formula():
    """Tests the strided sum against a hand-written formula."""
    y = np.array([1.0, 4.0, 2.0, 8.0, 5.0, 7.0, 3.0])
    dx = 0.5
    expected = 3 * dx * ((1.0 + 3.0) / 2 + 8.0)
    assert trapezoid_sum(y, dx, 3) == pytest.approx(expected)


def test_trapezoid_sum_coarsest_is_endpoint_rule():
    """Tests that a stride of N - 1 uses only the endpoints."""
    y = np.array([2.0, 100.0, -50.0, 4.0])
    assert trapezoid_sum(y, 1.0, 3) == pytest.approx(3.0 * (2.0 + 4.0) / 2)


def test_trapezoid_sum_uses_given_endsum():
    """Tests that a precomputed endpoint half-sum is used as given."""
    y = np.array([1.0, 2.0, 3.0])
    endsum = endpoint_half_sum(y)
    assert endsum == pytest.approx(2.0)
    assert trapezoid_sum(y, 1.0, 1, endsum) == trapezoid_sum(y, 1.0, 1)


def test_trapezoid_sum_does_not_modify_samples():
    """Tests that read-only samples are accepted and left untouched."""
    y = np.sin(np.linspace(0.0, np.pi, 9))
    before = y.copy()
    y.flags.writeable = False
    trapezoid_sum(y, np.pi / 8, 2)
    np.testing.assert_array_equal(y, before)


@pytest.mark.parametrize("multiplier", [0, 3, -1])
def test_trapezoid_sum_rejects_non_divisor(multiplier):
    """Tests that a multiplier that does not divide N - 1 is rejected."""
    with pytest.raises(InvalidInputError, match="divisor"):
        trapezoid_sum(np.ones(5), 1.0, multiplier)


def test_trapezoid_sum_rejects_single_sample():
    """Tests that one sample is not enough for a trapezoid."""
    with pytest.raises(InvalidInputError):
        trapezoid_sum(np.ones(1), 1.0)


def test_trapezoid_sum_promotes_integers():
    """Tests that integer samples and steps accumulate in float64."""
    est = trapezoid_sum(np.array([1, 2, 3]), 1)
    assert est.dtype == np.float64
    assert est == 4.0


def test_accumulation_dtype_keeps_wider_types():
    """Tests that longdouble and complex samples keep their precision."""
    assert accumulation_dtype(np.zeros(3, dtype=np.float32)) == np.float64
    assert accumulation_dtype(np.zeros(3, dtype=np.longdouble)) == np.longdouble
    assert accumulation_dtype(np.zeros(3, dtype=complex)) == np.complex128


def test_trapezoid_sum_vector_samples():
    """Tests that trailing axes are integrated component-wise."""
    x = np.linspace(0.0, 1.0, 5)
    y = np.stack([x, 2.0 * x, np.ones_like(x)], axis=1)
    est = trapezoid_sum(y, 0.25, 2)
    assert est.shape == (3,)
    np.testing.assert_allclose(est, [0.5, 1.0, 1.0], rtol=1e-15)
