"""Tests for rombergkit.utils.validate."""

import numpy as np
import pytest

from rombergkit.utils.validate import (
    InvalidInputError,
    LengthMismatchError,
    validate_max_steps,
    validate_power,
    validate_sample_count,
    validate_samples,
    validate_trace_buffer,
)


def test_error_hierarchy():
    """Tests that both error kinds are ValueErrors and mismatch is an invalid input."""
    assert issubclass(InvalidInputError, ValueError)
    assert issubclass(LengthMismatchError, InvalidInputError)


def test_validate_sample_count():
    """Tests that counts must be non-negative integers."""
    assert validate_sample_count(np.int64(4)) == 4
    with pytest.raises(InvalidInputError):
        validate_sample_count(-1)
    with pytest.raises(InvalidInputError):
        validate_sample_count(3.0)


def test_validate_samples_returns_view_for_numeric_arrays():
    """Tests that numeric arrays are not copied."""
    y = np.arange(5.0)
    assert validate_samples(y) is y


def test_validate_samples_converts_object_arrays():
    """Tests that object arrays of numbers become float arrays."""
    out = validate_samples(np.array([1, 2.5, 3], dtype=object))
    assert out.dtype == np.float64


@pytest.mark.parametrize("bad", [3.0, [], np.zeros((0, 2)), ["a", "b"], [object(), 1]])
def test_validate_samples_rejects_bad_input(bad):
    """Tests that scalars, empty input and non-numbers are rejected."""
    with pytest.raises(InvalidInputError):
        validate_samples(bad)


def test_validate_power():
    """Tests that the power must be positive and finite."""
    assert validate_power(2) == 2.0
    assert validate_power(0.5) == 0.5
    for bad in (0, -1.0, np.nan, True, None):
        with pytest.raises(InvalidInputError):
            validate_power(bad)


def test_validate_max_steps():
    """Tests that max_steps must lie in [1, max_depth]."""
    assert validate_max_steps(3, 3) == 3
    with pytest.raises(InvalidInputError, match="exceeds"):
        validate_max_steps(4, 3)
    with pytest.raises(InvalidInputError):
        validate_max_steps(0, 3)
    with pytest.raises(InvalidInputError):
        validate_max_steps(True, 3)


def test_validate_trace_buffer():
    """Tests that trace buffers must be writable square float arrays."""
    buffer = np.zeros((3, 3))
    assert validate_trace_buffer(buffer) is buffer
    assert validate_trace_buffer(np.zeros((2, 2), dtype=complex)).dtype == complex
    with pytest.raises(InvalidInputError, match="square"):
        validate_trace_buffer(np.zeros((2, 3)))
    with pytest.raises(InvalidInputError, match="NumPy"):
        validate_trace_buffer([[0.0]])
