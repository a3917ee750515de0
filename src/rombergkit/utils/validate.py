"""Validation utilities for RombergKit.

All checks run before any numerical work starts, so a failing call never
leaves a partially filled buffer behind.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "InvalidInputError",
    "LengthMismatchError",
    "validate_sample_count",
    "validate_samples",
    "validate_power",
    "validate_max_steps",
    "validate_trace_buffer",
]


class InvalidInputError(ValueError):
    """Raised when an argument has a shape, size or type the integrator cannot use."""


class LengthMismatchError(InvalidInputError):
    """Raised when two sequences that must have the same length do not."""


def validate_sample_count(n: int) -> int:
    """Checks that ``n`` is a usable number of samples.

    Args:
        n: Number of samples.

    Returns:
        ``n`` as a plain ``int``.

    Raises:
        InvalidInputError: If ``n`` is not an integer or is negative.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInputError(f"sample count must be an integer; got {n!r}.")
    if n < 0:
        raise InvalidInputError(f"sample count must be non-negative; got {n}.")
    return int(n)


def validate_samples(samples: ArrayLike) -> NDArray[Any]:
    """Converts ``samples`` into a NumPy array without copying numeric input.

    The leading axis indexes the sample points. Any trailing axes are treated
    as the output shape of a vector- or tensor-valued integrand.

    Object arrays (e.g. lists of ``fractions.Fraction`` or mixed Python
    numbers) are converted to ``float`` once; every other numeric dtype is
    returned as a view of the caller's data.

    Args:
        samples: Array-like of shape ``(N,)`` or ``(N, ...)``.

    Returns:
        The samples as a NumPy array.

    Raises:
        InvalidInputError: If ``samples`` is zero-dimensional, empty or not numeric.
    """
    arr = np.asarray(samples)

    if arr.ndim == 0:
        raise InvalidInputError("samples must be at least 1D.")
    if arr.shape[0] == 0:
        raise InvalidInputError("samples must not be empty; the integral over an empty domain is undefined.")

    if arr.dtype == object:
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise InvalidInputError("samples must contain only numbers.") from e
    elif arr.dtype.kind not in "biufc":
        raise InvalidInputError(f"samples must be numeric; got dtype {arr.dtype}.")

    return arr


def validate_power(power: float) -> float:
    """Checks the assumed error-order exponent of the extrapolation.

    Args:
        power: Exponent of the leading error term ``C * h**power``.

    Returns:
        ``power`` as a float.

    Raises:
        InvalidInputError: If ``power`` is not a finite positive real number.
    """
    if isinstance(power, bool) or not isinstance(power, Real):
        raise InvalidInputError(f"power must be a real number; got {power!r}.")
    p = float(power)
    if not np.isfinite(p) or p <= 0.0:
        raise InvalidInputError(f"power must be finite and > 0; got {power}.")
    return p


def validate_max_steps(max_steps: int, max_depth: int) -> int:
    """Checks a caller-supplied number of refinement levels.

    Args:
        max_steps: Requested number of trapezoid levels.
        max_depth: Number of levels the sample count supports.

    Returns:
        ``max_steps`` as a plain ``int``.

    Raises:
        InvalidInputError: If ``max_steps`` is not a positive integer or exceeds ``max_depth``.
    """
    if isinstance(max_steps, bool) or not isinstance(max_steps, Integral):
        raise InvalidInputError(f"max_steps must be an integer; got {max_steps!r}.")
    if max_steps < 1:
        raise InvalidInputError(f"max_steps must be >= 1; got {max_steps}.")
    if max_steps > max_depth:
        raise InvalidInputError(
            f"max_steps={max_steps} exceeds the {max_depth} refinement level(s) "
            "supported by the number of samples."
        )
    return int(max_steps)


def validate_trace_buffer(buffer: Any) -> NDArray[np.inexact]:
    """Checks that ``buffer`` can hold a convergence table in place.

    Args:
        buffer: Caller-owned array that will be overwritten.

    Returns:
        ``buffer`` itself.

    Raises:
        InvalidInputError: If ``buffer`` is not a writable, non-empty, square,
            floating-point (or complex) NumPy array.
    """
    if not isinstance(buffer, np.ndarray):
        raise InvalidInputError(f"buffer must be a NumPy array; got {type(buffer).__name__}.")
    if buffer.ndim != 2 or buffer.shape[0] != buffer.shape[1]:
        raise InvalidInputError(f"buffer must be square; got shape={buffer.shape}.")
    if buffer.shape[0] == 0:
        raise InvalidInputError("buffer must have at least one row.")
    if buffer.dtype.kind not in "fc":
        raise InvalidInputError(f"buffer must have a floating dtype; got {buffer.dtype}.")
    if not buffer.flags.writeable:
        raise InvalidInputError("buffer must be writeable.")
    return buffer
