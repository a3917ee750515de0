"""Composite trapezoidal estimates on strided views of the samples."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from rombergkit.utils.validate import InvalidInputError

__all__ = ["accumulation_dtype", "endpoint_half_sum", "trapezoid_sum"]


def accumulation_dtype(samples: NDArray[Any], step: float | int = 1.0) -> np.dtype:
    """Returns the floating dtype used to accumulate sums of ``samples``.

    Integers promote to ``float64``; ``longdouble`` and complex samples keep
    their precision.
    """
    return np.result_type(samples.dtype, np.asarray(step).dtype, np.float64)


def endpoint_half_sum(samples: NDArray[Any]) -> NDArray[np.inexact]:
    """Returns ``(y[0] + y[-1]) / 2``, shared by every resolution."""
    dtype = accumulation_dtype(samples)
    return (np.asarray(samples[0], dtype=dtype) + np.asarray(samples[-1], dtype=dtype)) / 2


def trapezoid_sum(
    samples: NDArray[Any],
    step: float | int,
    multiplier: int = 1,
    endsum: NDArray[np.inexact] | None = None,
) -> NDArray[np.inexact]:
    """Computes the composite trapezoid estimate using every ``multiplier``-th sample.

    The estimate is
    ``multiplier * step * (endsum + y[s] + y[2s] + ... + y[N-1-s])`` with
    ``s = multiplier``. The interior sum is taken over a strided view, so the
    samples are neither copied nor modified.

    Args:
        samples: Array of shape ``(N,)`` or ``(N, ...)`` with ``N >= 2``.
        step: Spacing between neighbouring samples.
        multiplier: Stride through the samples; must divide ``N - 1``.
        endsum: Precomputed :func:`endpoint_half_sum` of ``samples``.

    Returns:
        The estimate as a 0-d array (scalar samples) or an array of the
        trailing sample shape.

    Raises:
        InvalidInputError: If there are fewer than two samples or
            ``multiplier`` does not divide ``N - 1``.
    """
    n = samples.shape[0]
    if n < 2:
        raise InvalidInputError("the trapezoid rule needs at least two samples.")
    m = n - 1
    if multiplier < 1 or m % multiplier != 0:
        raise InvalidInputError(
            f"multiplier={multiplier} must be a positive divisor of {m}."
        )

    dtype = accumulation_dtype(samples, step)
    if endsum is None:
        endsum = endpoint_half_sum(samples)

    interior = np.sum(samples[multiplier:m:multiplier], axis=0, dtype=dtype)
    return np.asarray((multiplier * step) * (endsum + interior), dtype=dtype)
