"""Extrapolation methods for numerical approximations."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from rombergkit.logger import rombergkit_logger
from rombergkit.utils.types import Estimate
from rombergkit.utils.validate import (
    InvalidInputError,
    LengthMismatchError,
    validate_power,
)

__all__ = [
    "richardson_extrapolate",
    "convergence_ratios",
]


def _validate_step_sizes(step_sizes: Sequence[float], n: int) -> NDArray[np.float64]:
    h = np.asarray(step_sizes, dtype=float)
    if h.ndim != 1:
        raise InvalidInputError(f"step_sizes must be 1D; got shape {h.shape}.")
    if h.size != n:
        raise LengthMismatchError(
            f"got {n} base values but {h.size} step sizes."
        )
    if not np.all(np.isfinite(h)) or np.any(h <= 0):
        raise InvalidInputError("All step_sizes must be finite and > 0.")
    if np.any(np.diff(h) >= 0):
        raise InvalidInputError("step_sizes must be strictly decreasing (coarsest first).")
    return h


def richardson_extrapolate(
    base_values: Sequence[NDArray[np.inexact] | float],
    step_sizes: Sequence[float],
    power: float = 2.0,
    *,
    table: NDArray[np.inexact] | None = None,
) -> tuple[Estimate, float]:
    """Computes Richardson extrapolation for arbitrary step-size ratios.

    The approximations are assumed to behave like
    ``A(h) = A + c1 * h**power + c2 * h**(2*power) + ...``. Each new column
    of the extrapolation table removes one more of these terms by combining
    two neighbouring entries of the previous column::

        R[i, j] = (rho**power * R[i, j-1] - R[i-1, j-1]) / (rho**power - 1)

    where ``rho = h[i-j] / h[i]`` is the ratio of the step sizes the two
    entries were built from. With ``h`` halving at every level and
    ``power=2`` this is the classical Romberg recurrence with factors ``4**j``;
    any other ratios (e.g. from prime factors of a sample count) work the same
    way, as this is Neville's algorithm in the variable ``h**power``.

    Only one column is kept while the table is built, updated in place from
    the bottom up. After the last column, entry ``i`` holds the diagonal
    value ``R[i, i]``; the entry ``R[K, K-1]`` it replaced is kept for the
    error estimate.

    Args:
        base_values:
            Approximations ordered from the coarsest to the finest step size.
            Entries may be scalars or arrays of a common shape.
        step_sizes:
            Step size of each approximation, strictly decreasing. Only ratios
            between step sizes enter the recurrence, so relative step sizes
            (e.g. integer step multipliers) are fine.
        power:
            Exponent of the leading error term (default is 2.0, the
            trapezoidal rule).
        table:
            Optional square array of size ``len(base_values)``. When given,
            every column of the extrapolation table is written into its lower
            triangle and the upper triangle is set to zero. Requires scalar
            base values.

    Returns:
        A tuple ``(estimate, error)`` where:

        * ``estimate`` is the most extrapolated value ``R[K, K]``.
        * ``error`` is the norm of ``R[K, K] - R[K, K-1]``, the change made by
          the last extrapolation step. It is ``0.0`` for a
          single base value. This is a heuristic scale that assumes a smooth,
          well-resolved sequence; it is not a rigorous bound.

    Raises:
        InvalidInputError: If no base values are given, the step sizes are not
            positive and strictly decreasing, ``power`` is not positive, or
            ``table`` has the wrong shape.
        LengthMismatchError: If ``base_values`` and ``step_sizes`` differ in length.
    """
    n = len(base_values)
    if n < 1:
        raise InvalidInputError("richardson_extrapolate requires at least one base value.")

    h = _validate_step_sizes(step_sizes, n)
    p = validate_power(power)

    raw = [np.asarray(v) for v in base_values]
    dtype = np.result_type(*raw, np.float64)
    vals = [np.asarray(v, dtype=dtype) for v in raw]
    if any(v.shape != vals[0].shape for v in vals):
        raise InvalidInputError("all base values must have the same shape.")

    if table is not None:
        if table.shape != (n, n):
            raise InvalidInputError(
                f"table must have shape {(n, n)}; got {table.shape}."
            )
        if vals[0].ndim != 0:
            raise InvalidInputError("a convergence table can only be filled for scalar estimates.")
        table[np.triu_indices(n, 1)] = 0
        for i, v in enumerate(vals):
            table[i, 0] = v

    previous = vals[-1]
    for j in range(1, n):
        previous = vals[-1]
        for k in range(n - 1, j - 1, -1):
            factor = (h[k - j] / h[k]) ** p
            vals[k] = (factor * vals[k] - vals[k - 1]) / (factor - 1.0)
            if table is not None:
                table[k, j] = vals[k]

    result = vals[-1]
    if n == 1:
        err = 0.0
    else:
        err = float(np.sqrt(np.sum(np.abs(result - previous) ** 2)))

    if not np.all(np.isfinite(result)):
        rombergkit_logger.warning(
            "richardson_extrapolate produced a non-finite estimate; "
            "check the input values for NaN or inf."
        )

    return (result[()] if result.ndim == 0 else result), err


def convergence_ratios(table: NDArray[np.inexact]) -> NDArray[np.inexact]:
    """Computes the ratios of successive differences down each table column.

    For a well-resolved integrand whose error expands in powers of
    ``h**power``, successive differences in column ``j`` of a table built by
    halving the step size shrink by roughly ``2**(power * (j + 1))``, i.e.
    ``4, 16, 64, ...`` for the trapezoidal rule. Ratios far from these values
    indicate that the asymptotic regime has not been reached (or that the
    integrand is not smooth enough).

    Args:
        table: Square convergence table as filled by
            :func:`rombergkit.romberg.romberg_trace`.

    Returns:
        Array of shape ``(M - 2, M - 2)`` for a table of size ``M``. Entry
        ``[i, j]`` (``i >= j``) is
        ``(R[i+1, j] - R[i, j]) / (R[i+2, j] - R[i+1, j])``; the upper triangle
        is zero. Zero differences yield ``inf`` or ``nan``.

    Raises:
        InvalidInputError: If ``table`` is not square.
    """
    r = np.asarray(table)
    if r.ndim != 2 or r.shape[0] != r.shape[1]:
        raise InvalidInputError(f"table must be square; got shape={r.shape}.")

    m = r.shape[0]
    size = max(m - 2, 0)
    ratio = np.zeros((size, size), dtype=np.result_type(r.dtype, np.float64))

    with np.errstate(divide="ignore", invalid="ignore"):
        for j in range(size):
            diffs = np.diff(r[j:, j])
            ratio[j:, j] = diffs[:-1] / diffs[1:]

    return ratio
