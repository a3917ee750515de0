"""Romberg integration of equally spaced samples.

Typical usage examples:

>>> import numpy as np
>>> from rombergkit.romberg import romberg
>>> from rombergkit.utils.grid import EquallySpacedGrid
>>>
>>> grid = EquallySpacedGrid(0.0, np.pi, 2**8 + 1)
>>> estimate, error = romberg(grid, np.sin(grid.points()))
>>> bool(abs(estimate - 2.0) < 1e-12)
True
>>>
>>> # a scalar step works just as well
>>> estimate, error = romberg(1.0, [3, 3, 3, 3, 3, 3, 3])
>>> float(estimate)
18.0
"""

from __future__ import annotations

from typing import Any, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rombergkit.logger import rombergkit_logger
from rombergkit.romberg.planner import max_depth, plan_step_multipliers
from rombergkit.romberg.trapezoid import (
    accumulation_dtype,
    endpoint_half_sum,
    trapezoid_sum,
)
from rombergkit.utils.extrapolation import richardson_extrapolate
from rombergkit.utils.factorization import is_power_of_two
from rombergkit.utils.grid import resolve_step
from rombergkit.utils.types import Estimate, GridOrStep
from rombergkit.utils.validate import (
    InvalidInputError,
    validate_max_steps,
    validate_power,
    validate_samples,
    validate_trace_buffer,
)

__all__ = ["romberg", "romberg_trace", "trapezoid"]


def _zero_integral(y: NDArray[Any], step: float | int) -> Estimate:
    zero = np.zeros(y.shape[1:], dtype=accumulation_dtype(y, step))
    return zero[()] if zero.ndim == 0 else zero


def _romberg(
    step: float | int,
    y: NDArray[Any],
    plan: tuple[int, ...],
    power: float,
    table: NDArray[np.inexact] | None = None,
) -> tuple[Estimate, float]:
    """Samples every level of ``plan`` and extrapolates the estimates."""
    if y.shape[0] == 1:
        return _zero_integral(y, step), 0.0

    if y.shape[0] == 2:
        rombergkit_logger.info(
            "only two samples; using the plain trapezoid rule with no error estimate."
        )

    endsum = endpoint_half_sum(y)
    estimates = [trapezoid_sum(y, step, s, endsum) for s in plan]
    return richardson_extrapolate(estimates, plan, power, table=table)


@overload
def romberg(
    grid_or_step: GridOrStep,
    samples: ArrayLike,
    max_steps: None = None,
    *,
    power: float = 2.0,
) -> tuple[Estimate, float]: ...


@overload
def romberg(
    grid_or_step: GridOrStep,
    samples: ArrayLike,
    max_steps: int,
    *,
    power: float = 2.0,
) -> Estimate: ...


def romberg(grid_or_step, samples, max_steps=None, *, power=2.0):
    """Integrates equally spaced samples with Romberg's method.

    Trapezoid estimates are computed at every resolution the sample count
    allows (see :func:`rombergkit.romberg.planner.plan_step_multipliers`) and
    combined by Richardson extrapolation. ``N - 1`` does not need to be a
    power of two: any factorization works, although a power of two gives the
    most refinement levels and usually the best accuracy.

    Args:
        grid_or_step:
            The sample spacing, either as a real number or through an
            :class:`~rombergkit.utils.grid.EquallySpacedGrid` or ``range``
            whose length must match ``samples``.
        samples:
            Function values of shape ``(N,)``, or ``(N, ...)`` for vector- or
            tensor-valued integrands (integrated component-wise).
        max_steps:
            Optional number of trapezoid levels to use, counted from the
            finest one. When given, only the estimate is returned. Passing
            the maximum (:func:`rombergkit.romberg.planner.max_depth`) gives
            the same estimate as the automatic call.
        power:
            Exponent of the leading error term of the trapezoid rule,
            ``C * h**power`` (default 2). Integrands with endpoint
            singularities may converge better with a different value, e.g.
            ``0.5`` for square-root behaviour.

    Returns:
        ``(estimate, error)`` when ``max_steps`` is ``None``, else only
        ``estimate``. ``error`` is a heuristic, non-negative error scale (the
        change made by the last extrapolation step). It is ``0.0`` for
        one or two samples, where there is nothing to compare.

        Edge cases:

        * one sample: ``(0, 0)``, the domain has zero width;
        * two samples: the plain trapezoid rule;
        * three samples: Simpson's rule, exact for quadratics.

    Raises:
        InvalidInputError: If ``samples`` is empty or not numeric,
            ``grid_or_step`` is not a fixed-step type, ``power`` is not
            positive, or ``max_steps`` is out of range.
        LengthMismatchError: If the grid length differs from the number of samples.
    """
    y = validate_samples(samples)
    n = y.shape[0]
    step = resolve_step(grid_or_step, n)
    p = validate_power(power)

    plan = plan_step_multipliers(n)
    if max_steps is None:
        return _romberg(step, y, plan, p)

    levels = validate_max_steps(max_steps, max_depth(n))
    estimate, _ = _romberg(step, y, plan[len(plan) - levels:], p)
    return estimate


def romberg_trace(
    buffer: NDArray[np.inexact],
    grid_or_step: GridOrStep,
    samples: ArrayLike,
    *,
    power: float = 2.0,
) -> NDArray[np.inexact]:
    """Fills ``buffer`` with the full Romberg convergence table.

    Row ``i`` of the table starts with a trapezoid estimate and column ``j``
    holds the ``j``-th extrapolation; the bottom-right entry is the final
    estimate. The ``M = buffer.shape[0]`` finest step sizes are used, so
    ``buffer[M-1, M-1]`` equals ``romberg(grid_or_step, samples, M)``.
    The upper triangle is set to zero.

    The row and column layout assumes the step size halves between rows,
    so ``N - 1`` must be a power of two.

    Args:
        buffer: Writable square floating-point array; overwritten in place.
        grid_or_step: Sample spacing, as for :func:`romberg`.
        samples: One-dimensional function values.
        power: Exponent of the leading error term (default 2).

    Returns:
        ``buffer``.

    Raises:
        InvalidInputError: If ``buffer`` is not a writable square float array,
            the samples are not one-dimensional, ``N - 1`` is not a power of
            two, or ``M`` exceeds ``log2(N - 1) + 1``.
        LengthMismatchError: If the grid length differs from the number of samples.
    """
    validate_trace_buffer(buffer)
    y = validate_samples(samples)
    n = y.shape[0]
    step = resolve_step(grid_or_step, n)
    p = validate_power(power)

    if y.ndim != 1:
        raise InvalidInputError(
            f"romberg_trace requires one-dimensional samples; got shape {y.shape}."
        )
    if not is_power_of_two(n - 1):
        raise InvalidInputError(
            f"romberg_trace requires len(samples) - 1 to be a power of two; got {n - 1}."
        )
    if not np.can_cast(accumulation_dtype(y, step), buffer.dtype, casting="same_kind"):
        raise InvalidInputError(
            f"buffer dtype {buffer.dtype} cannot hold estimates of dtype {accumulation_dtype(y, step)}."
        )

    plan = plan_step_multipliers(n)
    levels = buffer.shape[0]
    if levels > len(plan):
        raise InvalidInputError(
            f"buffer of size {levels} needs {levels} refinement levels but "
            f"{n} samples only provide {len(plan)}."
        )

    _romberg(step, y, plan[len(plan) - levels:], p, table=buffer)
    return buffer


def trapezoid(grid_or_step: GridOrStep, samples: ArrayLike) -> Estimate:
    """Integrates equally spaced samples with the plain composite trapezoid rule.

    This is the finest row of the Romberg table and serves as a baseline.

    Args:
        grid_or_step: Sample spacing, as for :func:`romberg`.
        samples: Function values of shape ``(N,)`` or ``(N, ...)``.

    Returns:
        The trapezoid estimate; ``0`` for a single sample.
    """
    y = validate_samples(samples)
    step = resolve_step(grid_or_step, y.shape[0])
    if y.shape[0] == 1:
        return _zero_integral(y, step)
    estimate = trapezoid_sum(y, step)
    return estimate[()] if estimate.ndim == 0 else estimate
