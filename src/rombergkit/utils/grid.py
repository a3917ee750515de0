"""Equally spaced grids and step-size resolution.

The integrator only ever needs a single scalar spacing. It can be given
directly as a number, or through an object that guarantees a fixed step:

* :class:`EquallySpacedGrid` -- ``start``, ``stop`` and ``count`` (like
  ``numpy.linspace``),
* a Python ``range``.

Arbitrary coordinate arrays are rejected on purpose: the spacing is never
derived by subtracting neighbouring points.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from rombergkit.utils.validate import (
    InvalidInputError,
    LengthMismatchError,
    validate_sample_count,
)

__all__ = ["EquallySpacedGrid", "resolve_step"]


@dataclass(frozen=True)
class EquallySpacedGrid:
    """Grid of ``count`` points from ``start`` to ``stop`` (both included).

    Attributes:
        start: First grid point.
        stop: Last grid point.
        count: Number of grid points.
    """

    start: float
    stop: float
    count: int

    def __post_init__(self) -> None:
        validate_sample_count(self.count)
        for name in ("start", "stop"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or not np.isfinite(float(value)):
                raise InvalidInputError(f"{name} must be a finite real number; got {value!r}.")

    @property
    def step(self) -> float:
        """Spacing between neighbouring points; ``0.0`` when there are fewer than two."""
        if self.count < 2:
            return 0.0
        return (self.stop - self.start) / (self.count - 1)

    def __len__(self) -> int:
        return self.count

    def points(self) -> NDArray[np.float64]:
        """Returns the grid points as an array (same as ``numpy.linspace``)."""
        return np.linspace(self.start, self.stop, self.count)


def _validate_step(step: Any) -> float | int:
    if isinstance(step, bool) or not isinstance(step, Real):
        raise InvalidInputError(
            "grid_or_step must be a real step size, an EquallySpacedGrid or a range; "
            f"got {type(step).__name__}."
        )
    if not np.isfinite(float(step)):
        raise InvalidInputError(f"step size must be finite; got {step}.")
    if isinstance(step, (int, float, np.number)):
        return step
    # e.g. fractions.Fraction
    return float(step)


def resolve_step(grid_or_step: Any, n_samples: int) -> float | int:
    """Extracts the fixed spacing from a grid or a scalar step.

    Args:
        grid_or_step: Real step size, :class:`EquallySpacedGrid` or ``range``.
        n_samples: Number of samples the spacing will be used with.

    Returns:
        The step size. Integer steps stay integers; promotion to floating
        point happens together with the samples.

    Raises:
        InvalidInputError: If ``grid_or_step`` is not a fixed-step type, or
            the step is not finite.
        LengthMismatchError: If a grid is given whose length differs from
            ``n_samples``.
    """
    if isinstance(grid_or_step, (EquallySpacedGrid, range)):
        if len(grid_or_step) != n_samples:
            raise LengthMismatchError(
                f"grid has {len(grid_or_step)} points but {n_samples} samples were given."
            )
        step = grid_or_step.step
        return _validate_step(step)

    if isinstance(grid_or_step, (np.ndarray, list, tuple)):
        raise InvalidInputError(
            "grid_or_step must have a fixed step; pass an EquallySpacedGrid or a "
            "scalar step instead of an array of coordinates."
        )

    return _validate_step(grid_or_step)
