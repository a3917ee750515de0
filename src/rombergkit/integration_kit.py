"""Provides the IntegrationKit class.

A light wrapper around the Romberg helpers that keeps the samples and
their spacing together and exposes a simple API.

Typical usage examples:

>>> import numpy as np
>>> from rombergkit.integration_kit import IntegrationKit
>>> from rombergkit.utils.grid import EquallySpacedGrid
>>>
>>> grid = EquallySpacedGrid(0.0, 1.0, 2**4 + 1)
>>> kit = IntegrationKit(grid, grid.points() ** 2)
>>> estimate, error = kit.romberg()
>>> baseline = kit.trapezoid()
>>> table = kit.trace(levels=3)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from rombergkit.romberg import max_depth, romberg, romberg_trace, trapezoid
from rombergkit.utils.extrapolation import convergence_ratios
from rombergkit.utils.grid import resolve_step
from rombergkit.utils.types import Estimate, FloatArray, GridOrStep
from rombergkit.utils.validate import validate_samples


class IntegrationKit:
    """Provides access to Romberg estimates of one set of samples."""

    def __init__(self, grid_or_step: GridOrStep, samples: ArrayLike):
        """Initialise with the sample spacing and the samples.

        Args:
            grid_or_step: Real step size, ``EquallySpacedGrid`` or ``range``.
            samples: Function values of shape ``(N,)`` or ``(N, ...)``.
        """
        self.samples = validate_samples(samples)
        resolve_step(grid_or_step, self.samples.shape[0])
        self.grid_or_step = grid_or_step

    @property
    def max_depth(self) -> int:
        """Number of trapezoid levels the samples support."""
        return max_depth(self.samples.shape[0])

    def romberg(self, *, power: float = 2.0) -> tuple[Estimate, float]:
        """Returns the Romberg estimate and its error scale."""
        return romberg(self.grid_or_step, self.samples, power=power)

    def trapezoid(self) -> Estimate:
        """Returns the plain trapezoid estimate."""
        return trapezoid(self.grid_or_step, self.samples)

    def trace(self, levels: int | None = None, *, power: float = 2.0) -> FloatArray:
        """Returns the convergence table of the ``levels`` finest resolutions.

        Defaults to all available levels. Requires ``N - 1`` to be a power of two.
        """
        size = self.max_depth if levels is None else levels
        buffer = np.zeros((size, size), dtype=float)
        return romberg_trace(buffer, self.grid_or_step, self.samples, power=power)

    def convergence_ratios(self, levels: int | None = None) -> FloatArray:
        """Returns the successive-difference ratios of :meth:`trace`."""
        return convergence_ratios(self.trace(levels))
