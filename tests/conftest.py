"""Pytest configuration file with shared sample grids."""

import numpy as np
import pytest

from rombergkit.utils.grid import EquallySpacedGrid

__all__ = ["sampled"]


@pytest.fixture(scope="session")
def sampled():
    """Return a callable that samples a function on an equally spaced grid.

    The returned function has signature
    `make(function, start, stop, n) -> (EquallySpacedGrid, samples)`.
    """
    def _make(function, start: float, stop: float, n: int):
        grid = EquallySpacedGrid(start, stop, n)
        return grid, function(grid.points())
    return _make
