"""Shared typing aliases for RombergKit."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

from rombergkit.utils.grid import EquallySpacedGrid

FloatArray: TypeAlias = NDArray[np.float64]
Estimate: TypeAlias = float | np.floating | np.complexfloating | NDArray[np.inexact]
GridOrStep: TypeAlias = float | int | EquallySpacedGrid | range
