"""Provides all rombergkit methods."""

from importlib.metadata import PackageNotFoundError, version

from rombergkit.integration_kit import IntegrationKit
from rombergkit.romberg import romberg, romberg_trace, trapezoid
from rombergkit.utils.extrapolation import (
    convergence_ratios,
    richardson_extrapolate,
)
from rombergkit.utils.grid import EquallySpacedGrid
from rombergkit.utils.validate import InvalidInputError, LengthMismatchError

try:
    __version__ = version("rombergkit")
except PackageNotFoundError:
    pass

IntegrationKit.__module__ = "rombergkit"

__all__ = [
    "IntegrationKit",
    "romberg",
    "romberg_trace",
    "trapezoid",
    "richardson_extrapolate",
    "convergence_ratios",
    "EquallySpacedGrid",
    "InvalidInputError",
    "LengthMismatchError",
]
