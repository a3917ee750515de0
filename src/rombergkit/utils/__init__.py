"""Utility functions for RombergKit package."""

from .extrapolation import convergence_ratios, richardson_extrapolate
from .grid import EquallySpacedGrid
from .validate import InvalidInputError, LengthMismatchError

__all__ = [
    "richardson_extrapolate",
    "convergence_ratios",
    "EquallySpacedGrid",
    "InvalidInputError",
    "LengthMismatchError",
]
