"""Romberg integration of equally spaced samples."""

from .driver import romberg, romberg_trace, trapezoid
from .planner import max_depth, plan_step_multipliers

__all__ = [
    "romberg",
    "romberg_trace",
    "trapezoid",
    "max_depth",
    "plan_step_multipliers",
]
