"""Unit tests for public API."""

from __future__ import annotations

import rombergkit
from rombergkit import (
    EquallySpacedGrid,
    IntegrationKit,
    InvalidInputError,
    LengthMismatchError,
    romberg,
    romberg_trace,
)


def test_public_names_importable_from_top_level():
    """Test that the public entry points can be imported from top level."""
    assert IntegrationKit is not None
    assert callable(romberg)
    assert callable(romberg_trace)
    assert EquallySpacedGrid is not None


def test_public_all_contains_entry_points():
    """Test that __all__ contains the expected public names."""
    expected = {
        "IntegrationKit",
        "romberg",
        "romberg_trace",
        "trapezoid",
        "richardson_extrapolate",
        "convergence_ratios",
        "EquallySpacedGrid",
        "InvalidInputError",
        "LengthMismatchError",
    }
    assert expected.issubset(set(rombergkit.__all__))


def test_kit_reports_top_level_module():
    """Test that the kit presents as coming from the top-level package."""
    assert IntegrationKit.__module__ == "rombergkit"


def test_errors_are_value_errors():
    """Test that callers can catch the package errors as ValueError."""
    assert issubclass(InvalidInputError, ValueError)
    assert issubclass(LengthMismatchError, ValueError)
