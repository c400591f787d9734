"""
Generic, format-agnostic parsing utilities.

This module must NOT depend on page markers or markup so it can parse values
from any source (page fields, persisted artifacts, CLI input).
"""

from __future__ import annotations


def parse_int(value: str | int | float | None) -> int | None:
    """Parse a value to an integer, handling common edge cases.

    Accepts strings, ints, floats, or None. Returns None for empty strings or "-".
    """
    if value in (None, "", "-"):
        return None
    try:
        return int(float(value))
    except (ValueError, TypeError):
        return None


def format_ratio(numerator: int, denominator: int, places: int = 3) -> str | None:
    """Format numerator/denominator with fixed decimals, or None when undefined."""
    if denominator == 0:
        return None
    return f"{numerator / denominator:.{places}f}"
