"""
Low-level clock and timestamp utilities.

This module is domain-agnostic and should NOT contain NBA calendar logic
(e.g., season boundaries), which belongs in date_utils.py.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo


def today_et() -> date:
    """Return the current date in US Eastern Time (sports calendar day).

    Basketball Reference dates games on Eastern Time, so "is this game in
    the past" is judged against the Eastern calendar day.
    """
    return datetime.now(ZoneInfo("America/New_York")).date()


def modified_date(path: Path) -> date:
    """Local calendar date on which a file was last written."""
    return datetime.fromtimestamp(path.stat().st_mtime).date()
