"""
Marker-based field extraction for Sports Reference pages.

Fields are located by literal attribute markers (``data-stat="pts"``) and read
positionally: skip to the next ``>`` after the marker, then take everything up
to the next ``<``. This is a delimiter scan, not a markup parse; it depends on
stable marker text and has no tolerance for renamed fields. Generic value
conversion (ints) lives in parsing.py.
"""

from __future__ import annotations

import re

FIELD_OPEN = ">"
FIELD_CLOSE = "<"

_TEAM_CODE_RE = re.compile(r"[A-Z]{3}")


def data_stat_marker(stat: str) -> str:
    """Marker for a Sports Reference table cell, e.g. ``data-stat="fg"``."""
    return f'data-stat="{stat}"'


def extract_field(payload: str, marker: str, start: int = 0) -> str | None:
    """Return the text of the field following ``marker``, or None.

    When the field text is empty because a nested opening tag follows
    (``><a href="...">Text<``), the scan moves past that tag and reads the
    nested text instead.
    """
    index = payload.find(marker, start)
    if index < 0:
        return None
    index = payload.find(FIELD_OPEN, index + len(marker))
    while index >= 0:
        end = payload.find(FIELD_CLOSE, index + 1)
        if end < 0:
            return None
        value = payload[index + 1:end]
        if value.strip() or payload.startswith("</", end):
            return value.strip()
        index = payload.find(FIELD_OPEN, end)
    return None


def extract_between(payload: str, marker: str, terminator: str) -> str | None:
    """Return the text between ``marker`` and the next ``terminator``."""
    index = payload.find(marker)
    if index < 0:
        return None
    start = index + len(marker)
    end = payload.find(terminator, start)
    if end < 0:
        return None
    return payload[start:end]


def extract_team_code(payload: str, marker: str) -> str | None:
    """First three-letter uppercase team code after ``marker``."""
    index = payload.find(marker)
    if index < 0:
        return None
    match = _TEAM_CODE_RE.search(payload, index + len(marker))
    return match.group(0) if match else None
