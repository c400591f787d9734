"""Services that turn fetched pages into season artifacts."""

from .birthday_index import BirthdayIndex, RosterNotFoundError, build_birthday_index, find_closest_roster
from .freshness import classify_month, classify_months, resolve_month_selection, summarize_rosters
from .month_reports import compose_month_report, update_month_report
from .roster_ingestion import refresh_rosters
from .run_manager import SeasonRunManager
from .statistics import render_statistics, summarize_season, tally_month_report, write_statistics

__all__ = [
    # Freshness
    "classify_month",
    "classify_months",
    "summarize_rosters",
    "resolve_month_selection",
    # Birthday index
    "BirthdayIndex",
    "RosterNotFoundError",
    "build_birthday_index",
    "find_closest_roster",
    # Fetch pipeline
    "refresh_rosters",
    "compose_month_report",
    "update_month_report",
    # Statistics
    "tally_month_report",
    "summarize_season",
    "render_statistics",
    "write_statistics",
    # Orchestration
    "SeasonRunManager",
]
