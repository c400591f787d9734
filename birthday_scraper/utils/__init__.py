"""Common utilities for scrapers and artifact processing."""

from .date_utils import (
    birthday_key,
    current_season,
    day_before,
    game_date,
    month_end_boundary,
    month_label,
    month_start,
    roster_capture_month,
    season_order_key,
)
from .datetime_utils import modified_date, today_et
from .marker_parsing import data_stat_marker, extract_between, extract_field, extract_team_code
from .parsing import format_ratio, parse_int

__all__ = [
    # Season calendar
    "current_season",
    "game_date",
    "month_start",
    "month_end_boundary",
    "season_order_key",
    "day_before",
    "birthday_key",
    "roster_capture_month",
    "month_label",
    # Clock utilities
    "today_et",
    "modified_date",
    # Marker extraction
    "data_stat_marker",
    "extract_field",
    "extract_between",
    "extract_team_code",
    # Parsing utilities
    "parse_int",
    "format_ratio",
]
