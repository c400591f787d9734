"""
Domain-level date and season calculation utilities.

This module handles NBA calendar logic: season labels, in-season month
boundaries and season ordering. It operates on 'date' objects and should NOT
contain time-of-day or filesystem logic (which belongs in datetime_utils.py).

A season is named by the calendar year in which it ends, so season 2023
runs from October 2022 to April 2023.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..config_nba import FIRST_IN_SEASON_MONTH, LAST_IN_SEASON_MONTH, get_in_season_month, is_in_season_month


def current_season(today: date) -> int:
    """Season in progress (or about to start) on a given day.

    October or later belongs to the season ending next calendar year.
    """
    return today.year if today.month < 10 else today.year + 1


def calendar_year(season: int, month: int) -> int:
    """Calendar year of a month within a season (Jul-Dec fall in the prior year)."""
    return season - 1 if month > 6 else season


def game_date(season: int, month: int, day: int) -> date:
    """Calendar date of a schedule day within a season month."""
    return date(calendar_year(season, month), month, day)


def month_start(season: int, month: int) -> date:
    """First day of an in-season month."""
    return game_date(season, month, 1)


def month_end_boundary(season: int, month: int) -> date:
    """First day of the month following an in-season month.

    An artifact written on or after this date holds the whole month. The
    year rolls back only for October and November; December rolls into
    January of the season year.
    """
    get_in_season_month(month)
    year = season - 1 if month in (10, 11) else season
    return date(year, month % 12 + 1, 1)


def season_order_key(month: int, day: int) -> int:
    """Sort key placing July-December before January-June.

    Calendar order would put January first; NBA seasons start in October.
    """
    if month > 6:
        return day + month * 100
    return day + month * 10000


def day_before(game_day: date) -> date:
    """Birthdays are celebrated in the game played the day after them."""
    return game_day - timedelta(days=1)


def birthday_key(game_day: date) -> tuple[int, int]:
    """(month, day) birthday lookup key for a game date."""
    eve = day_before(game_day)
    return eve.month, eve.day


def roster_capture_month(season: int, today: date) -> int:
    """Month under which a freshly fetched roster snapshot is filed.

    Past seasons file under the final in-season month; during the off-season
    the current season's rosters file under the opening month.
    """
    if current_season(today) > season:
        return LAST_IN_SEASON_MONTH
    if not is_in_season_month(today.month):
        return FIRST_IN_SEASON_MONTH
    return today.month


def month_label(season: int, month: int) -> str:
    """Human label such as "March of 2023"."""
    year = season - 1 if month > 8 else season
    return f"{get_in_season_month(month).name} of {year}"
