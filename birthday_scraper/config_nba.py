"""
Single Source of Truth (SSOT) for the NBA calendar and team list.

In-season months and team abbreviations are referenced from here only.
Abbreviations follow Basketball Reference (BRK, CHO, PHO), since every
remote URL and every persisted artifact name is keyed by them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InSeasonMonth:
    """A tracked month of the NBA regular season."""

    number: int     # 10 for October
    name: str       # "October"

    @property
    def slug(self) -> str:
        """Lowercase name used in schedule page URLs."""
        return self.name.lower()


# Iteration order is season order (October -> April), not numeric order
IN_SEASON_MONTHS: dict[int, InSeasonMonth] = {
    10: InSeasonMonth(10, "October"),
    11: InSeasonMonth(11, "November"),
    12: InSeasonMonth(12, "December"),
    1: InSeasonMonth(1, "January"),
    2: InSeasonMonth(2, "February"),
    3: InSeasonMonth(3, "March"),
    4: InSeasonMonth(4, "April"),
}

MONTH_NUMBERS_BY_NAME: dict[str, int] = {m.name: m.number for m in IN_SEASON_MONTHS.values()}

FIRST_IN_SEASON_MONTH = next(iter(IN_SEASON_MONTHS))
LAST_IN_SEASON_MONTH = list(IN_SEASON_MONTHS)[-1]

TEAMS: dict[str, str] = {
    "ATL": "Atlanta Hawks",
    "BOS": "Boston Celtics",
    "BRK": "Brooklyn Nets",
    "CHO": "Charlotte Hornets",
    "CHI": "Chicago Bulls",
    "CLE": "Cleveland Cavaliers",
    "DAL": "Dallas Mavericks",
    "DEN": "Denver Nuggets",
    "DET": "Detroit Pistons",
    "GSW": "Golden State Warriors",
    "HOU": "Houston Rockets",
    "IND": "Indiana Pacers",
    "LAC": "Los Angeles Clippers",
    "LAL": "Los Angeles Lakers",
    "MEM": "Memphis Grizzlies",
    "MIA": "Miami Heat",
    "MIL": "Milwaukee Bucks",
    "MIN": "Minnesota Timberwolves",
    "NOP": "New Orleans Pelicans",
    "NYK": "New York Knicks",
    "OKC": "Oklahoma City Thunder",
    "ORL": "Orlando Magic",
    "PHI": "Philadelphia 76ers",
    "PHO": "Phoenix Suns",
    "POR": "Portland Trail Blazers",
    "SAC": "Sacramento Kings",
    "SAS": "San Antonio Spurs",
    "TOR": "Toronto Raptors",
    "UTA": "Utah Jazz",
    "WAS": "Washington Wizards",
}


def get_in_season_month(month: int) -> InSeasonMonth:
    """
    Get the in-season month for a month number.

    Raises:
        ValueError: If the month is not tracked (May through September)
    """
    try:
        return IN_SEASON_MONTHS[month]
    except KeyError:
        tracked = ", ".join(str(m) for m in IN_SEASON_MONTHS)
        raise ValueError(f"Month {month} is not an in-season month ({tracked})") from None


def is_in_season_month(month: int) -> bool:
    return month in IN_SEASON_MONTHS
