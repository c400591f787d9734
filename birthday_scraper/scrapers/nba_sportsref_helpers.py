"""Record extractors for Basketball Reference pages.

Each extractor works line by line over the raw page body and reads fields
with the marker primitives in utils.marker_parsing. A row that cannot be
read is skipped and logged at debug level; nothing here raises on markup
drift.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator

from ..config_nba import MONTH_NUMBERS_BY_NAME
from ..logging import logger
from ..models import GameRecord, PlayerBirthdayEntry, StatLine
from ..utils import data_stat_marker, extract_between, extract_field, extract_team_code, game_date, parse_int

BIRTH_DATE_MARKER = data_stat_marker("birth_date")
PLAYER_LINK_MARKER = 'href="/players/'
VISITOR_TEAM_MARKER = data_stat_marker("visitor_team_name")
HOME_TEAM_MARKER = data_stat_marker("home_team_name")
DID_NOT_PLAY = "Did Not Play"
DID_NOT_DRESS = "Did Not Dress"
BOX_SCORE_FIELDS = ("mp", "pts", "fg", "fga", "trb", "ast")
SHOOTING_TABLE_MARKER = 'id="shooting-team"'
FG_PCT_MARKER = data_stat_marker("fg_pct")
LEAGUE_AVERAGE_LABEL = "League Average"


def extract_roster_rows(payload: str) -> list[str]:
    """Roster table rows (lines with a row tag and a birth date), verbatim."""
    return [line for line in payload.splitlines() if "<tr" in line and "birth_date" in line]


def parse_birth_date(text: str) -> tuple[int, int, int] | None:
    """Parse "December 11, 2000" into (month, day, year).

    Returns None for malformed text and for months outside the season.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 3:
        return None
    month = MONTH_NUMBERS_BY_NAME.get(parts[0])
    day = parse_int(parts[1])
    year = parse_int(parts[2])
    if month is None or day is None or year is None:
        return None
    return month, day, year


def extract_birthday_entries(rows: Iterable[str]) -> Iterator[tuple[int, int, PlayerBirthdayEntry]]:
    """Yield (birth month, birth day, entry) for in-season birthdays."""
    for row in rows:
        birth_text = extract_field(row, BIRTH_DATE_MARKER)
        if not birth_text:
            logger.debug("roster_row_missing_birth_date", row=row[:120])
            continue
        parsed = parse_birth_date(birth_text)
        if parsed is None:
            continue
        player = extract_field(row, PLAYER_LINK_MARKER)
        if not player:
            logger.debug("roster_row_missing_player", row=row[:120])
            continue
        month, day, year = parsed
        yield month, day, PlayerBirthdayEntry(player_name=player, birth_year=year)


def _parse_schedule_row(line: str, season: int, month: int, today: date) -> GameRecord | None:
    day = parse_int(extract_between(line, "day=", "&"))
    visitor = extract_team_code(line, VISITOR_TEAM_MARKER)
    home = extract_team_code(line, HOME_TEAM_MARKER)
    if day is None or visitor is None or home is None:
        return None
    try:
        played_on = game_date(season, month, day)
    except ValueError:
        return None

    visitor_points = home_points = None
    if played_on < today:
        visitor_points = parse_int(extract_field(line, data_stat_marker("visitor_pts")))
        home_points = parse_int(extract_field(line, data_stat_marker("home_pts")))
    return GameRecord(
        game_date=played_on,
        visitor=visitor,
        home=home,
        visitor_points=visitor_points,
        home_points=home_points,
    )


def extract_schedule_games(payload: str, season: int, month: int, today: date) -> list[GameRecord]:
    """Games listed on a month schedule page, in page order."""
    games: list[GameRecord] = []
    for line in payload.splitlines():
        if VISITOR_TEAM_MARKER not in line:
            continue
        game = _parse_schedule_row(line, season, month, today)
        if game is None:
            logger.debug("schedule_row_skipped", season=season, month=month, row=line[:120])
            continue
        games.append(game)
    return games


def extract_stat_line(payload: str, player: str) -> StatLine:
    """A player's box-score line; Unavailable when it cannot be read."""
    for line in payload.splitlines():
        if player not in line:
            continue
        if DID_NOT_PLAY in line:
            return StatLine.did_not_play()
        if DID_NOT_DRESS in line:
            return StatLine.did_not_dress()
        if data_stat_marker("mp") not in line:
            continue

        values = {stat: extract_field(line, data_stat_marker(stat)) for stat in BOX_SCORE_FIELDS}
        numbers = {stat: parse_int(values[stat]) for stat in BOX_SCORE_FIELDS if stat != "mp"}
        if not values["mp"] or any(value is None for value in numbers.values()):
            logger.debug("stat_line_unreadable", player=player, values=values)
            return StatLine.unavailable()
        return StatLine(
            minutes=values["mp"],
            points=numbers["pts"],
            field_goals_made=numbers["fg"],
            field_goals_attempted=numbers["fga"],
            rebounds=numbers["trb"],
            assists=numbers["ast"],
        )
    logger.debug("stat_line_not_found", player=player)
    return StatLine.unavailable()


def extract_league_average_fg_pct(payload: str) -> str | None:
    """League-average field-goal percentage as "0.466", or None."""
    for line in payload.splitlines():
        if SHOOTING_TABLE_MARKER not in line or FG_PCT_MARKER not in line:
            continue
        start = line.find(LEAGUE_AVERAGE_LABEL)
        if start < 0:
            continue
        value = extract_field(line, FG_PCT_MARKER, start)
        if not value:
            continue
        return f"0{value}" if value.startswith(".") else value
    return None
