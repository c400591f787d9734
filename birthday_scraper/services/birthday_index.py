"""Per-team birthday index built from saved roster snapshots.

For a target month each team's index comes from its closest saved roster:
the snapshot nearest in time, preferring the earlier month at equal
distance. Birthdays are keyed by (month, day) and kept in season order so
October birthdays come before January ones.
"""

from __future__ import annotations

from pathlib import Path

from ..config_nba import TEAMS, get_in_season_month
from ..context import RunContext
from ..logging import logger
from ..models import PlayerBirthdayEntry
from ..persistence import SeasonArtifactStore
from ..scrapers.nba_sportsref_helpers import extract_birthday_entries
from ..utils import season_order_key
from .team_pool import run_per_team

# Distance 0, then alternating earlier/later; covers all 12 months once
CLOSEST_MONTH_OFFSETS = (0, -1, 1, -2, 2, -3, 3, -4, 4, -5, 5, -6)

TeamBirthdays = dict[tuple[int, int], list[PlayerBirthdayEntry]]


class RosterNotFoundError(RuntimeError):
    """Raised when a team has no saved roster snapshot for the season."""


def candidate_months(target_month: int) -> list[int]:
    """Months to try for a target month, nearest first."""
    return [((target_month - 1 + offset) % 12) + 1 for offset in CLOSEST_MONTH_OFFSETS]


def find_closest_roster(store: SeasonArtifactStore, team: str, target_month: int) -> Path | None:
    for month in candidate_months(target_month):
        path = store.roster_path(team, month)
        if path.is_file():
            return path
    return None


def build_team_birthdays(rows: list[str]) -> TeamBirthdays:
    """Group in-season birthdays by (month, day), players sorted by name."""
    grouped: TeamBirthdays = {}
    for month, day, entry in extract_birthday_entries(rows):
        grouped.setdefault((month, day), []).append(entry)
    return {
        key: sorted(grouped[key], key=lambda entry: entry.player_name)
        for key in sorted(grouped, key=lambda key: season_order_key(*key))
    }


def load_team_birthdays(store: SeasonArtifactStore, team: str, target_month: int) -> TeamBirthdays:
    path = find_closest_roster(store, team, target_month)
    if path is None:
        raise RosterNotFoundError(f"No saved roster for {team} in season {store.season}")
    logger.debug("closest_roster_selected", team=team, target_month=target_month, path=str(path))
    return build_team_birthdays(store.read_text(path).splitlines())


class BirthdayIndex:
    """Team -> (birth month, birth day) -> players sharing that birthday."""

    def __init__(self, target_month: int, teams: dict[str, TeamBirthdays]) -> None:
        self.target_month = target_month
        self.teams = teams

    def entries(self, team: str, month: int, day: int) -> list[PlayerBirthdayEntry]:
        return self.teams.get(team, {}).get((month, day), [])

    def team_birthdays(self, team: str) -> TeamBirthdays:
        return self.teams.get(team, {})

    def render_team(self, team: str) -> str:
        lines = [f"{team} birthdays:"]
        for (month, day), players in self.team_birthdays(team).items():
            names = ", ".join(f"{p.player_name} ({p.birth_year})" for p in players)
            lines.append(f"{month:02d}-{day:02d}: {names}")
        return "\n".join(lines) + "\n"

    def render(self) -> str:
        """Listing of every team's in-season birthdays, one block per team."""
        return "".join(self.render_team(team) + "\n" for team in TEAMS)


def build_birthday_index(context: RunContext, target_month: int) -> BirthdayIndex:
    """Build the index for a month, one worker task per team.

    Raises:
        RosterNotFoundError: If any team has no saved roster at all
    """
    get_in_season_month(target_month)
    store = context.artifacts
    teams = run_per_team(
        lambda team: load_team_birthdays(store, team, target_month),
        TEAMS,
        context.max_concurrency,
    )
    logger.info(
        "birthday_index_built",
        season=context.season,
        target_month=target_month,
        birthdays=sum(len(birthdays) for birthdays in teams.values()),
    )
    return BirthdayIndex(target_month, teams)


def write_season_birthdays(context: RunContext, index: BirthdayIndex) -> Path:
    """Rewrite the all-teams in-season birthday listing."""
    return context.artifacts.write_text(context.artifacts.birthdays_path, index.render())
