"""Season statistics for birthday games, recomputed from saved month reports.

Only months that have started and have a saved report are counted. A
birthday team's result is counted once per game from the final score in
the block header; field goals are summed from every stat annotation on
a ``turned`` line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..config_nba import IN_SEASON_MONTHS
from ..context import RunContext
from ..logging import logger
from ..models import SeasonStatisticsSummary
from ..scrapers import NBASportsReferenceScraper
from ..utils import format_ratio, month_start, parse_int
from .freshness import classify_month

GAME_HEADER_RE = re.compile(r"^(\d+): ([A-Z]{3}) at ([A-Z]{3})(?:, (\d+)-(\d+))?$")
STAT_GROUP_RE = re.compile(r"\(([^)]*)\)")

FG_PCT_NOT_AVAILABLE = "N/A"
LEAGUE_AVERAGE_UNAVAILABLE = "unavailable"


@dataclass
class BirthdayGameTally:
    wins: int = 0
    losses: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0

    def add(self, other: "BirthdayGameTally") -> None:
        self.wins += other.wins
        self.losses += other.losses
        self.field_goals_made += other.field_goals_made
        self.field_goals_attempted += other.field_goals_attempted


def _parse_field_goals(group: str) -> tuple[int, int] | None:
    """Made/attempted from "34:12 mp, 30 pts, 10/22 fga, 4 reb, 11 ast"."""
    fields = group.split(", ")
    if len(fields) < 3 or not fields[2].endswith(" fga"):
        return None
    made, _, attempted = fields[2].split(" ")[0].partition("/")
    made_count, attempted_count = parse_int(made), parse_int(attempted)
    if made_count is None or attempted_count is None:
        return None
    return made_count, attempted_count


def tally_month_report(content: str) -> BirthdayGameTally:
    tally = BirthdayGameTally()
    lines = content.splitlines()
    for position, line in enumerate(lines):
        header = GAME_HEADER_RE.match(line)
        if header and header.group(4) is not None:
            _, visitor, home, visitor_points, home_points = header.groups()
            visitor_won = int(visitor_points) > int(home_points)
            # Birthday lines for a game follow its header, at most one per team
            following = lines[position + 1:position + 3]
            for team, won in ((visitor, visitor_won), (home, not visitor_won)):
                if any(candidate.startswith(f"{team}:") for candidate in following):
                    if won:
                        tally.wins += 1
                    else:
                        tally.losses += 1

        if " turned " in line:
            for group in STAT_GROUP_RE.findall(line):
                field_goals = _parse_field_goals(group)
                if field_goals is None:
                    continue
                tally.field_goals_made += field_goals[0]
                tally.field_goals_attempted += field_goals[1]
    return tally


def summarize_season(context: RunContext, league_average_fg_pct: str | None) -> SeasonStatisticsSummary:
    """Tally every started month with a saved report."""
    store = context.artifacts
    tally = BirthdayGameTally()
    complete: list[int] = []
    partial: list[int] = []
    for month in IN_SEASON_MONTHS:
        if not context.today > month_start(context.season, month):
            continue
        path = store.month_path(month)
        if not path.is_file():
            continue
        state = classify_month(store, month)
        (complete if state == "complete" else partial).append(month)
        tally.add(tally_month_report(store.read_text(path)))

    return SeasonStatisticsSummary(
        as_of=context.today,
        wins=tally.wins,
        losses=tally.losses,
        field_goals_made=tally.field_goals_made,
        field_goals_attempted=tally.field_goals_attempted,
        birthday_fg_pct=format_ratio(tally.field_goals_made, tally.field_goals_attempted),
        league_average_fg_pct=league_average_fg_pct,
        complete_months=complete,
        partial_months=partial,
    )


def render_statistics(summary: SeasonStatisticsSummary) -> str:
    lines = [f"As of {summary.as_of.isoformat()}, and using the data you've collected from games in:"]
    lines.extend(f" - {IN_SEASON_MONTHS[month].name}" for month in summary.complete_months)
    lines.extend(f" - part of {IN_SEASON_MONTHS[month].name}" for month in summary.partial_months)
    lines.append(f"Birthday-teams' record in birthday-games: {summary.record}")
    birthday_pct = summary.birthday_fg_pct or FG_PCT_NOT_AVAILABLE
    league_pct = summary.league_average_fg_pct or LEAGUE_AVERAGE_UNAVAILABLE
    lines.append(f"FG% for birthday-boys in birthday-games: {birthday_pct} (league avg: {league_pct})")
    return "\n".join(lines) + "\n"


def write_statistics(context: RunContext, scraper: NBASportsReferenceScraper) -> tuple[SeasonStatisticsSummary, Path]:
    """Aggregate saved month reports and rewrite Statistics.txt."""
    league_average = scraper.fetch_league_average_fg_pct(context.season)
    summary = summarize_season(context, league_average)
    path = context.artifacts.write_text(context.artifacts.statistics_path, render_statistics(summary))
    logger.info(
        "statistics_written",
        season=context.season,
        record=summary.record,
        birthday_fg_pct=summary.birthday_fg_pct,
        league_average_fg_pct=summary.league_average_fg_pct,
    )
    return summary, path
