"""Month report composition for birthday games.

A month report lists every game of the month in which a rostered player
plays the day after his birthday. Each game block is a header line with
the matchup (and final score once played) followed by one line per
birthday team, visitor first:

    16: BOS at ATL, 90-100
    ATL: Trae Young turned 25 (34:12 mp, 30 pts, 10/22 fga, 4 reb, 11 ast)

Played games trigger one box-score fetch per birthday player.
"""

from __future__ import annotations

from pathlib import Path

from ..config_nba import get_in_season_month
from ..context import RunContext
from ..logging import logger
from ..models import GameRecord
from ..scrapers import NBASportsReferenceScraper
from ..utils import birthday_key, day_before
from .birthday_index import BirthdayIndex, build_birthday_index
from .freshness import classify_month


def compose_team_line(
    context: RunContext,
    scraper: NBASportsReferenceScraper,
    index: BirthdayIndex,
    team: str,
    game: GameRecord,
) -> str | None:
    """Birthday line for one team in one game, or None if nobody has a birthday."""
    month, day = birthday_key(game.game_date)
    players = index.entries(team, month, day)
    if not players:
        return None

    played = context.today > game.game_date
    verb = "turned" if played else "turns"
    birthday_year = day_before(game.game_date).year
    parts = []
    for player in players:
        annotation = ""
        if played:
            stat_line = scraper.fetch_box_score_stat_line(player.player_name, game.game_date, game.home)
            annotation = stat_line.annotation()
        parts.append(f"{player.player_name} {verb} {birthday_year - player.birth_year}{annotation}")
    return f"{team}: {', '.join(parts)}"


def compose_game_block(
    context: RunContext,
    scraper: NBASportsReferenceScraper,
    index: BirthdayIndex,
    game: GameRecord,
) -> str:
    """Report block for a game; empty when neither team has a birthday."""
    team_lines = [
        line
        for line in (
            compose_team_line(context, scraper, index, game.visitor, game),
            compose_team_line(context, scraper, index, game.home, game),
        )
        if line is not None
    ]
    if not team_lines:
        return ""

    header = f"{game.day}: {game.visitor} at {game.home}"
    score = game.final_score
    if score is not None:
        header += f", {score[0]}-{score[1]}"
    return "\n" + header + "\n" + "".join(f"{line}\n" for line in team_lines)


def compose_month_report(
    context: RunContext,
    scraper: NBASportsReferenceScraper,
    index: BirthdayIndex,
    month: int,
) -> str:
    games = scraper.fetch_month_schedule(context.season, month, context.today)
    blocks = [compose_game_block(context, scraper, index, game) for game in games]
    logger.info(
        "month_report_composed",
        season=context.season,
        month=get_in_season_month(month).name,
        games=len(games),
        birthday_games=sum(1 for block in blocks if block),
    )
    return "".join(blocks)


def update_month_report(context: RunContext, scraper: NBASportsReferenceScraper, month: int) -> Path | None:
    """(Re)write a month artifact unless it is already complete.

    Returns the written path, or None when the saved artifact was up to date.
    """
    month_name = get_in_season_month(month).name
    state = classify_month(context.artifacts, month)
    if state == "complete":
        logger.info("month_artifact_up_to_date", season=context.season, month=month_name)
        return None

    index = build_birthday_index(context, month)
    content = compose_month_report(context, scraper, index, month)
    path = context.artifacts.write_text(context.artifacts.month_path(month), content)
    logger.info("month_artifact_written", season=context.season, month=month_name, previous_state=state)
    return path
