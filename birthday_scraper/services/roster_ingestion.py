"""Roster snapshot refresh for every team."""

from __future__ import annotations

from pathlib import Path

from ..config_nba import TEAMS
from ..context import RunContext
from ..logging import logger
from ..scrapers import NBASportsReferenceScraper
from ..utils import roster_capture_month
from .team_pool import run_per_team


def refresh_team_roster(context: RunContext, scraper: NBASportsReferenceScraper, team: str, month: int) -> Path:
    rows = scraper.fetch_roster(team, context.season)
    content = "".join(f"{row}\n" for row in rows)
    return context.artifacts.write_text(context.artifacts.roster_path(team, month), content)


def refresh_rosters(context: RunContext, scraper: NBASportsReferenceScraper) -> dict[str, Path]:
    """Fetch every team's roster and file it under the capture month."""
    capture_month = roster_capture_month(context.season, context.today)
    context.artifacts.ensure_rosters_dir()
    logger.info("roster_refresh_started", season=context.season, capture_month=capture_month, teams=len(TEAMS))
    saved = run_per_team(
        lambda team: refresh_team_roster(context, scraper, team, capture_month),
        TEAMS,
        context.max_concurrency,
    )
    logger.info("roster_refresh_completed", season=context.season, capture_month=capture_month, teams=len(saved))
    return saved
