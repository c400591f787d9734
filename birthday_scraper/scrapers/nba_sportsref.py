"""NBA scraper powered by Basketball Reference.

One fetch per resource kind: team rosters, month schedules, box scores and
the league summary page. Every fetch goes through the run's request budget.
"""

from __future__ import annotations

from datetime import date

from ..config_nba import get_in_season_month
from ..logging import logger
from ..models import GameRecord, StatLine
from .base import BaseSportsReferenceScraper
from .nba_sportsref_helpers import (
    extract_league_average_fg_pct,
    extract_roster_rows,
    extract_schedule_games,
    extract_stat_line,
)


class NBASportsReferenceScraper(BaseSportsReferenceScraper):
    def roster_url(self, team: str, season: int) -> str:
        return self.url(f"/teams/{team}/{season}.html")

    def schedule_url(self, season: int, month: int) -> str:
        return self.url(f"/leagues/NBA_{season}_games-{get_in_season_month(month).slug}.html")

    def boxscore_url(self, game_date: date, home: str) -> str:
        return self.url(f"/boxscores/{game_date.strftime('%Y%m%d')}0{home}.html")

    def league_summary_url(self, season: int) -> str:
        return self.url(f"/leagues/NBA_{season}.html")

    def fetch_roster(self, team: str, season: int) -> list[str]:
        """Raw roster rows for a team, as saved in a snapshot."""
        rows = extract_roster_rows(self.fetch_text(self.roster_url(team, season)))
        logger.info("roster_fetched", team=team, season=season, rows=len(rows))
        return rows

    def fetch_month_schedule(self, season: int, month: int, today: date) -> list[GameRecord]:
        payload = self.fetch_text(self.schedule_url(season, month))
        games = extract_schedule_games(payload, season, month, today)
        logger.info("schedule_fetched", season=season, month=month, games=len(games))
        return games

    def fetch_box_score_stat_line(self, player: str, game_date: date, home: str) -> StatLine:
        payload = self.fetch_text(self.boxscore_url(game_date, home))
        return extract_stat_line(payload, player)

    def fetch_league_average_fg_pct(self, season: int) -> str | None:
        pct = extract_league_average_fg_pct(self.fetch_text(self.league_summary_url(season)))
        if pct is None:
            logger.warning("league_average_fg_pct_not_found", season=season)
        return pct
