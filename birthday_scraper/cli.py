"""Command line entry point for a season run.

Usage:
    birthday-scraper --season 2023 --refresh-rosters auto --months 0
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .context import create_run_context
from .logging import logger
from .models import SELECT_ALL_INCOMPLETE, RunConfig, RunSummary
from .persistence import ArtifactError
from .scrapers import ScraperError
from .services import RosterNotFoundError, SeasonRunManager

REFRESH_CHOICES = {"auto": None, "yes": True, "no": False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Collect NBA birthday-game data for a season")
    parser.add_argument(
        "--season",
        type=int,
        default=None,
        help="Season to collect, named by the year it ends (default: current season)",
    )
    parser.add_argument(
        "--refresh-rosters",
        choices=sorted(REFRESH_CHOICES),
        default="auto",
        help="Fetch new team rosters: auto only when a snapshot is missing (default: auto)",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=SELECT_ALL_INCOMPLETE,
        help="0 for every incomplete month, a month number (10, 11, 12, 1-4) for one month, 100 for none",
    )
    parser.add_argument(
        "--skip-statistics",
        action="store_true",
        help="Do not rewrite Statistics.txt",
    )
    return parser


def _log_summary(summary: RunSummary) -> None:
    classification = summary.classification
    logger.info(
        "season_summary",
        season=summary.season,
        complete=classification.month_names(classification.complete),
        partial=classification.month_names(classification.partial),
        missing=classification.month_names(classification.missing),
        rosters_last_updated=summary.roster_status.last_update_label,
        rosters_refreshed=summary.rosters_refreshed,
        months_written=classification.month_names(summary.months_written),
    )
    if summary.statistics is not None:
        logger.info(
            "season_statistics",
            season=summary.season,
            record=summary.statistics.record,
            birthday_fg_pct=summary.statistics.birthday_fg_pct,
            league_average_fg_pct=summary.statistics.league_average_fg_pct,
        )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig(
        season=args.season,
        refresh_rosters=REFRESH_CHOICES[args.refresh_rosters],
        month_selection=args.months,
        gather_statistics=not args.skip_statistics,
    )
    context = create_run_context(season=config.season)
    manager = SeasonRunManager(context)
    try:
        summary = manager.run(config)
    except (ArtifactError, RosterNotFoundError, ScraperError, ValueError) as exc:
        logger.error("season_run_failed", season=context.season, error=str(exc), error_type=type(exc).__name__)
        return 1
    finally:
        manager.scraper.close()
    _log_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
