"""Run manager that orchestrates one season run."""

from __future__ import annotations

from ..config_nba import LAST_IN_SEASON_MONTH
from ..context import RunContext
from ..logging import logger
from ..models import RunConfig, RunSummary
from ..scrapers import NBASportsReferenceScraper
from .birthday_index import build_birthday_index, write_season_birthdays
from .freshness import classify_months, resolve_month_selection, summarize_rosters
from .month_reports import update_month_report
from .roster_ingestion import refresh_rosters
from .statistics import write_statistics


class SeasonRunManager:
    def __init__(self, context: RunContext, scraper: NBASportsReferenceScraper | None = None) -> None:
        self.context = context
        self.scraper = scraper or NBASportsReferenceScraper(context.budget)

    def run(self, config: RunConfig) -> RunSummary:
        context = self.context
        store = context.artifacts
        logger.info(
            "season_run_started",
            season=context.season,
            today=str(context.today),
            month_selection=config.month_selection,
            refresh_rosters=config.refresh_rosters,
            gather_statistics=config.gather_statistics,
        )

        classification = classify_months(store)
        if classification.season_dir_created:
            logger.info("season_directory_created", season=context.season, path=str(store.season_dir))
        if classification.complete:
            logger.info(
                "complete_months_found",
                season=context.season,
                months=classification.month_names(classification.complete),
            )
        # Rejects a complete month before any fetch is made
        selected = resolve_month_selection(classification, config.month_selection)

        roster_status = summarize_rosters(store, context.today)
        logger.info(
            "roster_status",
            season=context.season,
            refresh_required=roster_status.refresh_required,
            refresh_recommended=roster_status.refresh_recommended,
            last_update=roster_status.last_update_label,
            teams_without_snapshot=roster_status.teams_without_snapshot,
        )
        rosters_refreshed = roster_status.refresh_required or config.refresh_rosters is True
        if rosters_refreshed:
            refresh_rosters(context, self.scraper)

        summary = RunSummary(
            season=context.season,
            classification=classification,
            roster_status=roster_status,
            rosters_refreshed=rosters_refreshed,
        )
        for month in selected:
            if update_month_report(context, self.scraper, month) is None:
                summary.months_up_to_date.append(month)
            else:
                summary.months_written.append(month)

        # Latest rosters for the season listing
        write_season_birthdays(context, build_birthday_index(context, LAST_IN_SEASON_MONTH))

        if config.gather_statistics:
            summary.statistics, _ = write_statistics(context, self.scraper)

        logger.info(
            "season_run_completed",
            season=context.season,
            months_written=classification.month_names(summary.months_written),
            months_up_to_date=classification.month_names(summary.months_up_to_date),
            record=summary.statistics.record if summary.statistics else None,
            requests_made=context.budget.requests_made,
        )
        return summary
