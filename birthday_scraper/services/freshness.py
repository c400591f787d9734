"""Freshness classification of saved season artifacts.

Month artifacts are judged by existence and modification date only: an
artifact written before the first day of the following month is Partial,
one written on or after it is Complete. Roster snapshots are summarised
into a single refresh decision.
"""

from __future__ import annotations

from datetime import date

from ..config_nba import IN_SEASON_MONTHS, TEAMS, get_in_season_month
from ..logging import logger
from ..models import SELECT_ALL_INCOMPLETE, SELECT_NONE, BucketState, MonthClassification, RosterStatus
from ..persistence import SeasonArtifactStore
from ..utils import month_end_boundary, month_label, roster_capture_month, season_order_key


def classify_month(store: SeasonArtifactStore, month: int) -> BucketState:
    """Bucket state of a single month artifact."""
    written_on = store.modified_date(store.month_path(month))
    if written_on is None:
        return "missing"
    if written_on < month_end_boundary(store.season, month):
        return "partial"
    return "complete"


def classify_months(store: SeasonArtifactStore) -> MonthClassification:
    """Classify every in-season month, creating the season directory if absent.

    A missing season directory means every month is Missing without looking
    at individual files.
    """
    if not store.season_dir_exists():
        created = store.ensure_season_dir()
        return MonthClassification(
            season=store.season,
            states={month: "missing" for month in IN_SEASON_MONTHS},
            season_dir_created=created,
        )

    states = {month: classify_month(store, month) for month in IN_SEASON_MONTHS}
    classification = MonthClassification(season=store.season, states=states)
    logger.info(
        "months_classified",
        season=store.season,
        missing=classification.month_names(classification.missing),
        partial=classification.month_names(classification.partial),
        complete=classification.month_names(classification.complete),
    )
    return classification


def summarize_rosters(store: SeasonArtifactStore, today: date) -> RosterStatus:
    """Collapse per-team roster snapshots into a refresh decision."""
    if not store.rosters_dir_exists():
        return RosterStatus(
            snapshot_months={team: [] for team in TEAMS},
            refresh_required=True,
            refresh_recommended=True,
        )

    snapshot_months = {team: store.roster_months(team) for team in TEAMS}
    if any(not months for months in snapshot_months.values()):
        return RosterStatus(snapshot_months=snapshot_months, refresh_required=True, refresh_recommended=True)

    # Each team's newest snapshot; the stalest of those is the last full update
    last_update = min(
        (months[-1] for months in snapshot_months.values()),
        key=lambda month: season_order_key(month, 1),
    )
    capture_month = roster_capture_month(store.season, today)
    return RosterStatus(
        snapshot_months=snapshot_months,
        refresh_required=False,
        refresh_recommended=last_update != capture_month,
        last_update_month=last_update,
        last_update_label=month_label(store.season, last_update),
    )


def resolve_month_selection(classification: MonthClassification, selection: int) -> list[int]:
    """Months to fetch for a selection of 0 (all incomplete), a month, or 100 (none).

    Raises:
        ValueError: If the month is not in season or is already complete
    """
    if selection == SELECT_NONE:
        return []
    if selection == SELECT_ALL_INCOMPLETE:
        return classification.incomplete
    month = get_in_season_month(selection)
    if selection not in classification.incomplete:
        raise ValueError(f"{month.name} is already complete and will not be fetched again")
    return [selection]
