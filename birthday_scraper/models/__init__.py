"""Common typed models shared across scrapers and services."""

from .schemas import (
    SELECT_ALL_INCOMPLETE,
    SELECT_NONE,
    BucketState,
    GameRecord,
    MonthClassification,
    PlayerBirthdayEntry,
    RosterStatus,
    RunConfig,
    RunSummary,
    SeasonStatisticsSummary,
    StatLine,
    StatOutcome,
)

__all__ = [
    "BucketState",
    "StatOutcome",
    "PlayerBirthdayEntry",
    "GameRecord",
    "StatLine",
    "MonthClassification",
    "RosterStatus",
    "SeasonStatisticsSummary",
    "RunConfig",
    "RunSummary",
    "SELECT_ALL_INCOMPLETE",
    "SELECT_NONE",
]
