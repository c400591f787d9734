"""Pydantic models used by the scraper, services and run manager."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..config_nba import IN_SEASON_MONTHS


BucketState = Literal["missing", "partial", "complete"]
StatOutcome = Literal["played", "did_not_play", "did_not_dress", "unavailable"]

# Selection sentinels accepted by the run manager and CLI
SELECT_ALL_INCOMPLETE = 0
SELECT_NONE = 100


class PlayerBirthdayEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_name: str
    birth_year: int


class GameRecord(BaseModel):
    """One scheduled game; scores are set only once the game is in the past."""

    model_config = ConfigDict(frozen=True)

    game_date: date
    visitor: str
    home: str
    visitor_points: int | None = None
    home_points: int | None = None

    @property
    def day(self) -> int:
        return self.game_date.day

    @property
    def final_score(self) -> tuple[int, int] | None:
        if self.visitor_points is None or self.home_points is None:
            return None
        return self.visitor_points, self.home_points


class StatLine(BaseModel):
    """A birthday player's box-score line, or the reason there is none."""

    model_config = ConfigDict(frozen=True)

    outcome: StatOutcome = "played"
    minutes: str | None = None
    points: int | None = None
    field_goals_made: int | None = None
    field_goals_attempted: int | None = None
    rebounds: int | None = None
    assists: int | None = None

    @classmethod
    def did_not_play(cls) -> "StatLine":
        return cls(outcome="did_not_play")

    @classmethod
    def did_not_dress(cls) -> "StatLine":
        return cls(outcome="did_not_dress")

    @classmethod
    def unavailable(cls) -> "StatLine":
        return cls(outcome="unavailable")

    def annotation(self) -> str:
        """Parenthesised report suffix; empty when the line is unavailable."""
        if self.outcome == "did_not_play":
            return " (DNP)"
        if self.outcome == "did_not_dress":
            return " (DND)"
        if self.outcome == "unavailable":
            return ""
        return (
            f" ({self.minutes} mp, {self.points} pts, "
            f"{self.field_goals_made}/{self.field_goals_attempted} fga, "
            f"{self.rebounds} reb, {self.assists} ast)"
        )


class MonthClassification(BaseModel):
    """Bucket state of every in-season month for one season, in season order."""

    season: int
    states: dict[int, BucketState]
    season_dir_created: bool = False

    def months_in(self, state: BucketState) -> list[int]:
        return [month for month, s in self.states.items() if s == state]

    @property
    def missing(self) -> list[int]:
        return self.months_in("missing")

    @property
    def partial(self) -> list[int]:
        return self.months_in("partial")

    @property
    def complete(self) -> list[int]:
        return self.months_in("complete")

    @property
    def incomplete(self) -> list[int]:
        """Missing and partial months in season order; the only fetchable months."""
        return [month for month, s in self.states.items() if s != "complete"]

    def month_names(self, months: list[int]) -> list[str]:
        return [IN_SEASON_MONTHS[m].name for m in months]


class RosterStatus(BaseModel):
    """Aggregate freshness of the locally saved team roster snapshots."""

    snapshot_months: dict[str, list[int]]
    refresh_required: bool
    refresh_recommended: bool
    last_update_month: int | None = None
    last_update_label: str | None = None

    @property
    def teams_without_snapshot(self) -> list[str]:
        return [team for team, months in self.snapshot_months.items() if not months]


class SeasonStatisticsSummary(BaseModel):
    as_of: date
    wins: int = 0
    losses: int = 0
    field_goals_made: int = 0
    field_goals_attempted: int = 0
    birthday_fg_pct: str | None = None
    league_average_fg_pct: str | None = None
    complete_months: list[int] = Field(default_factory=list)
    partial_months: list[int] = Field(default_factory=list)

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"


class RunConfig(BaseModel):
    """Choices the caller makes for one season run.

    ``refresh_rosters`` of None refreshes only when a snapshot is missing.
    ``month_selection`` is 0 for every incomplete month, a month number for
    one incomplete month, or 100 for none.
    """

    season: int | None = None
    refresh_rosters: bool | None = None
    month_selection: int = SELECT_ALL_INCOMPLETE
    gather_statistics: bool = True


class RunSummary(BaseModel):
    season: int
    classification: MonthClassification
    roster_status: RosterStatus
    rosters_refreshed: bool = False
    months_written: list[int] = Field(default_factory=list)
    months_up_to_date: list[int] = Field(default_factory=list)
    statistics: SeasonStatisticsSummary | None = None
