"""Explicit per-run state passed to every fetch-capable operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .config import Settings, settings as default_settings
from .persistence.artifacts import SeasonArtifactStore
from .rate_limit import RequestBudget
from .utils.date_utils import current_season
from .utils.datetime_utils import today_et


@dataclass
class RunContext:
    season: int
    today: date
    budget: RequestBudget
    data_root: Path
    max_concurrency: int = 4
    artifacts: SeasonArtifactStore = field(init=False)

    def __post_init__(self) -> None:
        self.artifacts = SeasonArtifactStore(self.data_root, self.season)


def create_run_context(
    season: int | None = None,
    today: date | None = None,
    budget: RequestBudget | None = None,
    config: Settings | None = None,
) -> RunContext:
    """Build a run context from settings, defaulting to the current season."""
    config = config or default_settings
    today = today or today_et()
    scraper_config = config.scraper_config
    if budget is None:
        budget = RequestBudget(
            max_requests=scraper_config.max_requests_per_window,
            cooldown_minutes=scraper_config.cooldown_minutes,
            notice_minutes=scraper_config.cooldown_notice_minutes,
        )
    return RunContext(
        season=season if season is not None else current_season(today),
        today=today,
        budget=budget,
        data_root=Path(config.data_root),
        max_concurrency=scraper_config.max_concurrency,
    )
