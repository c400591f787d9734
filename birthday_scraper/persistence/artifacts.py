"""Flat text artifacts for one season.

Stores everything a run produces in a structured directory:
  {data_root}/Season{season}/{MonthName}.txt
  {data_root}/Season{season}/AllInSeasonBirthdaysAllTeams.txt
  {data_root}/Season{season}/Statistics.txt
  {data_root}/Season{season}/TeamRosters/{TEAM}{month}.txt

The files are the only durable state; freshness is read from their
modification dates, so there is no embedded version or checksum.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from ..config_nba import IN_SEASON_MONTHS
from ..logging import logger
from ..utils.datetime_utils import modified_date

ROSTERS_DIRNAME = "TeamRosters"
BIRTHDAYS_FILENAME = "AllInSeasonBirthdaysAllTeams.txt"
STATISTICS_FILENAME = "Statistics.txt"


class ArtifactError(RuntimeError):
    """Raised when a season artifact cannot be created, read or written."""


class SeasonArtifactStore:
    """Paths and file I/O for one season's artifact tree."""

    def __init__(self, data_root: str | Path, season: int) -> None:
        self.data_root = Path(data_root)
        self.season = season
        self.season_dir = self.data_root / f"Season{season}"
        self.rosters_dir = self.season_dir / ROSTERS_DIRNAME

    def month_path(self, month: int) -> Path:
        return self.season_dir / f"{IN_SEASON_MONTHS[month].name}.txt"

    def roster_path(self, team: str, month: int) -> Path:
        return self.rosters_dir / f"{team}{month}.txt"

    @property
    def birthdays_path(self) -> Path:
        return self.season_dir / BIRTHDAYS_FILENAME

    @property
    def statistics_path(self) -> Path:
        return self.season_dir / STATISTICS_FILENAME

    def season_dir_exists(self) -> bool:
        return self.season_dir.is_dir()

    def rosters_dir_exists(self) -> bool:
        return self.rosters_dir.is_dir()

    def ensure_season_dir(self) -> bool:
        """Create the season directory; returns True if it did not exist."""
        return self._ensure_dir(self.season_dir)

    def ensure_rosters_dir(self) -> bool:
        """Create the roster snapshot directory; returns True if it did not exist."""
        return self._ensure_dir(self.rosters_dir)

    def _ensure_dir(self, path: Path) -> bool:
        if path.is_dir():
            return False
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactError(f"Cannot create directory {path}: {exc}") from exc
        logger.info("artifact_directory_created", path=str(path), season=self.season)
        return True

    def modified_date(self, path: Path) -> date | None:
        """Date the artifact was last written, or None if it does not exist."""
        if not path.is_file():
            return None
        return modified_date(path)

    def roster_months(self, team: str) -> list[int]:
        """Months with a saved roster snapshot for a team, in season order."""
        return [month for month in IN_SEASON_MONTHS if self.roster_path(team, month).is_file()]

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ArtifactError(f"Cannot read {path}: {exc}") from exc

    def write_text(self, path: Path, content: str) -> Path:
        """Replace an artifact's contents, creating parent directories."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ArtifactError(f"Cannot write {path}: {exc}") from exc
        logger.info("artifact_saved", path=str(path), size_kb=len(content) // 1024, season=self.season)
        return path
