"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os
import sys
import time
from datetime import date, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the package is importable without installing it
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Set required environment variables before any imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")


from birthday_scraper.context import RunContext
from birthday_scraper.rate_limit import RequestBudget


def set_written_on(path: Path, day: date) -> None:
    """Set a file's modification time to noon on a given day."""
    stamp = time.mktime(datetime(day.year, day.month, day.day, 12, 0).timetuple())
    os.utime(path, (stamp, stamp))


def roster_row(player: str, slug: str, birth_date: str, csk: str = "20000101") -> str:
    """A roster table row as served by Basketball Reference."""
    return (
        f'<tr ><th scope="row" class="center " data-stat="number" >1</th>'
        f'<td class="left " data-append-csv="{slug}" data-stat="player" csk="{player}" >'
        f'<a href="/players/{slug[0]}/{slug}.html">{player}</a></td>'
        f'<td class="center " data-stat="pos" >G</td>'
        f'<td class="left " data-stat="birth_date" csk="{csk}" >{birth_date}</td></tr>'
    )


def schedule_row(day_text: str, visitor: str, home: str, visitor_pts: str = "", home_pts: str = "",
                 month: int = 1, year: int = 2023) -> str:
    """A schedule table row; empty points for games not yet played."""
    return (
        f'<tr ><th scope="row" class="left " data-stat="date_game" csk="{year}{month:02d}{int(day_text):02d}" >'
        f'<a href="/boxscores/index.fcgi?month={month}&day={day_text}&year={year}">Sun, Jan {day_text}, {year}</a></th>'
        f'<td class="right" data-stat="game_start_time" >7:30p</td>'
        f'<td class="left " data-stat="visitor_team_name" csk="{visitor}"><a href="/teams/{visitor}/2023.html">Visitors</a></td>'
        f'<td class="right " data-stat="visitor_pts" >{visitor_pts}</td>'
        f'<td class="left " data-stat="home_team_name" csk="{home}"><a href="/teams/{home}/2023.html">Hosts</a></td>'
        f'<td class="right " data-stat="home_pts" >{home_pts}</td></tr>'
    )


def box_score_row(player: str, slug: str, mp: str = "34:12", pts: str = "30", fg: str = "10",
                  fga: str = "22", trb: str = "4", ast: str = "11") -> str:
    return (
        f'<tr ><th scope="row" class="left " data-append-csv="{slug}" data-stat="player" csk="{player}" >'
        f'<a href="/players/{slug[0]}/{slug}.html">{player}</a></th>'
        f'<td class="right " data-stat="mp" >{mp}</td>'
        f'<td class="right " data-stat="fg" >{fg}</td>'
        f'<td class="right " data-stat="fga" >{fga}</td>'
        f'<td class="right " data-stat="trb" >{trb}</td>'
        f'<td class="right " data-stat="ast" >{ast}</td>'
        f'<td class="right " data-stat="pts" >{pts}</td></tr>'
    )


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    client = MagicMock()
    client.get.return_value = MagicMock(status_code=200, text="")
    return client


@pytest.fixture
def mock_sleep():
    return MagicMock()


@pytest.fixture
def budget(mock_sleep):
    """A request budget that never actually sleeps."""
    return RequestBudget(sleep=mock_sleep, clock=lambda: datetime(2023, 1, 20, 9, 0))


@pytest.fixture
def make_context(tmp_path, budget):
    """Factory for run contexts rooted in a temporary data directory."""

    def _make(season: int = 2023, today: date = date(2023, 1, 20), max_concurrency: int = 2) -> RunContext:
        return RunContext(
            season=season,
            today=today,
            budget=budget,
            data_root=tmp_path,
            max_concurrency=max_concurrency,
        )

    return _make
