"""Sports Reference scrapers."""

from __future__ import annotations

from .base import BaseSportsReferenceScraper, ScraperError
from .nba_sportsref import NBASportsReferenceScraper

__all__ = [
    "BaseSportsReferenceScraper",
    "ScraperError",
    "NBASportsReferenceScraper",
]
