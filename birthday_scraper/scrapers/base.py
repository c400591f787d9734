"""Base class for Sports Reference scrapers gated by the request budget."""

from __future__ import annotations

import httpx

from ..config import settings
from ..logging import logger
from ..rate_limit import RequestBudget


class ScraperError(RuntimeError):
    """Raised when a scraper encounters an unrecoverable error."""


class BaseSportsReferenceScraper:
    """Shared utilities for fetching Sports Reference pages.

    Features:
    - One shared request budget per run (30 requests an hour)
    - A single attempt per page; a failed fetch is raised, never retried
    """

    base_url: str

    def __init__(
        self,
        budget: RequestBudget,
        *,
        base_url: str | None = None,
        timeout_seconds: int | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        scraper_config = settings.scraper_config
        self.budget = budget
        self.base_url = (base_url or scraper_config.base_url).rstrip("/")
        timeout = timeout_seconds or scraper_config.request_timeout_seconds
        self.client = client or httpx.Client(
            timeout=timeout,
            headers={
                "User-Agent": scraper_config.user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                "Accept-Language": "en-US,en;q=0.5",
            },
        )

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch_text(self, url: str) -> str:
        """Acquire from the budget, then fetch a page body."""
        self.budget.acquire()

        logger.info("fetching_url", url=url, requests_made=self.budget.requests_made)
        try:
            response = self.client.get(url, follow_redirects=True)
        except httpx.HTTPError as exc:
            raise ScraperError(f"Failed to fetch {url}: {exc}") from exc

        if response.status_code == 429:
            logger.warning("rate_limit_hit", url=url)
            raise ScraperError(f"Rate limited: {url} (429)")
        if response.status_code != 200:
            raise ScraperError(f"Failed to fetch {url} ({response.status_code})")
        return response.text

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "BaseSportsReferenceScraper":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
