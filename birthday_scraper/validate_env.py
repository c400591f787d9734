"""Fail-fast environment validation for the birthday scraper."""

from __future__ import annotations

import os
from functools import lru_cache
from urllib.parse import urlparse


ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


def _validate_environment_value(environment: str) -> None:
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def _validate_remote_url(name: str, value: str) -> None:
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"}:
        raise RuntimeError(f"{name} must be an http(s) URL.")
    if not parsed.hostname:
        raise RuntimeError(f"{name} must be a valid URL (missing hostname).")


def _validate_data_root(value: str) -> None:
    if not value.strip():
        raise RuntimeError("DATA_ROOT must not be blank when set.")


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before the first run starts."""
    environment = os.getenv("ENVIRONMENT", "development").strip()
    _validate_environment_value(environment)

    base_url = os.getenv("SCRAPER_BASE_URL")
    if base_url is not None:
        _validate_remote_url("SCRAPER_BASE_URL", base_url.strip())

    data_root = os.getenv("DATA_ROOT")
    if data_root is not None:
        _validate_data_root(data_root)
