"""Incremental NBA birthday-games scraper for basketball-reference.com."""

__version__ = "0.1.0"
