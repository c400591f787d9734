"""Persistence helpers for season artifacts."""

from .artifacts import ArtifactError, SeasonArtifactStore

__all__ = ["ArtifactError", "SeasonArtifactStore"]
