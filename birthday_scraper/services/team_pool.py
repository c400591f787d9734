"""Bounded per-team fan-out with a join barrier."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, TypeVar

from ..logging import logger

T = TypeVar("T")


def run_per_team(task: Callable[[str], T], teams: Iterable[str], max_workers: int) -> dict[str, T]:
    """Run ``task(team)`` for every team on a worker pool.

    Results come back keyed in the order the teams were given. The first
    failure cancels tasks that have not started and is re-raised once the
    running ones finish.
    """
    ordered = list(teams)
    results: dict[str, T] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(task, team): team for team in ordered}
        for future in as_completed(futures):
            team = futures[future]
            try:
                results[team] = future.result()
            except Exception as exc:
                logger.error("team_task_failed", team=team, error=str(exc))
                executor.shutdown(wait=True, cancel_futures=True)
                raise
    return {team: results[team] for team in ordered}
