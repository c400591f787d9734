"""Request budget for basketball-reference.com.

The site answers 429 once a client passes 30 requests in an hour, so every
fetch first acquires from a shared budget. When the window is spent the
caller sleeps through a cooldown and the window starts over.
"""

from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta
from typing import Callable

from .logging import logger

SECONDS_PER_MINUTE = 60


class RequestBudget:
    """Process-wide count of remote requests in the current window.

    Thread safe: the counter is only read and written under a lock, and a
    caller that trips the limit holds the lock for the whole cooldown so
    concurrent callers queue behind it.
    """

    def __init__(
        self,
        max_requests: int = 30,
        cooldown_minutes: int = 61,
        notice_minutes: int = 10,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = datetime.now,
        requests_made: int = 0,
    ) -> None:
        self.max_requests = max_requests
        self.cooldown_minutes = cooldown_minutes
        self.notice_minutes = notice_minutes
        self._sleep = sleep
        self._clock = clock
        self._requests_made = requests_made
        self._cooldowns = 0
        self._lock = threading.Lock()

    @property
    def requests_made(self) -> int:
        with self._lock:
            return self._requests_made

    @property
    def cooldowns(self) -> int:
        """Number of cooldowns served so far."""
        with self._lock:
            return self._cooldowns

    def acquire(self) -> None:
        """Reserve one request, first sleeping out a cooldown if the window is spent."""
        with self._lock:
            if self._requests_made >= self.max_requests:
                self._cool_down()
                self._requests_made = 0
            self._requests_made += 1

    def _cool_down(self) -> None:
        remaining = self.cooldown_minutes
        resume_at = self._clock() + timedelta(minutes=remaining)
        logger.warning(
            "request_budget_cooldown",
            requests_made=self._requests_made,
            wait_minutes=remaining,
            resume_at=resume_at.strftime("%I:%M %p"),
        )
        while remaining > self.notice_minutes:
            self._sleep(self.notice_minutes * SECONDS_PER_MINUTE)
            remaining -= self.notice_minutes
            logger.info("request_budget_cooldown_progress", minutes_remaining=remaining)
        self._sleep(remaining * SECONDS_PER_MINUTE)
        self._cooldowns += 1
        logger.info("request_budget_resumed", cooldowns=self._cooldowns)
