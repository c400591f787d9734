"""Tests for rate_limit.py module."""

from __future__ import annotations

import threading
from datetime import datetime
from unittest.mock import MagicMock

from birthday_scraper.rate_limit import RequestBudget


class TestRequestBudgetAcquire:
    """Tests for RequestBudget.acquire."""

    def test_counts_requests(self, budget, mock_sleep):
        """Each acquisition increments the counter without sleeping."""
        for _ in range(30):
            budget.acquire()
        assert budget.requests_made == 30
        mock_sleep.assert_not_called()

    def test_thirty_first_request_cools_down(self, budget, mock_sleep):
        """The 31st acquisition sleeps the cooldown and restarts the count."""
        for _ in range(31):
            budget.acquire()
        assert budget.requests_made == 1
        assert budget.cooldowns == 1
        slept = sum(call.args[0] for call in mock_sleep.call_args_list)
        assert slept == 61 * 60

    def test_cooldown_sleeps_in_notice_steps(self, mock_sleep):
        """61 minutes sleeps as six 10-minute steps then one minute."""
        budget = RequestBudget(sleep=mock_sleep, requests_made=30)
        budget.acquire()
        assert [call.args[0] for call in mock_sleep.call_args_list] == [600] * 6 + [60]

    def test_pre_tripped_budget(self, mock_sleep):
        """A budget created at its limit cools down on the next acquisition."""
        budget = RequestBudget(max_requests=2, cooldown_minutes=3, notice_minutes=1, sleep=mock_sleep, requests_made=2)
        budget.acquire()
        assert mock_sleep.call_count == 3
        assert budget.requests_made == 1

    def test_uses_clock_for_resume_time(self, mock_sleep):
        clock = MagicMock(return_value=datetime(2023, 1, 20, 9, 0))
        budget = RequestBudget(sleep=mock_sleep, clock=clock, requests_made=30)
        budget.acquire()
        clock.assert_called_once()


class TestRequestBudgetThreads:
    """Tests for concurrent acquisition."""

    def test_concurrent_acquisitions_are_counted(self, mock_sleep):
        budget = RequestBudget(max_requests=1000, sleep=mock_sleep)
        threads = [threading.Thread(target=lambda: [budget.acquire() for _ in range(50)]) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert budget.requests_made == 400

    def test_window_never_exceeds_limit(self, mock_sleep):
        """Across threads, one cooldown per 30 requests."""
        budget = RequestBudget(sleep=mock_sleep)
        threads = [threading.Thread(target=lambda: [budget.acquire() for _ in range(15)]) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert budget.cooldowns == 1
        assert budget.requests_made == 30
