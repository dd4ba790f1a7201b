"""
Tests for tilesnake.scheduler - fixed-delay tick accounting.
"""

import pytest

from tilesnake.scheduler import TickScheduler


class TestTickScheduler:
    """Tests for TickScheduler.feed()."""

    def test_partial_interval_carries_over(self):
        """Time below one interval is kept until it adds up to a tick."""
        scheduler = TickScheduler(delay_ms=250)
        assert scheduler.feed(0.125) == 0
        assert scheduler.feed(0.125) == 1
        assert scheduler.feed(0.125) == 0

    def test_several_ticks_in_one_frame(self):
        """A long frame releases every whole interval it covers."""
        scheduler = TickScheduler(delay_ms=250, max_catch_up=5)
        assert scheduler.feed(0.75) == 3

    def test_backlog_is_capped(self):
        """After a stall at most max_catch_up ticks run and the rest is dropped."""
        scheduler = TickScheduler(delay_ms=250, max_catch_up=2)
        assert scheduler.feed(10.0) == 2
        assert scheduler.feed(0.0) == 0

    def test_reset_discards_accumulated_time(self):
        """reset() starts the next interval from zero."""
        scheduler = TickScheduler(delay_ms=250)
        scheduler.feed(0.125)
        scheduler.reset()
        assert scheduler.feed(0.125) == 0

    def test_interval_in_seconds(self):
        """interval exposes the delay in seconds."""
        assert TickScheduler(delay_ms=60).interval == pytest.approx(0.06)

    @pytest.mark.parametrize("kwargs", [
        {"delay_ms": 0},
        {"delay_ms": -5},
        {"max_catch_up": 0},
    ])
    def test_invalid_settings(self, kwargs):
        """Non-positive delays and catch-up limits are rejected."""
        with pytest.raises(ValueError):
            TickScheduler(**kwargs)

    def test_negative_elapsed_time(self):
        """Time never runs backwards."""
        with pytest.raises(ValueError):
            TickScheduler().feed(-0.1)
