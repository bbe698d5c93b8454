"""
Unit tests for models.timed_relay module.

Tests:
- Timings stored as an immutable tuple
- is_reachable property
- rtt_mean() and rtt_median() statistics
- Undefined statistics without timings
"""

import pytest

from pingmole.models import Relay, TimedRelay


class TestConstruction:
    """TimedRelay construction."""

    def test_default_timings_empty(self, relay: Relay) -> None:
        assert TimedRelay(relay).timings == ()

    def test_list_coerced_to_tuple(self, relay: Relay) -> None:
        timed = TimedRelay(relay, [0.1, 0.2])  # type: ignore[arg-type]
        assert timed.timings == (0.1, 0.2)
        assert isinstance(timed.timings, tuple)

    def test_timings_keep_order(self, relay: Relay) -> None:
        assert TimedRelay(relay, (0.3, 0.1, 0.2)).timings == (0.3, 0.1, 0.2)


class TestReachable:
    """is_reachable property."""

    def test_with_timings(self, timed_relay: TimedRelay) -> None:
        assert timed_relay.is_reachable is True

    def test_without_timings(self, unreachable_relay: TimedRelay) -> None:
        assert unreachable_relay.is_reachable is False


class TestRttMean:
    """rtt_mean() arithmetic mean."""

    def test_mean(self, timed_relay: TimedRelay) -> None:
        assert timed_relay.rtt_mean() == pytest.approx(0.2)

    def test_single_timing(self, relay: Relay) -> None:
        assert TimedRelay(relay, (0.05,)).rtt_mean() == 0.05

    def test_undefined_without_timings(self, unreachable_relay: TimedRelay) -> None:
        assert unreachable_relay.rtt_mean() is None


class TestRttMedian:
    """rtt_median() middle value."""

    def test_odd_count(self, relay: Relay) -> None:
        assert TimedRelay(relay, (0.3, 0.1, 0.2)).rtt_median() == 0.2

    def test_even_count_averages_middle(self, relay: Relay) -> None:
        assert TimedRelay(relay, (0.4, 0.1, 0.3, 0.2)).rtt_median() == pytest.approx(0.25)

    def test_robust_to_outlier(self, relay: Relay) -> None:
        timed = TimedRelay(relay, (0.01, 0.01, 0.01, 0.7))
        assert timed.rtt_median() == pytest.approx(0.01)
        assert timed.rtt_mean() == pytest.approx(0.1825)

    def test_undefined_without_timings(self, unreachable_relay: TimedRelay) -> None:
        assert unreachable_relay.rtt_median() is None
