"""Concurrent relay latency probing.

Attributes:
    ProbeConfig: Immutable probe schedule (count, timeout, interval).
        See [ProbeConfig][pingmole.pinger.configs.ProbeConfig].
    IntervalTicker: Fixed-period trigger with delayed missed ticks.
        See [IntervalTicker][pingmole.pinger.ticker.IntervalTicker].
    RelayPinger: Probe sequence for one relay.
    RelaysPinger: Fan-out, join, and ping-stage filtering.
        See [RelaysPinger][pingmole.pinger.pinger.RelaysPinger].
"""

from .configs import ProbeConfig
from .pinger import RelayPinger, RelaysPinger
from .ticker import IntervalTicker


__all__ = [
    "IntervalTicker",
    "ProbeConfig",
    "RelayPinger",
    "RelaysPinger",
]
