"""
Relay paired with the RTTs of its successful probes.

Built exactly once per relay by
[RelayPinger][pingmole.pinger.pinger.RelayPinger] after all of its probes
have completed, and immutable afterwards.
"""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field

from .relay import Relay  # noqa: TC001


@dataclass(frozen=True, slots=True)
class TimedRelay:
    """A [Relay][pingmole.models.relay.Relay] and its successful probe timings.

    Attributes:
        relay: The probed relay.
        timings: Round-trip times in seconds, one per successful probe, in
            chronological order. Failed and timed-out probes are not
            represented. Empty when the relay never answered.

    Examples:
        ```python
        timed = TimedRelay(relay, (0.1, 0.3))
        timed.rtt_mean()    # 0.2
        timed.rtt_median()  # 0.2
        TimedRelay(relay).rtt_mean()  # None
        ```
    """

    relay: Relay
    timings: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple
        object.__setattr__(self, "timings", tuple(self.timings))

    @property
    def is_reachable(self) -> bool:
        """Whether at least one probe succeeded."""
        return bool(self.timings)

    def rtt_mean(self) -> float | None:
        """Arithmetic mean RTT in seconds, or ``None`` without timings."""
        if not self.timings:
            return None
        return statistics.fmean(self.timings)

    def rtt_median(self) -> float | None:
        """Median RTT in seconds, or ``None`` without timings.

        For an even number of timings the two middle values are averaged.
        """
        if not self.timings:
            return None
        return statistics.median(self.timings)
