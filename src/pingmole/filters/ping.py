"""
Ping-stage filters evaluated against timed relays after probing.
"""

from __future__ import annotations

from typing import ClassVar

from pingmole.models.constants import FilterStage
from pingmole.models.timed_relay import TimedRelay

from .base import Filter


class FilterByRtt(Filter[TimedRelay]):
    """Admits timed relays whose mean RTT is at most ``max_rtt`` seconds.

    Note:
        The two "no data" cases differ:

        - ``max_rtt is None``: every relay is admitted, including relays
          that never answered.
        - ``max_rtt`` set and no successful probe: the mean is undefined
          and the relay is rejected, so unreachable relays are never
          ranked by latency.
    """

    STAGE: ClassVar[FilterStage] = FilterStage.PING

    def __init__(self, max_rtt: float | None = None) -> None:
        self.max_rtt = max_rtt

    def matches(self, item: TimedRelay) -> bool:
        if self.max_rtt is None:
            return True
        mean = item.rtt_mean()
        return mean is not None and mean <= self.max_rtt
