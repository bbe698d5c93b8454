"""
Periodic trigger spacing the probes of a single relay.

The first tick fires immediately, later ticks fire every ``period``
seconds. A tick that is late (because the previous probe, including its
timeout, outlasted the period) fires at once and the schedule restarts one
full period after it: ticks are delayed, never burst to catch up and never
skipped.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Callable


class IntervalTicker:
    """Fixed-period ticker with a delay policy for missed ticks.

    Examples:
        ```python
        ticker = IntervalTicker(1.0)
        for _ in range(4):
            await ticker.tick()
            await probe()
        ```
    """

    def __init__(self, period: float, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._period = period
        self._clock = clock
        self._next: float | None = None

    @property
    def period(self) -> float:
        """Seconds between consecutive ticks."""
        return self._period

    async def tick(self) -> float:
        """Wait for the next tick and return the clock time it fired at."""
        now = self._clock()
        deadline = now if self._next is None else self._next

        if deadline > now:
            await asyncio.sleep(deadline - now)
            fired = deadline
        else:
            # First or missed tick: fire now, schedule the next one a full period later
            fired = now

        self._next = fired + self._period
        return fired
