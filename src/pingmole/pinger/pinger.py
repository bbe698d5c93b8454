"""
Concurrent TCP latency probing of relays.

[RelayPinger][pingmole.pinger.pinger.RelayPinger] runs the probe sequence
of one relay: ``count`` timed TCP connection attempts spaced by an
[IntervalTicker][pingmole.pinger.ticker.IntervalTicker], each bounded by
the per-probe timeout. Only successful connections are timed; refusals,
unreachable hosts, and timeouts are dropped without distinction.

[RelaysPinger][pingmole.pinger.pinger.RelaysPinger] fans out one task per
relay, joins them in completion order, and applies the ping-stage filters.
A task that crashes or is cancelled fails the whole batch.

Note:
    Probes open a bare TCP connection to
    [PROBE_PORT][pingmole.models.constants.PROBE_PORT] and close it
    immediately; no application data is sent or read. There is no overall
    batch deadline: the only timeout is the per-probe one.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from time import perf_counter
from typing import TYPE_CHECKING

from pingmole.core.exceptions import ProbeJoinError
from pingmole.filters.base import Filter, matches_all
from pingmole.models.constants import PROBE_PORT, FilterStage
from pingmole.models.timed_relay import TimedRelay

from .ticker import IntervalTicker


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pingmole.models.relay import Relay

    from .configs import ProbeConfig


logger = logging.getLogger("pingmole.pinger")


class RelayPinger:
    """Probe sequence for a single relay.

    Owns its relay and holds a read-only reference to the shared
    [ProbeConfig][pingmole.pinger.configs.ProbeConfig].
    """

    def __init__(self, relay: Relay, config: ProbeConfig) -> None:
        self._relay = relay
        self._config = config

    @property
    def relay(self) -> Relay:
        return self._relay

    async def execute(self) -> TimedRelay:
        """Run exactly ``count`` scheduled probes and collect their timings.

        Never raises for probe failures: a relay that never answers yields
        a [TimedRelay][pingmole.models.timed_relay.TimedRelay] with no
        timings.
        """
        ticker = IntervalTicker(self._config.interval)
        timings: list[float] = []

        for _ in range(self._config.count):
            await ticker.tick()
            rtt = await self._probe()
            if rtt is not None:
                timings.append(rtt)

        logger.debug(
            "relay_probed ip=%s success=%d count=%d",
            self._relay.ip,
            len(timings),
            self._config.count,
        )
        return TimedRelay(self._relay, tuple(timings))

    async def _probe(self) -> float | None:
        """Time one TCP connection attempt; ``None`` if it failed or timed out."""
        start = perf_counter()
        try:
            _reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self._relay.ip, PROBE_PORT),
                timeout=self._config.timeout,
            )
        except TimeoutError:
            logger.debug("probe_timeout ip=%s timeout_s=%s", self._relay.ip, self._config.timeout)
            return None
        except OSError as e:
            logger.debug("probe_failed ip=%s reason=%s", self._relay.ip, str(e))
            return None

        elapsed = perf_counter() - start

        writer.close()
        with contextlib.suppress(OSError):
            await writer.wait_closed()

        return elapsed


class RelaysPinger:
    """Probes many relays concurrently and keeps those passing the ping stage.

    Examples:
        ```python
        pinger = RelaysPinger(relays, ProbeConfig(count=4), [FilterByRtt(0.1)])
        admitted = await pinger.ping()
        ```
    """

    def __init__(
        self,
        relays: Sequence[Relay],
        config: ProbeConfig,
        filters: Iterable[Filter[TimedRelay]] = (),
    ) -> None:
        self._relays = list(relays)
        self._config = config
        self._filters = list(filters)

    async def ping(self) -> list[TimedRelay]:
        """Probe every relay and return the admitted results.

        Results are collected in task completion order, not submission
        order; callers rank them afterwards.

        Returns:
            Admitted [TimedRelay][pingmole.models.timed_relay.TimedRelay]
            values, unsorted.

        Raises:
            ProbeJoinError: If any prober task crashed or was cancelled.
                Remaining tasks are cancelled and no partial result is
                returned.
        """
        logger.debug("ping_started relays=%d count=%d", len(self._relays), self._config.count)

        tasks = {
            asyncio.create_task(
                RelayPinger(relay, self._config).execute(), name=f"ping-{relay.ip}"
            ): relay
            for relay in self._relays
        }

        admitted: list[TimedRelay] = []
        reachable = 0
        done: set[asyncio.Task[TimedRelay]] = set()
        pending: set[asyncio.Task[TimedRelay]] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    timed = self._join(task, tasks[task])
                    if timed.is_reachable:
                        reachable += 1
                    if matches_all(self._filters, timed, FilterStage.PING):
                        admitted.append(timed)
        finally:
            # Mark sibling failures in the last batch as retrieved
            for task in done:
                if not task.cancelled():
                    task.exception()
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        logger.debug(
            "ping_completed relays=%d reachable=%d admitted=%d",
            len(tasks),
            reachable,
            len(admitted),
        )
        return admitted

    @staticmethod
    def _join(task: asyncio.Task[TimedRelay], relay: Relay) -> TimedRelay:
        """Extract a finished task's result or raise ``ProbeJoinError``."""
        if task.cancelled():
            raise ProbeJoinError(f"prober for {relay.ip} was cancelled", ip=relay.ip)
        exc = task.exception()
        if exc is not None:
            raise ProbeJoinError(f"prober for {relay.ip} failed: {exc}", ip=relay.ip) from exc
        return task.result()
