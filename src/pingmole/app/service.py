"""
One batch run of the pingmole pipeline.

Stages, in order:

1. **Locate** -- use the configured position or fetch it
   ([resolve_location()][pingmole.utils.location.resolve_location]).
2. **Load** -- read the relay catalog and apply load-stage filters
   ([RelaysLoader][pingmole.catalog.loader.RelaysLoader]).
3. **Ping** -- probe every relay concurrently and apply ping-stage filters
   ([RelaysPinger][pingmole.pinger.pinger.RelaysPinger]).
4. **Rank** -- order the admitted results
   ([Reporter][pingmole.report.reporter.Reporter]).

Each stage reports its name through an optional ``on_stage`` callback so a
front end can show progress. Errors propagate as
[PingmoleError][pingmole.core.exceptions.PingmoleError] subclasses.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from pingmole.catalog.loader import RelaysLoader
from pingmole.core.exceptions import CatalogError
from pingmole.core.logger import Logger
from pingmole.pinger.pinger import RelaysPinger
from pingmole.report.reporter import Reporter
from pingmole.utils.location import resolve_location

from .configs import PingmoleConfig


if TYPE_CHECKING:
    from collections.abc import Callable

    from pingmole.models.coord import Coord
    from pingmole.models.relay import Relay
    from pingmole.models.timed_relay import TimedRelay


class Pingmole:
    """Runs locate, load, ping, and rank once.

    Examples:
        ```python
        app = Pingmole.from_yaml("pingmole.yaml")
        reporter = await app.run()
        reporter.report()
        ```
    """

    def __init__(
        self,
        config: PingmoleConfig | None = None,
        *,
        on_stage: Callable[[str], Any] | None = None,
    ) -> None:
        self._config = config if config is not None else PingmoleConfig()
        self._on_stage = on_stage
        self._logger = Logger("pingmole.app")

    @property
    def config(self) -> PingmoleConfig:
        """The validated configuration (read-only)."""
        return self._config

    @classmethod
    def from_yaml(cls, config_path: str, **kwargs: Any) -> Pingmole:
        return cls(PingmoleConfig.from_yaml(config_path), **kwargs)

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> Pingmole:
        return cls(PingmoleConfig.from_dict(data), **kwargs)

    def _stage(self, message: str) -> None:
        if self._on_stage is not None:
            self._on_stage(message)

    async def locate(self) -> Coord:
        self._stage("Getting current location")
        location = await resolve_location(self._config.location)
        self._logger.info(
            "location_resolved", latitude=location.latitude, longitude=location.longitude
        )
        return location

    async def load(self, location: Coord) -> list[Relay]:
        """Load the catalog and keep the relays passing the load stage.

        Raises:
            CatalogError: If the catalog cannot be loaded or no relay is left.
        """
        self._stage("Loading relays")
        loader = RelaysLoader(
            self._config.catalog, location, self._config.filters.load_filters()
        )
        relays = await loader.load()
        self._logger.info("relays_loaded", count=len(relays))
        if not relays:
            raise CatalogError("Couldn't find any relays")
        return relays

    async def ping(self, relays: list[Relay]) -> list[TimedRelay]:
        """Probe *relays* and keep those passing the ping stage.

        Raises:
            ProbeJoinError: If a prober task crashed or was cancelled.
        """
        self._stage("Pinging relays")
        probe = self._config.probe
        start = time.monotonic()
        pinger = RelaysPinger(relays, probe, self._config.filters.ping_filters())
        timed = await pinger.ping()
        self._logger.info(
            "relays_pinged",
            relays=len(relays),
            admitted=len(timed),
            count=probe.count,
            duration_s=round(time.monotonic() - start, 2),
        )
        return timed

    async def run(self) -> Reporter:
        """Execute all stages and return a reporter holding the ranked results."""
        location = await self.locate()
        relays = await self.load(location)
        timed = await self.ping(relays)

        reporter = Reporter(timed, self._config.report.sort_by)
        reporter.sort()
        return reporter
