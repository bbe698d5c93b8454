"""
Relay catalog loading with load-stage filtering.

[RelaysLoader][pingmole.catalog.loader.RelaysLoader] reads the catalog from
the VPN client's cache file or the public API, computes each relay's
distance from the operator, and keeps the relays admitted by every
load-stage filter. All I/O and parsing errors surface here as
[CatalogError][pingmole.core.exceptions.CatalogError], before any probing
starts.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiohttp

from pingmole.core.exceptions import CatalogError
from pingmole.filters.base import Filter, matches_all
from pingmole.models.constants import FilterStage
from pingmole.models.relay import Relay
from pingmole.utils.http import fetch_json

from .configs import CatalogConfig, CatalogSource
from .parsing import parse_api, parse_cache


if TYPE_CHECKING:
    from collections.abc import Iterable

    from pingmole.models.coord import Coord


logger = logging.getLogger("pingmole.catalog")

_CACHE_PATHS: dict[str, str] = {
    "linux": "/var/cache/mullvad-vpn/relays.json",
    "darwin": "/Library/Caches/mullvad-vpn/relays.json",
    "win32": "C:/ProgramData/Mullvad VPN/cache/relays.json",
}


def default_cache_path(platform: str = sys.platform) -> Path:
    """Return the VPN client's relay cache path for *platform*.

    Raises:
        CatalogError: If the platform has no known cache location.
    """
    path = _CACHE_PATHS.get(platform)
    if path is None:
        raise CatalogError(f"Unsupported system: {platform}")
    return Path(path)


class RelaysLoader:
    """Loads relays from the configured source and applies load-stage filters.

    Examples:
        ```python
        loader = RelaysLoader(
            CatalogConfig(source="file"),
            location=Coord(52.52, 13.405),
            filters=[FilterByDistance(500), FilterByProtocol(Protocol.WIREGUARD)],
        )
        relays = await loader.load()
        ```
    """

    def __init__(
        self,
        config: CatalogConfig,
        location: Coord,
        filters: Iterable[Filter[Relay]] = (),
    ) -> None:
        self._config = config
        self._location = location
        self._filters = list(filters)

    async def load(self) -> list[Relay]:
        """Read the catalog and return the admitted relays in catalog order.

        Raises:
            CatalogError: If the catalog cannot be read, fetched, or parsed.
        """
        relays = await self._read()
        admitted = [r for r in relays if matches_all(self._filters, r, FilterStage.LOAD)]
        logger.debug("relays_loaded total=%d admitted=%d", len(relays), len(admitted))
        return admitted

    async def _read(self) -> list[Relay]:
        source = self._config.source

        if source == CatalogSource.API:
            return await self._read_api()

        path = self._config.path
        if path is None:
            try:
                path = default_cache_path()
            except CatalogError:
                if source == CatalogSource.FILE:
                    raise

        if source == CatalogSource.AUTO and (path is None or not path.exists()):
            logger.debug("relay_cache_missing path=%s fallback=api", path)
            return await self._read_api()

        assert path is not None  # noqa: S101  # FILE source re-raised above
        return await self._read_file(path)

    async def _read_file(self, path: Path) -> list[Relay]:
        logger.debug("relay_cache_reading path=%s", path)
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise CatalogError(f"Failed to read the relay file: {path}") from e

        # UnicodeDecodeError is a ValueError
        try:
            data: Any = json.loads(raw)
        except ValueError as e:
            raise CatalogError(f"Failed to parse the relay file: {e}") from e

        return parse_cache(data, self._location)

    async def _read_api(self) -> list[Relay]:
        url = self._config.api_url
        logger.debug("relay_api_fetching url=%s", url)
        try:
            data = await fetch_json(url, timeout=self._config.timeout, max_size=self._config.max_size)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise CatalogError(f"Failed to fetch relays from {url}: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Failed to parse relays from {url}: {e}") from e

        return parse_api(data, self._location)
