"""
Operator location lookup.

Asks a "where am I" JSON endpoint (by default Mullvad's connection check)
for the caller's latitude and longitude. Only used when the position was
not given explicitly.
"""

from __future__ import annotations

import logging

import aiohttp
from pydantic import BaseModel, Field, model_validator

from pingmole.core.exceptions import LocationError
from pingmole.models.coord import Coord

from .http import fetch_json


logger = logging.getLogger("pingmole.utils")

DEFAULT_LOCATION_URL = "https://am.i.mullvad.net/json"


class LocationConfig(BaseModel):
    """Where the operator's position comes from.

    When both ``latitude`` and ``longitude`` are set no request is made.
    """

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    url: str = Field(default=DEFAULT_LOCATION_URL)
    timeout: float = Field(default=10.0, gt=0.0, description="Request timeout in seconds")

    @model_validator(mode="after")
    def validate_coordinates_pair(self) -> LocationConfig:
        """Latitude and longitude must be given together."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together")
        return self

    @property
    def coord(self) -> Coord | None:
        """The explicit position, or ``None`` if it must be fetched."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coord(self.latitude, self.longitude)


async def fetch_location(url: str = DEFAULT_LOCATION_URL, timeout: float = 10.0) -> Coord:  # noqa: ASYNC109
    """Fetch the caller's coordinates from *url*.

    Raises:
        LocationError: If the request fails, the body is not JSON, or it
            lacks numeric ``latitude``/``longitude`` fields.
    """
    logger.debug("location_fetch_started url=%s", url)
    try:
        data = await fetch_json(url, timeout=timeout)
    except (aiohttp.ClientError, TimeoutError) as e:
        raise LocationError(f"Failed to fetch coordinates: {e}") from e
    except ValueError as e:
        raise LocationError(f"Failed to parse response: {e}") from e

    if not isinstance(data, dict):
        raise LocationError("Failed to get latitude and longitude from the response")

    latitude = data.get("latitude")
    longitude = data.get("longitude")
    if not _is_number(latitude) or not _is_number(longitude):
        raise LocationError("Failed to get latitude and longitude from the response")

    coord = Coord(float(latitude), float(longitude))
    logger.debug("location_fetched latitude=%s longitude=%s", coord.latitude, coord.longitude)
    return coord


async def resolve_location(config: LocationConfig) -> Coord:
    """Return the configured position, fetching it when not set."""
    return config.coord or await fetch_location(config.url, config.timeout)


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
