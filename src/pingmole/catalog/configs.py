"""Relay catalog configuration models.

See Also:
    [RelaysLoader][pingmole.catalog.loader.RelaysLoader]: The loader that
        consumes this configuration.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

from pingmole.utils.http import DEFAULT_MAX_SIZE


DEFAULT_API_URL = "https://api.mullvad.net/app/v1/relays"


class CatalogSource(StrEnum):
    """Where the relay catalog is read from.

    Attributes:
        AUTO: The local cache file if it exists, otherwise the remote API.
        FILE: The local cache file only.
        API: The remote API only.
    """

    AUTO = "auto"
    FILE = "file"
    API = "api"


class CatalogConfig(BaseModel):
    """Catalog source, cache path, and API settings.

    ``path`` defaults to the VPN client's platform-specific cache file
    (see [default_cache_path()][pingmole.catalog.loader.default_cache_path]).
    """

    source: CatalogSource = Field(default=CatalogSource.AUTO)
    path: Path | None = Field(default=None, description="Relay cache file")
    api_url: str = Field(default=DEFAULT_API_URL)
    timeout: float = Field(default=10.0, gt=0.0, description="API timeout in seconds")
    max_size: int = Field(
        default=DEFAULT_MAX_SIZE,
        ge=1024,
        description="Maximum API response size in bytes",
    )
