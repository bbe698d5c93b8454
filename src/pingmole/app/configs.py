"""Application configuration models.

Aggregates the per-layer models into one
[PingmoleConfig][pingmole.app.configs.PingmoleConfig] that can be read from
YAML and overridden from the command line.

Examples:
    ```yaml
    location:
      latitude: 52.52
      longitude: 13.405
    catalog:
      source: file
      path: /var/cache/mullvad-vpn/relays.json
    filters:
      distance: 800
      protocol: wireguard
      rtt: 0.08
    probe:
      count: 6
      timeout: 0.5
      interval: 0.5
    report:
      sort_by: rtt-mean
    ```

See Also:
    [Pingmole][pingmole.app.service.Pingmole]: The pipeline that consumes
        this configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from pingmole.catalog.configs import CatalogConfig
from pingmole.core.exceptions import ConfigurationError
from pingmole.core.yaml import load_yaml
from pingmole.filters import FilterByDistance, FilterByProtocol, FilterByRtt
from pingmole.models.constants import Protocol, SortBy
from pingmole.pinger.configs import ProbeConfig
from pingmole.utils.location import LocationConfig


if TYPE_CHECKING:
    from pingmole.filters import Filter
    from pingmole.models.relay import Relay
    from pingmole.models.timed_relay import TimedRelay


class FiltersConfig(BaseModel):
    """Admission criteria for both pipeline stages."""

    distance: float = Field(default=500.0, gt=0.0, description="Maximum distance in km")
    protocol: Protocol | None = Field(default=None, description="Required protocol")
    rtt: float | None = Field(default=None, gt=0.0, description="Maximum mean RTT in seconds")

    def load_filters(self) -> list[Filter[Relay]]:
        """Filters applied to relays while loading the catalog."""
        return [FilterByDistance(self.distance), FilterByProtocol(self.protocol)]

    def ping_filters(self) -> list[Filter[TimedRelay]]:
        """Filters applied to timed relays after probing."""
        return [FilterByRtt(self.rtt)]


class ReportConfig(BaseModel):
    sort_by: SortBy = Field(default=SortBy.RTT_MEDIAN)


class PingmoleConfig(BaseModel):
    """Complete configuration for one batch run."""

    location: LocationConfig = Field(default_factory=LocationConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    probe: ProbeConfig = Field(default_factory=ProbeConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PingmoleConfig:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If validation fails.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from e

    @classmethod
    def from_yaml(cls, config_path: str) -> PingmoleConfig:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file is invalid.
        """
        return cls.from_dict(load_yaml(config_path))


def _describe(error: ValidationError) -> str:
    """Render a pydantic error as ``section.field: message; ...``."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
