"""Batch pipeline and its configuration.

Attributes:
    Pingmole: Runs locate, load, ping, and rank once.
        See [Pingmole][pingmole.app.service.Pingmole].
    PingmoleConfig: Aggregate configuration model.
        See [PingmoleConfig][pingmole.app.configs.PingmoleConfig].
"""

from .configs import FiltersConfig, PingmoleConfig, ReportConfig
from .service import Pingmole


__all__ = [
    "FiltersConfig",
    "Pingmole",
    "PingmoleConfig",
    "ReportConfig",
]
