"""Core layer providing the ambient infrastructure for pingmole.

Sits between ``pingmole.models`` and the I/O layers: depends on nothing but
the standard library and ``pyyaml``.

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][pingmole.core.logger.Logger].
    PingmoleError: Root of the exception hierarchy.
        See [PingmoleError][pingmole.core.exceptions.PingmoleError].
    YAML: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][pingmole.core.yaml.load_yaml].
"""

from .exceptions import (
    CatalogError,
    ConfigurationError,
    LocationError,
    PingmoleError,
    ProbeError,
    ProbeJoinError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "CatalogError",
    "ConfigurationError",
    "LocationError",
    "Logger",
    "PingmoleError",
    "ProbeError",
    "ProbeJoinError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
