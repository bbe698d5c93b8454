"""Relay catalog loading.

Attributes:
    CatalogConfig: Source, cache path, and API settings.
        See [CatalogConfig][pingmole.catalog.configs.CatalogConfig].
    RelaysLoader: Reads the catalog and applies load-stage filters.
        See [RelaysLoader][pingmole.catalog.loader.RelaysLoader].
    parse_cache, parse_api: Layout-specific parsers.
        See [pingmole.catalog.parsing][pingmole.catalog.parsing].
"""

from .configs import CatalogConfig, CatalogSource
from .loader import RelaysLoader, default_cache_path
from .parsing import parse_api, parse_cache, resolve_protocol


__all__ = [
    "CatalogConfig",
    "CatalogSource",
    "RelaysLoader",
    "default_cache_path",
    "parse_api",
    "parse_cache",
    "resolve_protocol",
]
