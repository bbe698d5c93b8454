r"""pingmole -- find the VPN relays with the lowest round-trip time.

Loads a relay catalog, keeps the relays near the operator, measures TCP
connect round-trip times to each of them concurrently, and prints the
results as a ranked table.

Architecture follows a **diamond DAG** dependency structure where imports
flow strictly downward:

```text
                  app                  Pipeline and aggregate config
          /    /    |    \     \
   catalog pinger report filters utils Loading, probing, ranking, I/O helpers
          \    \    |    /     /
                 core                  Logging, exceptions, YAML
                  |
                models                 Pure frozen dataclasses (zero I/O)
```

Attributes:
    models: Coordinates, relays, timed relays, enums. Zero I/O.
    core: Structured logging, exception hierarchy, YAML loading.
    filters: Load-stage and ping-stage admission predicates.
    utils: Bounded HTTP JSON reads, operator location lookup.
    catalog: Relay catalog loading from the local cache or the API.
    pinger: Interval-paced TCP connect probing.
    report: Ranking and table rendering.
    app: The batch pipeline and its configuration.

Note:
    Top-level imports (``from pingmole import Pingmole``) use lazy loading
    and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("pingmole")

__all__ = [
    "Coord",
    "Logger",
    "Pingmole",
    "PingmoleConfig",
    "PingmoleError",
    "Protocol",
    "Relay",
    "RelaysLoader",
    "RelaysPinger",
    "Reporter",
    "SortBy",
    "TimedRelay",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Coord": ("pingmole.models", "Coord"),
    "Protocol": ("pingmole.models", "Protocol"),
    "Relay": ("pingmole.models", "Relay"),
    "SortBy": ("pingmole.models", "SortBy"),
    "TimedRelay": ("pingmole.models", "TimedRelay"),
    "Logger": ("pingmole.core", "Logger"),
    "PingmoleError": ("pingmole.core", "PingmoleError"),
    "RelaysLoader": ("pingmole.catalog", "RelaysLoader"),
    "RelaysPinger": ("pingmole.pinger", "RelaysPinger"),
    "Reporter": ("pingmole.report", "Reporter"),
    "Pingmole": ("pingmole.app", "Pingmole"),
    "PingmoleConfig": ("pingmole.app", "PingmoleConfig"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'pingmole' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
