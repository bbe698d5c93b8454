"""pingmole exception hierarchy.

Typed exceptions for every error category the pipeline can surface.
Transient per-probe failures (refused connections, timeouts) are absorbed
inside [RelayPinger][pingmole.pinger.pinger.RelayPinger] and never appear
here.

Exception hierarchy:

```text
PingmoleError (base -- never raised directly)
├── ConfigurationError   -- invalid config file or CLI flag combination
├── LocationError        -- operator position could not be determined
├── CatalogError         -- relay catalog missing, unreadable, or malformed
└── ProbeError           -- structural probing failures
    └── ProbeJoinError   -- a prober task crashed or was cancelled
```

See Also:
    [RelaysPinger.ping()][pingmole.pinger.pinger.RelaysPinger.ping]: Raises
        [ProbeJoinError][pingmole.core.exceptions.ProbeJoinError].
    [RelaysLoader][pingmole.catalog.loader.RelaysLoader]: Raises
        [CatalogError][pingmole.core.exceptions.CatalogError].
    [fetch_location()][pingmole.utils.location.fetch_location]: Raises
        [LocationError][pingmole.core.exceptions.LocationError].
"""

from __future__ import annotations


class PingmoleError(Exception):
    """Base exception for all pingmole errors.

    Never raised directly -- always use a specific subclass. The CLI
    catches this class as its error boundary.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(PingmoleError):
    """Invalid or missing configuration (YAML file or CLI flags)."""


# ---------------------------------------------------------------------------
# Upstream collaborators
# ---------------------------------------------------------------------------


class LocationError(PingmoleError):
    """The operator's position could not be fetched or parsed."""


class CatalogError(PingmoleError):
    """The relay catalog could not be read, fetched, or parsed.

    Raised before any probing starts; the core never sees a partial catalog.
    """


# ---------------------------------------------------------------------------
# Probing
# ---------------------------------------------------------------------------


class ProbeError(PingmoleError):
    """Base for structural probing failures.

    Ordinary unreachability is not an error and never raises this.
    """


class ProbeJoinError(ProbeError):
    """A prober task could not be joined to completion.

    Fatal to the whole batch: no partial results are returned. Carries the
    address of the relay whose task failed.

    Attributes:
        ip: Address of the relay whose prober failed, if known.
    """

    def __init__(self, message: str, *, ip: str | None = None) -> None:
        super().__init__(message)
        self.ip = ip
