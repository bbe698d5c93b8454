"""Shared constants for the models layer.

Defines the enumerations used across the models, filters, pinger, and
report layers. Placing them here avoids circular dependencies between
those layers.

See Also:
    [Relay][pingmole.models.relay.Relay]: Tagged with a
        [Protocol][pingmole.models.constants.Protocol].
    [Filter][pingmole.filters.base.Filter]: Tagged with a
        [FilterStage][pingmole.models.constants.FilterStage].
    [rank()][pingmole.report.ranking.rank]: Orders results by a
        [SortBy][pingmole.models.constants.SortBy] field.
"""

from __future__ import annotations

from enum import StrEnum


# TCP port every probe connects to. Port 80 is open on the relays observed so far.
PROBE_PORT = 80


class Protocol(StrEnum):
    """Tunnel protocol advertised by a relay.

    Relays advertising anything else (e.g. ``bridge``) are skipped by the
    catalog loader and never reach the pinger.

    Attributes:
        OPENVPN: OpenVPN relay.
        WIREGUARD: WireGuard relay.
    """

    OPENVPN = "openvpn"
    WIREGUARD = "wireguard"

    @property
    def label(self) -> str:
        """Human-readable protocol name used in reports."""
        return {"openvpn": "OpenVPN", "wireguard": "WireGuard"}[self.value]


class FilterStage(StrEnum):
    """Pipeline point at which a filter is evaluated.

    Attributes:
        LOAD: Evaluated against [Relay][pingmole.models.relay.Relay]
            while loading the catalog, before any probing.
        PING: Evaluated against
            [TimedRelay][pingmole.models.timed_relay.TimedRelay] after
            probing completes.
    """

    LOAD = "load"
    PING = "ping"


class SortBy(StrEnum):
    """Field used to rank the admitted results.

    Attributes:
        COUNTRY: Lexicographic by country name.
        CITY: Lexicographic by city name.
        RTT_MEAN: By mean RTT, unreachable relays last.
        RTT_MEDIAN: By median RTT, unreachable relays last (default).
        DISTANCE: By precomputed distance from the operator.
    """

    COUNTRY = "country"
    CITY = "city"
    RTT_MEAN = "rtt-mean"
    RTT_MEDIAN = "rtt-median"
    DISTANCE = "distance"
