"""
Immutable VPN relay record.

Relays are built by the catalog loader from cache or API data and are
read-only afterwards. The distance from the operator is computed once at
load time and never recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import ip_address
from .constants import Protocol
from .coord import Coord


@dataclass(frozen=True, slots=True)
class Relay:
    """Immutable representation of one candidate relay.

    Validates that ``ip`` is an IP literal on construction and stores it in
    its normalized (compressed) form. No DNS resolution is ever performed.

    Attributes:
        ip: IPv4 or IPv6 address literal the relay accepts connections on.
        city: City name from the catalog.
        country: Country name from the catalog.
        coord: City coordinates.
        protocol: Tunnel [Protocol][pingmole.models.constants.Protocol].
        is_active: Whether the catalog marks the relay as active.
        is_owned: Whether the relay is owned by the VPN provider (not rented).
        distance: Great-circle distance from the operator in kilometers.

    Raises:
        ValueError: If ``ip`` is not a valid IP address literal.

    Examples:
        ```python
        relay = Relay(
            ip="185.213.154.68",
            city="Gothenburg",
            country="Sweden",
            coord=Coord(57.7, 11.96),
            protocol=Protocol.WIREGUARD,
            distance=412.3,
        )
        ```
    """

    ip: str
    city: str
    country: str
    coord: Coord
    protocol: Protocol
    is_active: bool = True
    is_owned: bool = False
    distance: float = field(default=0.0)

    def __post_init__(self) -> None:
        """Validate and normalize the IP literal.

        Raises:
            ValueError: If the address cannot be parsed.
        """
        try:
            address = ip_address(self.ip.strip())
        except ValueError:
            raise ValueError(f"Invalid relay address: '{self.ip}'") from None

        # Bypass frozen restriction to store the normalized address
        object.__setattr__(self, "ip", str(address))

