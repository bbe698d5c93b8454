"""
Relay catalog parsing.

Two layouts are supported:

* **cache** -- the VPN client's on-disk cache, nested as
  ``countries[].cities[].relays[]`` with the protocol encoded in each
  relay's ``endpoint_data`` field::

      "endpoint_data": "openvpn"
      "endpoint_data": "bridge"
      "endpoint_data": {"wireguard": {"public_key": "..."}}

* **api** -- the public relay API, with a ``locations`` map keyed by
  location code and one relay list per protocol::

      {"locations": {"se-got": {"country": "Sweden", "city": "Gothenburg", ...}},
       "openvpn": {"relays": [{"location": "se-got", "ipv4_addr_in": ...}]},
       "wireguard": {"relays": [...]}}

Bridges and unknown protocols are skipped. Any other missing or malformed
field aborts parsing with a [CatalogError][pingmole.core.exceptions.CatalogError].
"""

from __future__ import annotations

from typing import Any

from pingmole.core.exceptions import CatalogError
from pingmole.models.constants import Protocol
from pingmole.models.coord import Coord
from pingmole.models.relay import Relay


def resolve_protocol(relay: dict[str, Any]) -> Protocol | None:
    """Read the protocol from a cache relay's ``endpoint_data`` field.

    Returns:
        The protocol, or ``None`` for bridges and anything unrecognized.
    """
    endpoint = relay.get("endpoint_data")
    if isinstance(endpoint, str):
        return Protocol.OPENVPN if endpoint == Protocol.OPENVPN.value else None
    if isinstance(endpoint, dict) and Protocol.WIREGUARD.value in endpoint:
        return Protocol.WIREGUARD
    return None


def parse_cache(data: Any, location: Coord) -> list[Relay]:
    """Build relays from the on-disk cache layout.

    Args:
        data: Parsed cache JSON.
        location: Operator position used to compute each relay's distance.

    Raises:
        CatalogError: If a required field is missing or malformed.
    """
    relays: list[Relay] = []

    for country in _array(data, "countries"):
        country_name = _string(country, "name")
        for city in _array(country, "cities"):
            for entry in _array(city, "relays"):
                protocol = resolve_protocol(entry) if isinstance(entry, dict) else None
                if protocol is None:
                    continue
                coord = Coord(_number(city, "latitude"), _number(city, "longitude"))
                relays.append(
                    _build_relay(
                        entry,
                        city=_string(city, "name"),
                        country=country_name,
                        coord=coord,
                        protocol=protocol,
                        location=location,
                    )
                )

    return relays


def parse_api(data: Any, location: Coord) -> list[Relay]:
    """Build relays from the public API layout.

    Args:
        data: Parsed API JSON.
        location: Operator position used to compute each relay's distance.

    Raises:
        CatalogError: If a required field is missing or malformed, or a
            relay references an unknown location code.
    """
    locations = _object(data, "locations")
    relays: list[Relay] = []

    for protocol in Protocol:
        section = data.get(protocol.value)
        if section is None:
            continue
        for entry in _array(section, "relays"):
            code = _string(entry, "location")
            place = locations.get(code)
            if not isinstance(place, dict):
                raise CatalogError(f"Relay references unknown location '{code}'")
            coord = Coord(_number(place, "latitude"), _number(place, "longitude"))
            relays.append(
                _build_relay(
                    entry,
                    city=_string(place, "city"),
                    country=_string(place, "country"),
                    coord=coord,
                    protocol=protocol,
                    location=location,
                )
            )

    return relays


def _build_relay(  # noqa: PLR0913
    entry: Any,
    *,
    city: str,
    country: str,
    coord: Coord,
    protocol: Protocol,
    location: Coord,
) -> Relay:
    ip = _string(entry, "ipv4_addr_in")
    try:
        return Relay(
            ip=ip,
            city=city,
            country=country,
            coord=coord,
            protocol=protocol,
            is_active=_bool(entry, "active"),
            is_owned=_bool(entry, "owned"),
            distance=coord.distance_to(location),
        )
    except ValueError as e:
        raise CatalogError(f"Failed to parse the field ipv4_addr_in: {e}") from e


# ---------------------------------------------------------------------------
# Typed field access
# ---------------------------------------------------------------------------


def _malformed(name: str) -> CatalogError:
    return CatalogError(f"Failed to parse the field {name}: it's either missing or malformed")


def _field(data: Any, name: str) -> Any:
    if not isinstance(data, dict) or name not in data:
        raise _malformed(name)
    return data[name]


def _array(data: Any, name: str) -> list[Any]:
    value = _field(data, name)
    if not isinstance(value, list):
        raise _malformed(name)
    return value


def _object(data: Any, name: str) -> dict[str, Any]:
    value = _field(data, name)
    if not isinstance(value, dict):
        raise _malformed(name)
    return value


def _string(data: Any, name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str):
        raise _malformed(name)
    return value


def _number(data: Any, name: str) -> float:
    value = _field(data, name)
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise _malformed(name)
    return float(value)


def _bool(data: Any, name: str) -> bool:
    value = _field(data, name)
    if not isinstance(value, bool):
        raise _malformed(name)
    return value
