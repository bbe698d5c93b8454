"""Canonical relay fixtures shared across all test packages.

Usage: Registered via ``pytest_plugins`` in the root ``conftest.py``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pingmole.models import Coord, Protocol, Relay, TimedRelay


def build_relay(**overrides: Any) -> Relay:
    """Build a relay with sensible defaults, overriding any field."""
    fields: dict[str, Any] = {
        "ip": "10.0.0.1",
        "city": "Berlin",
        "country": "Germany",
        "coord": Coord(52.52, 13.405),
        "protocol": Protocol.WIREGUARD,
        "distance": 0.0,
    }
    fields.update(overrides)
    return Relay(**fields)


# =============================================================================
# Individual relay fixtures
# =============================================================================


@pytest.fixture
def relay() -> Relay:
    """WireGuard relay in Berlin."""
    return build_relay()


@pytest.fixture
def relay_openvpn() -> Relay:
    """OpenVPN relay in Frankfurt."""
    return build_relay(
        ip="10.0.0.2",
        city="Frankfurt",
        coord=Coord(50.11, 8.68),
        protocol=Protocol.OPENVPN,
        distance=424.0,
    )


@pytest.fixture
def make_relay() -> Callable[..., Relay]:
    """Factory fixture building relays with overridden fields."""
    return build_relay


# =============================================================================
# Timed relay fixtures
# =============================================================================


@pytest.fixture
def timed_relay(relay: Relay) -> TimedRelay:
    """Reachable relay with three timings (100, 200, 300 ms)."""
    return TimedRelay(relay, (0.1, 0.2, 0.3))


@pytest.fixture
def unreachable_relay(relay_openvpn: Relay) -> TimedRelay:
    """Relay that never answered."""
    return TimedRelay(relay_openvpn)


# =============================================================================
# Batch fixture
# =============================================================================


@pytest.fixture
def relay_batch() -> list[Relay]:
    """Batch of 5 relays at increasing distance for bulk tests."""
    return [build_relay(ip=f"10.0.1.{i}", distance=float(i * 100)) for i in range(1, 6)]
