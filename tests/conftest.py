"""
Pytest configuration and shared fixtures for pingmole tests.

Provides:
- Relay and timed relay fixtures (see ``tests/fixtures/relays.py``)
- Sample catalog payloads in both cache and API layouts
- Custom pytest markers for test categorization
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from pingmole.models import Coord


pytest_plugins = ["tests.fixtures.relays"]


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Location Fixtures
# ============================================================================


@pytest.fixture
def berlin() -> Coord:
    """Operator position used by catalog tests."""
    return Coord(52.52, 13.405)


# ============================================================================
# Catalog Payload Fixtures
# ============================================================================


@pytest.fixture
def cache_payload() -> dict[str, Any]:
    """Relay cache in the VPN client's on-disk layout.

    Contains one OpenVPN relay, one WireGuard relay, and one bridge in
    Germany, plus one WireGuard relay in Sweden.
    """
    return {
        "countries": [
            {
                "name": "Germany",
                "code": "de",
                "cities": [
                    {
                        "name": "Berlin",
                        "code": "ber",
                        "latitude": 52.52,
                        "longitude": 13.405,
                        "relays": [
                            {
                                "hostname": "de-ber-ovpn-001",
                                "ipv4_addr_in": "193.32.248.66",
                                "active": True,
                                "owned": False,
                                "endpoint_data": "openvpn",
                            },
                            {
                                "hostname": "de-ber-wg-001",
                                "ipv4_addr_in": "193.32.248.70",
                                "active": True,
                                "owned": True,
                                "endpoint_data": {"wireguard": {"public_key": "abc"}},
                            },
                            {
                                "hostname": "de-ber-br-001",
                                "ipv4_addr_in": "193.32.248.99",
                                "active": True,
                                "owned": False,
                                "endpoint_data": "bridge",
                            },
                        ],
                    }
                ],
            },
            {
                "name": "Sweden",
                "code": "se",
                "cities": [
                    {
                        "name": "Gothenburg",
                        "code": "got",
                        "latitude": 57.70887,
                        "longitude": 11.97456,
                        "relays": [
                            {
                                "hostname": "se-got-wg-001",
                                "ipv4_addr_in": "185.213.154.68",
                                "active": False,
                                "owned": True,
                                "endpoint_data": {"wireguard": {"public_key": "def"}},
                            }
                        ],
                    }
                ],
            },
        ]
    }


@pytest.fixture
def api_payload() -> dict[str, Any]:
    """Relay list in the public API layout."""
    return {
        "locations": {
            "de-ber": {
                "country": "Germany",
                "city": "Berlin",
                "latitude": 52.52,
                "longitude": 13.405,
            },
            "se-got": {
                "country": "Sweden",
                "city": "Gothenburg",
                "latitude": 57.70887,
                "longitude": 11.97456,
            },
        },
        "openvpn": {
            "relays": [
                {
                    "hostname": "de-ber-ovpn-001",
                    "location": "de-ber",
                    "active": True,
                    "owned": False,
                    "ipv4_addr_in": "193.32.248.66",
                }
            ]
        },
        "wireguard": {
            "relays": [
                {
                    "hostname": "se-got-wg-001",
                    "location": "se-got",
                    "active": True,
                    "owned": True,
                    "ipv4_addr_in": "185.213.154.68",
                }
            ]
        },
        "bridge": {"relays": []},
    }


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (no network access)")
