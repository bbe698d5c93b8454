"""
Load-stage filters evaluated against relays before any probing.
"""

from __future__ import annotations

from typing import ClassVar

from pingmole.models.constants import FilterStage, Protocol
from pingmole.models.relay import Relay

from .base import Filter


class FilterByDistance(Filter[Relay]):
    """Admits relays strictly closer than ``max_distance`` kilometers.

    Uses the distance precomputed at load time; a relay exactly at the
    threshold is rejected.
    """

    STAGE: ClassVar[FilterStage] = FilterStage.LOAD

    def __init__(self, max_distance: float) -> None:
        self.max_distance = max_distance

    def matches(self, item: Relay) -> bool:
        return item.distance < self.max_distance


class FilterByProtocol(Filter[Relay]):
    """Admits relays using ``protocol``, or every relay when it is ``None``."""

    STAGE: ClassVar[FilterStage] = FilterStage.LOAD

    def __init__(self, protocol: Protocol | None = None) -> None:
        self.protocol = protocol

    def matches(self, item: Relay) -> bool:
        if self.protocol is None:
            return True
        return item.protocol == self.protocol
