"""Pure frozen dataclasses and enums for pingmole.

Sits at the bottom of the diamond DAG: zero I/O, depends only on the
standard library.

Attributes:
    Coord: Latitude/longitude pair with haversine distance.
        See [Coord][pingmole.models.coord.Coord].
    Relay: Immutable relay record from the catalog.
        See [Relay][pingmole.models.relay.Relay].
    TimedRelay: Relay paired with its successful probe timings.
        See [TimedRelay][pingmole.models.timed_relay.TimedRelay].
    Protocol, FilterStage, SortBy: Closed enumerations.
        See [pingmole.models.constants][pingmole.models.constants].
"""

from .constants import PROBE_PORT, FilterStage, Protocol, SortBy
from .coord import Coord
from .relay import Relay
from .timed_relay import TimedRelay


__all__ = [
    "PROBE_PORT",
    "Coord",
    "FilterStage",
    "Protocol",
    "Relay",
    "SortBy",
    "TimedRelay",
]
