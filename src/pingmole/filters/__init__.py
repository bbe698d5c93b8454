"""Stage-tagged admission filters.

Attributes:
    Filter: Abstract generic predicate tagged with a stage.
        See [Filter][pingmole.filters.base.Filter].
    matches_all: Conjunction of the filters of one stage.
    FilterByDistance, FilterByProtocol: Load-stage filters over
        [Relay][pingmole.models.relay.Relay].
    FilterByRtt: Ping-stage filter over
        [TimedRelay][pingmole.models.timed_relay.TimedRelay].
"""

from .base import Filter, matches_all
from .load import FilterByDistance, FilterByProtocol
from .ping import FilterByRtt


__all__ = [
    "Filter",
    "FilterByDistance",
    "FilterByProtocol",
    "FilterByRtt",
    "matches_all",
]
