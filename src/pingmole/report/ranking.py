"""
Deterministic ordering of admitted results by one selectable field.

Results arrive from [RelaysPinger][pingmole.pinger.pinger.RelaysPinger] in
task completion order; this is the only step that imposes a final order.
Sorting is stable, so items with equal keys keep their incoming relative
order. No secondary key is applied.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from pingmole.models.constants import SortBy


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pingmole.models.timed_relay import TimedRelay


def _rtt_key(rtt: float | None) -> float:
    # Unreachable relays (undefined RTT) sort after every measured one
    return math.inf if rtt is None else rtt


def _distance_key(distance: float) -> tuple[bool, float]:
    # NaN-safe total order: NaN sorts last
    if math.isnan(distance):
        return (True, 0.0)
    return (False, distance)


_SORT_KEYS: dict[SortBy, Callable[[TimedRelay], Any]] = {
    SortBy.COUNTRY: lambda t: t.relay.country,
    SortBy.CITY: lambda t: t.relay.city,
    SortBy.RTT_MEAN: lambda t: _rtt_key(t.rtt_mean()),
    SortBy.RTT_MEDIAN: lambda t: _rtt_key(t.rtt_median()),
    SortBy.DISTANCE: lambda t: _distance_key(t.relay.distance),
}


def sort_key(sort_by: SortBy) -> Callable[[TimedRelay], Any]:
    """Return the key function ordering timed relays by *sort_by*."""
    return _SORT_KEYS[SortBy(sort_by)]


def rank(timed: Iterable[TimedRelay], sort_by: SortBy = SortBy.RTT_MEDIAN) -> list[TimedRelay]:
    """Return *timed* stably sorted by *sort_by*.

    Examples:
        ```python
        ranked = rank(admitted, SortBy.DISTANCE)
        [t.relay.distance for t in ranked]  # [10.0, 30.0, 50.0]
        ```
    """
    return sorted(timed, key=sort_key(sort_by))
