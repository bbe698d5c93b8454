"""
Abstract filter predicate tagged with its pipeline stage.

A filter inspects one kind of item -- [Relay][pingmole.models.relay.Relay]
for the load stage, [TimedRelay][pingmole.models.timed_relay.TimedRelay]
for the ping stage -- and returns whether the item is admitted. Filter sets
are conjunctive per stage: an item proceeds only if every filter of that
stage admits it.

See Also:
    [pingmole.filters.load][pingmole.filters.load]: Load-stage filters.
    [pingmole.filters.ping][pingmole.filters.ping]: Ping-stage filters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pingmole.models.constants import FilterStage


if TYPE_CHECKING:
    from collections.abc import Iterable


ItemT = TypeVar("ItemT")


class Filter(ABC, Generic[ItemT]):
    """Predicate over items of type ``ItemT``, evaluated at one stage.

    Subclasses set ``STAGE`` and implement
    [matches()][pingmole.filters.base.Filter.matches].

    Attributes:
        STAGE: The [FilterStage][pingmole.models.constants.FilterStage] at
            which the filter applies.
    """

    STAGE: ClassVar[FilterStage]

    @property
    def stage(self) -> FilterStage:
        """The pipeline stage this filter belongs to."""
        return self.STAGE

    @abstractmethod
    def matches(self, item: ItemT) -> bool:
        """Return True if *item* is admitted by this filter."""
        ...

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"


def matches_all(filters: Iterable[Filter[ItemT]], item: ItemT, stage: FilterStage) -> bool:
    """Return True if every filter of *stage* admits *item*.

    Filters of other stages are ignored. An empty filter set admits
    everything.
    """
    return all(f.matches(item) for f in filters if f.stage == stage)
