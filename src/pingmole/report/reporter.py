"""
Tabular rendering of ranked results.

Builds a ``rich`` table with one row per admitted relay. The column the
results are sorted by is marked with `` *``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from pingmole.models.constants import SortBy

from .ranking import rank


if TYPE_CHECKING:
    from collections.abc import Iterable

    from pingmole.models.timed_relay import TimedRelay


# (header, sort field marked with " *" when active, right-aligned)
_COLUMNS: tuple[tuple[str, SortBy | None, bool], ...] = (
    ("#", None, False),
    ("IP", None, False),
    ("Protocol", None, False),
    ("Country", SortBy.COUNTRY, False),
    ("City", SortBy.CITY, False),
    ("Distance", SortBy.DISTANCE, True),
    ("RTT median", SortBy.RTT_MEDIAN, True),
    ("RTT mean", SortBy.RTT_MEAN, True),
)


def format_rtt(rtt: float | None) -> str:
    """Format an RTT in seconds as milliseconds, ``-`` when undefined."""
    if rtt is None:
        return "-"
    return f"{rtt * 1_000.0:.2f} ms"


def format_distance(distance: float) -> str:
    if math.isnan(distance):
        return "-"
    return f"~{round(distance)} km"


class Reporter:
    """Ranks admitted results and renders them as a table.

    Examples:
        ```python
        reporter = Reporter(admitted, SortBy.DISTANCE)
        reporter.sort()
        reporter.report()
        ```
    """

    def __init__(self, timed: Iterable[TimedRelay], sort_by: SortBy = SortBy.RTT_MEDIAN) -> None:
        self._timed = list(timed)
        self._sort_by = SortBy(sort_by)

    @property
    def timed(self) -> list[TimedRelay]:
        return list(self._timed)

    def sort(self) -> None:
        """Order the results by the selected field (stable)."""
        self._timed = rank(self._timed, self._sort_by)

    def headers(self) -> list[str]:
        """Column headers, with the sorted column marked."""
        return [
            f"{name} *" if field is not None and field == self._sort_by else name
            for name, field, _ in _COLUMNS
        ]

    def rows(self) -> list[list[str]]:
        """Table rows in the current order."""
        return [
            [
                str(idx),
                timed.relay.ip,
                timed.relay.protocol.label,
                timed.relay.country,
                timed.relay.city,
                format_distance(timed.relay.distance),
                format_rtt(timed.rtt_median()),
                format_rtt(timed.rtt_mean()),
            ]
            for idx, timed in enumerate(self._timed, start=1)
        ]

    def build_table(self) -> Table:
        table = Table(box=box.ROUNDED)
        for header, (_, _, right) in zip(self.headers(), _COLUMNS, strict=True):
            table.add_column(header, justify="right" if right else "left")
        for row in self.rows():
            table.add_row(*row)
        return table

    def report(self, console: Console | None = None) -> None:
        """Print the table to *console* (stdout by default)."""
        (console or Console()).print(self.build_table())
