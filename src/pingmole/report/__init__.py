"""Ranking and rendering of admitted results.

Attributes:
    rank: Stable single-key sort of timed relays.
        See [rank()][pingmole.report.ranking.rank].
    Reporter: Ranks and prints results as a table.
        See [Reporter][pingmole.report.reporter.Reporter].
"""

from .ranking import rank, sort_key
from .reporter import Reporter, format_distance, format_rtt


__all__ = [
    "Reporter",
    "format_distance",
    "format_rtt",
    "rank",
    "sort_key",
]
