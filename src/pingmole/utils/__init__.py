"""Network helpers for the upstream collaborators.

Attributes:
    fetch_json: aiohttp GET with a bounded JSON body.
        See [fetch_json][pingmole.utils.http.fetch_json].
    fetch_location: Operator position lookup.
        See [fetch_location][pingmole.utils.location.fetch_location].
"""

from .http import fetch_json, read_bounded_json
from .location import LocationConfig, fetch_location, resolve_location


__all__ = [
    "LocationConfig",
    "fetch_json",
    "fetch_location",
    "read_bounded_json",
    "resolve_location",
]
