"""HTTP utilities for pingmole.

Provides bounded JSON reading for HTTP responses so that an oversized
catalog or location payload cannot exhaust memory.

Note:
    This module sits in the ``utils`` layer and depends only on stdlib and
    ``aiohttp``. It is importable from ``catalog`` and the CLI without
    violating the diamond DAG.

See Also:
    [fetch_location()][pingmole.utils.location.fetch_location]: Location
        lookup built on [fetch_json][pingmole.utils.http.fetch_json].
    [RelaysLoader][pingmole.catalog.loader.RelaysLoader]: Remote catalog
        fetch built on [fetch_json][pingmole.utils.http.fetch_json].
"""

from __future__ import annotations

import json
from typing import Any

import aiohttp


# Default cap on JSON response bodies (the full relay catalog is ~1 MB)
DEFAULT_MAX_SIZE = 16 * 1024 * 1024


async def _read_bounded(response: aiohttp.ClientResponse, max_size: int) -> bytes:
    """Read an entire response body with size enforcement.

    Accumulates chunks until EOF, so chunked transfer-encoding where a single
    read returns fewer bytes than requested is handled correctly.

    Raises:
        ValueError: If the response body exceeds *max_size*.
    """
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await response.content.read(max_size + 1 - total)
        if not chunk:
            break
        total += len(chunk)
        if total > max_size:
            raise ValueError(f"Response body too large: >{max_size} bytes")
        chunks.append(chunk)
    return b"".join(chunks)


async def read_bounded_json(response: aiohttp.ClientResponse, max_size: int) -> Any:
    """Read and parse a JSON response body with size enforcement.

    Args:
        response: An aiohttp response whose body has not yet been consumed.
        max_size: Maximum allowed response body size in bytes.

    Returns:
        The parsed JSON value.

    Raises:
        ValueError: If the response body exceeds *max_size*.
        json.JSONDecodeError: If the body is not valid JSON.
    """
    body = await _read_bounded(response, max_size)
    return json.loads(body)


async def fetch_json(
    url: str,
    timeout: float = 10.0,  # noqa: ASYNC109
    max_size: int = DEFAULT_MAX_SIZE,
) -> Any:
    """GET *url* and return its JSON body.

    Args:
        url: Endpoint to fetch.
        timeout: Total request timeout in seconds.
        max_size: Maximum allowed response body size in bytes.

    Raises:
        aiohttp.ClientError: If the request fails or returns an error status.
        TimeoutError: If the request exceeds *timeout*.
        ValueError: If the body is too large or not valid JSON.
    """
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with (
        aiohttp.ClientSession(timeout=client_timeout) as session,
        session.get(url) as response,
    ):
        response.raise_for_status()
        return await read_bounded_json(response, max_size)
