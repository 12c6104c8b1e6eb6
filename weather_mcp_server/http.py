"""
Outbound HTTP for weather tools.

Tools receive an async fetch callable in their constructor. The default,
aiohttp_fetch, opens one aiohttp session per request and applies the
configured timeout; tests inject a fake with the same signature.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

import aiohttp

from .config import get_http_timeout


@dataclass(frozen=True)
class FetchResponse:
    """Status and decoded JSON body of one GET request."""

    status: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


Fetch = Callable[..., Awaitable[FetchResponse]]


async def aiohttp_fetch(
    url: str, headers: Optional[Dict[str, str]] = None
) -> FetchResponse:
    """
    GET a URL and decode its JSON body.

    The body is only decoded for success statuses. api.weather.gov serves
    application/geo+json, so the content type is not checked.

    Args:
        url: Absolute URL to fetch
        headers: Optional request headers

    Returns:
        FetchResponse with the status and decoded payload
    """
    timeout = aiohttp.ClientTimeout(total=get_http_timeout())
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url, headers=headers) as response:
            payload = None
            if 200 <= response.status < 300:
                payload = await response.json(content_type=None)
            return FetchResponse(status=response.status, payload=payload)
