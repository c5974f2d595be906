"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect handling for every request.
- Makes testing easy: tests hand in a client built on `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application defaults.

    Redirects are followed so that probes report the final URL. No timeout
    is applied unless `http_timeout_seconds` is configured.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json,text/html;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """GET `url` and decode its JSON body; non-2xx responses raise."""

    logger.debug(f"Fetching {url}")
    resp = await client.get(url)
    resp.raise_for_status()
    return resp.json()
