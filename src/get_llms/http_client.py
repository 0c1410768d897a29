"""Shared httpx client construction and fail-soft GET."""

from __future__ import annotations

import httpx

from get_llms.config import Settings, settings
from get_llms.reporter import Reporter

# Raised by httpx for timeouts, connection errors, unsupported schemes and
# malformed URLs. Any of these only skips the current candidate.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def build_client(
    config: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` every network read goes through."""
    config = config or settings
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout),
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        transport=transport,
    )


async def try_get(
    client: httpx.AsyncClient, url: str, reporter: Reporter
) -> httpx.Response | None:
    """GET ``url``; return None instead of raising on transport failure."""
    try:
        return await client.get(url)
    except TRANSPORT_ERRORS as e:
        reporter.debug(f"GET {url} failed: {e!r}")
        return None
