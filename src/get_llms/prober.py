"""Probe the conventional llms.txt locations under a site."""

from __future__ import annotations

from urllib.parse import urlparse

import httpx

from get_llms import validator
from get_llms.http_client import try_get
from get_llms.models import FetchResult
from get_llms.reporter import NullReporter, Reporter


def candidate_urls(base_url: str) -> list[str]:
    """Return the ordered llms.txt candidates for ``base_url``.

    The site origin is tried after the given path so a homepage pointing at
    a deep page still finds a file published at the site root.
    """
    base = base_url.rstrip("/")
    candidates = [f"{base}/llms.txt", f"{base}/docs/llms.txt"]
    try:
        parsed = urlparse(base)
    except ValueError:
        # Malformed netloc (e.g. an unclosed IPv6 bracket): no origin to try
        return candidates

    origin = f"{parsed.scheme}://{parsed.netloc}" if parsed.netloc else ""
    candidates += [f"{origin}/llms.txt", f"{origin}/docs/llms.txt"]
    # Same URL twice when base is already the origin
    return list(dict.fromkeys(candidates))


class StandardUrlProber:
    """Try each candidate in order and return the first accepted one."""

    def __init__(self, client: httpx.AsyncClient, reporter: Reporter | None = None):
        self._client = client
        self._reporter = reporter or NullReporter()

    async def probe(self, base_url: str) -> FetchResult | None:
        for url in candidate_urls(base_url):
            response = await try_get(self._client, url, self._reporter)
            if response is None:
                continue
            if not validator.accept(response):
                self._reporter.debug(
                    f"Rejected {url} (status={response.status_code}, "
                    f"content-type={response.headers.get('content-type', '')!r})"
                )
                continue
            self._reporter.debug(f"Accepted {url}")
            return FetchResult(location=url, content=response.text)
        return None
