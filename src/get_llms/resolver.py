"""Resolution cascade: metadata -> declared field -> homepage -> fallback.

Each stage takes the package metadata and the fallback strategy and
returns a :class:`FetchResult` (found, stop) or None (not found, continue).
Only the metadata lookup can fail; :class:`MetadataUnavailable` propagates
to the caller so it can be told apart from "not found".
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from urllib.parse import urlparse

import httpx

from get_llms import validator
from get_llms.fallback import FallbackPolicy
from get_llms.github import GITHUB_RAW_URL, GithubReadmeLocator
from get_llms.http_client import try_get
from get_llms.models import FallbackStrategy, FetchResult, PackageMetadata
from get_llms.prober import StandardUrlProber
from get_llms.registry import MetadataProvider
from get_llms.reporter import NullReporter, Reporter

Stage = Callable[[PackageMetadata, FallbackStrategy], Awaitable[FetchResult | None]]


def is_github_host(url: str) -> bool:
    try:
        netloc = urlparse(url).netloc
    except ValueError:
        return False
    return "github.com" in netloc.lower()


class ResolutionEngine:
    """Find llms.txt (or a substitute) for one package at a time.

    Holds no per-package state, so a single engine can serve concurrent
    ``resolve`` calls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        metadata_provider: MetadataProvider,
        reporter: Reporter | None = None,
        github_raw_url: str = GITHUB_RAW_URL,
    ):
        self._client = client
        self._metadata = metadata_provider
        self._reporter = reporter or NullReporter()
        self.prober = StandardUrlProber(client, self._reporter)
        self.locator = GithubReadmeLocator(
            client, self.prober, self._reporter, raw_base_url=github_raw_url
        )
        self.fallback = FallbackPolicy(self.locator)
        self.stages: list[Stage] = [
            self.check_declared,
            self.check_homepage,
            self.apply_fallback,
        ]

    async def resolve(
        self,
        package_name: str,
        strategy: FallbackStrategy | str = FallbackStrategy.NONE,
    ) -> FetchResult | None:
        strategy = FallbackStrategy.coerce(strategy)
        self._reporter.debug(f"Fetching package info for {package_name}")
        metadata = await self._metadata.get(package_name)

        for stage in self.stages:
            result = await stage(metadata, strategy)
            if result is not None:
                return result
        return None

    async def check_declared(
        self, metadata: PackageMetadata, strategy: FallbackStrategy
    ) -> FetchResult | None:
        """Fetch the URL declared in the package's ``llms`` field."""
        url = metadata.llms
        if not url:
            return None
        if not url.startswith(("http://", "https://")):
            # Relative paths are not supported
            self._reporter.debug(f"{metadata.name}: ignoring non-URL llms field {url!r}")
            return None

        response = await try_get(self._client, url, self._reporter)
        if response is None or not validator.accept(response):
            self._reporter.debug(f"{metadata.name}: declared llms URL {url} unusable")
            return None
        return FetchResult(location=url, content=response.text)

    async def check_homepage(
        self, metadata: PackageMetadata, strategy: FallbackStrategy
    ) -> FetchResult | None:
        """Probe the homepage; GitHub homepages go through the README instead."""
        homepage = metadata.homepage
        if not homepage:
            return None
        if is_github_host(homepage):
            # The README scan is the only lookup for GitHub homepages
            return await self.locator.locate(homepage)
        return await self.prober.probe(homepage)

    async def apply_fallback(
        self, metadata: PackageMetadata, strategy: FallbackStrategy
    ) -> FetchResult | None:
        result = await self.fallback.apply(metadata, strategy)
        if result is not None:
            self._reporter.debug(
                f"{metadata.name}: using {result.fallback_type} fallback"
            )
        return result
