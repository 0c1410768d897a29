"""Substitute content when a package publishes no llms.txt."""

from __future__ import annotations

from get_llms.github import GithubReadmeLocator, parse_coordinates
from get_llms.models import (
    EMPTY_FALLBACK_LOCATION,
    FallbackStrategy,
    FetchResult,
    PackageMetadata,
)

EMPTY_TEMPLATE = "# {name}\n\nNo llms.txt found for this package.\n"


def empty_placeholder(package_name: str) -> FetchResult:
    return FetchResult(
        location=EMPTY_FALLBACK_LOCATION,
        content=EMPTY_TEMPLATE.format(name=package_name),
        is_fallback=True,
        fallback_type="empty",
    )


class FallbackPolicy:
    """Apply a :class:`FallbackStrategy` to a package's metadata."""

    def __init__(self, locator: GithubReadmeLocator):
        self._locator = locator

    async def apply(
        self, metadata: PackageMetadata, strategy: FallbackStrategy
    ) -> FetchResult | None:
        if strategy is FallbackStrategy.EMPTY:
            return empty_placeholder(metadata.name)
        if strategy is FallbackStrategy.README:
            return await self._readme(metadata)
        # NONE and SKIP both mean "report not found"
        return None

    async def _readme(self, metadata: PackageMetadata) -> FetchResult | None:
        """Use the GitHub README from the homepage, else from the repository."""
        for source in (metadata.homepage, metadata.repository_url):
            if not source:
                continue
            coords = parse_coordinates(source)
            if coords is None:
                continue
            readme = await self._locator.fetch_readme(coords.owner, coords.repo)
            if readme is not None and readme.content:
                return FetchResult(
                    location=readme.source_url,
                    content=readme.content,
                    is_fallback=True,
                    fallback_type="readme",
                )
        return None
