"""Find llms.txt for GitHub-hosted packages via the repository README.

GitHub repositories rarely publish llms.txt at a guessable path.  Instead
the README is scanned for a documentation link (GitHub Pages, a custom
domain, a docs subdomain) and the conventional locations are probed there.
"""

from __future__ import annotations

import re

import httpx

from get_llms.http_client import try_get
from get_llms.models import FetchResult, GithubCoordinates, Readme
from get_llms.prober import StandardUrlProber
from get_llms.reporter import NullReporter, Reporter

GITHUB_RAW_URL = "https://raw.githubusercontent.com"

README_BRANCHES = ("main", "master")
README_FILENAMES = ("README.md", "readme.md", "README.txt", "readme.txt")

_GH_REPO_RE = re.compile(r"github\.com/([^/]+)/([^/]+)")
# Single-level inline markdown link: [text](url)
_MD_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]+)\)")


def parse_coordinates(url: str) -> GithubCoordinates | None:
    """Extract owner/repo from a GitHub URL or npm repository reference.

    Accepts ``git+https://github.com/o/r.git#readme`` style references.
    """
    cleaned = url.strip().removeprefix("git+").split("#", 1)[0]
    cleaned = cleaned.removesuffix(".git")
    match = _GH_REPO_RE.search(cleaned)
    if not match:
        return None
    return GithubCoordinates(owner=match.group(1), repo=match.group(2))


def find_docs_link(readme: str) -> str | None:
    """Return the URL of the first link mentioning "docs" in text or target."""
    for match in _MD_LINK_RE.finditer(readme):
        text, url = match.group(1), match.group(2)
        if "docs" in text.lower() or "docs" in url.lower():
            return url
    return None


def resolve_link(url: str, owner: str, repo: str) -> str:
    """Turn a README link into something the prober can use as a base.

    Absolute links are kept.  Site-root links (``/docs``) are kept as-is:
    the site they belong to is unknown, so probing them fails soft.
    Anything else is assumed to be a path inside the repository on ``main``.
    """
    if url.startswith("http") or url.startswith("/"):
        return url
    # Approximation: a relative link could also be a page on an external
    # docs site; there is no way to tell from the README alone.
    return f"https://github.com/{owner}/{repo}/blob/main/{url}"


class GithubReadmeLocator:
    """README fetch + docs link scan for GitHub homepages."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        prober: StandardUrlProber | None = None,
        reporter: Reporter | None = None,
        raw_base_url: str = GITHUB_RAW_URL,
    ):
        self._client = client
        self._reporter = reporter or NullReporter()
        self._prober = prober or StandardUrlProber(client, self._reporter)
        self._raw_base_url = raw_base_url.rstrip("/")

    async def fetch_readme(self, owner: str, repo: str) -> Readme | None:
        """Fetch the README from ``main`` then ``master``.

        All filename variants are tried on a branch before moving to the
        next branch.  The first 200 response wins.
        """
        for branch in README_BRANCHES:
            for filename in README_FILENAMES:
                raw_url = f"{self._raw_base_url}/{owner}/{repo}/{branch}/{filename}"
                response = await try_get(self._client, raw_url, self._reporter)
                if response is not None and response.status_code == 200:
                    self._reporter.debug(f"Found README at {raw_url}")
                    return Readme(content=response.text, source_url=raw_url)
        self._reporter.debug(f"No README found for {owner}/{repo}")
        return None

    async def locate(self, homepage_url: str) -> FetchResult | None:
        coords = parse_coordinates(homepage_url)
        if coords is None:
            return None

        readme = await self.fetch_readme(coords.owner, coords.repo)
        if readme is None:
            return None

        link = find_docs_link(readme.content)
        if link is None:
            self._reporter.debug(
                f"README of {coords.owner}/{coords.repo} has no docs link"
            )
            return None

        base_url = resolve_link(link, coords.owner, coords.repo)
        self._reporter.debug(f"Probing docs link {base_url}")
        return await self._prober.probe(base_url)
