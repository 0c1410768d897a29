"""Value types shared by the resolution cascade."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

EMPTY_FALLBACK_LOCATION = "fallback:empty"

FallbackType = Literal["readme", "empty"]

# npm "owner/repo" repository shorthand
_SHORTHAND_RE = re.compile(r"^[\w.-]+/[\w.-]+$")


class FallbackStrategy(StrEnum):
    """What to return when no real llms.txt exists."""

    NONE = "none"
    README = "readme"
    EMPTY = "empty"
    SKIP = "skip"

    @classmethod
    def coerce(cls, value: str | FallbackStrategy | None) -> FallbackStrategy:
        """Map arbitrary user input to a strategy; unknown values mean NONE."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.NONE


class Repository(BaseModel):
    """``repository`` object form as published in npm metadata."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = ""


class PackageMetadata(BaseModel):
    """Subset of registry metadata consumed by the resolver."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    homepage: str | None = None
    llms: str | None = None
    repository: str | Repository | None = None

    @property
    def repository_url(self) -> str:
        """Repository reference as a URL string.

        npm shorthand (``owner/repo``, ``github:owner/repo``) expands to a
        full GitHub URL so it can be parsed like any other reference.
        """
        repo = self.repository
        if isinstance(repo, Repository):
            url = repo.url
        else:
            url = repo or ""
        url = url.strip()
        if url.startswith("github:"):
            url = url.removeprefix("github:")
            return f"https://github.com/{url}"
        if _SHORTHAND_RE.match(url):
            return f"https://github.com/{url}"
        return url


@dataclass(frozen=True)
class GithubCoordinates:
    owner: str
    repo: str


@dataclass(frozen=True)
class Readme:
    content: str
    source_url: str


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a successful resolution.

    Real hits carry the URL they were fetched from.  Fallbacks are marked
    with ``is_fallback`` and a ``fallback_type``, and never carry empty
    content.
    """

    location: str
    content: str
    is_fallback: bool = False
    fallback_type: FallbackType | None = None

    def __post_init__(self) -> None:
        if self.is_fallback:
            if self.fallback_type is None:
                raise ValueError("fallback results require a fallback_type")
            if not self.content:
                raise ValueError("fallback results require non-empty content")
        elif self.fallback_type is not None:
            raise ValueError("fallback_type is only valid on fallback results")
