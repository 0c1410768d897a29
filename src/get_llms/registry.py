"""npm registry metadata lookup."""

from __future__ import annotations

from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from get_llms.http_client import TRANSPORT_ERRORS
from get_llms.models import PackageMetadata


class MetadataUnavailable(RuntimeError):
    """The registry could not supply metadata for a package."""

    def __init__(self, package_name: str, reason: str):
        super().__init__(f"Could not fetch metadata for {package_name}: {reason}")
        self.package_name = package_name
        self.reason = reason


class MetadataProvider(Protocol):
    """Protocol for package metadata sources."""

    async def get(self, package_name: str) -> PackageMetadata:
        """Return metadata or raise :class:`MetadataUnavailable`."""
        ...


class NpmMetadataProvider:
    """Read ``{registry}/{name}/latest`` from the npm registry."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        registry_url: str = "https://registry.npmjs.org",
    ):
        self._client = client
        self._registry_url = registry_url.rstrip("/")

    def url_for(self, package_name: str) -> str:
        # Scoped names keep their "@", only the scope separator is escaped
        return f"{self._registry_url}/{quote(package_name, safe='@')}/latest"

    async def get(self, package_name: str) -> PackageMetadata:
        url = self.url_for(package_name)
        try:
            resp = await self._client.get(url)
        except TRANSPORT_ERRORS as e:
            raise MetadataUnavailable(package_name, f"request failed: {e!r}") from e

        if resp.status_code != 200:
            raise MetadataUnavailable(package_name, f"registry returned {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise MetadataUnavailable(package_name, "invalid JSON") from e
        if not isinstance(data, dict):
            raise MetadataUnavailable(package_name, "unexpected payload")

        data.setdefault("name", package_name)
        # Registry payloads sometimes carry empty strings or odd types here
        for key in ("homepage", "llms"):
            if not isinstance(data.get(key), str) or not data.get(key):
                data.pop(key, None)
        if not isinstance(data.get("repository"), (str, dict)):
            data.pop("repository", None)
        try:
            return PackageMetadata.model_validate(data)
        except ValidationError as e:
            raise MetadataUnavailable(package_name, "malformed metadata") from e
