"""get-llms - fetch llms.txt documentation files for npm packages."""

from importlib.metadata import PackageNotFoundError, version

from get_llms.__main__ import _cli as main
from get_llms.models import FallbackStrategy, FetchResult, PackageMetadata
from get_llms.registry import MetadataUnavailable, NpmMetadataProvider
from get_llms.resolver import ResolutionEngine

try:
    __version__ = version("get-llms")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "FallbackStrategy",
    "FetchResult",
    "MetadataUnavailable",
    "NpmMetadataProvider",
    "PackageMetadata",
    "ResolutionEngine",
    "main",
    "__version__",
]
