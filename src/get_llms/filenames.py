"""Output filenames for fetched files."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSAFE_CHARS_RE = re.compile(r'[<>:"|?*\\]')


@dataclass(frozen=True)
class SanitizerOptions:
    space_replacement: str = "_"
    slash_replacement: str = "-"
    at_replacement: str = ""


def sanitize_filename(name: str, options: SanitizerOptions | None = None) -> str:
    """Make a package name safe to use as a filename.

    ``@scope/pkg`` becomes ``scope-pkg`` with the default options.
    """
    options = options or SanitizerOptions()
    sanitized = name

    if sanitized.startswith("@"):
        sanitized = options.at_replacement + sanitized[1:]

    sanitized = sanitized.replace("/", options.slash_replacement)
    sanitized = sanitized.replace(" ", options.space_replacement)
    return _UNSAFE_CHARS_RE.sub("", sanitized)


def generate_filename(
    pattern: str,
    package_name: str,
    extension: str,
    options: SanitizerOptions | None = None,
) -> str:
    """Expand ``{name}`` in ``pattern`` and append the extension."""
    filename = pattern.replace("{name}", sanitize_filename(package_name, options))
    return f"{filename}.{extension.removeprefix('.')}"
