"""Select package names from a package.json manifest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from get_llms.reporter import NullReporter, Reporter

DependencyType = Literal["prod", "dev", "peer", "optional", "all"]

VALID_DEPENDENCY_TYPES: tuple[DependencyType, ...] = (
    "prod",
    "dev",
    "peer",
    "optional",
    "all",
)

# Dependency type -> package.json section
_SECTIONS: dict[str, str] = {
    "prod": "dependencies",
    "dev": "devDependencies",
    "peer": "peerDependencies",
    "optional": "optionalDependencies",
}


def parse_deps(deps: str, reporter: Reporter | None = None) -> list[DependencyType]:
    """Parse a comma-separated list like ``"prod, dev"``.

    Unknown entries are reported and dropped.  An empty result means "all".
    """
    reporter = reporter or NullReporter()
    result: list[DependencyType] = []
    for raw in deps.split(","):
        dep = raw.strip().lower()
        if not dep:
            continue
        if dep in VALID_DEPENDENCY_TYPES:
            result.append(dep)  # type: ignore[arg-type]
        else:
            reporter.warning(f"Unknown dependency type: {dep}")
    return result or ["all"]


def get_dependencies(
    package_json: dict[str, Any], dep_types: list[DependencyType]
) -> dict[str, str]:
    """Merge the selected dependency sections; later sections win on clashes."""
    include_all = "all" in dep_types
    result: dict[str, str] = {}
    for dep_type, section in _SECTIONS.items():
        if include_all or dep_type in dep_types:
            result.update(package_json.get(section) or {})
    return result


def load_package_json(path: str | Path) -> dict[str, Any]:
    """Read a package.json file.

    Raises:
        OSError: the file cannot be read.
        ValueError: the file is not a JSON object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data
