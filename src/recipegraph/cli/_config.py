"""Project-level configuration from pyproject.toml.

Reads the [tool.recipegraph] section to provide a default catalog path and
layout geometry for the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from recipegraph.viz.layout import LayoutConfig

_LAYOUT_KEYS = ("root_x", "root_y", "horizontal_spacing", "vertical_spacing")


@dataclass(frozen=True)
class RecipegraphConfig:
    """Configuration from [tool.recipegraph] in pyproject.toml."""

    catalog: str | None = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> RecipegraphConfig:
    """Load [tool.recipegraph] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.recipegraph] section.
    A relative ``catalog`` path is resolved against the pyproject.toml directory.
    """
    path = find_pyproject(start)
    if path is None:
        return RecipegraphConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return RecipegraphConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("recipegraph", {})
    if not section:
        return RecipegraphConfig()

    catalog = section.get("catalog")
    if catalog is not None:
        catalog = str(path.parent / catalog)

    geometry = {key: float(section[key]) for key in _LAYOUT_KEYS if key in section}
    return RecipegraphConfig(catalog=catalog, layout=LayoutConfig(**geometry))
