"""
Provides access to project metadata.

The installed distribution's metadata is authoritative; a source checkout
falls back to parsing pyproject.toml.
"""

import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import metadata
from pathlib import Path

DEFAULT_NAME = "immich-importer-bootstrap"
DEFAULT_VERSION = "0.0.0"


@dataclass
class Project:
    """Container for project metadata."""

    name: str
    version: str


def _from_pyproject(pyproject_path: Path) -> Project:
    if not pyproject_path.exists():
        # Frozen bundles ship without pyproject.toml or dist-info
        return Project(name=DEFAULT_NAME, version=DEFAULT_VERSION)

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    project_data = data.get("project", {})
    project_name = project_data.get("name", DEFAULT_NAME)
    version = project_data.get("version", DEFAULT_VERSION)

    return Project(name=project_name, version=version)


@cache
def get_project() -> Project:
    """
    Get project metadata from the installed package or pyproject.toml.
    The result is cached for performance.
    """
    try:
        return Project(name=DEFAULT_NAME, version=metadata.version(DEFAULT_NAME))
    except metadata.PackageNotFoundError:
        return _from_pyproject(Path(__file__).parent.parent / "pyproject.toml")
