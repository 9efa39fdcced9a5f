"""
Project metadata for the log formatters (service name and version).

The installed distribution is asked first; in a source checkout that was never
installed, the nearest pyproject.toml above this package answers instead.
"""
import tomllib
from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any

DISTRIBUTION_NAME = "bazaar"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    for directory in [start, *start.parents][:max_up]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def get_pyproject_value(key: str, start: str | Path | None = None, default: Any = None) -> Any:
    """
    Look up a dotted `key` such as "project.version" in the nearest pyproject.toml.
    Missing files, unreadable files and missing keys all give `default`.
    """
    start_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent
    pyproject = find_pyproject(start_path)
    if pyproject is None:
        return default

    try:
        with pyproject.open("rb") as fh:
            node: Any = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def _metadata_field(field: str) -> str | None:
    try:
        return importlib_metadata.metadata(DISTRIBUTION_NAME)[field]
    except importlib_metadata.PackageNotFoundError:
        return None


def get_project_name(default: str | None = None) -> str | None:
    return _metadata_field("Name") or get_pyproject_value("project.name", default=default)


def get_project_version(default: str = "unknown") -> str:
    return _metadata_field("Version") or get_pyproject_value("project.version", default=default)


__all__ = [
    "find_pyproject",
    "get_pyproject_value",
    "get_project_name",
    "get_project_version",
]
