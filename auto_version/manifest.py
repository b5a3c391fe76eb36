"""Manifest reading and writing utilities.

A manifest is the file where a project declares its version:
- pyproject.toml, under [project].version
- package.json, under the top-level "version" key

TOML files go through tomlkit to preserve formatting and comments, so a
version bump produces a one-line diff.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, MutableMapping, cast

import tomlkit

from .exceptions import InvalidManifest

MANIFEST_NAMES = ("pyproject.toml", "package.json")
DEFAULT_INDENTATION = 4

Document = MutableMapping[str, Any]


def manifest_file(directory: Path) -> Path | None:
    """Return the highest-priority manifest inside directory, if any."""
    for name in MANIFEST_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def locate(start: Path | str | None = None) -> Path | None:
    """Find the nearest directory holding a manifest.

    Walks from start (default: the current working directory) up through
    its ancestors. If start names a file, the walk begins at its parent.

    Returns:
        The project directory, or None if no ancestor has a manifest.
    """
    current = Path(start) if start is not None else Path.cwd()
    current = current.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        if manifest_file(directory) is not None:
            return directory
    return None


def is_toml(path: Path) -> bool:
    return path.suffix == ".toml"


def load_manifest(path: Path) -> Document:
    """Load and parse a manifest file.

    pyproject.toml is returned as a TOMLDocument that preserves formatting
    when modified and saved; package.json as a plain dict.

    Raises:
        InvalidManifest: If package.json holds anything but an object.
    """
    text = path.read_text(encoding="utf-8")
    if is_toml(path):
        return tomlkit.parse(text)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise InvalidManifest(
            "Manifest must hold a JSON object",
            context={"path": path, "found": type(data).__name__},
        )
    return cast(Document, data)


def save_manifest(
    path: Path, doc: Document, indentation: int = DEFAULT_INDENTATION
) -> None:
    """Save a manifest document back to disk.

    JSON is pretty-printed with indentation spaces. TOML keeps the layout
    it was loaded with, so indentation does not apply to it.
    """
    if is_toml(path):
        text = tomlkit.dumps(doc)
    else:
        text = json.dumps(doc, indent=indentation, ensure_ascii=False) + "\n"
    path.write_text(text, encoding="utf-8")


def get_manifest_version(path: Path, doc: Document) -> str:
    """Extract the declared version, defaulting to '0.0.0'."""
    if is_toml(path):
        return str(doc.get("project", {}).get("version", "0.0.0"))
    return str(doc.get("version", "0.0.0"))


def set_manifest_version(path: Path, doc: Document, version: str) -> None:
    """Assign the version field, modifying doc in place.

    A pyproject.toml without a [project] table gets one.
    """
    if not is_toml(path):
        doc["version"] = version
        return
    if "project" not in doc:
        doc["project"] = tomlkit.table()
    # Cast needed because tomlkit types are complex unions
    project = cast(dict[str, Any], doc["project"])
    project["version"] = version
