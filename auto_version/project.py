"""Project-level version access: find the manifest, read and write its version.

Every function accepts an optional path. A manifest file is used as-is; a
directory (or None, meaning the current working directory) is resolved to
the nearest enclosing project.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from .exceptions import ManifestNotFound
from .manifest import (
    DEFAULT_INDENTATION,
    MANIFEST_NAMES,
    Document,
    get_manifest_version,
    load_manifest,
    locate,
    manifest_file,
    save_manifest,
    set_manifest_version,
)
from .models import VersionBump
from .versions import check_level, increment

logger = structlog.get_logger(__name__)


def get_local_path() -> Path | None:
    """Return the directory of the project enclosing the current directory."""
    return locate()


def get_manifest_path(path: Path | str | None = None) -> Path:
    """Resolve path to a manifest file.

    Raises:
        ManifestNotFound: If no manifest exists at or above path.
    """
    start = Path(path) if path is not None else Path.cwd()
    if not start.exists():
        raise ManifestNotFound("No such file or directory", context={"path": start})
    if start.is_file() and start.name in MANIFEST_NAMES:
        return start.resolve()

    directory = locate(start)
    found = manifest_file(directory) if directory is not None else None
    if found is None:
        raise ManifestNotFound(
            "Unable to find a pyproject.toml or package.json",
            context={"start": start},
        )
    return found


def _read(path: Path | str | None) -> tuple[Path, Document]:
    manifest_path = get_manifest_path(path)
    try:
        doc = load_manifest(manifest_path)
    except OSError as exc:
        raise ManifestNotFound(
            f"Unable to read {manifest_path.name}: {exc.strerror or exc}",
            context={"path": manifest_path},
        ) from exc
    logger.debug(
        "manifest_loaded",
        path=str(manifest_path),
        version=get_manifest_version(manifest_path, doc),
    )
    return manifest_path, doc


def get_manifest(path: Path | str | None = None) -> Document:
    """Load the manifest of the project at path.

    Returns a TOMLDocument for pyproject.toml or a dict for package.json.

    Raises:
        ManifestNotFound: If no manifest can be located or read.
        InvalidManifest: If package.json is not a JSON object.
    """
    return _read(path)[1]


def get_version(path: Path | str | None = None) -> str:
    """Return the version declared by the project at path.

    Examples:
        get_version()              → the current project's version, e.g. "0.5.2"
        get_version("../any/dir")  → the version of the project in that directory
    """
    manifest_path, doc = _read(path)
    return get_manifest_version(manifest_path, doc)


def set_version(
    version: str,
    path: Path | str | None = None,
    indentation: int = DEFAULT_INDENTATION,
) -> None:
    """Write version into the manifest of the project at path.

    The version string is stored verbatim; pass it through to_semver()
    first to normalize it. The manifest is rewritten in place, at the same
    file it was read from.

    Args:
        version: New version string.
        path: Manifest file or a directory inside the project.
        indentation: Spaces per level when pretty-printing package.json.
    """
    manifest_path, doc = _read(path)
    set_manifest_version(manifest_path, doc, version)
    save_manifest(manifest_path, doc, indentation)
    logger.info("version_written", path=str(manifest_path), version=version)


def bump(
    level: str,
    path: Path | str | None = None,
    indentation: int = DEFAULT_INDENTATION,
) -> VersionBump:
    """Increment the project's version in place and report the change.

    Raises:
        InvalidArgument: If level is not major, minor or patch. Checked
            before the manifest is touched.
        ManifestNotFound: If no manifest can be located or read.
    """
    check_level(level)
    manifest_path, doc = _read(path)
    old = get_manifest_version(manifest_path, doc)
    new = increment(old, level)
    set_manifest_version(manifest_path, doc, new)
    save_manifest(manifest_path, doc, indentation)
    logger.info("version_bumped", path=str(manifest_path), old=old, new=new)
    return VersionBump(path=manifest_path, old=old, new=new)
