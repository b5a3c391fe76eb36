"""Read, normalize and bump semantic versions of a project's manifest."""

from __future__ import annotations

from importlib.metadata import version as pkg_version

from .exceptions import (
    AutoVersionError,
    InvalidArgument,
    InvalidManifest,
    ManifestNotFound,
)
from .models import VersionBump
from .project import bump, get_local_path, get_manifest, get_version, set_version
from .versions import increment, major, minor, parse, patch, stringify, to_semver

__version__ = pkg_version("auto-version")

__all__ = [
    "AutoVersionError",
    "InvalidArgument",
    "InvalidManifest",
    "ManifestNotFound",
    "VersionBump",
    "__version__",
    "bump",
    "get_local_path",
    "get_manifest",
    "get_version",
    "increment",
    "major",
    "minor",
    "parse",
    "patch",
    "set_version",
    "stringify",
    "to_semver",
]
