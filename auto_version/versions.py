"""Version parsing and bumping utilities.

Handles conversion between free-form version strings and semver objects.
Parsing is lenient: incomplete or decorated strings are normalized
(e.g., "1.3" → "1.3.0", "v1.3.5" → "1.3.5") and input with no digits at
all degrades to "0.0.0" instead of raising.
"""

from __future__ import annotations

import re

import semver

from .exceptions import InvalidArgument

LEVELS = ("major", "minor", "patch")

# First digit run, then up to two more, each behind a single non-digit separator
_VERSION_RE = re.compile(r"(\d+)(?:\D(\d+))?(?:\D(\d+))?")


def parse(version_str: str) -> semver.Version:
    """Extract major, minor and patch numbers from a version string.

    Missing components are padded with zeros:
    - "1" → 1.0.0
    - "1.2" → 1.2.0
    - "v1.2.3" → 1.2.3
    - "version 3" → 3.0.0
    - "latest" → 0.0.0

    Anything after the third number is ignored, and a component too long
    to convert to an int becomes 0. Prerelease/build metadata is not
    supported.
    """
    match = _VERSION_RE.search(version_str)
    if match is None:
        return semver.Version(0, 0, 0)
    return semver.Version(*(_component(group) for group in match.groups()))


def _component(group: str | None) -> int:
    """Convert one digit run, treating absent or unconvertible runs as 0."""
    if not group:
        return 0
    try:
        return int(group)
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return 0


def stringify(version: semver.Version) -> str:
    """Join a version as "major.minor.patch"."""
    return f"{version.major}.{version.minor}.{version.patch}"


def to_semver(version_str: str) -> str:
    """Normalize any version string to the "X.Y.Z" form.

    Examples:
        "1.3.5" → "1.3.5"
        "1.3" → "1.3.0"
        "v1.3.5" → "1.3.5"
        "version 3" → "3.0.0"
    """
    return stringify(parse(version_str))


def check_level(level: str) -> str:
    """Return level lowercased, or raise InvalidArgument if it is unknown."""
    normalized = level.lower() if isinstance(level, str) else None
    if normalized not in LEVELS:
        raise InvalidArgument(
            f"Unknown version level {level!r}",
            context={"expected": "|".join(LEVELS)},
        )
    return normalized


def increment(version_str: str, level: str) -> str:
    """Increment one component of a version and return it as a string.

    Bumping a component resets every component to its right:
        increment("0.4.7", "patch") → "0.4.8"
        increment("0.4.7", "minor") → "0.5.0"
        increment("0.4.7", "major") → "1.0.0"

    Args:
        version_str: Any version string accepted by parse().
        level: One of "major", "minor" or "patch" (case-insensitive).

    Raises:
        InvalidArgument: If level is not one of LEVELS.
    """
    normalized = check_level(level)
    version = parse(version_str)
    if normalized == "major":
        version = version.bump_major()
    elif normalized == "minor":
        version = version.bump_minor()
    else:
        version = version.bump_patch()
    return stringify(version)


def major(version_str: str) -> str:
    """Bump for a breaking release: "0.5.9" → "1.0.0"."""
    return increment(version_str, "major")


def minor(version_str: str) -> str:
    """Bump for a feature release: "0.5.8" → "0.6.0"."""
    return increment(version_str, "minor")


def patch(version_str: str) -> str:
    """Bump for a bugfix release: "0.5.9" → "0.5.10"."""
    return increment(version_str, "patch")
