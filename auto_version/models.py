"""Data models for auto-version."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class VersionBump(BaseModel):
    """Records a version change written to a manifest.

    Attributes:
        path: Manifest file that was rewritten.
        old: The version before bumping, as declared in the manifest.
        new: The version after bumping, always in "X.Y.Z" form.
    """

    path: Path
    old: str
    new: str
