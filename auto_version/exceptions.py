"""Exception hierarchy for auto-version.

The manifest can be missing or unreadable, it can hold something other
than a key/value document, or a caller can ask for a version level that
does not exist. Everything else is absorbed by the lenient version parser.
"""

from __future__ import annotations

from typing import Any


class AutoVersionError(Exception):
    """Base exception for all auto-version errors.

    Attributes:
        message: Human-readable error message.
        context: Extra key/value details appended to the rendered message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        items = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({items})"

    def __str__(self) -> str:
        return self._format_message()


class ManifestNotFound(AutoVersionError, FileNotFoundError):
    """No pyproject.toml or package.json could be located or read."""


class InvalidArgument(AutoVersionError, ValueError):
    """A version level outside major/minor/patch was requested."""


class InvalidManifest(AutoVersionError, ValueError):
    """The manifest parsed, but is not a key/value document."""
