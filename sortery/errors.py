"""Exceptions raised by the sorting engine."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class SorteryError(Exception):
    """Base class for every failure surfaced by Sortery."""


@dataclass(eq=False)
class SourceRootMissing(SorteryError):
    """Raised before traversal when the source directory does not exist."""

    path: Path

    def __str__(self) -> str:
        return f'Source directory "{self.path}" does not exist.'


@dataclass(eq=False)
class MetadataUnavailable(SorteryError):
    """Raised when a visited entry cannot be stat'ed or listed."""

    path: Path
    reason: str | None = None

    def __str__(self) -> str:
        message = f"Cannot read metadata for {self.path}"
        if self.reason:
            message = f"{message}: {self.reason}"
        return message


@dataclass(eq=False)
class TimestampKindUnsupported(SorteryError):
    """Raised when the platform does not expose the requested timestamp."""

    path: Path
    kind: str

    def __str__(self) -> str:
        return f"Timestamp kind {self.kind!r} is not available for {self.path} on this platform"


@dataclass(eq=False)
class ConfigParseError(SorteryError):
    """Raised when a configuration payload is malformed."""

    message: str
    path: tuple[str | int, ...] | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" (line {self.line}, column {self.column or 1})"
        pointer = ""
        if self.path:
            pointer = " at $." + ".".join(str(part) for part in self.path)
        return f"{self.message}{pointer}{location}"


@dataclass(eq=False)
class RenameFailed(SorteryError):
    """Raised when a planned rename cannot be performed.

    ``completed`` is the number of entries renamed before the failure. Those
    renames are not undone.
    """

    source: Path
    destination: Path
    completed: int
    reason: str | None = None

    def __str__(self) -> str:
        message = f"Failed to rename {self.source} -> {self.destination}"
        if self.reason:
            message = f"{message}: {self.reason}"
        return f"{message} ({self.completed} file(s) already moved)"


__all__ = [
    "ConfigParseError",
    "MetadataUnavailable",
    "RenameFailed",
    "SorteryError",
    "SourceRootMissing",
    "TimestampKindUnsupported",
]
