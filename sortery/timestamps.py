"""Read the access, creation or modification time of a file."""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from .errors import MetadataUnavailable, TimestampKindUnsupported
from .models import DateKind


def epoch_seconds(stat_result: os.stat_result, kind: DateKind, path: Path) -> int:
    """Pick the timestamp for *kind* out of *stat_result*, in whole UTC epoch seconds.

    Creation time comes from ``st_birthtime`` (macOS, BSD, Windows on 3.12+) or
    ``st_ctime`` on Windows. Linux ``os.stat`` does not report a birth time, so
    ``DateKind.CREATED`` raises :class:`TimestampKindUnsupported` there.
    """

    if kind is DateKind.MODIFIED:
        value = stat_result.st_mtime
    elif kind is DateKind.ACCESSED:
        value = stat_result.st_atime
    else:
        value = getattr(stat_result, "st_birthtime", None)
        if value is None and os.name == "nt":
            # st_ctime is the creation time on Windows.
            value = stat_result.st_ctime
        if value is None:
            raise TimestampKindUnsupported(path, kind.value)
    return int(value)


def resolve_timestamp(path: str | Path, kind: DateKind | str) -> datetime:
    """Return the *kind* timestamp of *path* as a naive local-time ``datetime``."""

    file_path = Path(path)
    date_kind = DateKind.parse(kind)
    try:
        stat_result = file_path.stat()
    except OSError as exc:
        raise MetadataUnavailable(file_path, exc.strerror or str(exc)) from exc

    seconds = epoch_seconds(stat_result, date_kind, file_path)
    try:
        return datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError) as exc:
        raise MetadataUnavailable(file_path, f"timestamp {seconds} out of range") from exc


__all__ = ["epoch_seconds", "resolve_timestamp"]
