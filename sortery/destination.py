"""Compute where a file lands under the target root."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .utils.fs import split_name


def build_file_name(
    source_name: str,
    timestamp: datetime,
    date_format: str,
    preserve_name: bool,
) -> str:
    """Render ``"<date>[ <stem>].<ext>"`` for *source_name*.

    The dot is written even when the source has no extension.
    """

    stem, extension = split_name(source_name)
    name = timestamp.strftime(date_format)
    if preserve_name:
        name = f"{name} {stem}"
    return f"{name}.{extension}"


def build_destination(
    target_root: Path,
    source_file: Path,
    timestamp: datetime,
    date_format: str,
    preserve_name: bool,
) -> Path:
    """Return ``target_root/YYYY/MM/<file name>`` for *source_file*.

    Collisions are not checked here.
    """

    directory = Path(target_root) / f"{timestamp.year:04d}" / f"{timestamp.month:02d}"
    return directory / build_file_name(Path(source_file).name, timestamp, date_format, preserve_name)


__all__ = ["build_destination", "build_file_name"]
