"""Filesystem helpers used by Sortery."""
from __future__ import annotations

from pathlib import Path


def ensure_directory(path: Path) -> Path:
    """Ensure that *path* exists as a directory and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def split_name(name: str) -> tuple[str, str]:
    """Split a file name into ``(stem, extension)`` at its last dot.

    The extension excludes the dot. A name whose only dot is the leading one
    (``.bashrc``) has no extension, and ``"report."`` has an empty one.

    >>> split_name("archive.tar.gz")
    ('archive.tar', 'gz')
    >>> split_name(".bashrc")
    ('.bashrc', '')
    """

    index = name.rfind(".")
    if index <= 0:
        return name, ""
    return name[:index], name[index + 1:]


def unique_path(
    base: Path,
    *,
    reserved: set[Path] | None = None,
    check_disk: bool = False,
) -> Path:
    """Return a path derived from *base* that is not in ``reserved``.

    Collisions are numbered ``stem_2.ext``, ``stem_3.ext`` and so on. The dot
    before the extension is always kept, so an extension-less ``"2022 test."``
    becomes ``"2022 test_2."``. With ``check_disk`` paths that already exist
    are treated as taken too. The selected path is added to ``reserved``.
    """

    reserved_paths: set[Path] = reserved if reserved is not None else set()

    def taken(path: Path) -> bool:
        return path in reserved_paths or (check_disk and path.exists())

    candidate = base
    if taken(candidate):
        stem, extension = split_name(base.name)
        counter = 2
        while True:
            candidate = base.with_name(f"{stem}_{counter}.{extension}")
            if not taken(candidate):
                break
            counter += 1
    reserved_paths.add(candidate)
    return candidate


__all__ = ["ensure_directory", "split_name", "unique_path"]
