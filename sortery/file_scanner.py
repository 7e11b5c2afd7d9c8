"""Deterministic recursive directory walk."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from .errors import MetadataUnavailable
from .logger import log_event

LOGGER_NAME = "sortery.scanner"


class FileScanner:
    """Yield every non-directory entry below a root in a stable order.

    Inside each directory files come first, sorted by name, followed by the
    subdirectories, also sorted by name. Symlinked directories are not
    descended into. Symlinks to files are reported like files.
    """

    def __init__(
        self,
        *,
        skip_directories: Iterable[Path] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.skip_directories = {Path(path) for path in skip_directories}
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def iter_files(self, root: str | Path) -> Iterator[Path]:
        yield from self._scan_directory(Path(root))

    def _scan_directory(self, directory: Path) -> Iterator[Path]:
        files: list[Path] = []
        subdirectories: list[Path] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    entry_path = Path(entry.path)
                    if entry.is_dir():
                        if entry.is_symlink() or entry_path in self.skip_directories:
                            log_event(
                                self.logger,
                                level=logging.DEBUG,
                                action="scan.skip_dir",
                                message=f"Not descending into {entry_path}",
                                extra={"path": str(entry_path)},
                            )
                            continue
                        subdirectories.append(entry_path)
                    else:
                        files.append(entry_path)
        except OSError as exc:
            raise MetadataUnavailable(directory, exc.strerror or str(exc)) from exc

        files.sort(key=lambda path: path.name)
        subdirectories.sort(key=lambda path: path.name)
        yield from files
        for subdirectory in subdirectories:
            yield from self._scan_directory(subdirectory)


__all__ = ["FileScanner"]
