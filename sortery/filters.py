"""Extension based eligibility rules."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Iterable

from .utils.fs import split_name


def extension_of(path: str | Path) -> str:
    """Return the literal text after the last dot of the file name, or ``""``."""

    return split_name(Path(path).name)[1]


def is_eligible(
    path: str | Path,
    exclude: AbstractSet[str],
    only: AbstractSet[str],
) -> bool:
    """Return True if *path* should be sorted.

    Matching is case-sensitive. A non-empty *only* set decides on its own and
    *exclude* is ignored.
    """

    extension = extension_of(path)
    if only:
        return extension in only
    return extension not in exclude


@dataclass(frozen=True, slots=True)
class ExtensionFilter:
    """Bind the exclude and only sets of a run."""

    exclude: frozenset[str] = frozenset()
    only: frozenset[str] = frozenset()

    @classmethod
    def from_lists(cls, exclude: Iterable[str] = (), only: Iterable[str] = ()) -> ExtensionFilter:
        return cls(frozenset(exclude), frozenset(only))

    def __call__(self, path: str | Path) -> bool:
        return is_eligible(path, self.exclude, self.only)


__all__ = ["ExtensionFilter", "extension_of", "is_eligible"]
