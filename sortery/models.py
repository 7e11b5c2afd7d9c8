"""Core dataclasses shared across Sortery modules."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, Mapping

ProgressCallback = Callable[[int, int, int], None]


class DateKind(str, Enum):
    """Which file timestamp drives the sort."""

    ACCESSED = "a"
    CREATED = "c"
    MODIFIED = "m"

    @classmethod
    def parse(cls, value: str | DateKind) -> DateKind:
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(repr(kind.value) for kind in cls)
            raise ValueError(f"date type must be one of {choices}, got {value!r}") from None


@dataclass(frozen=True, slots=True)
class SortConfig:
    """Immutable settings for a single sorting run."""

    source_root: Path
    target_root: Path
    date_format: str
    date_kind: DateKind = DateKind.MODIFIED
    preserve_name: bool = False
    exclude_extensions: frozenset[str] = frozenset()
    only_extensions: frozenset[str] = frozenset()
    avoid_existing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "source_root", Path(self.source_root))
        object.__setattr__(self, "target_root", Path(self.target_root))
        object.__setattr__(self, "date_kind", DateKind.parse(self.date_kind))
        object.__setattr__(self, "exclude_extensions", frozenset(self.exclude_extensions))
        object.__setattr__(self, "only_extensions", frozenset(self.only_extensions))

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, object],
        source_root: str | Path,
        target_root: str | Path,
        *,
        avoid_existing: bool = False,
    ) -> SortConfig:
        """Build a config from an already-validated JSON payload.

        The payload uses the on-disk key names (``date_type``,
        ``exclude_type``, ``only_type``). The roots are never part of it.
        """

        return cls(
            source_root=Path(source_root),
            target_root=Path(target_root),
            date_format=str(payload["date_format"]),
            date_kind=DateKind.parse(payload["date_type"]),  # type: ignore[arg-type]
            preserve_name=bool(payload["preserve_name"]),
            exclude_extensions=frozenset(payload["exclude_type"]),  # type: ignore[arg-type]
            only_extensions=frozenset(payload["only_type"]),  # type: ignore[arg-type]
            avoid_existing=avoid_existing,
        )


@dataclass(frozen=True, slots=True)
class PlanEntry:
    """A single planned rename."""

    source: Path
    destination: Path


@dataclass(slots=True)
class SortPlan:
    """Ordered renames produced by the planner for one run."""

    entries: list[PlanEntry] = field(default_factory=list)
    total_eligible: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)

    @property
    def sources(self) -> list[Path]:
        return [entry.source for entry in self.entries]

    @property
    def destinations(self) -> list[Path]:
        return [entry.destination for entry in self.entries]


@dataclass(frozen=True, slots=True)
class SortResult:
    """Outcome of a run; ``old_paths[i]`` was (or would be) renamed to ``new_paths[i]``."""

    items_sorted: int
    old_paths: list[Path]
    new_paths: list[Path]

    def __iter__(self) -> Iterator[object]:
        yield self.items_sorted
        yield self.old_paths
        yield self.new_paths

    def pairs(self) -> Iterable[tuple[Path, Path]]:
        return zip(self.old_paths, self.new_paths)


__all__ = [
    "DateKind",
    "PlanEntry",
    "ProgressCallback",
    "SortConfig",
    "SortPlan",
    "SortResult",
]
