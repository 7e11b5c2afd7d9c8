"""High level entry points tying the planner and the mover together."""
from __future__ import annotations

import logging
import time
from pathlib import Path

from .config import parse_config_payload
from .file_mover import FileMover
from .logger import log_event
from .models import ProgressCallback, SortConfig, SortPlan, SortResult
from .planner import Planner

LOGGER_NAME = "sortery.sorter"


class Sorter:
    """Sort the files of ``config.source_root`` into ``config.target_root``.

    Example::

        config = SortConfig(
            source_root=Path("~/Pictures/inbox").expanduser(),
            target_root=Path("~/Pictures/sorted").expanduser(),
            date_format="%Y-%m-%d",
            preserve_name=True,
            exclude_extensions=frozenset({"txt"}),
        )
        count, old, new = Sorter(config).sort(dry_run=True)
    """

    def __init__(
        self,
        config: SortConfig,
        *,
        planner: Planner | None = None,
        mover: FileMover | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.planner = planner or Planner()
        self.mover = mover or FileMover()
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    @classmethod
    def from_json(
        cls,
        json_string: str,
        source: str | Path,
        target: str | Path,
        *,
        avoid_existing: bool = False,
    ) -> Sorter:
        """Create a sorter from a JSON configuration string plus the two roots."""

        data = parse_config_payload(json_string)
        return cls(data.to_sort_config(source, target, avoid_existing=avoid_existing))

    def plan(self) -> SortPlan:
        return self.planner.build_plan(self.config)

    def sort(self, dry_run: bool = False, progress: ProgressCallback | None = None) -> SortResult:
        """Plan and execute the run; nothing is renamed when *dry_run* is true."""

        started = time.perf_counter()
        plan = self.plan()
        result = self.mover.execute(plan, dry_run=dry_run, progress=progress)
        log_event(
            self.logger,
            level=logging.INFO,
            action="sort.finished",
            message=f"{'Dry run' if dry_run else 'Run'} finished with {result.items_sorted} file(s)",
            duration_ms=round((time.perf_counter() - started) * 1000.0, 3),
            extra={"dry_run": dry_run},
        )
        return result

    def sort_with_callback(self, dry_run: bool, callback: ProgressCallback) -> SortResult:
        return self.sort(dry_run, progress=callback)


def plan_and_execute(
    config: SortConfig,
    dry_run: bool,
    progress: ProgressCallback | None = None,
) -> SortResult:
    """Return ``(items_sorted, old_paths, new_paths)`` for a run over *config*."""

    return Sorter(config).sort(dry_run, progress=progress)


__all__ = ["Sorter", "plan_and_execute"]
