"""Carry out (or simulate) the renames of a plan."""
from __future__ import annotations

import logging
import os

from .errors import RenameFailed
from .logger import log_event
from .models import PlanEntry, ProgressCallback, SortPlan, SortResult
from .utils.fs import ensure_directory

LOGGER_NAME = "sortery.mover"


class FileMover:
    """Execute plan entries in order, stopping at the first failure."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def execute(
        self,
        plan: SortPlan,
        *,
        dry_run: bool = False,
        progress: ProgressCallback | None = None,
    ) -> SortResult:
        """Rename every entry of *plan*, or only report them when *dry_run*.

        A failed rename raises :class:`~sortery.errors.RenameFailed`. Entries
        renamed before it stay where they are.
        """

        total = len(plan)
        for done, entry in enumerate(plan, start=1):
            if dry_run:
                log_event(
                    self.logger,
                    level=logging.INFO,
                    action="move.dry_run",
                    message=f"Would move {entry.source} -> {entry.destination}",
                )
            else:
                self._rename(entry, completed=done - 1)
            if progress is not None:
                progress(done, total, done * 100 // total)

        return SortResult(
            items_sorted=total,
            old_paths=plan.sources,
            new_paths=plan.destinations,
        )

    def _rename(self, entry: PlanEntry, *, completed: int) -> None:
        try:
            ensure_directory(entry.destination.parent)
            os.rename(entry.source, entry.destination)
        except OSError as exc:
            log_event(
                self.logger,
                level=logging.ERROR,
                action="move.failed",
                message=f"Error moving {entry.source} to {entry.destination}: {exc}",
                extra={"completed": completed},
            )
            raise RenameFailed(
                entry.source,
                entry.destination,
                completed,
                exc.strerror or str(exc),
            ) from exc

        log_event(
            self.logger,
            level=logging.INFO,
            action="move.rename",
            message=f"Moved {entry.source} -> {entry.destination}",
        )


__all__ = ["FileMover"]
