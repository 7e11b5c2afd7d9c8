"""Planner component that turns a source tree into a list of renames."""
from __future__ import annotations

import logging
from pathlib import Path

from .destination import build_destination
from .errors import SourceRootMissing
from .file_scanner import FileScanner
from .filters import ExtensionFilter
from .logger import log_event
from .models import PlanEntry, SortConfig, SortPlan
from .timestamps import resolve_timestamp
from .utils.fs import unique_path

LOGGER_NAME = "sortery.planner"


class Planner:
    """Walk the source tree and assign every eligible file a destination."""

    def __init__(
        self,
        *,
        scanner: FileScanner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.scanner = scanner
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    # ------------------------------------------------------------------
    # Public API
    def build_plan(self, config: SortConfig) -> SortPlan:
        """Return the :class:`~sortery.models.SortPlan` for *config*.

        Nothing on disk is modified. The first file seen keeps an unsuffixed
        destination; later files with the same destination are numbered from 2.
        """

        source_root = Path(config.source_root)
        if not source_root.is_dir():
            raise SourceRootMissing(source_root)

        scanner = self.scanner or FileScanner(skip_directories=self._nested_target(config))
        eligible = ExtensionFilter(config.exclude_extensions, config.only_extensions)
        assigned: set[Path] = set()
        plan = SortPlan()

        for source in scanner.iter_files(source_root):
            if not eligible(source):
                log_event(
                    self.logger,
                    level=logging.DEBUG,
                    action="plan.skip",
                    message=f"Skip {source}",
                    extra={"path": str(source), "reason": "extension"},
                )
                continue

            plan.total_eligible += 1
            timestamp = resolve_timestamp(source, config.date_kind)
            candidate = build_destination(
                config.target_root,
                source,
                timestamp,
                config.date_format,
                config.preserve_name,
            )
            destination = unique_path(candidate, reserved=assigned, check_disk=config.avoid_existing)
            if destination != candidate:
                log_event(
                    self.logger,
                    level=logging.INFO,
                    action="plan.collision",
                    message=f"{candidate} already taken, using {destination.name}",
                    extra={"path": str(source), "candidate": str(candidate)},
                )

            plan.entries.append(PlanEntry(source=source, destination=destination))
            log_event(
                self.logger,
                level=logging.INFO,
                action="plan.item",
                message=f"Planned {source} -> {destination}",
                extra={"timestamp": timestamp.isoformat(), "date_type": config.date_kind.value},
            )

        log_event(
            self.logger,
            level=logging.INFO,
            action="plan.summary",
            message=f"Planned {len(plan)} of {plan.total_eligible} eligible file(s)",
            extra={"source": str(source_root), "target": str(config.target_root)},
        )
        return plan

    # ------------------------------------------------------------------
    # Helpers
    @staticmethod
    def _nested_target(config: SortConfig) -> list[Path]:
        """Return the target root, spelled under the source root, if it lives there."""

        source = Path(config.source_root)
        try:
            relative = Path(config.target_root).resolve().relative_to(source.resolve())
        except ValueError:
            return []
        if relative == Path("."):
            return []
        return [source / relative]


__all__ = ["Planner"]
