from __future__ import annotations

from pathlib import Path

import pytest

from sortery.errors import RenameFailed
from sortery.file_mover import FileMover
from sortery.models import PlanEntry, SortPlan


def snapshot(root: Path) -> list[str]:
    return sorted(path.relative_to(root).as_posix() for path in root.rglob("*"))


def make_plan(tmp_path: Path, count: int = 4) -> SortPlan:
    plan = SortPlan()
    for index in range(1, count + 1):
        source = tmp_path / "source" / f"file{index}.jpg"
        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_text(str(index), encoding="utf-8")
        destination = tmp_path / "target" / "2022" / "01" / f"2022_{index}.jpg"
        plan.entries.append(PlanEntry(source=source, destination=destination))
        plan.total_eligible += 1
    return plan


def test_dry_run_leaves_filesystem_untouched(tmp_path: Path) -> None:
    plan = make_plan(tmp_path)
    before = snapshot(tmp_path)

    result = FileMover().execute(plan, dry_run=True)

    assert snapshot(tmp_path) == before
    assert result.items_sorted == 4
    assert result.old_paths == plan.sources
    assert result.new_paths == plan.destinations


def test_run_creates_directories_and_renames_in_order(tmp_path: Path) -> None:
    plan = make_plan(tmp_path)

    count, old_paths, new_paths = FileMover().execute(plan)

    assert count == 4
    for old, new in zip(old_paths, new_paths):
        assert not old.exists()
        assert new.exists()
    assert new_paths[2].read_text(encoding="utf-8") == "3"


def test_progress_reports_done_total_and_percent(tmp_path: Path) -> None:
    calls: list[tuple[int, int, int]] = []

    FileMover().execute(make_plan(tmp_path), progress=lambda *data: calls.append(data))

    assert calls == [(1, 4, 25), (2, 4, 50), (3, 4, 75), (4, 4, 100)]


def test_progress_in_dry_run_follows_plan(tmp_path: Path) -> None:
    calls: list[tuple[int, int, int]] = []

    FileMover().execute(make_plan(tmp_path, count=3), dry_run=True, progress=lambda *data: calls.append(data))

    assert calls == [(1, 3, 33), (2, 3, 66), (3, 3, 100)]


def test_failure_on_second_rename_stops_the_batch(tmp_path: Path) -> None:
    plan = make_plan(tmp_path)
    plan.entries[1].source.unlink()
    calls: list[tuple[int, int, int]] = []

    with pytest.raises(RenameFailed) as excinfo:
        FileMover().execute(plan, progress=lambda *data: calls.append(data))

    first, second, third, fourth = plan.entries
    assert excinfo.value.source == second.source
    assert excinfo.value.completed == 1
    assert first.destination.exists() and not first.source.exists()
    assert not second.destination.exists()
    assert third.source.exists() and not third.destination.exists()
    assert fourth.source.exists() and not fourth.destination.exists()
    assert calls == [(1, 4, 25)]


def test_empty_plan_is_a_no_op(tmp_path: Path) -> None:
    calls: list[tuple[int, int, int]] = []
    result = FileMover().execute(SortPlan(), progress=lambda *data: calls.append(data))
    assert tuple(result) == (0, [], [])
    assert calls == []
