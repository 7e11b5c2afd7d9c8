from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from sortery.errors import MetadataUnavailable, TimestampKindUnsupported
from sortery.models import DateKind
from sortery.timestamps import epoch_seconds, resolve_timestamp

MTIME = datetime(2022, 1, 1, 10, 32, 2, tzinfo=timezone.utc).timestamp()
ATIME = datetime(2021, 6, 15, 8, 0, 0, tzinfo=timezone.utc).timestamp()


@pytest.fixture()
def dated_file(tmp_path: Path) -> Path:
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"jpeg")
    os.utime(path, (ATIME, MTIME))
    return path


def test_modified_time_is_local(dated_file: Path) -> None:
    assert resolve_timestamp(dated_file, DateKind.MODIFIED) == datetime.fromtimestamp(MTIME)


def test_accessed_time_accepts_short_code(dated_file: Path) -> None:
    assert resolve_timestamp(dated_file, "a") == datetime.fromtimestamp(ATIME)


def test_fractional_seconds_are_truncated(tmp_path: Path) -> None:
    path = tmp_path / "clip.mov"
    path.write_bytes(b"")
    os.utime(path, (MTIME + 0.75, MTIME + 0.75))
    assert resolve_timestamp(path, "m") == datetime.fromtimestamp(MTIME)


def test_missing_file_raises_metadata_unavailable(tmp_path: Path) -> None:
    missing = tmp_path / "gone.txt"
    with pytest.raises(MetadataUnavailable) as excinfo:
        resolve_timestamp(missing, "m")
    assert excinfo.value.path == missing


def test_unknown_kind_is_rejected(dated_file: Path) -> None:
    with pytest.raises(ValueError):
        resolve_timestamp(dated_file, "x")


def test_birthtime_used_for_created_kind() -> None:
    stat_result = SimpleNamespace(st_birthtime=1641033122.5, st_ctime=0.0, st_mtime=0.0, st_atime=0.0)
    assert epoch_seconds(stat_result, DateKind.CREATED, Path("a.jpg")) == 1641033122


@pytest.mark.skipif(os.name == "nt", reason="st_ctime is the creation time on Windows")
def test_created_kind_without_birthtime_is_unsupported() -> None:
    stat_result = SimpleNamespace(st_ctime=1641033122.0, st_mtime=0.0, st_atime=0.0)
    with pytest.raises(TimestampKindUnsupported) as excinfo:
        epoch_seconds(stat_result, DateKind.CREATED, Path("a.jpg"))
    assert excinfo.value.kind == "c"
