from __future__ import annotations

from datetime import datetime
from pathlib import Path

from sortery.destination import build_destination, build_file_name
from sortery.utils.fs import split_name, unique_path

STAMP = datetime(2022, 3, 7, 9, 5, 1)


def test_destination_uses_year_and_padded_month(tmp_path: Path) -> None:
    destination = build_destination(tmp_path, Path("src/test.jpg"), STAMP, "%Y", True)
    assert destination == tmp_path / "2022" / "03" / "2022 test.jpg"


def test_destination_directory_ignores_date_format(tmp_path: Path) -> None:
    destination = build_destination(tmp_path, Path("IMG_1.png"), STAMP, "%d.%m", False)
    assert destination == tmp_path / "2022" / "03" / "07.03.png"


def test_default_format_without_preserved_name() -> None:
    name = build_file_name("test.txt", STAMP, "%Y-%m-%d %Hh%Mm%Ss", False)
    assert name == "2022-03-07 09h05m01s.txt"


def test_missing_extension_keeps_trailing_dot() -> None:
    assert build_file_name("test", STAMP, "%Y", False) == "2022."
    assert build_file_name("test", STAMP, "%Y", True) == "2022 test."


def test_only_final_extension_is_split_off() -> None:
    assert build_file_name("backup.tar.gz", STAMP, "%Y", True) == "2022 backup.tar.gz"


def test_split_name() -> None:
    assert split_name("2022 test.") == ("2022 test", "")
    assert split_name("2022.03.jpg") == ("2022.03", "jpg")
    assert split_name(".profile") == (".profile", "")


def test_unique_path_returns_free_candidate_unchanged(tmp_path: Path) -> None:
    reserved: set[Path] = set()
    candidate = tmp_path / "2022 test.jpg"
    assert unique_path(candidate, reserved=reserved) == candidate
    assert candidate in reserved


def test_unique_path_numbers_collisions_from_two(tmp_path: Path) -> None:
    reserved: set[Path] = set()
    candidate = tmp_path / "2022.jpg"
    chosen = [unique_path(candidate, reserved=reserved) for _ in range(4)]
    assert [path.name for path in chosen] == ["2022.jpg", "2022_2.jpg", "2022_3.jpg", "2022_4.jpg"]
    assert len(set(chosen)) == 4


def test_unique_path_without_extension_suffixes_before_dot(tmp_path: Path) -> None:
    reserved = {tmp_path / "2022 test."}
    assert unique_path(tmp_path / "2022 test.", reserved=reserved).name == "2022 test_2."


def test_unique_path_skips_numbers_already_taken(tmp_path: Path) -> None:
    reserved = {tmp_path / "a.png", tmp_path / "a_2.png"}
    assert unique_path(tmp_path / "a.png", reserved=reserved).name == "a_3.png"


def test_unique_path_can_consider_files_on_disk(tmp_path: Path) -> None:
    (tmp_path / "2022.jpg").write_bytes(b"old")
    candidate = tmp_path / "2022.jpg"
    assert unique_path(candidate, reserved=set()) == candidate
    assert unique_path(candidate, reserved=set(), check_disk=True).name == "2022_2.jpg"
