"""Tests for joborg.reorganizer."""

from __future__ import annotations

from pathlib import Path

import pytest

from joborg.models import WorkRecord
from joborg.reorganizer import (
    ReorganizeError,
    Reorganizer,
    clear_destination,
    destination_for,
)


def _record(path: Path, *, language="other", quality="low", national=False) -> WorkRecord:
    return WorkRecord(
        file=str(path),
        language=language,
        quality=quality,
        national=national,
        content_length=10,
    )


@pytest.mark.parametrize(
    ("language", "quality", "national", "expected"),
    [
        ("java", "good", True, "Works in java language/National (uruguayan) works"),
        ("java", "good", False, "Works in java language/Good quality works"),
        ("java", "low", False, "Works in java language/Low quality works"),
        ("other", "low", True, "Works in other languages/National (uruguayan) works"),
        ("other", "good", False, "Works in other languages/Good quality works"),
        ("other", "low", False, "Works in other languages/Low quality works"),
    ],
)
def test_destination_for_follows_group_rules(
    tmp_path: Path, language: str, quality: str, national: bool, expected: str
) -> None:
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    record = _record(source / "team" / "job.txt", language=language, quality=quality, national=national)

    assert destination_for(record, source, dest) == dest / expected / "team" / "job.txt"


def test_destination_for_rejects_paths_outside_source(tmp_path: Path) -> None:
    record = _record(tmp_path / "elsewhere" / "job.txt")
    with pytest.raises(ReorganizeError):
        destination_for(record, tmp_path / "src", tmp_path / "dest")


def test_clear_destination_keeps_root_and_removes_children(tmp_path: Path) -> None:
    dest = tmp_path / "dest"
    (dest / "old" / "nested").mkdir(parents=True)
    (dest / "old" / "nested" / "file.txt").write_text("x", encoding="utf-8")
    (dest / "stale.txt").write_text("x", encoding="utf-8")

    clear_destination(dest)

    assert dest.is_dir()
    assert list(dest.iterdir()) == []


def test_clear_destination_creates_missing_root(tmp_path: Path) -> None:
    dest = tmp_path / "a" / "b"
    clear_destination(dest)
    assert dest.is_dir()


def test_reorganize_copies_bytes_preserving_relative_layout(work_tree, tmp_path: Path) -> None:
    work_tree.write(
        {
            "team/one.txt": "Java in Uruguay",
            "team/two.txt": b"\x00\x01binary",
        }
    )
    dest = tmp_path.resolve() / "dest"
    records = [
        _record(work_tree.path("team/one.txt"), language="java", national=True),
        _record(work_tree.path("team/two.txt")),
    ]

    summary = Reorganizer().reorganize(work_tree.path(), dest, records)

    one = dest / "Works in java language" / "National (uruguayan) works" / "team" / "one.txt"
    two = dest / "Works in other languages" / "Low quality works" / "team" / "two.txt"
    assert one.read_bytes() == work_tree.path("team/one.txt").read_bytes()
    assert two.read_bytes() == b"\x00\x01binary"
    assert summary.placed == [str(one), str(two)]


def test_reorganize_is_idempotent_and_drops_stale_placements(work_tree, tmp_path: Path) -> None:
    work_tree.write({"job.txt": "java"})
    dest = tmp_path / "dest"
    job = work_tree.path("job.txt")

    Reorganizer().reorganize(work_tree.path(), dest, [_record(job, language="java")])
    Reorganizer().reorganize(work_tree.path(), dest, [_record(job)])

    files = sorted(p.relative_to(dest).as_posix() for p in dest.rglob("*") if p.is_file())
    assert files == ["Works in other languages/Low quality works/job.txt"]


def test_reorganize_fails_fast_on_missing_source(work_tree, tmp_path: Path) -> None:
    dest = tmp_path / "dest"
    records = [_record(work_tree.path("vanished.txt"))]

    with pytest.raises(ReorganizeError) as excinfo:
        Reorganizer().reorganize(work_tree.path(), dest, records)

    assert "vanished.txt" in str(excinfo.value)


def test_reorganize_rejects_destination_inside_source(work_tree) -> None:
    with pytest.raises(ReorganizeError):
        Reorganizer().reorganize(work_tree.path(), work_tree.path("out"), [])
    assert not work_tree.path("out").exists()


def test_reorganize_rejects_source_inside_destination(work_tree, tmp_path: Path) -> None:
    work_tree.write({"job.txt": "java"})
    with pytest.raises(ReorganizeError):
        Reorganizer().reorganize(work_tree.path(), tmp_path, [])
    assert work_tree.path("job.txt").exists()
