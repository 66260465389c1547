"""Copies classified works into the grouped destination tree."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from .logging import get_logger
from .models import WorkRecord, group_label, subgroup_label


class ReorganizeError(RuntimeError):
    """Raised when the destination tree cannot be prepared or populated."""


def destination_for(record: WorkRecord, source_root: Path, dest_root: Path) -> Path:
    """Compute ``dest_root/group/subgroup/<path relative to source_root>``."""
    try:
        relative = Path(record.file).relative_to(source_root)
    except ValueError as exc:
        raise ReorganizeError(
            f"{record.file} is not located under source root {source_root}"
        ) from exc
    return dest_root / group_label(record) / subgroup_label(record) / relative


def clear_destination(dest_root: Path) -> None:
    """Empty ``dest_root`` without removing it, creating it when absent."""
    try:
        if dest_root.exists() and not dest_root.is_dir():
            raise ReorganizeError(f"Destination is not a directory: {dest_root}")
        dest_root.mkdir(parents=True, exist_ok=True)
        for entry in dest_root.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
    except OSError as exc:
        raise ReorganizeError(f"Failed to prepare destination {dest_root}: {exc}") from exc


@dataclass
class ReorganizeSummary:
    """Files placed by a single reorganizer pass."""

    dest_root: str
    placed: List[str] = field(default_factory=list)


class Reorganizer:
    """Rebuilds the destination tree from stored classification records."""

    def __init__(self) -> None:
        self.logger = get_logger("reorganizer")

    def reorganize(
        self,
        source_root: str | Path,
        dest_root: str | Path,
        records: Iterable[WorkRecord],
    ) -> ReorganizeSummary:
        """Clear ``dest_root`` and copy every record's file to its group folder.

        Any copy failure aborts the pass with :class:`ReorganizeError`; the
        partially populated tree is left for the next full run to replace.
        """
        source_path = Path(source_root).expanduser().resolve()
        dest_path = Path(dest_root).expanduser().resolve()
        if dest_path == source_path or source_path in dest_path.parents:
            raise ReorganizeError(
                f"Destination {dest_path} must not be inside source root {source_path}"
            )
        if dest_path in source_path.parents:
            raise ReorganizeError(
                f"Source root {source_path} must not be inside destination {dest_path}"
            )

        clear_destination(dest_path)
        summary = ReorganizeSummary(dest_root=str(dest_path))

        for record in records:
            target = destination_for(record, source_path, dest_path)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(record.file, target)
            except OSError as exc:
                raise ReorganizeError(f"Failed to copy {record.file} to {target}: {exc}") from exc
            summary.placed.append(str(target))
            self.logger.debug("Copied %s -> %s", record.file, target)

        self.logger.info("Placed %d files under %s", len(summary.placed), dest_path)
        return summary


__all__ = [
    "ReorganizeError",
    "ReorganizeSummary",
    "Reorganizer",
    "clear_destination",
    "destination_for",
    "group_label",
    "subgroup_label",
]
