"""Source tree scanning and record store population."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List

from .classifier import classify
from .logging import get_logger
from .models import WorkRecord
from .stores import RecordStore


@dataclass
class ScanSummary:
    """Outcome of a single scanner pass."""

    root: str
    files: int = 0
    unreadable_files: List[str] = field(default_factory=list)
    skipped_dirs: List[str] = field(default_factory=list)


class WorkScanner:
    """Walks a source tree and stores one classification record per file."""

    def __init__(self) -> None:
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path, store: RecordStore) -> ScanSummary:
        """Clear ``store`` and repopulate it from every regular file under ``root``."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")

        store.clear()
        summary = ScanSummary(root=str(root_path))

        for path in self._iter_files(root_path, summary):
            content: bytes | None
            try:
                content = path.read_bytes()
            except OSError as exc:
                self.logger.warning("Could not read %s: %s", path, exc)
                summary.unreadable_files.append(str(path))
                content = None

            classification = classify(content)
            if content and classification.content_length == 0:
                self.logger.warning("%s is not valid UTF-8; treating as empty", path)
                summary.unreadable_files.append(str(path))

            key = str(path)
            store.put(key, WorkRecord.from_classification(key, classification))
            summary.files += 1
            self.logger.debug(
                "Classified %s as %s/%s (national=%s)",
                key,
                classification.language,
                classification.quality,
                classification.national,
            )

        store.flush()
        self.logger.info("Scanned %d files under %s", summary.files, root_path)
        return summary

    def _iter_files(self, root: Path, summary: ScanSummary) -> Iterator[Path]:
        def _on_error(exc: OSError) -> None:
            self.logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc)
            summary.skipped_dirs.append(str(exc.filename))

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            current_dir = Path(dirpath)
            dirnames.sort()
            for filename in sorted(filenames):
                path = current_dir / filename
                if path.is_symlink() or not path.is_file():
                    continue
                yield path


__all__ = ["ScanSummary", "WorkScanner"]
