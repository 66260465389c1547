"""Pipeline orchestration for scan, reorganize and report phases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

from .config import ConfigError, JobOrgConfig
from .logging import get_logger
from .models import ScoredEntry
from .ranking import ReportBuilder
from .reorganizer import Reorganizer, ReorganizeSummary
from .scanner import ScanSummary, WorkScanner
from .stores import RecordStore


@dataclass
class PipelineOutcome:
    """Result of a full pipeline run."""

    scan: ScanSummary
    reorganize: ReorganizeSummary
    report_path: Path
    ranked: List[ScoredEntry]


class Pipeline:
    """Runs the scan, reorganize and rank phases strictly in sequence."""

    def __init__(
        self,
        scanner: WorkScanner | None = None,
        reorganizer: Reorganizer | None = None,
        report_builder: ReportBuilder | None = None,
    ) -> None:
        self.scanner = scanner or WorkScanner()
        self.reorganizer = reorganizer or Reorganizer()
        self.report_builder = report_builder or ReportBuilder()
        self.logger = get_logger("pipeline")

    def run(
        self, config: JobOrgConfig, *, generated_at: datetime | None = None
    ) -> PipelineOutcome:
        """Rebuild the store, destination tree and report from the source tree."""
        source = config.source_dir
        if not source.exists():
            raise FileNotFoundError(f"Source path not found: {source}")
        if not source.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {source}")
        _check_layout(config)

        self.logger.info("Starting run for %s", source)
        store = RecordStore(config.db_path)

        scan = self.scanner.scan(source, store)

        # Each later phase reopens the store so it only sees the flushed generation.
        reorganized = self.reorganizer.reorganize(
            scan.root, config.destination_dir, RecordStore(config.db_path).records()
        )

        ranked = self.report_builder.write(
            RecordStore(config.db_path).records(),
            config.report_path,
            generated_at=generated_at,
        )
        self.logger.info("Run complete: %d files organized", len(reorganized.placed))
        return PipelineOutcome(
            scan=scan,
            reorganize=reorganized,
            report_path=config.report_path,
            ranked=ranked,
        )

    def report(
        self, config: JobOrgConfig, *, generated_at: datetime | None = None
    ) -> List[ScoredEntry]:
        """Re-rank the existing store without rescanning."""
        store = RecordStore(config.db_path)
        return self.report_builder.write(
            store.records(), config.report_path, generated_at=generated_at
        )


def _is_within(path: Path, root: Path) -> bool:
    path = path.expanduser().resolve()
    root = root.expanduser().resolve()
    return path == root or root in path.parents


def _check_layout(config: JobOrgConfig) -> None:
    """Reject layouts where one phase would delete or rescan another phase's output."""
    if _is_within(config.db_path, config.destination_dir):
        raise ConfigError(
            f"Record store {config.db_path} must not be inside destination {config.destination_dir}"
        )
    if _is_within(config.db_path, config.source_dir):
        raise ConfigError(
            f"Record store {config.db_path} must not be inside source root {config.source_dir}"
        )
    if _is_within(config.report_path, config.source_dir):
        raise ConfigError(
            f"Report {config.report_path} must not be inside source root {config.source_dir}"
        )


__all__ = ["Pipeline", "PipelineOutcome"]
