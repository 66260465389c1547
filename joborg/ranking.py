"""Scoring, ranking and report rendering for stored works."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader

from .constants import (
    SCORE_LANGUAGE,
    SCORE_LENGTH_CAP,
    SCORE_QUALITY,
    SCORE_REGIONAL,
)
from .logging import get_logger
from .models import ScoredEntry, WorkRecord

_TEMPLATE_NAME = "top_opportunities.md.j2"
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def score_record(record: WorkRecord) -> ScoredEntry:
    """Convert a stored record into its ranking entry."""
    score = 0.0
    if record.is_language_match:
        score += SCORE_LANGUAGE
    if record.national:
        score += SCORE_REGIONAL
    if record.is_good_quality:
        score += SCORE_QUALITY
    score += min(record.content_length / SCORE_LENGTH_CAP, 1.0)

    return ScoredEntry(
        path=record.file,
        display_name=Path(record.file).name or "unknown",
        score=score,
        is_language_match=record.is_language_match,
        is_regional=record.national,
        is_good_quality=record.is_good_quality,
        content_length=record.content_length,
    )


def rank_records(records: Iterable[WorkRecord]) -> List[ScoredEntry]:
    """Return scored entries, highest score first; equal scores sort by path."""
    entries = [score_record(record) for record in records]
    entries.sort(key=lambda entry: (-entry.score, entry.path))
    return entries


class ReportBuilder:
    """Renders the ranked opportunities report."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.logger = get_logger("ranking")

    def render(
        self,
        entries: List[ScoredEntry],
        *,
        generated_at: datetime | None = None,
    ) -> str:
        timestamp = (generated_at or datetime.now()).strftime(_TIMESTAMP_FORMAT)
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(entries=entries, generated_at=timestamp)

    def write(
        self,
        records: Iterable[WorkRecord],
        path: Path,
        *,
        generated_at: datetime | None = None,
    ) -> List[ScoredEntry]:
        """Rank ``records`` and rewrite the report at ``path``."""
        entries = rank_records(records)
        content = self.render(entries, generated_at=generated_at)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.logger.info("Wrote %d ranked opportunities to %s", len(entries), path)
        return entries


__all__ = ["ReportBuilder", "rank_records", "score_record"]
