"""Classify job description files, organize them by priority and rank them."""

from .classifier import classify
from .pipeline import Pipeline, PipelineOutcome
from .ranking import ReportBuilder, rank_records, score_record
from .reorganizer import Reorganizer
from .scanner import WorkScanner
from .stores import RecordStore

__version__ = "0.1.0"

__all__ = [
    "Pipeline",
    "PipelineOutcome",
    "RecordStore",
    "Reorganizer",
    "ReportBuilder",
    "WorkScanner",
    "classify",
    "rank_records",
    "score_record",
]
