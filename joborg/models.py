"""Core data models shared across joborg components."""

from dataclasses import dataclass

from .constants import (
    GROUP_LANGUAGE_MATCH,
    GROUP_LANGUAGE_OTHER,
    LANGUAGE_MATCH,
    QUALITY_GOOD,
    SUBGROUP_GOOD,
    SUBGROUP_LOW,
    SUBGROUP_REGIONAL,
)


@dataclass(frozen=True)
class Classification:
    """Heuristic facts derived from a single file's content."""

    language: str
    quality: str
    national: bool
    content_length: int

    @property
    def is_language_match(self) -> bool:
        return self.language == LANGUAGE_MATCH

    @property
    def is_good_quality(self) -> bool:
        return self.quality == QUALITY_GOOD


@dataclass
class WorkRecord:
    """Persisted classification outcome for one source file."""

    file: str
    language: str
    quality: str
    national: bool
    content_length: int
    applied: bool = False

    @classmethod
    def from_classification(cls, path: str, classification: Classification) -> "WorkRecord":
        return cls(
            file=path,
            language=classification.language,
            quality=classification.quality,
            national=classification.national,
            content_length=classification.content_length,
        )

    @property
    def is_language_match(self) -> bool:
        return self.language == LANGUAGE_MATCH

    @property
    def is_good_quality(self) -> bool:
        return self.quality == QUALITY_GOOD


def group_label(record: WorkRecord) -> str:
    """Return the top-level folder name for ``record``."""
    if record.is_language_match:
        return GROUP_LANGUAGE_MATCH
    return GROUP_LANGUAGE_OTHER


def subgroup_label(record: WorkRecord) -> str:
    """Return the subgroup folder name for ``record``; first match wins."""
    if record.national:
        return SUBGROUP_REGIONAL
    if record.is_good_quality:
        return SUBGROUP_GOOD
    return SUBGROUP_LOW


@dataclass
class ScoredEntry:
    """Ranking view of a record, built fresh for each report."""

    path: str
    display_name: str
    score: float
    is_language_match: bool
    is_regional: bool
    is_good_quality: bool
    content_length: int


@dataclass
class ListingView:
    """Display fields exposed to the interactive viewer."""

    id: str
    title: str
    company: str
    description: str
    applied: bool
