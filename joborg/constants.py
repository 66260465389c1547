"""Fixed classification markers, folder names and score weights."""

from __future__ import annotations

LANGUAGE_PATTERN = r"(?i)\bjava\b"
REGIONAL_MARKER = "Uruguay"
QUALITY_THRESHOLD = 1000

LANGUAGE_MATCH = "java"
LANGUAGE_OTHER = "other"
QUALITY_GOOD = "good"
QUALITY_LOW = "low"

GROUP_LANGUAGE_MATCH = "Works in java language"
GROUP_LANGUAGE_OTHER = "Works in other languages"

SUBGROUP_REGIONAL = "National (uruguayan) works"
SUBGROUP_GOOD = "Good quality works"
SUBGROUP_LOW = "Low quality works"

SCORE_LANGUAGE = 3.0
SCORE_REGIONAL = 2.0
SCORE_QUALITY = 1.0
# Content length contributes linearly up to this many bytes, capped at 1.0.
SCORE_LENGTH_CAP = 5000

REPORT_FILENAME = "top_opportunities.md"


__all__ = [
    "GROUP_LANGUAGE_MATCH",
    "GROUP_LANGUAGE_OTHER",
    "LANGUAGE_MATCH",
    "LANGUAGE_OTHER",
    "LANGUAGE_PATTERN",
    "QUALITY_GOOD",
    "QUALITY_LOW",
    "QUALITY_THRESHOLD",
    "REGIONAL_MARKER",
    "REPORT_FILENAME",
    "SCORE_LANGUAGE",
    "SCORE_LENGTH_CAP",
    "SCORE_QUALITY",
    "SCORE_REGIONAL",
    "SUBGROUP_GOOD",
    "SUBGROUP_LOW",
    "SUBGROUP_REGIONAL",
]
