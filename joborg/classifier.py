"""Content heuristics that classify a single work description."""

from __future__ import annotations

import re

from .constants import (
    LANGUAGE_MATCH,
    LANGUAGE_OTHER,
    LANGUAGE_PATTERN,
    QUALITY_GOOD,
    QUALITY_LOW,
    QUALITY_THRESHOLD,
    REGIONAL_MARKER,
)
from .models import Classification

_LANGUAGE_RE = re.compile(LANGUAGE_PATTERN)


def decode_content(content: bytes | str | None) -> str:
    """Return content as text; undecodable or missing content becomes empty."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def classify(content: bytes | str | None) -> Classification:
    """Classify raw file content by language mention, region and length.

    The language marker is matched case-insensitively on word boundaries so
    that longer identifiers such as ``javascript`` do not count. The regional
    marker is a plain case-sensitive substring. Quality is ``good`` only when
    the UTF-8 byte length strictly exceeds the threshold.
    """
    text = decode_content(content)
    length = len(text.encode("utf-8"))
    language = LANGUAGE_MATCH if _LANGUAGE_RE.search(text) else LANGUAGE_OTHER
    quality = QUALITY_GOOD if length > QUALITY_THRESHOLD else QUALITY_LOW
    return Classification(
        language=language,
        quality=quality,
        national=REGIONAL_MARKER in text,
        content_length=length,
    )


__all__ = ["classify", "decode_content"]
