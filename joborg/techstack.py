"""Keyword based technology extraction for job descriptions."""

from __future__ import annotations

import re
from typing import List

TECH_KEYWORDS: tuple[str, ...] = (
    "Rust",
    "Python",
    "Java",
    "JavaScript",
    "TypeScript",
    "Go",
    "C++",
    "C#",
    "React",
    "Angular",
    "Vue",
    "Node.js",
    "Django",
    "Flask",
    "Spring",
    "SQL",
    "NoSQL",
    "PostgreSQL",
    "MySQL",
    "MongoDB",
    "Redis",
    "AWS",
    "Azure",
    "GCP",
    "Docker",
    "Kubernetes",
    "Terraform",
    "Linux",
    "Git",
    "Agile",
    "Scrum",
)

# \b does not work for keywords ending in symbols such as "C++" or "C#".
_KEYWORD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (keyword, re.compile(rf"(?:^|\W){re.escape(keyword)}(?:\W|$)", re.IGNORECASE))
    for keyword in TECH_KEYWORDS
)


def extract_tech_stack(description: str) -> List[str]:
    """Return the known technologies mentioned in ``description``."""
    return [keyword for keyword, pattern in _KEYWORD_PATTERNS if pattern.search(description)]


__all__ = ["TECH_KEYWORDS", "extract_tech_stack"]
