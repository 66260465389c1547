"""Tests for joborg.techstack."""

from __future__ import annotations

from joborg.techstack import extract_tech_stack


def test_extract_simple() -> None:
    tech = extract_tech_stack("We are looking for a Rust developer with experience in Python and AWS.")
    assert tech == ["Rust", "Python", "AWS"]


def test_extract_case_insensitive() -> None:
    tech = extract_tech_stack("Experience with rust and PYTHON is required.")
    assert sorted(tech) == ["Python", "Rust"]


def test_extract_no_matches() -> None:
    assert extract_tech_stack("Looking for a project manager.") == []


def test_extract_with_punctuation() -> None:
    tech = extract_tech_stack("Skills: Java, Kubernetes. Nice to have: C++.")
    assert set(tech) == {"Java", "Kubernetes", "C++"}
    assert len(tech) == 3


def test_extract_does_not_match_inside_longer_words() -> None:
    tech = extract_tech_stack("Senior JavaScript engineer")
    assert tech == ["JavaScript"]
