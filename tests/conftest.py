"""Shared fixtures: build documents that hit exact word counts."""

import pytest

from docscore.rubric import PROJECT_OVERVIEW
from docscore.types import Section

FILLER = "lorem"


def make_section_text(number: int, section: Section, word_count: int, keywords=None) -> str:
    """Section text (header included) with exactly `word_count` words."""
    keywords = list(section.required_keywords) if keywords is None else list(keywords)
    header = f"## {number}. {section.name}"
    used = len(header.split()) + sum(len(kw.split()) for kw in keywords)
    filler = [FILLER] * max(word_count - used, 0)
    return header + "\n" + " ".join(keywords + filler) + "\n"


def make_document(document_type=PROJECT_OVERVIEW) -> str:
    """Document meeting every section's minimum word count and keywords."""
    parts = ["# Project Overview\n"]
    for i, section in enumerate(document_type.sections, start=1):
        parts.append(make_section_text(i, section, section.min_word_count))
    return "\n".join(parts)


@pytest.fixture
def complete_document():
    return make_document()


@pytest.fixture
def intro_section():
    return PROJECT_OVERVIEW.sections[0]
