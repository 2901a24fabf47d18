"""Split flat article text into a titled outline."""
from __future__ import annotations

from typing import List

from .models import Section
from .normalization import slugify_heading, split_paragraphs

INTRODUCTION_ID = "introduction"
INTRODUCTION_TITLE = "Introduction"
DETAILS_ID = "details"
DETAILS_TITLE = "Historical Details"
FALLBACK_ID = "content"
FALLBACK_TITLE = "Content"

_MAX_HEADING_LENGTH = 60


def is_heading(paragraph: str, index: int) -> bool:
    """Short lines without a closing period read as headings, except the first."""

    return index > 0 and len(paragraph) < _MAX_HEADING_LENGTH and not paragraph.endswith(".")


def process_content_into_sections(content: str | None) -> List[Section]:
    """Return the ordered sections of ``content``.

    When no heading shows up the paragraphs are split in half into an
    introduction and a details section.
    """

    paragraphs = split_paragraphs(content)
    if not paragraphs:
        return []

    sections: List[Section] = []
    current_id, current_title = INTRODUCTION_ID, INTRODUCTION_TITLE
    current_content: List[str] = []
    saw_heading = False

    for index, paragraph in enumerate(paragraphs):
        if is_heading(paragraph, index):
            saw_heading = True
            if current_content:
                sections.append(Section(current_id, current_title, tuple(current_content)))
            current_id = slugify_heading(paragraph)
            current_title = paragraph
            current_content = []
        else:
            current_content.append(paragraph)

    if current_content:
        sections.append(Section(current_id, current_title, tuple(current_content)))

    if not saw_heading or not sections:
        midpoint = len(paragraphs) // 2
        return [
            Section(INTRODUCTION_ID, INTRODUCTION_TITLE, tuple(paragraphs[:midpoint])),
            Section(DETAILS_ID, DETAILS_TITLE, tuple(paragraphs[midpoint:])),
        ]
    return sections


def fallback_sections(content: str | None) -> List[Section]:
    """Single section holding every paragraph verbatim."""

    return [Section(FALLBACK_ID, FALLBACK_TITLE, tuple(split_paragraphs(content)))]


__all__ = [
    "DETAILS_ID",
    "DETAILS_TITLE",
    "FALLBACK_ID",
    "FALLBACK_TITLE",
    "INTRODUCTION_ID",
    "INTRODUCTION_TITLE",
    "fallback_sections",
    "is_heading",
    "process_content_into_sections",
]
