"""Normalization helpers shared by the extractors."""
from __future__ import annotations

import re
from typing import List

# First words that make a capitalized run look like a name when it is not.
DETERMINER_BLOCKLIST = frozenset(
    {"The", "This", "That", "These", "Those", "There", "Their", "They"}
)
TERM_BLOCKLIST = DETERMINER_BLOCKLIST | {"It"}

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_SLUG_SEPARATOR = re.compile(r"[^a-z0-9]+")


def split_paragraphs(content: str | None) -> List[str]:
    """Split raw article text on line breaks, dropping blank paragraphs."""

    if not content:
        return []
    paragraphs = []
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if line:
            paragraphs.append(line)
    return paragraphs


def split_sentences(paragraph: str) -> List[str]:
    """Split a paragraph after each ``.``, ``!`` or ``?`` followed by whitespace."""

    return _SENTENCE_BOUNDARY.split(paragraph)


def find_enclosing_sentence(paragraph: str, start: int, end: int) -> str | None:
    """Return the sentence around the ``start:end`` span of ``paragraph``.

    The sentence runs from just after the last period at or before ``start``
    to the first period at or after ``end``. ``None`` is returned when no
    period closes the sentence.
    """

    sentence_start = paragraph.rfind(".", 0, start + 1) + 1
    sentence_end = paragraph.find(".", end)
    if sentence_end == -1:
        return None
    return paragraph[sentence_start:sentence_end].strip()


def slugify_heading(title: str) -> str:
    """Lowercase ``title`` and collapse each non-alphanumeric run into ``-``."""

    return _SLUG_SEPARATOR.sub("-", title.lower())


def first_word(phrase: str) -> str:
    return phrase.split(" ", 1)[0]


__all__ = [
    "DETERMINER_BLOCKLIST",
    "TERM_BLOCKLIST",
    "find_enclosing_sentence",
    "first_word",
    "slugify_heading",
    "split_paragraphs",
    "split_sentences",
]
