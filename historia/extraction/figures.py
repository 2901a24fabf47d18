"""Heuristic detection of people mentioned in the article."""
from __future__ import annotations

import re
from typing import List

from .models import KeyFigure
from .normalization import (
    DETERMINER_BLOCKLIST,
    find_enclosing_sentence,
    first_word,
    split_paragraphs,
)

MAX_KEY_FIGURES = 5
MIN_DESCRIPTION_LENGTH = 10

HONORIFICS = (
    "King",
    "Queen",
    "Emperor",
    "Empress",
    "Prince",
    "Princess",
    "Duke",
    "Duchess",
    "Lord",
    "Lady",
    "Sir",
    "Dame",
    "President",
    "Prime Minister",
    "Chancellor",
    "General",
    "Admiral",
    "Captain",
    "Colonel",
    "Professor",
    "Dr.",
    "Saint",
)

NAME_PATTERN = re.compile(
    r"\b(" + "|".join(re.escape(title) for title in HONORIFICS) + r")?\s?"
    r"([A-Z][a-z]+(?:\s[A-Z][a-z]+){1,3})\b"
)


def extract_key_figures(content: str | None) -> List[KeyFigure]:
    """Return up to five people named by 2-4 capitalized words.

    A leading honorific is matched but left out of the stored name. The
    enclosing sentence must mention the name, otherwise the hit is dropped.
    """

    figures: List[KeyFigure] = []
    names: set[str] = set()

    for paragraph in split_paragraphs(content):
        for match in NAME_PATTERN.finditer(paragraph):
            name = match.group(2)
            if first_word(name) in DETERMINER_BLOCKLIST or name in names:
                continue
            description = find_enclosing_sentence(paragraph, match.start(), match.end())
            if description is None or len(description) <= MIN_DESCRIPTION_LENGTH:
                continue
            if name not in description:
                continue
            names.add(name)
            figures.append(KeyFigure(name=name, description=description))

    return figures[:MAX_KEY_FIGURES]


__all__ = ["HONORIFICS", "MAX_KEY_FIGURES", "NAME_PATTERN", "extract_key_figures"]
