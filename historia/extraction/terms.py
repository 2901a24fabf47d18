"""Glossary terms introduced with a definitional verb."""
from __future__ import annotations

import re
from typing import List

from .models import KeyTerm
from .normalization import TERM_BLOCKLIST, find_enclosing_sentence, first_word, split_paragraphs

MIN_DEFINITION_LENGTH = 10

TERM_PATTERN = re.compile(
    r"\b([A-Z][a-z]+(?:\s[A-Z][a-z]+){0,3})\s(?:is|was|were|are|refers to|defined as)\b"
)


def extract_key_terms(content: str | None) -> List[KeyTerm]:
    """Return every defined term once, with its sentence as the definition."""

    terms: List[KeyTerm] = []
    seen: set[str] = set()

    for paragraph in split_paragraphs(content):
        for match in TERM_PATTERN.finditer(paragraph):
            term = match.group(1)
            if first_word(term) in TERM_BLOCKLIST or term in seen:
                continue
            definition = find_enclosing_sentence(paragraph, match.start(), match.end())
            if definition is None or len(definition) <= MIN_DEFINITION_LENGTH:
                continue
            seen.add(term)
            terms.append(KeyTerm(term=term, definition=definition))

    return terms


__all__ = ["TERM_PATTERN", "extract_key_terms"]
