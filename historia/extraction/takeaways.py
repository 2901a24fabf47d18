"""Selection of stand-alone sentences worth remembering."""
from __future__ import annotations

import re
from typing import List

from .normalization import split_paragraphs, split_sentences

MAX_TAKEAWAYS = 5
MIN_TAKEAWAYS = 3
MIN_SENTENCE_LENGTH = 30
MAX_SENTENCE_LENGTH = 200

SALIENCE_PATTERNS = (
    re.compile(
        r"\b(?:significant|important|crucial|critical|essential|key|major|primary|fundamental)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:led to|resulted in|caused|influenced|affected|changed|transformed|revolutionized)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:first|last|only|largest|smallest|greatest|most|best|worst)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:ultimately|eventually|finally|in conclusion|as a result|consequently|therefore)\b",
        re.IGNORECASE,
    ),
)


def is_salient(sentence: str) -> bool:
    return any(pattern.search(sentence) for pattern in SALIENCE_PATTERNS)


def extract_key_takeaways(content: str | None) -> List[str]:
    """Return up to five salient sentences.

    When fewer than three qualify, the opening sentence of the article is
    prepended and its closing sentence appended.
    """

    paragraphs = split_paragraphs(content)
    takeaways: List[str] = []

    for paragraph in paragraphs:
        for sentence in split_sentences(paragraph):
            if not MIN_SENTENCE_LENGTH <= len(sentence) < MAX_SENTENCE_LENGTH:
                continue
            if is_salient(sentence) and sentence not in takeaways:
                takeaways.append(sentence)

    if len(takeaways) < MIN_TAKEAWAYS and paragraphs:
        first_sentence = paragraphs[0].split(".")[0] + "."
        if first_sentence not in takeaways and len(first_sentence) > MIN_SENTENCE_LENGTH:
            takeaways.insert(0, first_sentence)

        last_sentence = split_sentences(paragraphs[-1])[-1]
        if last_sentence not in takeaways and len(last_sentence) > MIN_SENTENCE_LENGTH:
            takeaways.append(last_sentence)

    return takeaways[:MAX_TAKEAWAYS]


__all__ = ["MAX_TAKEAWAYS", "SALIENCE_PATTERNS", "extract_key_takeaways", "is_salient"]
