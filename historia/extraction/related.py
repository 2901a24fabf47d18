"""Suggestions of adjacent topics built from capitalized phrases."""
from __future__ import annotations

import re
from typing import List

from .models import RelatedTopicStub, TopicIdGenerator

MAX_RELATED_TOPICS = 6
MIN_WORD_LENGTH = 4
MAX_DESCRIPTION_LENGTH = 150

_TOKEN_PUNCTUATION = ".,;:!?()[]{}'\""
_CAPITALIZED = re.compile(r"^[A-Z][a-z]+$")
_PHRASE_CONTINUATION = re.compile(r"^[A-Z]?[a-z]+$")
_NUMERIC = re.compile(r"^\d+$")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def generate_mock_id(title: str) -> str:
    """Deterministic ``hash * 31 + code unit`` string hash, as a positive string.

    The result only keeps suggestions stable between renders; it is not an
    encyclopedia page id and cannot be used to fetch the topic.
    """

    value = 0
    encoded = title.encode("utf-16-le")
    for index in range(0, len(encoded), 2):
        code_unit = encoded[index] | (encoded[index + 1] << 8)
        value = _to_int32(value * 31 + code_unit)
    return str(abs(value))


class MockTopicIdGenerator:
    """:class:`TopicIdGenerator` backed by :func:`generate_mock_id`."""

    def generate(self, title: str) -> str:
        return generate_mock_id(title)


def _clean(token: str) -> str:
    return token.strip(_TOKEN_PUNCTUATION)


def candidate_phrases(content: str, current_title: str) -> List[str]:
    """Capitalized one to three word phrases in reading order, without repeats."""

    words = content.split()
    title_lower = current_title.lower()
    phrases: List[str] = []

    def _add(phrase: str) -> None:
        if phrase.lower() != title_lower and phrase not in phrases:
            phrases.append(phrase)

    for index, raw_word in enumerate(words):
        word = _clean(raw_word)
        if len(word) < MIN_WORD_LENGTH or _NUMERIC.match(word) or word.lower() == title_lower:
            continue
        if not _CAPITALIZED.match(word):
            continue
        _add(word)

        if index < len(words) - 2:
            second = _clean(words[index + 1])
            if _PHRASE_CONTINUATION.match(second):
                _add(f"{word} {second}")
                if index < len(words) - 3:
                    third = _clean(words[index + 2])
                    if _PHRASE_CONTINUATION.match(third):
                        _add(f"{word} {second} {third}")
    return phrases


def _truncate(description: str) -> str:
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return description[: MAX_DESCRIPTION_LENGTH - 3] + "..."
    return description


def find_related_topics(
    content: str | None,
    current_title: str | None,
    id_generator: TopicIdGenerator | None = None,
) -> List[RelatedTopicStub]:
    """Return up to six related-topic stubs described by their first sentence."""

    if not content or not current_title:
        return []
    id_generator = id_generator or MockTopicIdGenerator()
    sentences = [s for s in _SENTENCE_SPLIT.split(content) if s.strip()]

    topics: List[RelatedTopicStub] = []
    for phrase in candidate_phrases(content, current_title):
        sentence = next((s for s in sentences if phrase in s), None)
        if sentence is None:
            continue
        topics.append(
            RelatedTopicStub(
                id=id_generator.generate(phrase),
                title=phrase,
                description=_truncate(sentence.strip()),
            )
        )
        if len(topics) == MAX_RELATED_TOPICS:
            break
    return topics


__all__ = [
    "MAX_RELATED_TOPICS",
    "MockTopicIdGenerator",
    "candidate_phrases",
    "find_related_topics",
    "generate_mock_id",
]
