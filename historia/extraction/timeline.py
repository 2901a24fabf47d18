"""Timeline event extraction from years and calendar dates."""
from __future__ import annotations

import re
from typing import Iterable, List

from .models import TimelineEvent
from .normalization import find_enclosing_sentence, split_paragraphs

MAX_TIMELINE_EVENTS = 10
MIN_DESCRIPTION_LENGTH = 10

_MONTHS = (
    "January|February|March|April|May|June|July|August|September|October|November|December"
)

YEAR_PATTERN = re.compile(
    r"\b(in|during|around|about|circa|by)?\s?(\d{3,4}(?:\s?(?:BC|BCE|AD|CE))?)\b",
    re.IGNORECASE,
)
DATE_PATTERN = re.compile(rf"\b(?:{_MONTHS})\s+\d{{1,2}},\s+\d{{4}}\b", re.IGNORECASE)

_ERA_BEFORE_COMMON = re.compile(r"\d\s?BCE?\b", re.IGNORECASE)
_YEAR_DIGITS = re.compile(r"\d{3,4}")
_ANY_DIGITS = re.compile(r"\d+")


def extract_timeline_events(content: str | None) -> List[TimelineEvent]:
    """Return events in discovery order, at most ten.

    Every paragraph is scanned for years first and calendar dates second; the
    sentence around each hit becomes the description. Events whose description
    was already collected are skipped.
    """

    events: List[TimelineEvent] = []
    seen: set[str] = set()

    def _collect(year: str, title: str, paragraph: str, start: int, end: int) -> None:
        description = find_enclosing_sentence(paragraph, start, end)
        if description is None or len(description) <= MIN_DESCRIPTION_LENGTH:
            return
        if description in seen:
            return
        seen.add(description)
        events.append(TimelineEvent(year=year, title=title, description=description))

    for paragraph in split_paragraphs(content):
        for match in YEAR_PATTERN.finditer(paragraph):
            year = match.group(2)
            _collect(year, f"Event in {year}", paragraph, match.start(), match.end())
        for match in DATE_PATTERN.finditer(paragraph):
            date = match.group(0)
            _collect(date, f"Event on {date}", paragraph, match.start(), match.end())

    return events[:MAX_TIMELINE_EVENTS]


def chronological_key(event: TimelineEvent) -> int:
    """Signed year of an event; BC/BCE years are negative, unknown years 0."""

    year = str(event.year or "")
    groups = _YEAR_DIGITS.findall(year)
    if groups:
        value = int(groups[-1])
    else:
        digits = _ANY_DIGITS.search(year)
        value = int(digits.group(0)) if digits else 0
    if _ERA_BEFORE_COMMON.search(year):
        value = -value
    return value


def sort_timeline_events(events: Iterable[TimelineEvent]) -> List[TimelineEvent]:
    """Order events chronologically for display, keeping ties in input order."""

    return sorted(events, key=chronological_key)


__all__ = [
    "DATE_PATTERN",
    "MAX_TIMELINE_EVENTS",
    "YEAR_PATTERN",
    "chronological_key",
    "extract_timeline_events",
    "sort_timeline_events",
]
