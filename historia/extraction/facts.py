"""Labelled quick facts pulled from the article by per-label patterns."""
from __future__ import annotations

import re
from typing import List

from .figures import extract_key_figures
from .models import (
    FACT_CATEGORY,
    FACT_DURATION,
    FACT_KEY_FIGURE,
    FACT_OUTCOME,
    FACT_REGION,
    FACT_SIGNIFICANCE,
    FACT_SIGNIFICANT_DATE,
    FACT_TIME_PERIOD,
    QuickFact,
)
from .timeline import DATE_PATTERN

MIN_PATTERN_FACTS = 3

CATEGORIES = (
    "Historical Event",
    "Historical Period",
    "Ancient Civilization",
    "War",
    "Revolution",
    "Movement",
    "Dynasty",
    "Empire",
)

TIME_PERIOD_PATTERN = re.compile(
    r"\b(\d{1,4}(?:st|nd|rd|th)?\s+century"
    r"|\d{4}s"
    r"|\d{3,4}\s*(?:BC|BCE|AD|CE)"
    r"|\d{3,4}-\d{3,4}(?:\s*(?:BC|BCE|AD|CE))?)\b",
    re.IGNORECASE,
)
# Proper-noun branch stays case sensitive so "in the middle of" is not a region.
REGION_PATTERN = re.compile(
    r"\bin\s+(North|South|East|West|Central)?\s*"
    r"(America|Europe|Asia|Africa|Australia|Antarctica"
    r"|the\s+(?-i:[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*))\b",
    re.IGNORECASE,
)
DURATION_PATTERN = re.compile(
    r"\blasted\s+for\s+(\d+(?:\.\d+)?\s+(?:years|decades|centuries))\b", re.IGNORECASE
)
OUTCOME_PATTERN = re.compile(
    r"\b(?:resulted\s+in|led\s+to|outcome\s+was|ended\s+with|concluded\s+with)\s+([^.]+)",
    re.IGNORECASE,
)
_LEADING_IN = re.compile(r"^in\s+", re.IGNORECASE)


def find_category(content: str, title: str) -> str | None:
    """First category noun present in the content or title."""

    content_lower = content.lower()
    title_lower = title.lower()
    for category in CATEGORIES:
        needle = category.lower()
        if needle in content_lower or needle in title_lower:
            return category
    return None


def extract_quick_facts(content: str | None, title: str | None) -> List[QuickFact]:
    """Return at most one fact per label in priority order."""

    if not content or not title:
        return []

    facts: List[QuickFact] = []

    match = TIME_PERIOD_PATTERN.search(content)
    if match:
        facts.append(QuickFact(FACT_TIME_PERIOD, match.group(0)))

    match = REGION_PATTERN.search(content)
    if match:
        facts.append(QuickFact(FACT_REGION, _LEADING_IN.sub("", match.group(0))))

    figures = extract_key_figures(content)
    if figures:
        facts.append(QuickFact(FACT_KEY_FIGURE, figures[0].name))

    match = DATE_PATTERN.search(content)
    if match:
        facts.append(QuickFact(FACT_SIGNIFICANT_DATE, match.group(0)))

    match = DURATION_PATTERN.search(content)
    if match:
        facts.append(QuickFact(FACT_DURATION, match.group(1)))

    match = OUTCOME_PATTERN.search(content)
    if match:
        facts.append(QuickFact(FACT_OUTCOME, match.group(1).strip()))

    if len(facts) < MIN_PATTERN_FACTS:
        category = find_category(content, title)
        if category:
            facts.append(QuickFact(FACT_CATEGORY, category))
        facts.append(
            QuickFact(FACT_SIGNIFICANCE, f"Important topic in {title.split(' ')[0]} history")
        )

    return facts


__all__ = ["CATEGORIES", "extract_quick_facts", "find_category"]
