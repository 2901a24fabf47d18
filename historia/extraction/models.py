"""Dataclasses and shared protocols for the content-processing pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .normalization import split_paragraphs

FACT_TIME_PERIOD = "Time Period"
FACT_REGION = "Region"
FACT_KEY_FIGURE = "Key Figure"
FACT_SIGNIFICANT_DATE = "Significant Date"
FACT_DURATION = "Duration"
FACT_OUTCOME = "Outcome"
FACT_CATEGORY = "Category"
FACT_SIGNIFICANCE = "Significance"


@dataclass(frozen=True, slots=True)
class TopicDocument:
    """Article text fetched from the encyclopedia together with its title."""

    topic_id: str
    title: str
    content: str

    def paragraphs(self) -> list[str]:
        """Return the non-empty paragraphs of the article in order."""

        return split_paragraphs(self.content)


@dataclass(frozen=True, slots=True)
class Section:
    """Titled slice of the article outline."""

    id: str
    title: str
    content: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TimelineEvent:
    """Year or calendar date found in the text with its enclosing sentence."""

    year: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class KeyFigure:
    name: str
    description: str


@dataclass(frozen=True, slots=True)
class Location:
    """Gazetteer hit with placeholder coordinates.

    ``lat``/``lng`` come from a :class:`Geocoder`; the default one draws them
    at random, so ``coordinates_authoritative`` stays ``False``.
    """

    name: str
    description: str
    lat: float
    lng: float
    coordinates_authoritative: bool = False


@dataclass(frozen=True, slots=True)
class KeyTerm:
    term: str
    definition: str


@dataclass(frozen=True, slots=True)
class QuickFact:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    """Multiple-choice question; ``options[correct_answer]`` is the right one."""

    question: str
    options: tuple[str, ...]
    correct_answer: int
    explanation: str

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer]


@dataclass(frozen=True, slots=True)
class RelatedTopicStub:
    """Suggested topic whose ``id`` is a mock hash, not an encyclopedia page id."""

    id: str
    title: str
    description: str
    mock_id: bool = True


@dataclass(frozen=True, slots=True)
class ProcessedTopic:
    """Combined output of one pipeline run over a :class:`TopicDocument`."""

    document: TopicDocument
    sections: tuple[Section, ...] = ()
    timeline_events: tuple[TimelineEvent, ...] = ()
    key_figures: tuple[KeyFigure, ...] = ()
    locations: tuple[Location, ...] = ()
    key_terms: tuple[KeyTerm, ...] = ()
    quiz_questions: tuple[QuizQuestion, ...] = ()
    key_takeaways: tuple[str, ...] = ()
    quick_facts: tuple[QuickFact, ...] = ()
    related_topics: tuple[RelatedTopicStub, ...] = ()

    def to_mapping(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation for UI consumers."""

        return {
            "topic": {
                "id": self.document.topic_id,
                "title": self.document.title,
            },
            "sections": [
                {"id": s.id, "title": s.title, "content": list(s.content)}
                for s in self.sections
            ],
            "timelineEvents": [
                {"year": e.year, "title": e.title, "description": e.description}
                for e in self.timeline_events
            ],
            "keyFigures": [
                {"name": f.name, "description": f.description} for f in self.key_figures
            ],
            "locations": [
                {
                    "name": loc.name,
                    "description": loc.description,
                    "lat": loc.lat,
                    "lng": loc.lng,
                    "coordinatesAuthoritative": loc.coordinates_authoritative,
                }
                for loc in self.locations
            ],
            "keyTerms": [
                {"term": t.term, "definition": t.definition} for t in self.key_terms
            ],
            "quizQuestions": [
                {
                    "question": q.question,
                    "options": list(q.options),
                    "correctAnswer": q.correct_answer,
                    "explanation": q.explanation,
                }
                for q in self.quiz_questions
            ],
            "keyTakeaways": list(self.key_takeaways),
            "quickFacts": [
                {"label": fact.label, "value": fact.value} for fact in self.quick_facts
            ],
            "relatedTopics": [
                {
                    "id": r.id,
                    "title": r.title,
                    "description": r.description,
                    "mockId": r.mock_id,
                }
                for r in self.related_topics
            ],
        }


class ExtractionCache(Protocol):
    """Key/value store shared by the extraction operations."""

    def get(self, key: str) -> Any | None:
        """Return the cached result for ``key`` or ``None``."""

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""


class Geocoder(Protocol):
    """Turns a place name into coordinates."""

    def locate(self, name: str) -> tuple[float, float]:
        """Return ``(lat, lng)`` for the given place name."""


class TopicIdGenerator(Protocol):
    """Derives identifiers for suggested related topics."""

    def generate(self, title: str) -> str:
        """Return an identifier for ``title``."""


__all__ = [
    "ExtractionCache",
    "FACT_CATEGORY",
    "FACT_DURATION",
    "FACT_KEY_FIGURE",
    "FACT_OUTCOME",
    "FACT_REGION",
    "FACT_SIGNIFICANCE",
    "FACT_SIGNIFICANT_DATE",
    "FACT_TIME_PERIOD",
    "Geocoder",
    "KeyFigure",
    "KeyTerm",
    "Location",
    "ProcessedTopic",
    "QuickFact",
    "QuizQuestion",
    "RelatedTopicStub",
    "Section",
    "TimelineEvent",
    "TopicDocument",
    "TopicIdGenerator",
]
