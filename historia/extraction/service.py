"""Cached, failure-tolerant entry points over the extractors."""
from __future__ import annotations

import logging
import random
from typing import Any, Callable, List, Sequence

from .cache import LRUExtractionCache, make_cache_key
from .facts import extract_quick_facts
from .figures import extract_key_figures
from .gazetteer import LocationGazetteer, RandomPlaceholderGeocoder, extract_locations
from .models import (
    ExtractionCache,
    Geocoder,
    KeyFigure,
    KeyTerm,
    Location,
    QuickFact,
    QuizQuestion,
    RelatedTopicStub,
    Section,
    TimelineEvent,
    TopicIdGenerator,
)
from .quiz import generate_quiz_questions
from .related import MockTopicIdGenerator, find_related_topics
from .sections import fallback_sections, process_content_into_sections
from .takeaways import extract_key_takeaways
from .terms import extract_key_terms
from .timeline import extract_timeline_events


class ContentProcessingService:
    """Runs each extractor at most once per distinct input.

    Results are stored in the injected cache as tuples and handed out as
    fresh lists. An extractor that raises is logged and replaced by its
    fallback (an empty list, or a single catch-all section for the outline);
    fallbacks are never cached.
    """

    def __init__(
        self,
        *,
        cache: ExtractionCache | None = None,
        geocoder: Geocoder | None = None,
        id_generator: TopicIdGenerator | None = None,
        rng: random.Random | None = None,
        gazetteer: LocationGazetteer | None = None,
    ) -> None:
        self._cache = cache if cache is not None else LRUExtractionCache()
        self._rng = rng or random.Random()
        self._geocoder = geocoder or RandomPlaceholderGeocoder(self._rng)
        self._id_generator = id_generator or MockTopicIdGenerator()
        self._gazetteer = gazetteer
        self._log = logging.getLogger("historia.extraction")

    @property
    def cache(self) -> ExtractionCache:
        return self._cache

    def process_content_into_sections(self, content: str | None) -> List[Section]:
        if not content:
            return []
        return self._run(
            "sections",
            (content,),
            lambda: process_content_into_sections(content),
            fallback=lambda: fallback_sections(content),
        )

    def extract_timeline_events(self, content: str | None) -> List[TimelineEvent]:
        if not content:
            return []
        return self._run("timeline", (content,), lambda: extract_timeline_events(content))

    def extract_key_figures(self, content: str | None) -> List[KeyFigure]:
        if not content:
            return []
        return self._run("figures", (content,), lambda: extract_key_figures(content))

    def extract_locations(self, content: str | None) -> List[Location]:
        if not content:
            return []
        return self._run(
            "locations",
            (content,),
            lambda: extract_locations(
                content, gazetteer=self._gazetteer, geocoder=self._geocoder
            ),
        )

    def extract_key_terms(self, content: str | None) -> List[KeyTerm]:
        if not content:
            return []
        return self._run("terms", (content,), lambda: extract_key_terms(content))

    def extract_key_takeaways(self, content: str | None) -> List[str]:
        if not content:
            return []
        return self._run("takeaways", (content,), lambda: extract_key_takeaways(content))

    def extract_quick_facts(self, content: str | None, title: str | None) -> List[QuickFact]:
        if not content or not title:
            return []
        return self._run(
            "quickfacts", (title, content), lambda: extract_quick_facts(content, title)
        )

    def generate_quiz_questions(
        self, content: str | None, title: str | None
    ) -> List[QuizQuestion]:
        if not content or not title:
            return []
        return self._run(
            "quiz",
            (title, content),
            lambda: generate_quiz_questions(content, title, rng=self._rng),
        )

    def find_related_topics(
        self, content: str | None, current_title: str | None
    ) -> List[RelatedTopicStub]:
        if not content or not current_title:
            return []
        return self._run(
            "related",
            (current_title, content),
            lambda: find_related_topics(
                content, current_title, id_generator=self._id_generator
            ),
        )

    def _run(
        self,
        kind: str,
        parts: tuple[str, ...],
        compute: Callable[[], Sequence[Any]],
        *,
        fallback: Callable[[], Sequence[Any]] | None = None,
    ) -> list[Any]:
        key = make_cache_key(kind, *parts)
        try:
            cached = self._cache.get(key)
        except Exception:
            self._log.exception("Failed to read cached %s results", kind)
            cached = None
        if cached is not None:
            self._log.debug("Cache hit for %s", kind)
            return list(cached)
        try:
            result = tuple(compute())
        except Exception:
            self._log.exception("Failed to run %s extraction", kind)
            return list(fallback()) if fallback is not None else []
        try:
            self._cache.set(key, result)
        except Exception:
            self._log.exception("Failed to cache %s results", kind)
        return list(result)


__all__ = ["ContentProcessingService"]
