"""Topic-level orchestration over :class:`ContentProcessingService`."""
from __future__ import annotations

import logging

from .cache import LRUExtractionCache
from .models import ProcessedTopic, TopicDocument
from .service import ContentProcessingService


class TopicPipeline:
    """Runs every extractor over a topic once and remembers the combined result.

    Revisiting a topic id returns the stored :class:`ProcessedTopic` without
    touching the extractors; distinct topics still share the per-operation
    cache of the service.
    """

    def __init__(
        self,
        service: ContentProcessingService,
        *,
        topic_cache: LRUExtractionCache | None = None,
    ) -> None:
        self._service = service
        self._topic_cache = topic_cache if topic_cache is not None else LRUExtractionCache(64)
        self._log = logging.getLogger("historia.pipeline")

    def process(self, document: TopicDocument) -> ProcessedTopic:
        cached = self._topic_cache.get(document.topic_id)
        if cached is not None:
            self._log.debug("Using cached data for topic %s", document.topic_id)
            return cached

        content, title = document.content, document.title
        service = self._service
        processed = ProcessedTopic(
            document=document,
            sections=tuple(service.process_content_into_sections(content)),
            timeline_events=tuple(service.extract_timeline_events(content)),
            key_figures=tuple(service.extract_key_figures(content)),
            locations=tuple(service.extract_locations(content)),
            key_terms=tuple(service.extract_key_terms(content)),
            quiz_questions=tuple(service.generate_quiz_questions(content, title)),
            key_takeaways=tuple(service.extract_key_takeaways(content)),
            quick_facts=tuple(service.extract_quick_facts(content, title)),
            related_topics=tuple(service.find_related_topics(content, title)),
        )
        self._topic_cache.set(document.topic_id, processed)
        self._log.info(
            "Processed topic %s: %d sections, %d events, %d questions",
            document.topic_id,
            len(processed.sections),
            len(processed.timeline_events),
            len(processed.quiz_questions),
        )
        return processed

    def invalidate(self, topic_id: str) -> None:
        self._topic_cache.pop(topic_id)


__all__ = ["TopicPipeline"]
