"""Wiring of the processing service and topic pipeline from settings."""
from __future__ import annotations

import random
from dataclasses import dataclass

from historia.extraction import ContentProcessingService, LRUExtractionCache, TopicPipeline
from historia.settings import get_cache_size, get_random_seed, get_topic_cache_size


@dataclass
class Container:
    """Resolved collaborators for a processing session."""

    service: ContentProcessingService
    pipeline: TopicPipeline


def build_container(*, seed: int | None = None) -> Container:
    """Construct the service and pipeline, seeding randomness when asked to."""

    if seed is None:
        seed = get_random_seed()
    rng = random.Random(seed)
    service = ContentProcessingService(
        cache=LRUExtractionCache(get_cache_size()),
        rng=rng,
    )
    pipeline = TopicPipeline(
        service,
        topic_cache=LRUExtractionCache(get_topic_cache_size()),
    )
    return Container(service=service, pipeline=pipeline)


__all__ = ["Container", "build_container"]
