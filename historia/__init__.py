"""Historia - heuristic study material from encyclopedia articles."""
from .container import Container, build_container
from .extraction import ContentProcessingService, ProcessedTopic, TopicDocument, TopicPipeline

__all__ = [
    "Container",
    "ContentProcessingService",
    "ProcessedTopic",
    "TopicDocument",
    "TopicPipeline",
    "build_container",
]
