"""Content-processing pipeline turning article prose into teaching artifacts."""
from .models import (
    ExtractionCache,
    Geocoder,
    KeyFigure,
    KeyTerm,
    Location,
    ProcessedTopic,
    QuickFact,
    QuizQuestion,
    RelatedTopicStub,
    Section,
    TimelineEvent,
    TopicDocument,
    TopicIdGenerator,
)
from .cache import LRUExtractionCache, NullExtractionCache, make_cache_key
from .facts import extract_quick_facts
from .figures import extract_key_figures
from .gazetteer import LocationGazetteer, RandomPlaceholderGeocoder, extract_locations
from .quiz import generate_quiz_questions
from .related import MockTopicIdGenerator, find_related_topics, generate_mock_id
from .sections import process_content_into_sections
from .takeaways import extract_key_takeaways
from .terms import extract_key_terms
from .timeline import extract_timeline_events, sort_timeline_events
from .service import ContentProcessingService
from .pipeline import TopicPipeline

__all__ = [
    "ContentProcessingService",
    "ExtractionCache",
    "Geocoder",
    "KeyFigure",
    "KeyTerm",
    "LRUExtractionCache",
    "Location",
    "LocationGazetteer",
    "MockTopicIdGenerator",
    "NullExtractionCache",
    "ProcessedTopic",
    "QuickFact",
    "QuizQuestion",
    "RandomPlaceholderGeocoder",
    "RelatedTopicStub",
    "Section",
    "TimelineEvent",
    "TopicDocument",
    "TopicIdGenerator",
    "TopicPipeline",
    "extract_key_figures",
    "extract_key_takeaways",
    "extract_key_terms",
    "extract_locations",
    "extract_quick_facts",
    "extract_timeline_events",
    "find_related_topics",
    "generate_mock_id",
    "generate_quiz_questions",
    "make_cache_key",
    "process_content_into_sections",
    "sort_timeline_events",
]
