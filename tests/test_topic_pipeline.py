import random

from historia.extraction import (
    ContentProcessingService,
    LRUExtractionCache,
    TopicDocument,
    TopicPipeline,
)

CONTENT = (
    "In 1969, Apollo 11 landed on the Moon. Neil Armstrong was the first person to walk on it.\n"
    "Legacy\n"
    "The landing was one of the most important events of the twentieth century in America."
)


def _pipeline():
    service = ContentProcessingService(cache=LRUExtractionCache(32), rng=random.Random(5))
    return TopicPipeline(service, topic_cache=LRUExtractionCache(4))


def test_pipeline_combines_every_extractor():
    document = TopicDocument(topic_id="apollo-11", title="Apollo 11", content=CONTENT)

    processed = _pipeline().process(document)

    assert processed.document is document
    assert [s.id for s in processed.sections] == ["introduction", "legacy"]
    assert [e.year for e in processed.timeline_events] == ["1969"]
    assert [f.name for f in processed.key_figures] == ["Neil Armstrong"]
    assert [loc.name for loc in processed.locations] == ["America"]
    assert processed.quiz_questions
    assert processed.quick_facts


def test_pipeline_reuses_processed_topic_until_invalidated():
    pipeline = _pipeline()
    document = TopicDocument(topic_id="apollo-11", title="Apollo 11", content=CONTENT)

    first = pipeline.process(document)
    second = pipeline.process(document)
    pipeline.invalidate("apollo-11")
    third = pipeline.process(document)

    assert second is first
    assert third is not first
    assert third == first


def test_pipeline_handles_empty_articles():
    document = TopicDocument(topic_id="empty", title="Empty", content="")

    processed = _pipeline().process(document)

    assert processed.sections == ()
    assert processed.quiz_questions == ()
    assert processed.related_topics == ()


def test_to_mapping_exposes_consumer_field_names():
    document = TopicDocument(topic_id="apollo-11", title="Apollo 11", content=CONTENT)

    mapping = _pipeline().process(document).to_mapping()

    assert mapping["topic"] == {"id": "apollo-11", "title": "Apollo 11"}
    assert mapping["timelineEvents"][0]["year"] == "1969"
    for question in mapping["quizQuestions"]:
        assert 0 <= question["correctAnswer"] < len(question["options"])
    assert all(loc["coordinatesAuthoritative"] is False for loc in mapping["locations"])
    assert all(topic["mockId"] is True for topic in mapping["relatedTopics"])


def test_document_paragraphs_skip_blank_lines():
    document = TopicDocument(topic_id="t", title="T", content="  First.  \n\n   \nSecond.")

    assert document.paragraphs() == ["First.", "Second."]
