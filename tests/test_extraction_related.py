from historia.extraction.related import (
    MockTopicIdGenerator,
    candidate_phrases,
    find_related_topics,
    generate_mock_id,
)

CONTENT = "The Roman Empire expanded across Europe. Julius Caesar crossed the Rubicon."


def test_generate_mock_id_matches_rolling_hash():
    assert generate_mock_id("a") == "97"
    assert generate_mock_id("hello") == "99162322"
    assert generate_mock_id("") == "0"


def test_generate_mock_id_wraps_to_32_bits():
    assert generate_mock_id("polygenelubricants") == "2147483648"


def test_candidate_phrases_skip_current_title():
    phrases = candidate_phrases(CONTENT, "Roman Empire")

    assert "Roman Empire" not in phrases
    assert phrases[:3] == ["Roman", "Roman Empire expanded", "Empire"]
    assert "The" not in phrases


def test_related_topics_use_first_containing_sentence():
    topics = find_related_topics(CONTENT, "Roman Empire")

    assert [t.title for t in topics] == [
        "Roman",
        "Roman Empire expanded",
        "Empire",
        "Empire expanded",
        "Empire expanded across",
        "Europe",
    ]
    assert topics[-1].description == "The Roman Empire expanded across Europe"
    assert all(t.id == generate_mock_id(t.title) for t in topics)
    assert all(t.mock_id for t in topics)


def test_related_topics_drop_phrases_without_sentence():
    topics = find_related_topics("Europe. Julius Caesar crossed the Rubicon.", "Rome")

    titles = [t.title for t in topics]
    assert "Europe Julius" not in titles
    assert "Julius Caesar" in titles


def test_related_topics_truncate_long_descriptions():
    content = "Byzantium " + "endured through many long centuries of change " * 5 + "."

    topics = find_related_topics(content, "Rome")

    assert topics[0].title == "Byzantium"
    assert len(topics[0].description) == 150
    assert topics[0].description.endswith("...")


def test_related_topics_accept_custom_id_generator():
    class Prefixed(MockTopicIdGenerator):
        def generate(self, title: str) -> str:
            return "mock-" + super().generate(title)

    topics = find_related_topics(CONTENT, "Roman Empire", id_generator=Prefixed())

    assert all(t.id.startswith("mock-") for t in topics)


def test_related_topics_need_content_and_title():
    assert find_related_topics("", "Rome") == []
    assert find_related_topics(CONTENT, None) == []
