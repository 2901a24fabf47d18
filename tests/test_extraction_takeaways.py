from historia.extraction.takeaways import extract_key_takeaways


def test_takeaways_keep_salient_sentences_only():
    content = (
        "The war was the most important conflict of the century. "
        "It led to major changes in Europe. Soldiers ate bread."
    )

    takeaways = extract_key_takeaways(content)

    assert takeaways == [
        "The war was the most important conflict of the century.",
        "It led to major changes in Europe.",
    ]


def test_takeaways_backfill_with_first_and_last_sentences():
    content = (
        "Paris is a city on the river Seine in France. "
        "Bakers sell bread every single morning there.\n"
        "Many tourists visit the city during the summer months."
    )

    takeaways = extract_key_takeaways(content)

    assert takeaways == [
        "Paris is a city on the river Seine in France.",
        "Many tourists visit the city during the summer months.",
    ]


def test_takeaways_respect_length_band():
    too_long = "This was an important period " + "of change " * 20 + "overall."
    content = " ".join(
        [
            too_long,
            "The first railway changed travel forever.",
            "The telegraph transformed communication quickly.",
            "Steam power was a crucial invention of the era.",
        ]
    )

    takeaways = extract_key_takeaways(content)

    assert len(too_long) >= 200
    assert too_long not in takeaways
    assert len(takeaways) == 3


def test_takeaways_are_capped_and_unique():
    sentences = [f"Battle number {i} was the most decisive moment of the war." for i in range(7)]
    content = " ".join(sentences + sentences[:2])

    takeaways = extract_key_takeaways(content)

    assert takeaways == sentences[:5]


def test_takeaways_of_missing_content_are_empty():
    assert extract_key_takeaways("") == []
