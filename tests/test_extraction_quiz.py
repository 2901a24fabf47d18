import random

from historia.extraction.quiz import (
    BLANK,
    build_year_question,
    generate_quiz_questions,
    year_distractors,
)

MOON_PARAGRAPH = (
    "The Apollo program was run by NASA during the space race. "
    "In 1969, Neil Armstrong became the first person to walk on the Moon "
    "after a long journey."
)


class SequenceRandom(random.Random):
    """Random source replaying fixed ``randint`` offsets."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def randint(self, a, b):
        return self._values.pop(0)


def _sourced_answers(content: str, title: str) -> set[str]:
    return {
        "1969",
        "In 1969, Neil Armstrong became the first person to walk on the Moon after a long journey",
        content.split(".")[0].strip(),
    }


def test_quiz_builds_year_figure_and_definition_questions():
    questions = generate_quiz_questions(MOON_PARAGRAPH, "Apollo program", rng=random.Random(7))

    assert len(questions) == 3
    by_prefix = {q.question.split(" ")[0]: q for q in questions}
    year_question = by_prefix["In"]
    figure_question = by_prefix["Who"]
    definition_question = by_prefix["Which"]

    assert year_question.correct_option == "1969"
    assert BLANK in year_question.question
    assert "1969" not in year_question.question
    assert figure_question.question == "Who was Neil Armstrong?"
    assert figure_question.correct_answer == 0
    assert definition_question.correct_option == (
        "The Apollo program was run by NASA during the space race"
    )


def test_quiz_correct_answer_survives_shuffling():
    for seed in range(25):
        questions = generate_quiz_questions(MOON_PARAGRAPH, "Apollo program", rng=random.Random(seed))
        expected = _sourced_answers(MOON_PARAGRAPH, "Apollo program")
        for question in questions:
            assert len(question.options) == 4
            assert question.correct_option in expected


def test_year_question_options_are_distinct_numbers():
    for seed in range(50):
        question = build_year_question(MOON_PARAGRAPH, random.Random(seed))
        assert question is not None
        assert len(set(question.options)) == 4
        assert all(option.isdigit() for option in question.options)
        assert question.options[question.correct_answer] == "1969"


def test_year_distractors_resample_collisions():
    rng = SequenceRandom([10, -3, 10, 15])

    assert year_distractors(1900, rng) == [1910, 1897, 1915]


def test_short_paragraphs_only_yield_the_definition_question():
    questions = generate_quiz_questions("Rome was founded in 753 BC. It grew.", "Rome")

    assert len(questions) == 1
    assert questions[0].question == "Which of the following best describes Rome?"
    assert questions[0].correct_option == "Rome was founded in 753 BC"
    assert questions[0].correct_answer == 0


def test_quiz_is_capped_at_five_questions():
    content = "\n".join([MOON_PARAGRAPH] * 4)

    questions = generate_quiz_questions(content, "Apollo program", rng=random.Random(1))

    assert len(questions) == 5


def test_quiz_needs_content_and_title():
    assert generate_quiz_questions("", "Rome") == []
    assert generate_quiz_questions(MOON_PARAGRAPH, "") == []
