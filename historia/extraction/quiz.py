"""Multiple-choice quiz generation from years, people and the opening sentence."""
from __future__ import annotations

import random
import re
from typing import List

from .figures import extract_key_figures
from .models import QuizQuestion
from .normalization import find_enclosing_sentence, split_paragraphs

MAX_QUESTIONS = 5
MIN_PARAGRAPH_LENGTH = 100
MIN_SENTENCE_LENGTH = 20
BLANK = "______"

# Inclusive offset ranges for the three wrong years, in option order.
YEAR_DISTRACTOR_OFFSETS = ((1, 10), (-10, -1), (10, 29))

_FOUR_DIGIT_YEAR = re.compile(r"\b(\d{4})\b")


def year_distractors(year: int, rng: random.Random) -> list[int]:
    """Three wrong years, resampled until all four options differ."""

    taken = {year}
    distractors: list[int] = []
    for low, high in YEAR_DISTRACTOR_OFFSETS:
        candidate = year + rng.randint(low, high)
        while candidate in taken:
            candidate = year + rng.randint(low, high)
        taken.add(candidate)
        distractors.append(candidate)
    return distractors


def build_year_question(paragraph: str, rng: random.Random) -> QuizQuestion | None:
    """Fill-in-the-blank question on the first four-digit year of ``paragraph``."""

    match = _FOUR_DIGIT_YEAR.search(paragraph)
    if match is None:
        return None
    year = match.group(1)
    sentence = find_enclosing_sentence(paragraph, match.start(), match.end())
    if sentence is None or len(sentence) <= MIN_SENTENCE_LENGTH or year not in sentence:
        return None

    options = [year] + [str(value) for value in year_distractors(int(year), rng)]
    rng.shuffle(options)
    return QuizQuestion(
        question=(
            "In what year did the following event occur: "
            f"{sentence.replace(year, BLANK, 1)}"
        ),
        options=tuple(options),
        correct_answer=options.index(year),
        explanation=sentence,
    )


def build_figure_question(paragraph: str, title: str) -> QuizQuestion | None:
    """Build a "Who was X?" question on the first person in ``paragraph``.

    The options are never shuffled, so the right answer is always index 0.
    """

    figures = extract_key_figures(paragraph)
    if not figures:
        return None
    figure = figures[0]
    return QuizQuestion(
        question=f"Who was {figure.name}?",
        options=(
            figure.description,
            f"A fictional character in {title} literature",
            f"An opponent of the main historical figures in {title}",
            f"A modern historian who studied {title}",
        ),
        correct_answer=0,
        explanation=figure.description,
    )


def build_definition_question(content: str, title: str) -> QuizQuestion:
    first_sentence = content.split(".")[0].strip()
    return QuizQuestion(
        question=f"Which of the following best describes {title}?",
        options=(
            first_sentence,
            "A modern political movement based on historical events",
            "A fictional story created for entertainment purposes",
            "A scientific theory proposed in the 21st century",
        ),
        correct_answer=0,
        explanation=first_sentence,
    )


def generate_quiz_questions(
    content: str | None,
    title: str | None,
    rng: random.Random | None = None,
) -> List[QuizQuestion]:
    """Return up to five questions in shuffled order.

    Only year questions shuffle their options; person and definition
    questions keep the right answer first. The list itself is shuffled
    before being truncated.
    """

    if not content or not title:
        return []
    rng = rng or random.Random()
    questions: List[QuizQuestion] = []

    for paragraph in split_paragraphs(content):
        if len(paragraph) < MIN_PARAGRAPH_LENGTH:
            continue
        year_question = build_year_question(paragraph, rng)
        if year_question is not None:
            questions.append(year_question)
        figure_question = build_figure_question(paragraph, title)
        if figure_question is not None:
            questions.append(figure_question)

    questions.append(build_definition_question(content, title))
    rng.shuffle(questions)
    return questions[:MAX_QUESTIONS]


__all__ = [
    "BLANK",
    "MAX_QUESTIONS",
    "build_definition_question",
    "build_figure_question",
    "build_year_question",
    "generate_quiz_questions",
    "year_distractors",
]
