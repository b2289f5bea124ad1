"""Quiz session construction and answer option generation."""

import random

from .config import (
    CATEGORY_SESSION_LENGTH, GENERAL_SESSION_LENGTH, DISTRACTOR_COUNT, GENERAL
)
from .discovery import combined_pool, discovered_pool
from .errors import NoMistakesTracked
from .models import QuizSession
from .utils import shuffle


def candidate_pool(target: str, catalog, progress) -> tuple[list, int]:
    """Return (pool, session_length) for a quiz target."""
    if target == GENERAL:
        return (combined_pool(catalog, progress), GENERAL_SESSION_LENGTH)
    if not catalog.is_quiz_target(target):
        raise ValueError(f"Cannot quiz on category: {target}")
    return (discovered_pool(target, catalog, progress), CATEGORY_SESSION_LENGTH)


def build_session(target: str, review_mode: bool, progress, catalog,
                  rng: random.Random = None) -> QuizSession:
    """Build a randomized quiz over the currently discovered items.

    In review mode only items with at least one tracked mistake are eligible;
    raises NoMistakesTracked if none are.
    """
    pool, length = candidate_pool(target, catalog, progress)
    if review_mode:
        pool = [item for item in pool if progress.is_weak(item.id)]
        if not pool:
            raise NoMistakesTracked(target)
    questions = shuffle(pool, rng)[:length]
    return QuizSession(questions, target, review_mode)


def expected_answer(item) -> str:
    """Meaning for kanji and vocabulary, romanized reading otherwise."""
    if item.is_meaning_question:
        return item.meaning
    return item.romaji


def build_options(item, catalog, rng: random.Random = None) -> list[str]:
    """Correct answer plus up to DISTRACTOR_COUNT wrong answers, shuffled."""
    if rng is None:
        rng = random.Random()
    correct = expected_answer(item)
    if item.is_meaning_question:
        source = catalog.items('kanji') + catalog.items('vocabulary')
    else:
        source = catalog.items('hiragana') + catalog.items('katakana')

    candidates = []
    seen = {correct}
    for other in source:
        if other.id == item.id:
            continue
        answer = expected_answer(other)
        if answer and answer not in seen:
            seen.add(answer)
            candidates.append(answer)

    wrong = shuffle(candidates, rng)[:DISTRACTOR_COUNT]
    return shuffle([correct] + wrong, rng)
