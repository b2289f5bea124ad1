"""Domain models for N5 Master."""

import uuid
from dataclasses import dataclass

from .config import MASTERY_THRESHOLD, MEANING_CATEGORIES

IDLE = 'idle'
AWAITING_HINT = 'awaiting_hint'


@dataclass(frozen=True)
class LearnableItem:
    """One catalog entry: a kana, a kanji or a vocabulary word."""

    id: str
    char: str
    romaji: str
    category: str
    meaning: str | None = None
    onyomi: str | None = None
    kunyomi: str | None = None
    sino_vietnamese: str | None = None  # Hán Việt reading, kanji only
    example_vocab: str | None = None

    @property
    def is_meaning_question(self) -> bool:
        return self.category in MEANING_CATEGORIES

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'char': self.char,
            'romaji': self.romaji,
            'category': self.category,
            'meaning': self.meaning,
            'onyomi': self.onyomi,
            'kunyomi': self.kunyomi,
            'sino_vietnamese': self.sino_vietnamese,
            'example_vocab': self.example_vocab
        }


@dataclass(frozen=True)
class GrammarPoint:
    """One N5 grammar lesson."""

    id: str
    title: str
    structure: str
    explanation: str
    example_jp: str
    example_en: str

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'structure': self.structure,
            'explanation': self.explanation,
            'example_jp': self.example_jp,
            'example_en': self.example_en
        }


class ProgressRecord:
    """Per-learner mastery, mistake and success counters."""

    def __init__(self):
        self.mastered_ids = []      # Order of mastery, no duplicates
        self.weak_ids = {}          # {item_id: mistake count}
        self.success_counts = {}    # {item_id: success counter, floor 0}

    def is_mastered(self, item_id: str) -> bool:
        return item_id in self.mastered_ids

    def success_count(self, item_id: str) -> int:
        return self.success_counts.get(item_id, 0)

    def mistake_count(self, item_id: str) -> int:
        return self.weak_ids.get(item_id, 0)

    def is_weak(self, item_id: str) -> bool:
        return self.mistake_count(item_id) > 0

    def mastered_count(self, items) -> int:
        """Count how many of the given items are mastered."""
        mastered = set(self.mastered_ids)
        return sum(1 for item in items if item.id in mastered)

    def record_success(self, item_id: str) -> bool:
        """Count a correct answer. Returns True if the item just became mastered."""
        self.success_counts[item_id] = self.success_count(item_id) + 1
        if self.success_counts[item_id] >= MASTERY_THRESHOLD and not self.is_mastered(item_id):
            self.mastered_ids.append(item_id)
            return True
        return False

    def record_mistake(self, item_id: str) -> None:
        """Count an incorrect answer. Mastery is never revoked."""
        self.weak_ids[item_id] = self.mistake_count(item_id) + 1
        self.success_counts[item_id] = max(0, self.success_count(item_id) - 1)

    def to_dict(self) -> dict:
        return {
            'masteredIds': list(self.mastered_ids),
            'weakIds': dict(self.weak_ids),
            'successCounts': dict(self.success_counts)
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> 'ProgressRecord':
        progress = cls()
        if not data:
            return progress
        # Null is treated like a missing key. Deduplicate mastered ids, keeping first occurrence
        seen = set()
        for item_id in data.get('masteredIds') or []:
            if item_id not in seen:
                seen.add(item_id)
                progress.mastered_ids.append(item_id)
        progress.weak_ids = {
            item_id: _counter(count)
            for item_id, count in (data.get('weakIds') or {}).items()
        }
        progress.success_counts = {
            item_id: _counter(count)
            for item_id, count in (data.get('successCounts') or {}).items()
        }
        return progress


def _counter(value) -> int:
    """Non-negative int from a stored counter; null or garbage counts as 0."""
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


class QuizSession:
    """One quiz run over a fixed list of questions."""

    def __init__(self, questions, target: str, review_mode: bool = False):
        self.id = str(uuid.uuid4())[:8]
        self.questions = tuple(questions)
        self.target = target
        self.review_mode = review_mode
        self.current_index = 0
        self.score = 0
        self.mistakes = []
        self.completed = not self.questions
        # Per-question state, reset on advance
        self.answered = False
        self.last_correct = None
        self.hint_state = IDLE
        self.mnemonic = None
        self.hint_error = None

    @property
    def current_question(self) -> LearnableItem | None:
        if self.completed:
            return None
        return self.questions[self.current_index]

    @property
    def is_processing(self) -> bool:
        """True while a hint request for the current question is pending."""
        return self.hint_state == AWAITING_HINT

    @property
    def is_last(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    def record_answer(self, item_id: str, is_correct: bool) -> None:
        self.answered = True
        self.last_correct = is_correct
        if is_correct:
            self.score += 1
        else:
            self.mistakes.append(item_id)

    def begin_hint(self) -> tuple[str, int]:
        """Enter the awaiting-hint state. Returns the token that must match on resolve."""
        self.hint_state = AWAITING_HINT
        self.mnemonic = None
        self.hint_error = None
        return (self.id, self.current_index)

    def resolve_hint(self, token: tuple[str, int], mnemonic: dict | None = None,
                     error: str | None = None) -> bool:
        """Apply a hint outcome. Stale outcomes (user moved on) are discarded.
        Returns True if the outcome was applied."""
        if self.hint_state != AWAITING_HINT or tuple(token) != (self.id, self.current_index):
            return False
        self.hint_state = IDLE
        self.mnemonic = mnemonic
        self.hint_error = error
        return True

    def advance(self) -> bool:
        """Move to the next question. Returns False once the session is completed."""
        self.answered = False
        self.last_correct = None
        self.hint_state = IDLE
        self.mnemonic = None
        self.hint_error = None
        if self.completed:
            return False
        if self.is_last:
            self.completed = True
            return False
        self.current_index += 1
        return True

    def to_dict(self) -> dict:
        question = self.current_question
        return {
            'id': self.id,
            'target': self.target,
            'review_mode': self.review_mode,
            'current_index': self.current_index,
            'total': len(self.questions),
            'score': self.score,
            'mistakes': list(self.mistakes),
            'completed': self.completed,
            'question': question.to_dict() if question else None,
            'answered': self.answered,
            'last_correct': self.last_correct,
            'hint_state': self.hint_state,
            'mnemonic': self.mnemonic,
            'hint_error': self.hint_error
        }
