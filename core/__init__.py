from .models import LearnableItem, GrammarPoint, ProgressRecord, QuizSession
from .interfaces import AIProvider, Storage
from .catalog import Catalog, DEFAULT_CATALOG
from .discovery import discovered_pool, combined_pool, UnlockTracker
from .session import build_session, build_options, expected_answer
from .evaluator import evaluate, AnswerEvaluator
from .classifier import status, proficiency
from .errors import (
    QuizError, NoMistakesTracked, SessionCompleted, AnswerRejected,
    HintError, HintUnavailable, InvalidCredential
)
from .utils import shuffle, lookup_url, search_url
from .config import (
    MASTERY_THRESHOLD, PROFICIENCY_INTERMEDIATE, PROFICIENCY_ADVANCED,
    INITIAL_INTRO_COUNT, CATEGORY_SESSION_LENGTH, GENERAL_SESSION_LENGTH,
    PROGRESS_NAMESPACE
)

__all__ = [
    'LearnableItem', 'GrammarPoint', 'ProgressRecord', 'QuizSession',
    'AIProvider', 'Storage',
    'Catalog', 'DEFAULT_CATALOG',
    'discovered_pool', 'combined_pool', 'UnlockTracker',
    'build_session', 'build_options', 'expected_answer',
    'evaluate', 'AnswerEvaluator',
    'status', 'proficiency',
    'QuizError', 'NoMistakesTracked', 'SessionCompleted', 'AnswerRejected',
    'HintError', 'HintUnavailable', 'InvalidCredential',
    'shuffle', 'lookup_url', 'search_url',
    'MASTERY_THRESHOLD', 'PROFICIENCY_INTERMEDIATE', 'PROFICIENCY_ADVANCED',
    'INITIAL_INTRO_COUNT', 'CATEGORY_SESSION_LENGTH', 'GENERAL_SESSION_LENGTH',
    'PROGRESS_NAMESPACE'
]
