"""Answer evaluation, progress bookkeeping and hint requests."""

import logging
from typing import Callable

from .errors import AnswerRejected, HintUnavailable, InvalidCredential, SessionCompleted
from .session import expected_answer

logger = logging.getLogger(__name__)

HINT_UNAVAILABLE = 'hint_unavailable'
INVALID_CREDENTIAL = 'invalid_credential'


def evaluate(item, answer: str, progress) -> dict:
    """Judge an answer by exact string match and update the progress counters."""
    expected = expected_answer(item)
    is_correct = answer == expected
    newly_mastered = False
    if is_correct:
        newly_mastered = progress.record_success(item.id)
    else:
        progress.record_mistake(item.id)
    return {
        'is_correct': is_correct,
        'expected': expected,
        'newly_mastered': newly_mastered,
        'progress': progress
    }


class AnswerEvaluator:
    """Applies answers to a learner's progress and drives the hint flow.

    Progress is persisted through `persist` after every answer, before any
    hint is requested, so hint failures never affect bookkeeping.
    """

    def __init__(self, progress, persist: Callable[[dict], None] | None = None, ai_provider=None):
        self.progress = progress
        self.persist = persist
        self.ai_provider = ai_provider
        self.credential_invalid = False

    def submit(self, session, answer: str) -> dict:
        """Evaluate an answer to the session's current question.

        Returns the evaluation result plus 'hint_token' (None on a correct
        answer). Raises SessionCompleted or AnswerRejected when input is gated.
        """
        if session.completed:
            raise SessionCompleted("Session is already completed")
        if session.is_processing:
            raise AnswerRejected("Still waiting for a hint on this question")
        if session.answered:
            raise AnswerRejected("Question already answered")

        item = session.current_question
        result = evaluate(item, answer, self.progress)
        session.record_answer(item.id, result['is_correct'])
        self.save()

        hint_token = None
        if not result['is_correct']:
            hint_token = session.begin_hint()
        return {
            'is_correct': result['is_correct'],
            'expected': result['expected'],
            'newly_mastered': result['newly_mastered'],
            'item': item,
            'hint_token': hint_token
        }

    def save(self) -> None:
        if self.persist is not None:
            self.persist(self.progress.to_dict())

    def generate_hint(self, item) -> dict:
        """Ask the provider for a mnemonic. Never raises.

        Returns {'mnemonic': dict | None, 'error': None | 'invalid_credential' | 'hint_unavailable'}.
        """
        if self.credential_invalid:
            return {'mnemonic': None, 'error': INVALID_CREDENTIAL}
        provider = self.ai_provider
        if provider is None:
            return {'mnemonic': None, 'error': HINT_UNAVAILABLE}
        try:
            mnemonic = provider.get_mnemonic(item)
        except InvalidCredential as e:
            if provider is not self.ai_provider:
                # The key was replaced while this request was in flight
                logger.info(f"Ignoring credential failure from a replaced provider: {e}")
                return {'mnemonic': None, 'error': HINT_UNAVAILABLE}
            logger.warning(f"Hint provider rejected credentials: {e}")
            self.credential_invalid = True
            return {'mnemonic': None, 'error': INVALID_CREDENTIAL}
        except HintUnavailable as e:
            logger.warning(f"Hint unavailable for {item.id}: {e}")
            return {'mnemonic': None, 'error': HINT_UNAVAILABLE}
        except Exception as e:
            logger.error(f"Unexpected hint failure for {item.id}: {type(e).__name__}: {e}")
            return {'mnemonic': None, 'error': HINT_UNAVAILABLE}
        return {'mnemonic': mnemonic, 'error': None}

    def fetch_hint(self, session, token) -> dict:
        """Generate a hint for the question identified by token and apply it to the session."""
        _, index = token
        item = session.questions[index]
        outcome = self.generate_hint(item)
        outcome['applied'] = session.resolve_hint(token, outcome['mnemonic'], outcome['error'])
        return outcome

    def reset_credentials(self, ai_provider=None) -> None:
        """Re-enable hints, optionally with a new provider."""
        if ai_provider is not None:
            self.ai_provider = ai_provider
        self.credential_invalid = False
