"""HTTP API tests for the N5 Master server."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

import server.app as app_module
from core.catalog import DEFAULT_CATALOG
from core.config import INITIAL_INTRO_COUNT, MASTERY_THRESHOLD
from core.errors import InvalidCredential, StorageError
from core.interfaces import AIProvider, Storage
from core.models import IDLE
from core.session import expected_answer


class MockAIProvider(AIProvider):
    """Mock AI provider for testing."""

    def __init__(self, error: Exception = None):
        self.error = error
        self.calls = []

    def get_mnemonic(self, item) -> dict:
        self.calls.append(item.id)
        if self.error is not None:
            raise self.error
        return {
            'character': item.char,
            'mnemonic': f'Remember {item.char}',
            'example_sentence': 'テストです。',
            'translation': 'It is a test.'
        }

    def get_stats(self) -> dict:
        return {'model': 'mock', 'calls': len(self.calls), 'failures': 0, 'total_ms': 0, 'avg_ms': 0}


class MockStorage(Storage):
    """Mock storage for testing."""

    def __init__(self):
        self.progress = {}
        self.save_calls = []

    def load_config(self) -> dict:
        return {}

    def load_progress(self, user_id: str = "default") -> dict | None:
        return self.progress.get(user_id)

    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        self.save_calls.append((user_id, progress))
        self.progress[user_id] = progress

    def list_users(self) -> list[str]:
        return sorted(self.progress)

    def delete_progress(self, user_id: str) -> bool:
        return self.progress.pop(user_id, None) is not None


class UnreadableStorage(MockStorage):
    """Storage whose records exist but cannot be read."""

    def load_progress(self, user_id: str = "default") -> dict | None:
        raise StorageError(f"Could not load progress for {user_id}")


class ServerTestCase(unittest.TestCase):
    """Resets the server's global state around each test."""

    def setUp(self):
        self.storage = MockStorage()
        self.provider = MockAIProvider()
        app_module.storage = self.storage
        app_module.ai_provider = self.provider
        app_module.user_evaluators.clear()
        app_module.quiz_sessions.clear()
        app_module.quiz_options.clear()
        app_module.unlock_trackers.clear()
        # No context manager: the startup hook would replace the mocks
        self.client = TestClient(app_module.create_app())

    def correct_answer(self, state: dict) -> str:
        return expected_answer(DEFAULT_CATALOG.get(state['question']['id']))

    def start(self, target: str = 'hiragana', review: bool = False) -> dict:
        response = self.client.post("/api/quiz/start", json={'target': target, 'review': review})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()


class TestHomeAndPools(ServerTestCase):

    def test_root(self):
        self.assertEqual(self.client.get("/").json()['service'], 'n5master')

    def test_fresh_home(self):
        home = self.client.get("/api/home").json()
        self.assertEqual(home['total_mastered'], 0)
        self.assertEqual(home['available'], INITIAL_INTRO_COUNT * 4)
        self.assertEqual([c['discovered'] for c in home['categories']], [INITIAL_INTRO_COUNT] * 4)
        self.assertEqual(home['unlocked'], [])
        self.assertFalse(home['credential_invalid'])

    def test_home_reports_unlocks_once(self):
        self.client.get("/api/home")
        progress = app_module.get_progress('default')
        for _ in range(MASTERY_THRESHOLD):
            progress.record_success('hira-001')
        home = self.client.get("/api/home").json()
        self.assertEqual([item['id'] for item in home['unlocked']], ['hira-011'])
        self.assertEqual(self.client.get("/api/home").json()['unlocked'], [])

    def test_home_without_provider(self):
        app_module.ai_provider = None
        self.assertTrue(self.client.get("/api/home").json()['credential_invalid'])

    def test_unreadable_progress_is_not_replaced(self):
        self.storage = UnreadableStorage()
        app_module.storage = self.storage
        response = self.client.get("/api/home")
        self.assertEqual(response.status_code, 503)
        self.assertIn('Could not load progress', response.json()['detail'])
        self.assertEqual(self.client.post("/api/quiz/start", json={'target': 'hiragana'}).status_code, 503)
        self.assertEqual(self.storage.save_calls, [])
        self.assertNotIn('default', app_module.user_evaluators)

        # Once storage recovers the record is loaded instead of a blank one
        self.storage.load_progress = lambda user_id="default": {'masteredIds': ['hira-001']}
        self.assertEqual(self.client.get("/api/home").json()['total_mastered'], 1)

    def test_pool(self):
        data = self.client.get("/api/pool/kanji").json()
        self.assertEqual(data['total'], INITIAL_INTRO_COUNT)
        self.assertEqual(data['items'][0]['status'], 'Not started')

    def test_general_pool(self):
        self.assertEqual(self.client.get("/api/pool/general").json()['total'], INITIAL_INTRO_COUNT * 4)

    def test_unknown_pool(self):
        self.assertEqual(self.client.get("/api/pool/emoji").status_code, 400)


class TestQuizFlow(ServerTestCase):

    def test_start_hides_answer(self):
        state = self.start()
        self.assertEqual(state['total'], 10)
        self.assertEqual(len(state['options']), 4)
        self.assertNotIn('romaji', state['question'])
        self.assertIsNone(state['expected'])
        self.assertIn(self.correct_answer(state), state['options'])

    def test_options_stable_between_polls(self):
        state = self.start()
        self.assertEqual(self.client.get("/api/quiz").json()['options'], state['options'])

    def test_correct_answer(self):
        state = self.start()
        response = self.client.post("/api/quiz/answer", json={'answer': self.correct_answer(state)})
        result = response.json()
        self.assertTrue(result['is_correct'])
        self.assertFalse(result['hint_pending'])
        self.assertEqual(result['success_count'], 1)
        self.assertEqual(len(self.storage.save_calls), 1)
        self.assertEqual(self.provider.calls, [])

    def test_second_answer_conflicts(self):
        state = self.start()
        self.client.post("/api/quiz/answer", json={'answer': self.correct_answer(state)})
        response = self.client.post("/api/quiz/answer", json={'answer': self.correct_answer(state)})
        self.assertEqual(response.status_code, 409)

    def test_wrong_answer_delivers_mnemonic(self):
        state = self.start()
        result = self.client.post("/api/quiz/answer", json={'answer': 'definitely wrong'}).json()
        self.assertFalse(result['is_correct'])
        self.assertTrue(result['hint_pending'])
        self.assertEqual(self.storage.progress['default']['weakIds'], {state['question']['id']: 1})

        quiz = self.client.get("/api/quiz").json()
        self.assertEqual(quiz['hint_state'], IDLE)
        self.assertEqual(quiz['mnemonic']['character'], state['question']['char'])
        self.assertIsNone(quiz['hint_error'])
        self.assertEqual(quiz['expected'], self.correct_answer(state))

    def test_wrong_answer_includes_study_guide(self):
        state = self.start('kanji')
        self.assertIsNone(state['study_guide'])
        self.client.post("/api/quiz/answer", json={'answer': 'definitely wrong'})

        quiz = self.client.get("/api/quiz").json()
        guide = quiz['study_guide']
        item = DEFAULT_CATALOG.get(state['question']['id'])
        self.assertEqual(guide['char'], item.char)
        self.assertEqual(guide['meaning'], item.meaning)
        self.assertEqual(guide['sino_vietnamese'], item.sino_vietnamese)
        self.assertTrue(guide['example_vocab'])
        self.assertEqual(guide['mistake_count'], 1)
        self.assertTrue(guide['lookup_url'].endswith('%23kanji'))
        self.assertIn('search_url', guide)
        self.assertEqual(quiz['expected'], expected_answer(item))

    def test_no_study_guide_without_mnemonic(self):
        self.provider.error = InvalidCredential('API key not valid')
        self.start('kanji')
        self.client.post("/api/quiz/answer", json={'answer': 'wrong'})
        self.assertIsNone(self.client.get("/api/quiz").json()['study_guide'])

    def test_invalid_credential_and_reset(self):
        self.provider.error = InvalidCredential('Requested entity was not found')
        self.start()
        self.client.post("/api/quiz/answer", json={'answer': 'wrong'})
        quiz = self.client.get("/api/quiz").json()
        self.assertEqual(quiz['hint_error'], 'invalid_credential')
        self.assertTrue(quiz['credential_invalid'])
        self.assertFalse(quiz['is_processing'])

        with patch.object(app_module, 'GeminiProvider', MagicMock(return_value=MockAIProvider())):
            response = self.client.post("/api/credentials", json={'api_key': 'new-key'})
        self.assertEqual(response.status_code, 200)
        self.assertFalse(self.client.get("/api/quiz").json()['credential_invalid'])

    def test_empty_credentials_rejected(self):
        self.assertEqual(self.client.post("/api/credentials", json={'api_key': '  '}).status_code, 400)

    def test_next_requires_answer(self):
        self.start()
        self.assertEqual(self.client.post("/api/quiz/next", json={}).status_code, 409)

    def test_full_session_and_summary(self):
        state = self.start('katakana')
        for i in range(state['total']):
            answer = self.correct_answer(state) if i % 2 == 0 else 'wrong'
            self.client.post("/api/quiz/answer", json={'answer': answer})
            state = self.client.post("/api/quiz/next", json={}).json()
        self.assertTrue(state['completed'])
        self.assertIsNone(state['question'])
        self.assertEqual(state['score'], 5)

        summary = self.client.get("/api/quiz/summary").json()
        self.assertEqual(summary['score'], 5)
        self.assertEqual(len(summary['missed_items']), 5)
        self.assertEqual(self.client.post("/api/quiz/answer", json={'answer': 'x'}).status_code, 409)

    def test_review_without_mistakes(self):
        response = self.client.post("/api/quiz/start", json={'target': 'hiragana', 'review': True})
        self.assertEqual(response.status_code, 404)
        self.assertIn('No mistakes tracked', response.json()['detail'])

    def test_review_after_mistake(self):
        state = self.start()
        self.client.post("/api/quiz/answer", json={'answer': 'wrong'})
        review = self.start('general', review=True)
        self.assertEqual(review['total'], 1)
        self.assertEqual(review['question']['id'], state['question']['id'])

    def test_grammar_is_not_quizzable(self):
        response = self.client.post("/api/quiz/start", json={'target': 'grammar'})
        self.assertEqual(response.status_code, 400)

    def test_no_active_quiz(self):
        self.assertEqual(self.client.get("/api/quiz").status_code, 404)

    def test_abandon(self):
        self.start()
        self.assertTrue(self.client.delete("/api/quiz").json()['abandoned'])
        self.assertFalse(self.client.delete("/api/quiz").json()['abandoned'])

    def test_users_are_separate(self):
        self.start()
        self.assertEqual(self.client.get("/api/quiz", params={'user_id': 'yuki'}).status_code, 404)


class TestUsersAndReset(ServerTestCase):

    def test_list_users(self):
        self.assertEqual(self.client.get("/api/users").json()['users'], [])
        for user_id in ('yuki', 'default'):
            state = self.start_for(user_id)
            self.client.post("/api/quiz/answer", json={'answer': self.correct_answer(state), 'user_id': user_id})
        self.assertEqual(self.client.get("/api/users").json()['users'], ['default', 'yuki'])

    def start_for(self, user_id: str) -> dict:
        response = self.client.post("/api/quiz/start", json={'target': 'hiragana', 'user_id': user_id})
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def test_reset_progress(self):
        state = self.start()
        self.client.post("/api/quiz/answer", json={'answer': 'wrong'})
        self.assertIn('default', self.storage.progress)

        self.assertTrue(self.client.delete("/api/progress").json()['deleted'])
        self.assertNotIn('default', self.storage.progress)
        self.assertNotIn('default', app_module.user_evaluators)
        self.assertEqual(self.client.get("/api/quiz").status_code, 404)
        review = self.client.post("/api/quiz/start", json={'target': 'hiragana', 'review': True})
        self.assertEqual(review.status_code, 404)
        self.assertEqual(self.client.get("/api/items/" + state['question']['id']).json()['mistake_count'], 0)

        self.assertFalse(self.client.delete("/api/progress").json()['deleted'])

    def test_reset_failure(self):
        self.storage.delete_progress = MagicMock(side_effect=StorageError('Could not delete progress for default'))
        self.start()
        response = self.client.delete("/api/progress")
        self.assertEqual(response.status_code, 503)
        self.assertIn('default', app_module.quiz_sessions)


class TestCatalogEndpoints(ServerTestCase):

    def test_item_detail(self):
        item = self.client.get("/api/items/kanji-001").json()
        self.assertEqual(item['char'], '一')
        self.assertTrue(item['lookup_url'].endswith('%23kanji'))
        self.assertIn('search_url', item)

    def test_unknown_item(self):
        self.assertEqual(self.client.get("/api/items/nope").status_code, 404)

    def test_progress_overview(self):
        data = self.client.get("/api/progress").json()
        hiragana = data['scripts'][0]
        self.assertEqual(hiragana['category'], 'hiragana')
        self.assertEqual(hiragana['total'], 71)
        self.assertEqual(
            [section['name'] for section in hiragana['subsections']],
            ['Basics (46)', 'Dakuten & Handakuten (25)']
        )

    def test_vocabulary_search(self):
        data = self.client.get("/api/vocabulary", params={'search': 'water'}).json()
        self.assertGreater(data['total'], 0)
        self.assertIn('lookup_url', data['items'][0])

    def test_grammar_search(self):
        data = self.client.get("/api/grammar").json()
        self.assertEqual(data['total'], len(DEFAULT_CATALOG.grammar))

    def test_stats(self):
        self.assertEqual(self.client.get("/api/stats").json()['model'], 'mock')
        app_module.ai_provider = None
        self.assertIsNone(self.client.get("/api/stats").json()['model'])


if __name__ == '__main__':
    unittest.main()
