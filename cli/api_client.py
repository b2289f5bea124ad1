"""REST API client for the N5 Master server."""

import requests


class N5MasterAPIClient:
    """Client for communicating with the N5 Master REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make a POST request."""
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def _delete(self, endpoint: str) -> dict:
        response = self.session.delete(f"{self.base_url}{endpoint}", params={'user_id': self.user_id})
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_home(self) -> dict:
        """Mastery per category plus newly unlocked items."""
        return self._get("/api/home")

    def get_pool(self, category: str) -> dict:
        return self._get(f"/api/pool/{category}")

    def start_quiz(self, target: str, review: bool = False) -> dict:
        return self._post("/api/quiz/start", {'target': target, 'review': review})

    def get_quiz(self) -> dict:
        return self._get("/api/quiz")

    def submit_answer(self, answer: str) -> dict:
        return self._post("/api/quiz/answer", {'answer': answer})

    def next_question(self) -> dict:
        return self._post("/api/quiz/next", {})

    def get_summary(self) -> dict:
        return self._get("/api/quiz/summary")

    def abandon_quiz(self) -> dict:
        return self._delete("/api/quiz")

    def get_item(self, item_id: str) -> dict:
        return self._get(f"/api/items/{item_id}")

    def get_progress(self) -> dict:
        """Per-script proficiency breakdown."""
        return self._get("/api/progress")

    def search_vocabulary(self, query: str = '') -> dict:
        return self._get("/api/vocabulary", {'search': query})

    def search_grammar(self, query: str = '') -> dict:
        return self._get("/api/grammar", {'search': query})

    def list_users(self) -> list[str]:
        """Users that have stored progress on the server."""
        response = self.session.get(f"{self.base_url}/api/users")
        response.raise_for_status()
        return response.json()['users']

    def reset_progress(self) -> dict:
        """Erase this user's stored progress."""
        return self._delete("/api/progress")

    def set_api_key(self, api_key: str) -> dict:
        """Replace the server's Gemini API key."""
        response = self.session.post(f"{self.base_url}/api/credentials", json={'api_key': api_key})
        response.raise_for_status()
        return response.json()
