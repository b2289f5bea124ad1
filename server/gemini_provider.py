"""Gemini AI provider implementation."""

import json
import logging
import time
import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from core.config import DEFAULT_HINT_MODEL
from core.errors import HintUnavailable, InvalidCredential
from core.interfaces import AIProvider

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MNEMONIC_KEYS = ['character', 'mnemonic', 'example_sentence', 'translation']
# The prompt asks for camelCase; responses are normalized to MNEMONIC_KEYS
KEY_ALIASES = {'exampleSentence': 'example_sentence'}

# Error message fragments the API uses for bad or unusable keys
CREDENTIAL_MESSAGES = ['API key not valid', 'API_KEY_INVALID', 'Requested entity was not found']


class GeminiProvider(AIProvider):
    """Gemini AI provider implementation."""

    def __init__(self, api_key: str, model_name: str = DEFAULT_HINT_MODEL):
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)
        self.model_name = model_name
        self.stats = _empty_stats()

    def _execute(self, prompt: str) -> tuple[str, int]:
        start_time = time.time()
        response = self.model.generate_content(
            prompt,
            generation_config={'response_mime_type': 'application/json'}
        )
        end_time = time.time()
        ms = int((end_time - start_time) * 1000)
        return (response.text, ms)

    def _record_stats(self, ms: int, failed: bool = False) -> None:
        self.stats['calls'] += 1
        self.stats['total_ms'] += ms
        if failed:
            self.stats['failures'] += 1

    def get_stats(self) -> dict:
        calls = self.stats['calls']
        return {
            'model': self.model_name,
            **self.stats,
            'avg_ms': round(self.stats['total_ms'] / calls, 1) if calls > 0 else 0
        }

    def _build_prompt(self, item) -> str:
        if item.category == 'kanji':
            description = f"Kanji for {item.meaning}"
        elif item.category == 'vocabulary':
            description = f"vocabulary word meaning {item.meaning}"
        else:
            description = f"{item.category}, read as {item.romaji}"
        return f"""
            Generate a fun and memorable mnemonic for the Japanese character: {item.char} ({description}).
            Provide a simple N5-level example sentence using this character in Japanese and its English translation.

            Respond with ONLY a JSON object in this exact format:
            {{
                "character": "{item.char}",
                "mnemonic": "a creative story or visual mnemonic to help remember the character",
                "exampleSentence": "a basic N5-level Japanese sentence",
                "translation": "English translation of the example sentence"
            }}
        """

    def _parse_mnemonic(self, response: str) -> dict:
        """Parse the JSON payload. Raises HintUnavailable when it is malformed."""
        cleaned = response.strip().replace('```json', '').replace('```', '')
        try:
            mnemonic = json.loads(cleaned)
        except (json.JSONDecodeError, TypeError) as e:
            logger.error(f"Failed to parse mnemonic: {e}")
            logger.error(f"Raw response:\n{response}")
            if '{' not in response:
                logger.error("Diagnosis: No opening brace '{' found")
            elif '}' not in response:
                logger.error("Diagnosis: No closing brace '}' found")
            raise HintUnavailable("Malformed mnemonic response") from e

        if not isinstance(mnemonic, dict):
            logger.warning(f"Mnemonic response is not an object: {type(mnemonic)}")
            logger.warning(f"Raw response:\n{response}")
            raise HintUnavailable("Mnemonic response is not an object")

        for alias, key in KEY_ALIASES.items():
            if alias in mnemonic and key not in mnemonic:
                mnemonic[key] = mnemonic.pop(alias)

        missing_keys = [k for k in MNEMONIC_KEYS if not isinstance(mnemonic.get(k), str)]
        if missing_keys:
            logger.warning(f"Mnemonic response missing keys: {missing_keys}")
            logger.warning(f"Raw response:\n{response}")
            raise HintUnavailable(f"Mnemonic response missing keys: {missing_keys}")

        return {key: mnemonic[key] for key in MNEMONIC_KEYS}

    def get_mnemonic(self, item) -> dict:
        start_time = time.time()
        try:
            response, ms = self._execute(self._build_prompt(item))
        except Exception as e:
            ms = int((time.time() - start_time) * 1000)
            self._record_stats(ms, failed=True)
            if is_credential_error(e):
                raise InvalidCredential(str(e)) from e
            logger.error(f"Mnemonic request failed: {type(e).__name__}: {e}")
            raise HintUnavailable(str(e)) from e

        try:
            mnemonic = self._parse_mnemonic(response)
        except HintUnavailable:
            self._record_stats(ms, failed=True)
            raise
        self._record_stats(ms)
        return mnemonic


def is_credential_error(error: Exception) -> bool:
    """Whether a Gemini API failure means the API key is missing, invalid or unauthorized."""
    if isinstance(error, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return True
    message = str(error)
    return any(fragment in message for fragment in CREDENTIAL_MESSAGES)


def _empty_stats() -> dict:
    return {'calls': 0, 'failures': 0, 'total_ms': 0}
