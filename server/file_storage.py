"""File-based storage implementation."""

import json
import logging
import os

from core.config import CONFIG_FILE, PROGRESS_NAMESPACE
from core.errors import StorageError
from core.interfaces import Storage

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """File-based storage implementation. One JSON file per user."""

    def __init__(self, config_file: str = None, state_dir: str = None):
        self.config_file = config_file or os.path.expanduser(CONFIG_FILE)
        # Project root is one level up from server/
        project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.state_dir = state_dir or os.environ.get('N5MASTER_STATE_DIR') or project_root

    def _get_progress_file(self, user_id: str) -> str:
        """Get progress file path for a user."""
        if user_id == "default":
            return os.path.join(self.state_dir, f'{PROGRESS_NAMESPACE}.json')
        return os.path.join(self.state_dir, f'{PROGRESS_NAMESPACE}_{user_id}.json')

    def load_config(self) -> dict:
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(
                f"Config file not found at {self.config_file}\n"
                f'Please create it with: {{"gemini_api_key": "YOUR_API_KEY_HERE"}}'
            )
        with open(self.config_file, 'r') as f:
            return json.load(f)

    def load_progress(self, user_id: str = "default") -> dict | None:
        progress_file = self._get_progress_file(user_id)
        if not os.path.exists(progress_file):
            return None
        try:
            with open(progress_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read progress for {user_id} from {progress_file}: {e}")
            raise StorageError(f"Could not read progress for {user_id}") from e

    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        os.makedirs(self.state_dir, exist_ok=True)
        progress_file = self._get_progress_file(user_id)
        # Write then rename so a crash never leaves a truncated record
        tmp_file = progress_file + '.tmp'
        with open(tmp_file, 'w', encoding='utf-8') as f:
            json.dump(progress, f, indent=2, ensure_ascii=False)
        os.replace(tmp_file, progress_file)

    def list_users(self) -> list[str]:
        """List all existing user IDs."""
        users = []
        prefix = f'{PROGRESS_NAMESPACE}_'
        if os.path.exists(self.state_dir):
            for filename in os.listdir(self.state_dir):
                if filename == f'{PROGRESS_NAMESPACE}.json':
                    users.append('default')
                elif filename.startswith(prefix) and filename.endswith('.json'):
                    users.append(filename[len(prefix):-5])
        return sorted(users)

    def delete_progress(self, user_id: str) -> bool:
        """Delete a user's progress file."""
        progress_file = self._get_progress_file(user_id)
        if not os.path.exists(progress_file):
            return False
        try:
            os.remove(progress_file)
        except OSError as e:
            logger.error(f"Could not delete {progress_file}: {e}")
            raise StorageError(f"Could not delete progress for {user_id}") from e
        return True
