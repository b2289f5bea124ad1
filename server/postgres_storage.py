"""PostgreSQL storage implementation."""

import json
import logging
import os
import psycopg2
from psycopg2.extras import RealDictCursor

from core.config import CONFIG_FILE, PROGRESS_NAMESPACE
from core.errors import StorageError
from core.interfaces import Storage

logger = logging.getLogger(__name__)


class PostgresStorage(Storage):
    """PostgreSQL-based storage implementation."""

    def __init__(self, config_file: str = None, db_url: str = None, namespace: str = PROGRESS_NAMESPACE):
        self.config_file = config_file or os.path.expanduser(CONFIG_FILE)
        self.db_url = db_url or os.environ.get(
            'DATABASE_URL',
            'postgresql://localhost:5432/n5master'
        )
        self.namespace = namespace
        self._conn = None
        self._initialized = False

    @property
    def conn(self):
        """Lazy connection initialization."""
        if self._conn is None or self._conn.closed:
            self._conn = psycopg2.connect(self.db_url)
            if not self._initialized:
                self._init_db()
                self._initialized = True
        return self._conn

    def _init_db(self):
        """Create tables if they don't exist."""
        with self._conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS learner_progress (
                    namespace VARCHAR(64) NOT NULL,
                    user_id VARCHAR(255) NOT NULL,
                    progress JSONB NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    PRIMARY KEY (namespace, user_id)
                )
            """)
            cur.execute("""
                CREATE INDEX IF NOT EXISTS idx_learner_progress_updated
                ON learner_progress(updated_at)
            """)
        self._conn.commit()

    def close(self):
        """Close the database connection."""
        if self._conn and not self._conn.closed:
            self._conn.close()

    def load_config(self) -> dict:
        if not os.path.exists(self.config_file):
            raise FileNotFoundError(
                f"Config file not found at {self.config_file}\n"
                f'Please create it with: {{"gemini_api_key": "YOUR_API_KEY_HERE"}}'
            )
        with open(self.config_file, 'r') as f:
            return json.load(f)

    def load_progress(self, user_id: str = "default") -> dict | None:
        try:
            with self.conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT progress FROM learner_progress WHERE namespace = %s AND user_id = %s",
                    (self.namespace, user_id)
                )
                row = cur.fetchone()
                if row:
                    return row['progress']
                return None
        except psycopg2.Error as e:
            logger.error(f"Error loading progress for {user_id}: {e}")
            if self._conn is not None and not self._conn.closed:
                self._conn.rollback()
            raise StorageError(f"Could not load progress for {user_id}") from e

    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO learner_progress (namespace, user_id, progress, updated_at)
                    VALUES (%s, %s, %s, CURRENT_TIMESTAMP)
                    ON CONFLICT (namespace, user_id)
                    DO UPDATE SET progress = EXCLUDED.progress, updated_at = CURRENT_TIMESTAMP
                """, (self.namespace, user_id, json.dumps(progress)))
            self.conn.commit()
        except psycopg2.Error as e:
            logger.error(f"Error saving progress for {user_id}: {e}")
            self.conn.rollback()
            raise

    def list_users(self) -> list[str]:
        """List all existing user IDs."""
        try:
            with self.conn.cursor() as cur:
                cur.execute(
                    "SELECT user_id FROM learner_progress WHERE namespace = %s ORDER BY user_id",
                    (self.namespace,)
                )
                return [row[0] for row in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Error listing users: {e}")
            return []

    def delete_progress(self, user_id: str) -> bool:
        """Delete a user's progress."""
        try:
            with self.conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM learner_progress WHERE namespace = %s AND user_id = %s",
                    (self.namespace, user_id)
                )
                deleted = cur.rowcount > 0
            self.conn.commit()
            return deleted
        except psycopg2.Error as e:
            logger.error(f"Error deleting progress for {user_id}: {e}")
            self.conn.rollback()
            raise StorageError(f"Could not delete progress for {user_id}") from e
