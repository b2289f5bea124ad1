"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class AIProvider(ABC):
    """Abstract base class for AI/LLM provider."""

    @abstractmethod
    def get_mnemonic(self, item) -> dict:
        """Generate a mnemonic for a learnable item.

        Returns {character, mnemonic, example_sentence, translation}.
        Raises InvalidCredential when the key is rejected and
        HintUnavailable for any other failure.
        """
        pass


class Storage(ABC):
    """Abstract base class for config and progress storage."""

    @abstractmethod
    def load_config(self) -> dict:
        """Load configuration. Returns config dict."""
        pass

    @abstractmethod
    def load_progress(self, user_id: str = "default") -> dict | None:
        """Load the serialized progress record for a user, or None if absent.

        Raises StorageError when a record may exist but cannot be read.
        """
        pass

    @abstractmethod
    def save_progress(self, progress: dict, user_id: str = "default") -> None:
        """Replace the serialized progress record for a user."""
        pass

    @abstractmethod
    def list_users(self) -> list[str]:
        """List user IDs that have stored progress."""
        pass

    @abstractmethod
    def delete_progress(self, user_id: str) -> bool:
        """Delete stored progress for a user. Returns True if something was deleted.

        Raises StorageError when the delete itself fails.
        """
        pass
