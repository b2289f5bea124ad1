"""Error taxonomy for quiz sessions and hint generation."""


class QuizError(Exception):
    """Base class for quiz flow errors."""


class NoMistakesTracked(QuizError):
    """Review mode requested but no discovered item has a tracked mistake."""

    def __init__(self, target: str):
        super().__init__("No mistakes tracked in your active discovery set yet!")
        self.target = target


class SessionCompleted(QuizError):
    """The session already moved past its last question."""


class AnswerRejected(QuizError):
    """The current question cannot take another answer right now."""


class HintError(Exception):
    """Base class for hint generation failures."""


class HintUnavailable(HintError):
    """The hint service failed or returned something unusable."""


class InvalidCredential(HintError):
    """The hint service rejected the configured API key."""


class StorageError(Exception):
    """Stored progress exists but could not be read."""
