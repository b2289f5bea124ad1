"""Status and proficiency classification of learnable items."""

from .config import PROFICIENCY_ADVANCED, PROFICIENCY_INTERMEDIATE

NOT_STARTED = 'Not started'
IN_PROGRESS = 'In progress'
COMPLETED = 'Completed'

NONE = 'None'
BEGINNER = 'Beginner'
INTERMEDIATE = 'Intermediate'
ADVANCED = 'Advanced'


def status(item_id: str, progress) -> str:
    if progress.is_mastered(item_id):
        return COMPLETED
    if progress.success_count(item_id) > 0:
        return IN_PROGRESS
    return NOT_STARTED


def proficiency(item_id: str, progress) -> str:
    """Tier from the current success counter only. Can regress after mistakes
    even for mastered items."""
    success = progress.success_count(item_id)
    if success >= PROFICIENCY_ADVANCED:
        return ADVANCED
    if success >= PROFICIENCY_INTERMEDIATE:
        return INTERMEDIATE
    if success > 0:
        return BEGINNER
    return NONE


def describe(item, progress) -> dict:
    """Item fields plus its counters and classification."""
    return {
        **item.to_dict(),
        'status': status(item.id, progress),
        'proficiency': proficiency(item.id, progress),
        'success_count': progress.success_count(item.id),
        'mistake_count': progress.mistake_count(item.id)
    }


def summarize(items, progress) -> dict:
    """Counts of completed, in-progress and advanced items in a group."""
    statuses = [status(item.id, progress) for item in items]
    return {
        'total': len(items),
        'mastered': statuses.count(COMPLETED),
        'in_progress': statuses.count(IN_PROGRESS),
        'advanced': sum(1 for item in items if proficiency(item.id, progress) == ADVANCED)
    }
