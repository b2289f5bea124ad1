"""Progressive unlocking of catalog items based on mastery."""

from .config import CHARACTER_CATEGORIES, INITIAL_INTRO_COUNT


def discovered_pool(category: str, catalog, progress) -> list:
    """Return the unlocked prefix of a category's curriculum.

    Every mastered item in the category unlocks one more item past the
    initial introduction set. Catalog order is never changed.
    """
    items = catalog.items(category)
    allowed = INITIAL_INTRO_COUNT + progress.mastered_count(items)
    return items[:min(allowed, len(items))]


def discovered_pools(catalog, progress) -> dict[str, list]:
    """Discovered pool for every character category."""
    return {
        category: discovered_pool(category, catalog, progress)
        for category in CHARACTER_CATEGORIES
    }


def combined_pool(catalog, progress) -> list:
    """Concatenate the discovered pools of all character categories."""
    pool = []
    for category in CHARACTER_CATEGORIES:
        pool.extend(discovered_pool(category, catalog, progress))
    return pool


class UnlockTracker:
    """Reports the item revealed when a category's pool grows."""

    def __init__(self, counts: dict[str, int] | None = None):
        self.counts = {category: INITIAL_INTRO_COUNT for category in CHARACTER_CATEGORIES}
        if counts:
            self.counts.update(counts)

    @classmethod
    def from_progress(cls, catalog, progress) -> 'UnlockTracker':
        """Seed with the current pool sizes so only future growth is reported."""
        pools = discovered_pools(catalog, progress)
        return cls({category: len(pool) for category, pool in pools.items()})

    def observe(self, category: str, pool: list):
        """Record the pool length. Returns the newly revealed trailing item, or None."""
        previous = self.counts.get(category, INITIAL_INTRO_COUNT)
        self.counts[category] = len(pool)
        if pool and len(pool) > previous:
            return pool[-1]
        return None

    def observe_all(self, catalog, progress) -> list:
        """Observe every category and return the items unlocked since the last call."""
        unlocked = []
        for category, pool in discovered_pools(catalog, progress).items():
            item = self.observe(category, pool)
            if item is not None:
                unlocked.append(item)
        return unlocked
