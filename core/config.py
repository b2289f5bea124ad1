"""Configuration constants for the N5 Master application."""

# Mastery criteria
MASTERY_THRESHOLD = 3          # Successful answers needed to master an item

# Proficiency tiers (by current success counter)
PROFICIENCY_INTERMEDIATE = 5
PROFICIENCY_ADVANCED = 8

# Discovery
INITIAL_INTRO_COUNT = 10       # Items unlocked per category before any mastery

# Quiz sessions
CATEGORY_SESSION_LENGTH = 10
GENERAL_SESSION_LENGTH = 20
DISTRACTOR_COUNT = 3           # Wrong options shown next to the correct one

# Categories
GENERAL = 'general'
GRAMMAR = 'grammar'
CHARACTER_CATEGORIES = ['hiragana', 'katakana', 'kanji', 'vocabulary']
MEANING_CATEGORIES = ('kanji', 'vocabulary')
READING_CATEGORIES = ('hiragana', 'katakana')
ALL_CATEGORIES = CHARACTER_CATEGORIES + [GRAMMAR, GENERAL]

# Persistence
PROGRESS_NAMESPACE = 'japanese-progress'
CONFIG_FILE = '~/.config/n5master/config.json'

# Hint generation
DEFAULT_HINT_MODEL = 'gemini-2.0-flash'

# External lookup
DICTIONARY_URL = 'https://jisho.org/search/'
SEARCH_URL = 'https://www.google.com/search?q='
