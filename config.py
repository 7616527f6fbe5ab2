"""
Configuration settings for the Norwegian phrase search engine.

This module contains all configurable parameters for the search engine
and the conversation layer. Modify these values to customize the behavior
of the system, or pass a dictionary of overrides to PhraseSearchEngine.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_FILE = None  # Optional JSON dataset; None uses the built-in dataset

# Text normalization settings
WORD_CHARACTERS = "0-9a-z_а-яёæøå"  # Regex ranges kept by the normalizer (after lowercasing)
CHARACTER_FOLDS = {}  # Character replacements applied before stripping, e.g. {"ё": "е"}
VOCABULARY_FOLDS = {"ё": "е", "ъ": "", "ь": ""}  # Folds used by the vocabulary engine
MIN_TOKEN_LENGTH = 2  # Tokens shorter than this are dropped
MAX_QUERY_TOKENS = 10  # Tokens kept per text to bound query cost
STOP_WORDS = frozenset([
    "и", "в", "на", "с", "по", "для", "что", "как", "где", "когда", "почему", "кто",
])

# Index settings
INDEX_CATEGORY_AS_KEYWORD = True  # Category names are searchable like keywords

# Search settings
TOP_K_RESULTS = 10  # Default result limit
SNIPPET_CHARS = 120  # Maximum characters in result snippets

# Relevance weights
EXACT_KEYWORD_SCORE = 100  # Keyword equals the normalized query
PARTIAL_KEYWORD_SCORE = 50  # Keyword contains the normalized query
PRIMARY_TOKEN_SCORE = 10  # Per query token found in the primary text
SECONDARY_TOKEN_SCORE = 5  # Per query token found in the secondary text
CATEGORY_BONUS = 20  # Category named among the query tokens

# Cache settings
CACHE_ENABLED = True
CACHE_MAX_SIZE = 1000  # Oldest-inserted entry is evicted on overflow

# Autocomplete / auto-correction settings
SUGGESTION_LIMIT = 5  # Autocomplete suggestions returned
AUTO_CORRECT_ENABLED = True  # Enable/disable "did you mean" suggestions
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for auto-correction
MIN_WORD_LENGTH = 2  # Minimum word length for auto-correction

# Queries run at startup to warm the cache
POPULAR_QUERIES = [
    "привет", "спасибо", "как дела", "семья", "еда", "время",
    "работа", "hei", "takk", "приветствие",
]

# Conversation settings
ASSISTANT_RESULT_LIMIT = 3
TRANSLATION_SUGGESTION_LIMIT = 3
TRANSLATION_FUZZY_CUTOFF = 70  # Similarity (0-100) for misspelled phrase suggestions
TRANSLATION_KEYWORDS = ["перевод", "переведи", "как сказать", "что означает", "как будет", "translate"]
GRAMMAR_KEYWORDS = ["грамматика", "правило", "как образуется", "множественное число", "артикл"]
RANDOM_WORD_KEYWORDS = ["случайное слово", "дай слово", "новое слово", "изучить слово"]
TRANSLATION_STRIP_PHRASES = [
    "переведи", "перевод", "как сказать", "по-норвежски", "translate", "oversett",
]

# Output settings
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting
HIGHLIGHT_CASE_SENSITIVE = False  # Case sensitivity for highlighting
SHOW_SCORES = True  # Show relevance scores in results

# Logging settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
