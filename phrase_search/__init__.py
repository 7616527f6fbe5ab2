"""
Norwegian Phrase Search

A keyword search engine for a language-learning chat assistant: inverted
indexes over a small static dataset, AND-then-OR query evaluation,
lexical relevance scoring and a bounded result cache.

Main components:
- PhraseSearchEngine: Main search engine class
- Tokenizer: Text normalization and tokenization
- Indexer: Inverted index construction and lookups
- Ranker: Relevance scoring
- ResultCache: Bounded memo cache for ranked results
- AutoCorrect: "Did you mean" suggestions using Levenshtein distance
- VocabularySearchEngine: Word-level vocabulary lookup
- TranslationLookup: Phrase translation dictionary
- LanguageAssistant: Conversation layer built on the above
"""

from .search_engine import PhraseSearchEngine
from .tokenizer import Tokenizer
from .indexer import Indexer
from .ranker import Ranker
from .cache import ResultCache
from .autocorrect import AutoCorrect
from .models import Record, SearchOptions, SearchResult, VocabularyEntry, GrammarRule, Dataset
from .vocabulary import VocabularySearchEngine
from .translation import TranslationLookup
from .assistant import LanguageAssistant, Intent
from .data import load_dataset, build_records
from .utils import ResultFormatter, load_config

__version__ = "1.0.0"

__all__ = [
    "PhraseSearchEngine",
    "Tokenizer",
    "Indexer",
    "Ranker",
    "ResultCache",
    "AutoCorrect",
    "Record",
    "SearchOptions",
    "SearchResult",
    "VocabularyEntry",
    "GrammarRule",
    "Dataset",
    "VocabularySearchEngine",
    "TranslationLookup",
    "LanguageAssistant",
    "Intent",
    "load_dataset",
    "build_records",
    "ResultFormatter",
    "load_config",
]
