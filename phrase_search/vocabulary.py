"""
Vocabulary lookup over the Norwegian word list.

A simpler companion to PhraseSearchEngine: every word of an entry's
Norwegian and Russian text is indexed, and queries match indexed words
exactly or as substrings in either direction. It also serves random words,
category listings and grammar rules to the conversation layer.
"""

import logging
import random
from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence

from .models import GrammarRule, Record, VocabularyEntry
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def format_entry_card(entry: VocabularyEntry, categories: Optional[Mapping[str, str]] = None,
                      levels: Optional[Mapping[str, str]] = None, with_example: bool = True) -> str:
    """
    Render a vocabulary entry as the text shown to the learner.

    Args:
        entry: Vocabulary entry.
        categories: Category labels keyed by category tag.
        levels: Level labels keyed by level tag.
        with_example: Include the first usage example, if any.

    Returns:
        Multi-line card text.
    """
    categories = categories or {}
    levels = levels or {}

    lines = [f"🇳🇴 **{entry.norwegian}** [{entry.pronunciation}]", f"🇷🇺 **{entry.russian}**", ""]
    if with_example and entry.examples:
        example = entry.examples[0]
        lines += ["📝 **Пример:**", f"• {example.no}", f"• {example.ru}", ""]
    lines.append(f"📚 Категория: {categories.get(entry.category, entry.category)}")
    lines.append(f"📊 Уровень: {levels.get(entry.level, entry.level)}")
    return "\n".join(lines)


def entry_to_record(entry: VocabularyEntry, categories: Optional[Mapping[str, str]] = None,
                    levels: Optional[Mapping[str, str]] = None) -> Record:
    """Convert a vocabulary entry into a searchable record."""
    return Record(
        id=f"nor_{entry.id}",
        keywords=(entry.norwegian, entry.russian) + tuple(entry.synonyms),
        primary_text=f"{entry.norwegian} {entry.russian}",
        secondary_text=format_entry_card(entry, categories, levels, with_example=False),
        category=entry.category,
        level=entry.level,
        kind="norwegian",
    )


class VocabularySearchEngine:
    """Word-level lookup over vocabulary entries."""

    def __init__(self, config, vocabulary: Sequence[VocabularyEntry] = (),
                 grammar: Sequence[GrammarRule] = (), rng: Optional[random.Random] = None):
        """
        Initialize and index the vocabulary.

        Args:
            config: Configuration object.
            vocabulary: Vocabulary entries to index.
            grammar: Grammar rules served by get_grammar_rules().
            rng: Random source for get_random_word(); a fresh one if None.
        """
        self.config = config
        self.tokenizer = Tokenizer(config, folds=config.VOCABULARY_FOLDS, stop_words=())
        self.vocabulary: List[VocabularyEntry] = list(vocabulary)
        self.grammar: List[GrammarRule] = list(grammar)
        self.rng = rng or random.Random()

        self.norwegian_index: Dict[str, List[VocabularyEntry]] = {}
        self.russian_index: Dict[str, List[VocabularyEntry]] = {}
        self.search_index: Dict[str, List[VocabularyEntry]] = {}
        self.build_indexes()

    def _words(self, text: str) -> List[str]:
        normalized = self.tokenizer.normalize(text)
        return normalized.split(" ") if normalized else []

    def build_indexes(self) -> None:
        """Index every word of each entry's Norwegian and Russian text."""
        norwegian_index = defaultdict(list)
        russian_index = defaultdict(list)
        search_index = defaultdict(list)

        for entry in self.vocabulary:
            norwegian_words = self._words(entry.norwegian)
            russian_words = self._words(entry.russian)
            for word in norwegian_words:
                norwegian_index[word].append(entry)
            for word in russian_words:
                russian_index[word].append(entry)

            all_words = norwegian_words + russian_words
            if entry.category:
                all_words.append(entry.category)
            for word in all_words:
                search_index[word].append(entry)

        self.norwegian_index = dict(norwegian_index)
        self.russian_index = dict(russian_index)
        self.search_index = dict(search_index)
        logger.debug("Vocabulary indexed: %d entries, %d words", len(self.vocabulary), len(self.search_index))

    def search(self, query: Optional[str]) -> List[VocabularyEntry]:
        """
        Find entries sharing a word, or part of a word, with the query.

        Args:
            query: Raw query text.

        Returns:
            Matching entries, each once, in the order they were first found.
        """
        results: Dict[int, VocabularyEntry] = {}

        for word in self._words(query):
            for entry in self.search_index.get(word, ()):
                results.setdefault(entry.id, entry)

            for index_word, entries in self.search_index.items():
                if word in index_word or index_word in word:
                    for entry in entries:
                        results.setdefault(entry.id, entry)

        return list(results.values())

    def get_random_word(self, level: Optional[str] = None,
                        category: Optional[str] = None) -> Optional[VocabularyEntry]:
        """Pick a random entry, optionally restricted by level and category."""
        filtered = [
            entry for entry in self.vocabulary
            if (level is None or entry.level == level)
            and (category is None or entry.category == category)
        ]
        if not filtered:
            return None
        return self.rng.choice(filtered)

    def get_by_category(self, category: str) -> List[VocabularyEntry]:
        return [entry for entry in self.vocabulary if entry.category == category]

    def get_grammar_rules(self, level: Optional[str] = None) -> List[GrammarRule]:
        if level is None:
            return list(self.grammar)
        return [rule for rule in self.grammar if rule.level == level]

    def find_grammar_rule(self, message: Optional[str]) -> Optional[GrammarRule]:
        """
        Pick the grammar rule a message asks about.

        The first rule whose topic, or the stem of its topic's first word,
        appears in the message wins; otherwise the first rule.
        """
        if not self.grammar:
            return None
        text = self.tokenizer.normalize(message)
        for rule in self.grammar:
            topic = self.tokenizer.normalize(rule.topic)
            stem = topic.split(" ")[0][:-1] if topic else ""
            if topic and (topic in text or (len(stem) > 3 and stem in text)):
                return rule
        return self.grammar[0]
