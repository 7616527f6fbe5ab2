"""
Conversation layer that turns a user message into an answer.

Messages are classified by keyword presence, in priority order:
translation request, random word request, grammar question. Anything
else goes to the phrase search engine, then to a keyword scan of the
dataset records, then to the vocabulary lookup, and finally to a help
message.
"""

import enum
import logging
import re
from typing import Optional

from .data import build_records, load_dataset
from .models import Dataset, Record
from .search_engine import PhraseSearchEngine
from .translation import TranslationLookup
from .utils import load_config
from .vocabulary import VocabularySearchEngine, format_entry_card

logger = logging.getLogger(__name__)

HELP_MESSAGE = """Я помогаю изучать норвежский язык! 🇳🇴

Вы можете:
• Спросить перевод: "как сказать привет?"
• Попросить случайное слово: "дай новое слово"
• Узнать грамматику: "расскажи про артикли"
• Просто написать слово на русском или норвежском"""


class Intent(enum.Enum):
    TRANSLATION = "translation"
    RANDOM_WORD = "random_word"
    GRAMMAR = "grammar"
    SEARCH = "search"


class LanguageAssistant:
    """Answers learner messages from the search engine and the static dataset."""

    def __init__(self, engine: PhraseSearchEngine, vocabulary: VocabularySearchEngine,
                 translations: TranslationLookup, dataset: Optional[Dataset] = None):
        self.engine = engine
        self.config = engine.config
        self.vocabulary = vocabulary
        self.translations = translations
        self.dataset = dataset or Dataset()
        self._strip_regex = re.compile(
            "|".join(rf"{re.escape(p)}\s*" for p in self.config.TRANSLATION_STRIP_PHRASES)
        )

    @classmethod
    def from_dataset(cls, dataset: Optional[Dataset] = None, config_dict=None,
                     preload: bool = True) -> "LanguageAssistant":
        """
        Build an assistant with a freshly indexed engine.

        Args:
            dataset: Dataset to serve. If None, uses the built-in dataset.
            config_dict: Optional configuration overrides.
            preload: Warm the cache with config.POPULAR_QUERIES.

        Returns:
            A ready assistant.
        """
        config = load_config(config_dict)
        if dataset is None:
            dataset = load_dataset(config.DATA_FILE)

        engine = PhraseSearchEngine(config=config)
        engine.build_index(build_records(dataset))
        if preload:
            engine.preload_popular_queries(config.POPULAR_QUERIES)

        vocabulary = VocabularySearchEngine(config, dataset.vocabulary, dataset.grammar)
        translations = TranslationLookup(dataset.translations, fuzzy_cutoff=config.TRANSLATION_FUZZY_CUTOFF)
        return cls(engine, vocabulary, translations, dataset)

    def classify_intent(self, message: Optional[str]) -> Intent:
        text = (message or "").lower()
        cfg = self.config
        if any(k in text for k in cfg.TRANSLATION_KEYWORDS):
            return Intent.TRANSLATION
        if any(k in text for k in cfg.RANDOM_WORD_KEYWORDS):
            return Intent.RANDOM_WORD
        if any(k in text for k in cfg.GRAMMAR_KEYWORDS):
            return Intent.GRAMMAR
        return Intent.SEARCH

    def answer(self, message: Optional[str]) -> str:
        """
        Produce the assistant's reply to a message.

        Args:
            message: Typed or transcribed user text.

        Returns:
            Reply text; the help message when nothing matched.
        """
        intent = self.classify_intent(message)
        logger.debug("Message %r classified as %s", message, intent.value)

        if intent is Intent.TRANSLATION:
            return self.handle_translation_request(message)
        if intent is Intent.RANDOM_WORD:
            return self.random_word_response()
        if intent is Intent.GRAMMAR:
            return self.grammar_response(message)

        best = self.engine.find_best(message, limit=self.config.ASSISTANT_RESULT_LIMIT)
        if best is not None:
            return best.record.secondary_text or best.record.primary_text

        record = self.find_record_by_keyword(message)
        if record is not None:
            return record.secondary_text or record.primary_text

        entries = self.vocabulary.search(message)
        if entries:
            return self.format_entry(entries[0])

        return self.help_response(message)

    def find_record_by_keyword(self, message: Optional[str]) -> Optional[Record]:
        """First dataset record with a keyword contained anywhere in the message."""
        text = self.engine.tokenizer.normalize(message)
        if not text:
            return None
        for record in self.dataset.records:
            for keyword in record.keywords:
                normalized = self.engine.tokenizer.normalize(keyword)
                if normalized and normalized in text:
                    return record
        return None

    def extract_phrase(self, message: Optional[str]) -> str:
        """Strip translation commands and quotes from a request."""
        text = self._strip_regex.sub("", (message or "").lower())
        text = re.sub(r"[\"'«»]", "", text)
        return text.strip(" ?!.,")

    def handle_translation_request(self, message: Optional[str]) -> str:
        phrase = self.extract_phrase(message)
        translation = self.translations.lookup(phrase)
        if translation:
            return (
                "**Перевод:**\n\n"
                f"🇷🇺 \"{phrase}\"\n"
                f"🇳🇴 {translation}"
            )

        suggestions = self.translations.suggestions(phrase, limit=self.config.TRANSLATION_SUGGESTION_LIMIT)
        if suggestions:
            lines = "\n".join(f"• {ru} = {no}" for ru, no in suggestions)
            return f"**Точный перевод не найден**\n\nВозможно, вы искали:\n{lines}"

        return (
            "**Перевод не найден**\n\n"
            f"К сожалению, я не нашел перевод для \"{phrase}\".\n\n"
            "**Пример:** \"Переведи привет\" или \"Как сказать спасибо\""
        )

    def random_word_response(self) -> str:
        entry = self.vocabulary.get_random_word()
        if entry is None:
            return HELP_MESSAGE
        return self.format_entry(entry)

    def grammar_response(self, message: Optional[str]) -> str:
        rule = self.vocabulary.find_grammar_rule(message)
        if rule is None:
            return "Извините, грамматические правила пока не найдены."

        lines = [
            f"📖 **Грамматика: {rule.topic}**", "",
            f"🇳🇴 **Правило:** {rule.norwegian_rule}", "",
            f"🇷🇺 **Объяснение:** {rule.russian_explanation}", "",
            "📝 **Примеры:**",
        ]
        lines.extend(f"• {example.no} — {example.ru}" for example in rule.examples)
        return "\n".join(lines)

    def help_response(self, message: Optional[str]) -> str:
        corrected, _changes = self.engine.suggest_corrections(message)
        if corrected:
            return f"{HELP_MESSAGE}\n\nВозможно, вы имели в виду: \"{corrected}\"?"
        return HELP_MESSAGE

    def format_entry(self, entry) -> str:
        return format_entry_card(entry, self.dataset.categories, self.dataset.levels)
