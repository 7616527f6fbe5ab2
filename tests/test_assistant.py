"""Tests for the conversation layer."""

import pytest

from phrase_search.assistant import HELP_MESSAGE, Intent, LanguageAssistant
from phrase_search.models import Dataset, Record


@pytest.fixture
def assistant(dataset):
    return LanguageAssistant.from_dataset(dataset, preload=False)


@pytest.mark.parametrize("message, intent", [
    ("как сказать спасибо", Intent.TRANSLATION),
    ("Translate hei", Intent.TRANSLATION),
    ("переведи новое слово", Intent.TRANSLATION),
    ("дай новое слово", Intent.RANDOM_WORD),
    ("расскажи про артикли", Intent.GRAMMAR),
    ("какое правило?", Intent.GRAMMAR),
    ("hei", Intent.SEARCH),
    ("", Intent.SEARCH),
    (None, Intent.SEARCH),
])
def test_classify_intent(assistant, message, intent):
    assert assistant.classify_intent(message) is intent


def test_extract_phrase_strips_commands_and_quotes(assistant):
    assert assistant.extract_phrase("Переведи «привет»!") == "привет"
    assert assistant.extract_phrase("как сказать 'доброе утро' по-норвежски?") == "доброе утро"


def test_translation_request(assistant):
    answer = assistant.answer("Как сказать спасибо?")
    assert answer.startswith("**Перевод:**")
    assert "takk [так]" in answer
    assert '"спасибо"' in answer


def test_translation_request_with_typo_offers_suggestions(assistant):
    answer = assistant.answer("переведи спосибо")
    assert answer.startswith("**Точный перевод не найден**")
    assert "• спасибо = takk [так]" in answer


def test_translation_not_found(assistant):
    answer = assistant.answer("переведи qwerty")
    assert answer.startswith("**Перевод не найден**")
    assert '"qwerty"' in answer


def test_search_answer_uses_top_record(assistant):
    answer = assistant.answer("hei")
    assert "**hei**" in answer
    assert "**привет**" in answer


def test_vocabulary_fallback_for_partial_words(assistant):
    assert assistant.engine.search("kaff") == []
    answer = assistant.answer("kaff")
    assert "jeg vil gjerne ha kaffe" in answer
    assert "Jeg vil gjerne ha en kopp kaffe, takk." in answer


def test_grammar_answer(assistant):
    answer = assistant.answer("расскажи про артикли")
    assert "Грамматика: артикли" in answer
    assert "• et hus (дом) — неопределенный артикль среднего рода" in answer


def test_random_word_answer(assistant):
    answer = assistant.answer("дай новое слово")
    assert answer.startswith("🇳🇴 **")
    assert "Уровень:" in answer


def test_help_when_nothing_matches(assistant):
    assert assistant.answer("xyz").startswith(HELP_MESSAGE)


def test_help_suggests_correction(assistant):
    assert assistant.help_response("takk") == HELP_MESSAGE
    assert 'Возможно, вы имели в виду: "takk"?' in assistant.help_response("tak")


def test_from_dataset_preloads_popular_queries(dataset, config):
    assistant = LanguageAssistant.from_dataset(dataset)
    stats = assistant.engine.get_stats()
    assert stats["total_searches"] == len(config.POPULAR_QUERIES)
    assert stats["cache_size"] > 0


def test_from_dataset_uses_builtin_dataset():
    assistant = LanguageAssistant.from_dataset(preload=False)
    assert assistant.engine.indexer.record_count == 12
    assert len(assistant.translations) > 100


def test_keyword_contained_in_message_answers_from_dataset_records():
    dataset = Dataset(records=[
        Record.from_mapping({"id": "r1", "keywords": ["ha det bra"], "answer": "до свидания"}),
        Record.from_mapping({"id": "r2", "keywords": ["god natt"], "answer": "спокойной ночи"}),
    ])
    assistant = LanguageAssistant.from_dataset(dataset, preload=False)

    assert assistant.engine.search("vi sier god natt til alle") == []
    assert assistant.answer("Vi sier God natt til alle!") == "спокойной ночи"
    assert assistant.find_record_by_keyword("") is None
