"""Tests for the word-level vocabulary lookup."""

import pytest

from phrase_search.models import VocabularyEntry
from phrase_search.vocabulary import VocabularySearchEngine, entry_to_record, format_entry_card


@pytest.fixture
def vocabulary(config, dataset, rng):
    return VocabularySearchEngine(config, dataset.vocabulary, dataset.grammar, rng=rng)


def _ids(entries):
    return [e.id for e in entries]


def test_exact_word_match(vocabulary):
    assert _ids(vocabulary.search("takk")) == [2]


def test_search_finds_phrase_by_any_word(vocabulary):
    assert _ids(vocabulary.search("доброе утро"))[0] == 3
    assert 6 in _ids(vocabulary.search("понимаю"))


def test_partial_word_match(vocabulary):
    assert _ids(vocabulary.search("kaff")) == [9]


def test_punctuation_and_soft_signs_are_ignored(config):
    entry = VocabularyEntry(id=1, norwegian="salt", russian="соль")
    vocabulary = VocabularySearchEngine(config, [entry])
    assert _ids(vocabulary.search("Соль!")) == [1]
    assert _ids(vocabulary.search("сол")) == [1]


def test_results_are_unique(vocabulary):
    ids = _ids(vocabulary.search("hvor er bussen"))
    assert len(ids) == len(set(ids))
    assert ids[0] == 5


@pytest.mark.parametrize("query", [None, "", "   ", "?!"])
def test_empty_query_matches_nothing(vocabulary, query):
    assert vocabulary.search(query) == []


def test_category_is_searchable(vocabulary):
    assert _ids(vocabulary.search("transport")) == [10]


def test_random_word_respects_filters(vocabulary):
    for _ in range(10):
        assert vocabulary.get_random_word(level="intermediate").id in (11, 12)
    assert vocabulary.get_random_word(category="transport").id == 10
    assert vocabulary.get_random_word(category="unknown") is None


def test_get_by_category(vocabulary):
    assert _ids(vocabulary.get_by_category("greetings")) == [1, 2, 3, 4]
    assert vocabulary.get_by_category("unknown") == []


def test_grammar_rules(vocabulary):
    assert len(vocabulary.get_grammar_rules()) == 2
    assert len(vocabulary.get_grammar_rules("beginner")) == 2
    assert vocabulary.get_grammar_rules("advanced") == []


def test_find_grammar_rule(vocabulary):
    assert vocabulary.find_grammar_rule("расскажи про артикль").topic == "артикли"
    assert vocabulary.find_grammar_rule("как образуется множественное число").topic == "множественное число"
    assert vocabulary.find_grammar_rule("что-нибудь").id == 1


def test_find_grammar_rule_without_rules(config):
    assert VocabularySearchEngine(config).find_grammar_rule("артикли") is None


def test_entry_to_record(dataset):
    entry = dataset.vocabulary[0]
    record = entry_to_record(entry, dataset.categories, dataset.levels)
    assert record.id == "nor_1"
    assert record.keywords == ("hei", "привет")
    assert record.primary_text == "hei привет"
    assert record.category == "greetings"
    assert record.kind == "norwegian"
    assert "Категория: приветствие" in record.secondary_text


def test_format_entry_card_includes_example(dataset):
    card = format_entry_card(dataset.vocabulary[1], dataset.categories, dataset.levels)
    assert "**takk** [так]" in card
    assert "Takk for hjelpen!" in card
    assert "Уровень: начинающий" in card
