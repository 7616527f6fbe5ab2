"""Unit tests for text normalization and tokenization."""

import pytest

from phrase_search.tokenizer import Tokenizer


@pytest.fixture
def tokenizer(config):
    return Tokenizer(config)


@pytest.mark.parametrize("text", [None, "", "   ", "?!.,"])
def test_normalize_empty_input_yields_empty_string(tokenizer, text):
    assert tokenizer.normalize(text) == ""


def test_normalize_lowercases_and_strips_punctuation(tokenizer):
    assert tokenizer.normalize("  Hei!  Hvordan har du det? ") == "hei hvordan har du det"
    assert tokenizer.normalize("Привет, мир!") == "привет мир"


def test_normalize_keeps_norwegian_letters_and_underscore(tokenizer):
    assert tokenizer.normalize("Jeg FORSTÅR ikke, Ærlig!") == "jeg forstår ikke ærlig"
    assert tokenizer.normalize("personal_info") == "personal_info"


def test_normalize_collapses_all_whitespace(tokenizer):
    assert tokenizer.normalize("god\tmorgen\n\n takk") == "god morgen takk"


@pytest.mark.parametrize("text", [
    "Hei! Hvordan har du det?",
    "Ёлка — «ёж» и ÆØÅ",
    "İstanbul über café",
    "  tabs\tand\nnewlines  ",
    "emoji 🇳🇴 **bold** [хай]",
    "hvor-mye/koster_det?",
])
def test_normalize_is_idempotent(tokenizer, text):
    once = tokenizer.normalize(text)
    assert tokenizer.normalize(once) == once


def test_tokenize_drops_short_tokens_and_stop_words(tokenizer):
    assert tokenizer.tokenize("я и ты как где hei") == ["ты", "hei"]


def test_tokenize_truncates_to_configured_token_count(tokenizer, config):
    text = " ".join(f"w{i}" for i in range(25))
    tokens = tokenizer.tokenize(text)
    assert len(tokens) == config.MAX_QUERY_TOKENS
    assert tokens[0] == "w0"
    assert tokens[-1] == f"w{config.MAX_QUERY_TOKENS - 1}"


def test_tokenize_respects_explicit_max_tokens(tokenizer):
    assert tokenizer.tokenize("god morgen takk hei", max_tokens=2) == ["god", "morgen"]


def test_stop_words_come_from_constructor(config):
    tokenizer = Tokenizer(config, stop_words=["hei"])
    assert tokenizer.tokenize("hei takk где") == ["takk", "где"]


def test_character_folds_are_applied_before_stripping(config):
    tokenizer = Tokenizer(config, folds={"ё": "е", "ь": ""})
    assert tokenizer.normalize("Ёлка соль") == "елка сол"
