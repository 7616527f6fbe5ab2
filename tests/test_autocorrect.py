"""Tests for query auto-correction."""

import pytest

from phrase_search.autocorrect import AutoCorrect


@pytest.fixture
def auto_correct(config):
    ac = AutoCorrect(config)
    ac.fit({"hest": 5, "test": 1, "takk": 2, "god morgen": 1})
    return ac


def test_fit_skips_multi_word_keywords(auto_correct):
    assert auto_correct.word_vocab == {"hest", "test", "takk"}
    assert auto_correct.by_len_index == {4: ["hest", "takk", "test"]}


def test_tie_break_prefers_higher_frequency(auto_correct):
    assert auto_correct.suggest_correction("fest") == ("hest", 1)


def test_no_suggestion_beyond_max_distance(auto_correct):
    assert auto_correct.suggest_correction("abcdefgh") == (None, None)


def test_autocorrect_query_words(auto_correct):
    corrected, changes, oov = auto_correct.autocorrect_query_words(["takk", "tak", "x", "zzzzzzz"])
    assert corrected == ["takk", "takk", "x", "zzzzzzz"]
    assert changes == [("tak", "takk")]
    assert oov == ["zzzzzzz"]
