"""Unit tests for relevance scoring."""

import pytest

from phrase_search.models import Record
from phrase_search.ranker import Ranker
from phrase_search.tokenizer import Tokenizer


@pytest.fixture
def ranker(config):
    return Ranker(config)


def test_exact_keyword_scores_higher_than_partial(ranker):
    exact = Record(id=1, keywords=("hei",))
    partial = Record(id=2, keywords=("hei på deg",))
    assert ranker.score_record(exact, "hei", ["hei"]) == 100
    assert ranker.score_record(partial, "hei", ["hei"]) == 50


def test_partial_and_exact_are_counted_per_keyword(ranker):
    record = Record(id=1, keywords=("takk", "tusen takk", "спасибо"))
    assert ranker.score_record(record, "takk", ["takk"]) == 150


def test_text_token_overlap_scores(ranker):
    record = Record(id=1, primary_text="God morgen!", secondary_text="morgen kaffe")
    assert ranker.score_record(record, "god morgen", ["god", "morgen"]) == 2 * 10 + 5


def test_category_bonus_uses_lowercased_category(ranker):
    record = Record(id=1, category="Greetings")
    assert ranker.score_record(record, "greetings", ["greetings"]) == 20
    assert ranker.score_record(record, "takk", ["takk"]) == 0


def test_scores_accumulate_without_cap(ranker):
    record = Record(id=1, keywords=("hei",), primary_text="hei", secondary_text="hei", category="hei")
    assert ranker.score_record(record, "hei", ["hei"]) == 100 + 10 + 5 + 20


def test_rank_sorts_descending_and_keeps_input_order_for_ties(ranker):
    first = Record(id="zeta", primary_text="hei")
    second = Record(id="alpha", primary_text="hei")
    best = Record(id="mid", keywords=("hei",))
    ranked = ranker.rank([first, second, best], "hei", ["hei"])
    assert [r.record.id for r in ranked] == ["mid", "zeta", "alpha"]
    assert [r.score for r in ranked] == [100, 10, 10]


def test_rank_truncates_to_topk(ranker):
    records = [Record(id=i, primary_text="hei") for i in range(5)]
    ranked = ranker.rank(records, "hei", ["hei"], topk=2)
    assert [r.record.id for r in ranked] == [0, 1]


def test_rank_without_topk_uses_configured_default_and_shares_tokenizer(config):
    tokenizer = Tokenizer(config)
    ranker = Ranker(config, tokenizer=tokenizer)
    assert ranker.tokenizer is tokenizer
    records = [Record(id=i, primary_text="hei") for i in range(12)]
    assert len(ranker.rank(records, "hei", ["hei"], topk=None)) == config.TOP_K_RESULTS
