"""Unit tests for the bounded result cache."""

from phrase_search.cache import ResultCache


def _counting(value):
    calls = []

    def compute():
        calls.append(value)
        return value

    return compute, calls


def test_hit_skips_compute():
    cache = ResultCache(max_entries=10)
    compute, calls = _counting("v")

    assert cache.get_or_compute("k", compute) == "v"
    assert cache.get_or_compute("k", compute) == "v"
    assert calls == ["v"]
    assert cache.hits == 1
    assert cache.misses == 1
    assert "k" in cache


def test_evicts_oldest_inserted_entry():
    cache = ResultCache(max_entries=2)
    cache.get_or_compute("a", lambda: 1)
    cache.get_or_compute("b", lambda: 2)
    # Reading "a" does not refresh it
    cache.get_or_compute("a", lambda: 1)
    cache.get_or_compute("c", lambda: 3)

    assert len(cache) == 2
    assert "a" not in cache
    assert "b" in cache and "c" in cache


def test_clear_empties_cache():
    cache = ResultCache(max_entries=5)
    cache.get_or_compute("a", lambda: 1)
    cache.clear()
    assert len(cache) == 0
    compute, calls = _counting(1)
    cache.get_or_compute("a", compute)
    assert calls == [1]


def test_disabled_cache_always_computes():
    cache = ResultCache(max_entries=5, enabled=False)
    compute, calls = _counting("v")
    cache.get_or_compute("k", compute)
    cache.get_or_compute("k", compute)
    assert calls == ["v", "v"]
    assert len(cache) == 0
    assert cache.hits == 0


def test_zero_size_cache_is_disabled():
    cache = ResultCache(max_entries=0)
    assert not cache.enabled
    cache.get_or_compute("k", lambda: 1)
    assert len(cache) == 0
