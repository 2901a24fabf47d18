import pytest

from historia.extraction.cache import LRUExtractionCache, NullExtractionCache, make_cache_key


def test_make_cache_key_uses_full_content():
    prefix = "x" * 100
    assert make_cache_key("timeline", prefix + "a") != make_cache_key("timeline", prefix + "b")


def test_make_cache_key_separates_kinds_and_parts():
    assert make_cache_key("timeline", "text") != make_cache_key("figures", "text")
    assert make_cache_key("quiz", "ab", "c") != make_cache_key("quiz", "a", "bc")
    assert make_cache_key("quiz", "Rome", "text") == make_cache_key("quiz", "Rome", "text")


def test_lru_cache_evicts_least_recently_used():
    cache = LRUExtractionCache(capacity=2)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1
    cache.set("c", 3)

    assert "b" not in cache
    assert cache.get("a") == 1
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_lru_cache_last_write_wins_and_counts_hits():
    cache = LRUExtractionCache(capacity=4)
    cache.set("k", "old")
    cache.set("k", "new")

    assert cache.get("k") == "new"
    assert cache.get("missing") is None
    assert cache.hits == 1
    assert cache.misses == 1

    cache.clear()
    assert len(cache) == 0
    assert cache.hits == 0


def test_lru_cache_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        LRUExtractionCache(capacity=0)


def test_null_cache_never_stores():
    cache = NullExtractionCache()
    cache.set("k", [1])
    assert cache.get("k") is None
