"""Tests for ResultCache.

Tests lookup, TTL expiry, capacity eviction, re-insertion order and statistics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from core.cache.manager import ResultCache
from models.translation_models import TranslationResult

if TYPE_CHECKING:
    from models.cache_models import CacheStatistics


class FakeClock:
    def __init__(self) -> None:
        self.now: float = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _result(text: str) -> TranslationResult:
    return TranslationResult(
        text=text.upper(),
        original_text=text,
        source_language="english",
        target_language="hindi",
        is_translated=True,
        confidence=1.0,
        method="dictionary",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ResultCache:
    return ResultCache(ttl_sec=10.0, max_entries=3, clock=clock)


@pytest.mark.asyncio
async def test_cache_lifecycle(cache: ResultCache) -> None:
    """component_load marks the cache initialized and teardown drops entries."""
    await cache.component_load()
    cache.set("k", _result("a"))

    assert cache.is_initialized is True
    assert len(cache) == 1

    await cache.component_teardown()

    assert cache.is_initialized is False
    assert cache.size == 0


def test_cache_miss_returns_none(cache: ResultCache) -> None:
    assert cache.get("missing") is None


def test_cache_hit_returns_stored_result(cache: ResultCache) -> None:
    result: TranslationResult = _result("hello")
    cache.set("k", result)

    assert cache.get("k") is result


def test_entry_expires_after_ttl(cache: ResultCache, clock: FakeClock) -> None:
    cache.set("k", _result("hello"))

    clock.advance(9.9)
    assert cache.get("k") is not None

    clock.advance(0.1)
    assert cache.get("k") is None


def test_oldest_entry_is_evicted_at_capacity(cache: ResultCache) -> None:
    for key in ("a", "b", "c"):
        cache.set(key, _result(key))

    cache.set("d", _result("d"))

    assert cache.size == 3
    assert cache.get("a") is None
    assert cache.get("d") is not None


def test_hits_do_not_protect_from_eviction(cache: ResultCache) -> None:
    """Eviction is by insertion order, not by use."""
    for key in ("a", "b", "c"):
        cache.set(key, _result(key))
    for _ in range(5):
        cache.get("a")

    cache.set("d", _result("d"))

    assert cache.get("a") is None
    assert cache.get("b") is not None


def test_resetting_key_moves_it_to_newest_position(cache: ResultCache, clock: FakeClock) -> None:
    for key in ("a", "b", "c"):
        cache.set(key, _result(key))
    clock.advance(5.0)

    cache.set("a", _result("a2"))
    cache.set("d", _result("d"))

    assert cache.get("b") is None
    refreshed: TranslationResult | None = cache.get("a")
    assert refreshed is not None
    assert refreshed.original_text == "a2"

    # The refreshed entry got a new insertion time
    clock.advance(6.0)
    assert cache.get("a") is not None


def test_expired_entries_are_purged_before_eviction(cache: ResultCache, clock: FakeClock) -> None:
    cache.set("a", _result("a"))
    clock.advance(11.0)
    cache.set("b", _result("b"))
    cache.set("c", _result("c"))

    cache.set("d", _result("d"))

    assert cache.size == 3
    assert cache.get("b") is not None
    assert cache.get("c") is not None


def test_statistics_report_live_entries(cache: ResultCache, clock: FakeClock) -> None:
    cache.set("a", _result("a"))
    clock.advance(4.0)
    cache.set("b", _result("b"))
    cache.get("a")
    cache.get("a")
    cache.get("b")

    stats: CacheStatistics = cache.statistics()

    assert stats.total_entries == 2
    assert stats.total_hits == 3
    assert stats.capacity == 3
    assert stats.ttl_sec == 10.0
    assert stats.oldest_age_sec == pytest.approx(4.0)


def test_statistics_of_empty_cache(cache: ResultCache) -> None:
    stats: CacheStatistics = cache.statistics()

    assert stats.total_entries == 0
    assert stats.oldest_age_sec is None


def test_clear_removes_everything(cache: ResultCache) -> None:
    cache.set("a", _result("a"))
    cache.clear()

    assert cache.size == 0
    assert cache.get("a") is None


def test_make_key_is_case_insensitive_and_bounded() -> None:
    cache = ResultCache(key_text_length=5)

    assert cache.make_key("Hello World", "english", "hindi") == cache.make_key("hello there", "english", "hindi")
    assert cache.make_key("hello", "english", "hindi") != cache.make_key("hello", "english", "tamil")


def test_entry_for_another_text_sharing_the_key_is_a_miss(cache: ResultCache) -> None:
    stored: TranslationResult = _result("Thank you John")
    cache.set("k", stored)

    assert cache.get("k", "thank you JOHN") is None
    assert cache.get("k", "Thank you John") is stored
    assert cache.statistics().total_hits == 1


@pytest.mark.parametrize("kwargs", [{"ttl_sec": 0}, {"max_entries": 0}, {"key_text_length": -1}])
def test_invalid_limits_raise_value_error(kwargs: dict[str, float]) -> None:
    with pytest.raises(ValueError, match="positive"):
        ResultCache(**kwargs)
