"""Tests for runtime/cache.py - LocaleCache get-or-populate memo."""

from __future__ import annotations

import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuparser.runtime.cache import LocaleCache


class TestLocaleCache:
    """Populate-once semantics and counters."""

    def test_factory_runs_once_per_key(self) -> None:
        cache: LocaleCache[str, int] = LocaleCache()
        calls: list[str] = []

        def factory() -> int:
            calls.append("en")
            return 42

        assert cache.get_or_populate("en", factory) == 42
        assert cache.get_or_populate("en", factory) == 42
        assert calls == ["en"]
        assert cache.misses == 1
        assert cache.hits == 1

    def test_contains_and_len(self) -> None:
        cache: LocaleCache[str, str] = LocaleCache()
        cache.get_or_populate("de", lambda: "x")
        cache.get_or_populate("fr", lambda: "y")

        assert "de" in cache
        assert "ru" not in cache
        assert len(cache) == 2

    def test_clear_resets_entries_and_counters(self) -> None:
        cache: LocaleCache[str, int] = LocaleCache()
        cache.get_or_populate("en", lambda: 1)
        cache.get_or_populate("en", lambda: 1)

        cache.clear()

        assert len(cache) == 0
        assert (cache.hits, cache.misses) == (0, 0)
        assert cache.get_or_populate("en", lambda: 2) == 2

    def test_factory_error_leaves_key_unpopulated(self) -> None:
        cache: LocaleCache[str, int] = LocaleCache()

        def failing() -> int:
            msg = "no data"
            raise LookupError(msg)

        with pytest.raises(LookupError, match="no data"):
            cache.get_or_populate("xx", failing)
        assert "xx" not in cache
        assert cache.get_or_populate("xx", lambda: 3) == 3

    def test_concurrent_readers_agree(self) -> None:
        cache: LocaleCache[str, tuple[str, ...]] = LocaleCache()
        results: list[tuple[str, ...]] = []

        def worker() -> None:
            results.append(cache.get_or_populate("ru", lambda: ("one", "few", "many", "other")))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert set(results) == {("one", "few", "many", "other")}
        assert cache.hits + cache.misses == 8

    @given(st.lists(st.sampled_from(["en", "de", "ru", "ar"]), max_size=30))
    def test_counters_add_up(self, keys: list[str]) -> None:
        cache: LocaleCache[str, str] = LocaleCache()
        for key in keys:
            cache.get_or_populate(key, key.upper)

        assert cache.misses == len(set(keys))
        assert cache.hits == len(keys) - len(set(keys))
        assert len(cache) == len(set(keys))
