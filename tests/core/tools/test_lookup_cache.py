"""
tests/core/tools/test_lookup_cache.py - LookupCache 테스트
"""

import threading
from unittest.mock import MagicMock

from core.tools.cache import LookupCache
from core.tools.cache.memory import CacheMetrics


class TestLookupCache:
    """LookupCache 테스트"""

    def test_fetch_on_miss_then_hit(self):
        """미스 시 조회, 이후 히트"""
        cache: LookupCache[str, int] = LookupCache("test")
        fetch = MagicMock(return_value=7)

        assert cache.get_or_fetch("a", fetch) == 7
        assert cache.get_or_fetch("a", fetch) == 7

        fetch.assert_called_once()
        assert cache.metrics.cache_misses == 1
        assert cache.metrics.cache_hits == 1
        assert cache.metrics.api_calls == 1
        assert "a" in cache
        assert len(cache) == 1

    def test_failure_not_cached(self):
        """None 결과는 캐싱하지 않고 다음 호출에서 재조회"""
        cache: LookupCache[str, int] = LookupCache("test")
        fetch = MagicMock(side_effect=[None, 3])

        assert cache.get_or_fetch("a", fetch) is None
        assert "a" not in cache
        assert cache.get_or_fetch("a", fetch) == 3

        assert fetch.call_count == 2
        assert cache.metrics.errors == 1

    def test_zero_value_cached(self):
        """0은 유효한 값으로 캐싱"""
        cache: LookupCache[str, float] = LookupCache("test")
        fetch = MagicMock(return_value=0.0)

        cache.get_or_fetch("a", fetch)
        cache.get_or_fetch("a", fetch)

        fetch.assert_called_once()

    def test_peek_and_clear(self):
        """peek는 조회하지 않음, clear는 비움"""
        cache: LookupCache[str, int] = LookupCache("test")
        cache.get_or_fetch("a", lambda: 1)

        assert cache.peek("a") == 1
        assert cache.peek("b") is None

        cache.clear()
        assert len(cache) == 0

    def test_fetch_outside_lock(self):
        """조회 중에도 다른 키 조회가 막히지 않음"""
        cache: LookupCache[str, int] = LookupCache("test")
        started = threading.Event()
        release = threading.Event()

        def slow_fetch():
            started.set()
            release.wait(timeout=5)
            return 1

        t = threading.Thread(target=cache.get_or_fetch, args=("slow", slow_fetch))
        t.start()
        started.wait(timeout=5)

        assert cache.get_or_fetch("fast", lambda: 2) == 2

        release.set()
        t.join()
        assert cache.peek("slow") == 1


class TestCacheMetrics:
    """CacheMetrics 테스트"""

    def test_hit_rate(self):
        """히트율 계산"""
        metrics = CacheMetrics()
        assert metrics.hit_rate == 0.0

        metrics.increment_cache_hits()
        metrics.increment_cache_hits()
        metrics.increment_cache_hits()
        metrics.increment_cache_misses()

        assert metrics.hit_rate == 0.75
        assert metrics.to_dict()["hit_rate"] == 0.75

    def test_reset(self):
        """초기화"""
        metrics = CacheMetrics()
        metrics.increment_api_calls()
        metrics.increment_errors()
        metrics.reset()

        assert metrics.to_dict() == {
            "api_calls": 0,
            "cache_hits": 0,
            "cache_misses": 0,
            "hit_rate": 0.0,
            "errors": 0,
        }
