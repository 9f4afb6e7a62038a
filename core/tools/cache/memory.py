"""프로세스 메모리 기반 조회 캐시.

정적 데이터(인스턴스 타입 스펙, 시간당 가격)를 키 단위로 메모이즈합니다.

정책:
    - 캐시 히트: 외부 호출 없이 저장된 값 반환
    - 캐시 미스: fetch 함수를 정확히 1회 호출, 결과가 ``None`` 이 아니면 저장
    - 실패(``None``)는 캐시하지 않음 → 다음 호출에서 다시 조회
    - 만료/제거 없음 (프로세스 종료까지 유지)

동시성:
    락은 dict 읽기/쓰기에만 사용하고 fetch 호출 중에는 잡지 않습니다.
    같은 키로 동시에 미스가 나면 두 스레드 모두 fetch할 수 있으며,
    값이 동일하므로 마지막 쓰기가 남습니다.

Example:
    ::

        from core.tools.cache.memory import LookupCache

        cache: LookupCache[str, float] = LookupCache("price")
        price = cache.get_or_fetch("us-east-1:t3.micro:Linux", lambda: fetch_price(...))
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass
class CacheMetrics:
    """캐시 조회 메트릭 (thread-safe).

    Attributes:
        api_calls: 외부 조회(fetch) 호출 횟수
        cache_hits: 캐시 히트 횟수
        cache_misses: 캐시 미스 횟수
        errors: 조회 실패(값 없음) 횟수
    """

    api_calls: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    errors: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def hit_rate(self) -> float:
        """캐시 히트율 (0.0 ~ 1.0). 조회가 없으면 ``0.0``"""
        total = self.cache_hits + self.cache_misses
        return self.cache_hits / total if total > 0 else 0.0

    def increment_api_calls(self) -> None:
        with self._lock:
            self.api_calls += 1

    def increment_cache_hits(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def increment_cache_misses(self) -> None:
        with self._lock:
            self.cache_misses += 1

    def increment_errors(self) -> None:
        with self._lock:
            self.errors += 1

    def to_dict(self) -> dict[str, float | int]:
        return {
            "api_calls": self.api_calls,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": round(self.hit_rate, 2),
            "errors": self.errors,
        }

    def reset(self) -> None:
        with self._lock:
            self.api_calls = 0
            self.cache_hits = 0
            self.cache_misses = 0
            self.errors = 0


class LookupCache(Generic[K, V]):
    """fetch-on-miss 메모리 캐시 (negative caching 없음).

    Attributes:
        name: 로그용 캐시 이름
        metrics: CacheMetrics 인스턴스
    """

    def __init__(self, name: str):
        self.name = name
        self.metrics = CacheMetrics()
        self._store: dict[K, V] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def peek(self, key: K) -> V | None:
        """외부 조회 없이 저장된 값만 반환"""
        with self._lock:
            return self._store.get(key)

    def get_or_fetch(self, key: K, fetch: Callable[[], V | None]) -> V | None:
        """캐시 조회, 미스이면 ``fetch`` 를 호출하여 결과를 저장한다.

        Args:
            key: 캐시 키
            fetch: 미스 시 호출할 조회 함수. 실패 시 ``None`` 반환

        Returns:
            캐시된 값 또는 새로 조회한 값. 조회 실패 시 ``None`` (캐시하지 않음)
        """
        with self._lock:
            if key in self._store:
                self.metrics.increment_cache_hits()
                return self._store[key]

        self.metrics.increment_cache_misses()
        self.metrics.increment_api_calls()

        # 락 밖에서 조회 (동일 키 동시 미스 허용)
        value = fetch()

        if value is None:
            self.metrics.increment_errors()
            logger.debug(f"[{self.name}] 조회 실패, 캐시하지 않음: {key}")
            return None

        with self._lock:
            self._store[key] = value
        return value

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
