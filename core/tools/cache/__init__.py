"""
core/tools/cache - 인메모리 조회 캐시

프로세스 수명 동안 유지되는 조회 결과 캐시를 제공합니다.
만료/축출이 없으며, 조회 실패(None)는 캐싱하지 않습니다.

사용법:
    from core.tools.cache import LookupCache

    cache: LookupCache[str, float] = LookupCache("price")
    value = cache.get_or_fetch("us-east-1:t3.micro:Linux", fetch_price)
    print(cache.metrics.to_dict())
"""

__all__ = [
    "CacheMetrics",
    "LookupCache",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in __all__:
        from . import memory

        return getattr(memory, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
