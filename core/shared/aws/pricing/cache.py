"""
core/shared/aws/pricing/cache.py - On-Demand 가격 메모리 캐시

``{region}:{instance_type}:{os}`` 키로 시간당 가격을 프로세스 수명 동안 캐싱한다.
조회 실패는 캐싱하지 않으므로 이후 호출에서 API를 다시 조회한다.

사용법:
    from core.shared.aws.pricing.cache import PriceCache
    from core.shared.aws.pricing.fetcher import PricingFetcher

    cache = PriceCache(PricingFetcher())
    hourly = cache.get("ap-northeast-2", "t3.medium")  # 실패 시 0.0
"""

from __future__ import annotations

import logging

from core.tools.cache.memory import LookupCache

from .constants import DEFAULT_OPERATING_SYSTEM
from .fetcher import PricingFetcher

logger = logging.getLogger(__name__)


def make_price_key(region: str, instance_type: str, operating_system: str = DEFAULT_OPERATING_SYSTEM) -> str:
    """가격 캐시 키 생성 (예: ``"us-east-1:t3.micro:Linux"``)"""
    return f"{region}:{instance_type}:{operating_system}"


class PriceCache:
    """EC2 On-Demand 가격 캐시.

    여러 리전 수집기가 하나의 인스턴스를 공유한다.

    Attributes:
        fetcher: PricingFetcher 인스턴스
    """

    def __init__(self, fetcher: PricingFetcher):
        self.fetcher = fetcher
        self._cache: LookupCache[str, float] = LookupCache("price")

    @property
    def metrics(self):
        return self._cache.metrics

    def __len__(self) -> int:
        return len(self._cache)

    def get(
        self,
        region: str,
        instance_type: str,
        operating_system: str = DEFAULT_OPERATING_SYSTEM,
    ) -> float:
        """시간당 On-Demand 가격을 조회한다 (캐시 → API).

        Args:
            region: AWS 리전 코드
            instance_type: EC2 인스턴스 타입
            operating_system: OS (기본: ``"Linux"``)

        Returns:
            시간당 USD 가격. 조회 실패 시 ``0.0`` (캐시하지 않음)
        """
        key = make_price_key(region, instance_type, operating_system)
        price = self._cache.get_or_fetch(
            key,
            lambda: self.fetcher.get_ec2_price(instance_type, region, operating_system),
        )
        return price if price is not None else 0.0
