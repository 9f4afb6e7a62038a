"""
core/shared/aws/pricing/ec2.py - Amazon EC2 인스턴스 연간 비용 계산

24/7 가동을 가정하여 On-Demand 시간당 가격으로 연간 비용을 산출한다.
인스턴스 상태(running/stopped)와 무관하게 계산하므로, 실행 중 인스턴스만의 합계는
보고서 쪽에서 따로 구한다.

사용법:
    from core.shared.aws.pricing.ec2 import calculate_annual_cost

    annual = calculate_annual_cost(0.0416)  # 364.42
"""

from __future__ import annotations

import math

from .cache import PriceCache
from .constants import DEFAULT_OPERATING_SYSTEM, HOURS_PER_YEAR


def round_half_up(value: float, ndigits: int = 2) -> float:
    """소수점 ndigits 자리 반올림 (0.5는 올림, 예: 0.625 -> 0.63)"""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def calculate_annual_cost(hourly_price: float) -> float:
    """시간당 가격으로 연간 비용을 계산한다.

    ``hourly_price * 24 * 365`` 를 소수점 2자리로 반올림한다.

    Args:
        hourly_price: 시간당 USD 가격

    Returns:
        연간 USD 비용
    """
    return round_half_up(hourly_price * HOURS_PER_YEAR)


def get_instance_annual_cost(
    price_cache: PriceCache,
    region: str,
    instance_type: str,
    operating_system: str = DEFAULT_OPERATING_SYSTEM,
) -> float:
    """인스턴스 타입의 연간 On-Demand 비용을 조회한다.

    Args:
        price_cache: 가격 캐시
        region: AWS 리전 코드
        instance_type: EC2 인스턴스 타입 (예: ``"t3.medium"``)
        operating_system: OS (기본: ``"Linux"``)

    Returns:
        연간 USD 비용. 가격 정보가 없으면 ``0.0``
    """
    hourly = price_cache.get(region, instance_type, operating_system)
    return calculate_annual_cost(hourly)
