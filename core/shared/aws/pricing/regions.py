"""
core/shared/aws/pricing/regions.py - 리전 코드 → Price List 리전 이름 변환

Pricing API의 ``location`` 필터는 리전 코드가 아닌 사람이 읽는 이름을 사용한다.
매핑에 없는 리전은 코드를 그대로 반환하여, 실패로 닫지 않고 원래 코드로 조회를 시도한다.
"""

from __future__ import annotations

from .constants import REGION_NAME_MAP


def get_pricing_region(region: str) -> str:
    """리전 코드를 Price List ``location`` 이름으로 변환한다.

    Args:
        region: AWS 리전 코드 (예: ``"us-east-1"``)

    Returns:
        Price List 리전 이름 (예: ``"US East (N. Virginia)"``).
        매핑에 없으면 입력 코드 그대로
    """
    return REGION_NAME_MAP.get(region, region)
