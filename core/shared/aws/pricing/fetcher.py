"""
core/shared/aws/pricing/fetcher.py - AWS Pricing API 조회

``pricing.get_products`` 로 EC2 인스턴스 타입의 On-Demand 시간당 가격을 조회한다.

조회 조건:
    - ServiceCode: AmazonEC2
    - instanceType / location(리전 이름) / operatingSystem
    - tenancy: Shared, preInstalledSw: NA, capacitystatus: Used
    - MaxResults: 1 (첫 번째 상품만 사용)

가격 추출 경로::

    terms → OnDemand → <첫 번째 term> → priceDimensions → <첫 번째 dimension> → pricePerUnit → USD

사용법:
    from core.shared.aws.pricing.fetcher import PricingFetcher

    fetcher = PricingFetcher(profile_name="prod")
    hourly = fetcher.get_ec2_price("t3.medium", "ap-northeast-2")  # 0.052 또는 None
"""

from __future__ import annotations

import json
import logging
import threading
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.auth.session import get_session
from core.parallel import ErrorCollector, get_client

from .constants import (
    DEFAULT_CAPACITY_STATUS,
    DEFAULT_OPERATING_SYSTEM,
    DEFAULT_PRE_INSTALLED_SW,
    DEFAULT_TENANCY,
    EC2_SERVICE_CODE,
    PRICING_API_REGION,
)
from .regions import get_pricing_region

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


def build_ec2_price_filters(
    instance_type: str,
    region: str,
    operating_system: str = DEFAULT_OPERATING_SYSTEM,
) -> list[dict[str, str]]:
    """EC2 On-Demand 가격 조회용 TERM_MATCH 필터 목록을 생성한다.

    Args:
        instance_type: EC2 인스턴스 타입 (예: ``"t3.medium"``)
        region: AWS 리전 코드 (``location`` 이름으로 변환됨)
        operating_system: OS (기본: ``"Linux"``)

    Returns:
        ``get_products`` 의 ``Filters`` 인자
    """
    terms = [
        ("ServiceCode", EC2_SERVICE_CODE),
        ("instanceType", instance_type),
        ("location", get_pricing_region(region)),
        ("operatingSystem", operating_system),
        ("tenancy", DEFAULT_TENANCY),
        ("preInstalledSw", DEFAULT_PRE_INSTALLED_SW),
        ("capacitystatus", DEFAULT_CAPACITY_STATUS),
    ]
    return [{"Type": "TERM_MATCH", "Field": field, "Value": value} for field, value in terms]


def _first_value(mapping: Any) -> Any:
    """딕셔너리의 첫 번째 키 값 (없으면 None)"""
    if not isinstance(mapping, dict) or not mapping:
        return None
    return next(iter(mapping.values()))


def extract_on_demand_price(price_item: str | dict[str, Any]) -> float | None:
    """Price List 항목에서 On-Demand USD 단가를 추출한다.

    각 단계에서 첫 번째 키만 사용하며 추가 구분은 하지 않는다.

    Args:
        price_item: ``PriceList`` 의 원소 (JSON 문자열 또는 딕셔너리)

    Returns:
        시간당 USD 가격. 구조가 없거나 USD 값이 없으면 ``None``
    """
    try:
        data = json.loads(price_item) if isinstance(price_item, str) else price_item
    except json.JSONDecodeError as e:
        logger.warning(f"Price List 항목 파싱 실패: {e}")
        return None

    if not isinstance(data, dict):
        return None

    terms = data.get("terms")
    term = _first_value(terms.get("OnDemand") if isinstance(terms, dict) else None)
    if not isinstance(term, dict):
        return None

    dimension = _first_value(term.get("priceDimensions"))
    if not isinstance(dimension, dict):
        return None

    price_per_unit = dimension.get("pricePerUnit")
    usd = price_per_unit.get("USD") if isinstance(price_per_unit, dict) else None
    if not usd:
        return None

    try:
        return float(usd)
    except (TypeError, ValueError):
        logger.warning(f"USD 단가 변환 실패: {usd!r}")
        return None


class PricingFetcher:
    """AWS Pricing API 클라이언트 래퍼.

    Pricing 클라이언트는 첫 호출 시 지연 생성(lazy init)되며,
    생성은 락으로 보호되어 여러 리전 워커가 공유해도 안전하다.

    Attributes:
        error_collector: 조회 실패를 기록할 ErrorCollector (선택)
    """

    def __init__(
        self,
        session: boto3.Session | None = None,
        profile_name: str | None = None,
        error_collector: ErrorCollector | None = None,
    ):
        """
        Args:
            session: Pricing 클라이언트 생성에 사용할 Session (None이면 profile로 생성)
            profile_name: AWS 프로파일 이름
            error_collector: 조회 실패 기록용 ErrorCollector
        """
        self._session = session
        self._profile_name = profile_name
        self._client: Any = None
        self._client_lock = threading.Lock()
        self.error_collector = error_collector

    @property
    def client(self) -> Any:
        """Pricing 클라이언트를 지연 생성하여 반환한다."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    session = self._session or get_session(self._profile_name, PRICING_API_REGION)
                    self._client = get_client(session, "pricing", region_name=PRICING_API_REGION)
        return self._client

    def get_ec2_price(
        self,
        instance_type: str,
        region: str,
        operating_system: str = DEFAULT_OPERATING_SYSTEM,
    ) -> float | None:
        """EC2 인스턴스 타입의 On-Demand 시간당 가격을 조회한다.

        Args:
            instance_type: EC2 인스턴스 타입 (예: ``"t3.medium"``)
            region: AWS 리전 코드
            operating_system: OS (기본: ``"Linux"``)

        Returns:
            시간당 USD 가격. API 실패 또는 상품 없음이면 ``None``
        """
        try:
            response = self.client.get_products(
                ServiceCode=EC2_SERVICE_CODE,
                Filters=build_ec2_price_filters(instance_type, region, operating_system),
                MaxResults=1,
            )
        except (ClientError, BotoCoreError) as e:
            if self.error_collector:
                self.error_collector.collect(
                    e, region, "get_products", resource_id=instance_type, service="pricing"
                )
            else:
                logger.warning(f"가격 조회 실패 [{instance_type}/{region}]: {e}")
            return None

        price_list = response.get("PriceList", [])
        if not price_list:
            logger.debug(f"가격 정보 없음: {instance_type}/{region}/{operating_system}")
            return None

        price = extract_on_demand_price(price_list[0])
        if price is None:
            logger.debug(f"On-Demand 단가 없음: {instance_type}/{region}/{operating_system}")
        return price
