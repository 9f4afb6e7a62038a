"""
core/shared/aws/pricing - EC2 On-Demand 가격 조회 및 연간 비용 계산 패키지

AWS Pricing API(us-east-1)로 인스턴스 타입별 시간당 가격을 조회하고,
프로세스 메모리 캐시로 동일 조건의 반복 호출을 막습니다.

모듈 구성:
    - constants: 연간 시간, 조회 고정 조건, 리전 이름 매핑
    - regions: 리전 코드 → Price List location 이름 변환
    - fetcher: PricingFetcher (get_products 호출 + On-Demand 단가 추출)
    - cache: PriceCache (``region:type:os`` 키, negative caching 없음)
    - ec2: 연간 비용 계산

사용법:
    from core.shared.aws.pricing import PriceCache, PricingFetcher, calculate_annual_cost

    cache = PriceCache(PricingFetcher())
    hourly = cache.get("ap-northeast-2", "t3.medium")
    annual = calculate_annual_cost(hourly)
"""

from .cache import PriceCache, make_price_key
from .constants import HOURS_PER_YEAR, PRICING_API_REGION, REGION_NAME_MAP
from .ec2 import calculate_annual_cost, get_instance_annual_cost
from .fetcher import PricingFetcher, build_ec2_price_filters, extract_on_demand_price
from .regions import get_pricing_region

__all__: list[str] = [
    "PriceCache",
    "PricingFetcher",
    "make_price_key",
    "build_ec2_price_filters",
    "extract_on_demand_price",
    "get_pricing_region",
    "calculate_annual_cost",
    "get_instance_annual_cost",
    "HOURS_PER_YEAR",
    "PRICING_API_REGION",
    "REGION_NAME_MAP",
]
