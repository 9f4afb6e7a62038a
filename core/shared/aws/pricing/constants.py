"""
core/shared/aws/pricing/constants.py - 가격 모듈 중앙 상수

상수:
    - ``HOURS_PER_YEAR``: 연간 시간 (8760h = 365일 * 24h, 24/7 가동 가정)
    - ``PRICING_API_REGION``: Pricing API 엔드포인트 리전
    - ``EC2_SERVICE_CODE``: EC2 Price List 서비스 코드
    - ``REGION_NAME_MAP``: 리전 코드 → Price List ``location`` 이름
"""

from __future__ import annotations

# 연간 시간 (24시간 * 365일)
HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365
HOURS_PER_YEAR = HOURS_PER_DAY * DAYS_PER_YEAR

# Pricing API는 us-east-1 / ap-south-1 에서만 제공
PRICING_API_REGION = "us-east-1"

EC2_SERVICE_CODE = "AmazonEC2"
DEFAULT_OPERATING_SYSTEM = "Linux"

# On-Demand 조회 고정 조건 (Shared tenancy, 사전 설치 SW 없음, 사용 중 용량)
DEFAULT_TENANCY = "Shared"
DEFAULT_PRE_INSTALLED_SW = "NA"
DEFAULT_CAPACITY_STATUS = "Used"

# ============================================================================
# 리전 코드 → Price List location 이름
# ============================================================================

REGION_NAME_MAP: dict[str, str] = {
    "us-east-1": "US East (N. Virginia)",
    "us-east-2": "US East (Ohio)",
    "us-west-1": "US West (N. California)",
    "us-west-2": "US West (Oregon)",
    "ca-central-1": "Canada (Central)",
    "eu-central-1": "EU (Frankfurt)",
    "eu-west-1": "EU (Ireland)",
    "eu-west-2": "EU (London)",
    "eu-west-3": "EU (Paris)",
    "eu-north-1": "EU (Stockholm)",
    "eu-south-1": "EU (Milan)",
    "ap-northeast-1": "Asia Pacific (Tokyo)",
    "ap-northeast-2": "Asia Pacific (Seoul)",
    "ap-northeast-3": "Asia Pacific (Osaka)",
    "ap-southeast-1": "Asia Pacific (Singapore)",
    "ap-southeast-2": "Asia Pacific (Sydney)",
    "ap-south-1": "Asia Pacific (Mumbai)",
    "sa-east-1": "South America (Sao Paulo)",
    "me-south-1": "Middle East (Bahrain)",
    "af-south-1": "Africa (Cape Town)",
    "ap-east-1": "Asia Pacific (Hong Kong)",
    "ap-southeast-3": "Asia Pacific (Jakarta)",
}
