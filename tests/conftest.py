"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_ec2_client, make_record):
        # mock_ec2_client: 기본 응답이 설정된 EC2 클라이언트 Mock
        # make_record: 테스트용 ResourceRecord 생성 함수
        pass
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 자격 증명/프로파일 사용 방지)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_ec2_client():
    """EC2 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.describe_regions.return_value = {
        "Regions": [
            {"RegionName": "us-east-1"},
            {"RegionName": "ap-northeast-2"},
        ]
    }

    mock_client.describe_instance_types.return_value = {
        "InstanceTypes": [
            {
                "InstanceType": "t3.micro",
                "VCpuInfo": {"DefaultVCpus": 2},
                "MemoryInfo": {"SizeInMiB": 1024},
            }
        ]
    }

    yield mock_client


@pytest.fixture
def mock_pricing_client():
    """Pricing 클라이언트 모킹 (t3.micro 0.0104 USD/h)"""
    mock_client = MagicMock()
    mock_client.get_products.return_value = {"PriceList": [make_price_item("0.0104000000")]}
    yield mock_client


@pytest.fixture
def make_record():
    """ResourceRecord 생성 팩토리"""
    from core.shared.aws.inventory.types import ResourceRecord

    def _make(**overrides: Any) -> ResourceRecord:
        values: Dict[str, Any] = {
            "instance_id": "i-1234567890abcdef0",
            "name": "web-server",
            "region": "us-east-1",
            "instance_type": "t3.micro",
            "cpu_count": 2,
            "cpu_architecture": "x86_64",
            "ram_gb": 1.0,
            "disk_storage_gb": 8,
            "state": "running",
            "hourly_price": 0.0104,
            "annual_cost": 91.1,
        }
        values.update(overrides)
        return ResourceRecord(**values)

    return _make


# =============================================================================
# 유틸리티 함수
# =============================================================================


def make_price_item(usd: str, as_json: bool = True) -> Any:
    """Pricing API PriceList 항목 생성 헬퍼"""
    item = {
        "product": {"attributes": {"instanceType": "t3.micro"}},
        "terms": {
            "OnDemand": {
                "SKU.JRTCKXETXF": {
                    "priceDimensions": {
                        "SKU.JRTCKXETXF.6YS6EN2CT7": {
                            "unit": "Hrs",
                            "pricePerUnit": {"USD": usd},
                        }
                    }
                }
            }
        },
    }
    return json.dumps(item) if as_json else item


def make_instance(
    instance_id: Optional[str] = "i-1234567890abcdef0",
    instance_type: Optional[str] = "t3.micro",
    state: Optional[str] = "running",
    name: Optional[str] = "web-server",
    architecture: Optional[str] = "x86_64",
) -> Dict[str, Any]:
    """describe_instances Instance 항목 생성 헬퍼 (None이면 필드 생략)"""
    inst: Dict[str, Any] = {}
    if instance_id is not None:
        inst["InstanceId"] = instance_id
    if instance_type is not None:
        inst["InstanceType"] = instance_type
    if state is not None:
        inst["State"] = {"Code": 16, "Name": state}
    if name is not None:
        inst["Tags"] = [{"Key": "Name", "Value": name}]
    if architecture is not None:
        inst["Architecture"] = architecture
    return inst


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def moto_ec2():
        """moto를 사용한 EC2 모킹"""
        with moto.mock_aws():
            import boto3

            ec2 = boto3.client("ec2", region_name="us-east-1")
            yield ec2

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_ec2():
        pytest.skip("moto not installed")
