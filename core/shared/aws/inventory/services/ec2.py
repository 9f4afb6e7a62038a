"""
core/shared/aws/inventory/services/ec2.py - EC2 리소스 조회

리전 목록, 인스턴스 목록(페이지네이션), 연결된 EBS 볼륨 크기를 조회합니다.
이 모듈의 함수들은 API 예외를 그대로 전파하며, 대체값 처리는 수집기가 담당합니다.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..types import NOT_AVAILABLE, UNKNOWN
from .helpers import get_tag_value, parse_tags

# describe_instances 최대 페이지 크기
MAX_PAGE_SIZE = 1000


def get_enabled_regions(ec2: Any) -> list[str]:
    """계정에서 활성화된 리전 목록을 조회합니다.

    ``AllRegions=False`` 로 opt-in 되지 않은 리전은 제외합니다.

    Args:
        ec2: EC2 클라이언트

    Returns:
        응답 순서대로의 리전 코드 목록
    """
    response = ec2.describe_regions(AllRegions=False)
    return [r["RegionName"] for r in response.get("Regions", []) if r.get("RegionName")]


def iter_instances(ec2: Any, page_size: int = MAX_PAGE_SIZE) -> Iterator[dict[str, Any]]:
    """리전의 모든 EC2 인스턴스를 목록 순서대로 반환합니다.

    ``NextToken`` 이 없을 때까지 페이지를 따라가며, 각 페이지의
    모든 Reservation의 모든 Instance를 차례로 yield 합니다.

    Args:
        ec2: EC2 클라이언트
        page_size: 페이지 크기 (MaxResults, 최대 1000)

    Yields:
        describe_instances 의 Instance 딕셔너리
    """
    paginator = ec2.get_paginator("describe_instances")
    for page in paginator.paginate(PaginationConfig={"PageSize": page_size}):
        for reservation in page.get("Reservations", []):
            yield from reservation.get("Instances", [])


def get_attached_storage_gb(ec2: Any, instance_id: str) -> int:
    """인스턴스에 연결된 모든 EBS 볼륨 크기 합계(GB)를 조회합니다.

    Args:
        ec2: EC2 클라이언트
        instance_id: 인스턴스 ID

    Returns:
        볼륨 크기 합계 (볼륨이 없으면 0)
    """
    total = 0
    paginator = ec2.get_paginator("describe_volumes")
    for page in paginator.paginate(Filters=[{"Name": "attachment.instance-id", "Values": [instance_id]}]):
        for volume in page.get("Volumes", []):
            total += volume.get("Size") or 0
    return total


def parse_instance(inst: dict[str, Any], name_tag_key: str = "Name") -> dict[str, str]:
    """Instance 딕셔너리에서 목록 응답만으로 알 수 있는 필드를 추출합니다.

    없는 값은 대체값("N/A", "unknown")으로 채웁니다.

    Args:
        inst: describe_instances 의 Instance 딕셔너리
        name_tag_key: 표시 이름으로 사용할 태그 키

    Returns:
        instance_id, name, instance_type, state, cpu_architecture 키를 가진 딕셔너리
    """
    tags = parse_tags(inst.get("Tags"), exclude_aws=False)
    return {
        "instance_id": inst.get("InstanceId") or NOT_AVAILABLE,
        "name": get_tag_value(tags, name_tag_key, NOT_AVAILABLE),
        "instance_type": inst.get("InstanceType") or UNKNOWN,
        "state": (inst.get("State") or {}).get("Name") or UNKNOWN,
        "cpu_architecture": inst.get("Architecture") or UNKNOWN,
    }
