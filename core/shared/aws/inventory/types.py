"""
core/shared/aws/inventory/types.py - 리소스 타입 정의

인벤토리 수집 결과 데이터 클래스와 대체값(sentinel) 상수.

대체값:
- ``NOT_AVAILABLE`` ("N/A"): 인스턴스 ID, 이름이 없을 때
- ``UNKNOWN`` ("unknown"): 인스턴스 타입, 아키텍처, 상태가 없을 때
- 숫자 필드는 ``0`` / ``0.0`` (조회 실패 또는 정보 없음)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from core.shared.aws.pricing.ec2 import round_half_up

NOT_AVAILABLE = "N/A"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class InstanceSpec:
    """인스턴스 타입 하드웨어 스펙

    Attributes:
        cpu_count: 기본 vCPU 수
        ram_gb: 메모리 (GB, MiB / 1024 소수점 2자리)
    """

    cpu_count: int = 0
    ram_gb: float = 0.0

    @classmethod
    def from_mib(cls, vcpus: int, memory_mib: int) -> InstanceSpec:
        """vCPU 수와 MiB 단위 메모리로 생성"""
        return cls(cpu_count=vcpus, ram_gb=round_half_up(memory_mib / 1024))


# 스펙 조회 실패 시 대체값
UNKNOWN_SPEC = InstanceSpec()


@dataclass(frozen=True)
class ResourceRecord:
    """EC2 인스턴스 인벤토리 레코드 (생성 후 불변)

    Attributes:
        instance_id: 인스턴스 ID (없으면 "N/A")
        name: Name 태그 값 (없으면 "N/A")
        region: 수집한 리전 코드
        instance_type: 인스턴스 타입 (예: t3.micro, 없으면 "unknown")
        cpu_count: vCPU 수 (0이면 스펙 조회 실패)
        cpu_architecture: CPU 아키텍처 (x86_64, arm64, 없으면 "unknown")
        ram_gb: 메모리 GB
        disk_storage_gb: 연결된 전체 EBS 볼륨 크기 합계 (GB)
        state: 인스턴스 상태 (running, stopped 등, 없으면 "unknown")
        hourly_price: On-Demand 시간당 가격 (USD, 0.0이면 조회 실패)
        annual_cost: 24/7 기준 연간 비용 (USD)
    """

    instance_id: str
    name: str
    region: str
    instance_type: str
    cpu_count: int
    cpu_architecture: str
    ram_gb: float
    disk_storage_gb: int
    state: str
    hourly_price: float
    annual_cost: float

    @property
    def is_running(self) -> bool:
        return self.state == "running"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
