"""
core/shared/aws/inventory - EC2 인벤토리 수집 모듈

InventoryCollector와 데이터 타입을 제공합니다.

구성:
- collector: InventoryCollector (리전 병렬 수집 + 스펙/용량/가격 결합)
- specs: InstanceSpecCache (인스턴스 타입 → vCPU/메모리)
- services: EC2 API 조회 함수 (리전, 인스턴스, 볼륨)
- types: ResourceRecord, InstanceSpec, 대체값 상수
"""

from .collector import InventoryCollector
from .specs import InstanceSpecCache
from .types import NOT_AVAILABLE, UNKNOWN, UNKNOWN_SPEC, InstanceSpec, ResourceRecord

__all__ = [
    "InventoryCollector",
    "InstanceSpecCache",
    "InstanceSpec",
    "ResourceRecord",
    "NOT_AVAILABLE",
    "UNKNOWN",
    "UNKNOWN_SPEC",
]
