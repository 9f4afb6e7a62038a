"""
core/shared/aws/inventory/specs.py - 인스턴스 타입 스펙 캐시

``describe_instance_types`` 로 인스턴스 타입의 vCPU/메모리를 조회하고
인스턴스 타입 키로 프로세스 수명 동안 캐싱합니다.
조회 실패는 캐싱하지 않고 ``InstanceSpec(0, 0.0)`` 을 반환합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.parallel import ErrorCollector
from core.tools.cache.memory import LookupCache

from .types import UNKNOWN_SPEC, InstanceSpec

logger = logging.getLogger(__name__)


class InstanceSpecCache:
    """인스턴스 타입 → 하드웨어 스펙 캐시

    조회에는 호출한 리전의 EC2 클라이언트를 사용합니다.

    Example:
        specs = InstanceSpecCache()
        spec = specs.get("t3.micro", ec2)  # InstanceSpec(cpu_count=2, ram_gb=1.0)
    """

    def __init__(self, error_collector: ErrorCollector | None = None):
        self.error_collector = error_collector
        self._cache: LookupCache[str, InstanceSpec] = LookupCache("instance_spec")

    @property
    def metrics(self):
        return self._cache.metrics

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, instance_type: str, ec2: Any, region: str = "") -> InstanceSpec:
        """인스턴스 타입 스펙 조회 (캐시 → describe_instance_types)

        Args:
            instance_type: 인스턴스 타입 (예: t3.micro)
            ec2: 조회에 사용할 EC2 클라이언트
            region: 로깅용 리전 코드

        Returns:
            InstanceSpec. 조회 실패 시 ``InstanceSpec(0, 0.0)`` (캐싱하지 않음)
        """
        spec = self._cache.get_or_fetch(instance_type, lambda: self._fetch(instance_type, ec2, region))
        return spec if spec is not None else UNKNOWN_SPEC

    def _fetch(self, instance_type: str, ec2: Any, region: str) -> InstanceSpec | None:
        """describe_instance_types 단건 조회 (첫 번째 결과 사용)"""
        try:
            response = ec2.describe_instance_types(InstanceTypes=[instance_type])
        except (ClientError, BotoCoreError) as e:
            if self.error_collector:
                self.error_collector.collect(e, region, "describe_instance_types", resource_id=instance_type)
            else:
                logger.warning(f"인스턴스 타입 조회 실패 [{instance_type}]: {e}")
            return None

        type_infos = response.get("InstanceTypes", [])
        if not type_infos:
            logger.debug(f"인스턴스 타입 정보 없음: {instance_type}")
            return None

        info = type_infos[0]
        return InstanceSpec.from_mib(
            vcpus=info.get("VCpuInfo", {}).get("DefaultVCpus", 0),
            memory_mib=info.get("MemoryInfo", {}).get("SizeInMiB", 0),
        )
