"""
core/shared/aws/inventory/collector.py - EC2 인벤토리 수집기

활성 리전을 조회한 뒤 리전별로 EC2 인스턴스를 병렬 수집하고,
각 인스턴스에 하드웨어 스펙 / EBS 용량 / On-Demand 가격 / 연간 비용을 결합합니다.

에러 처리:
    - 활성 리전 조회 실패: ``RegionDiscoveryError`` 전파 (전체 중단)
    - 리전 인스턴스 목록 조회 실패: 해당 리전만 중단, 그때까지 수집한 레코드 반환
    - 스펙/볼륨/가격 조회 실패: 해당 필드만 대체값(0)으로 채우고 계속 진행

모든 복구 가능한 에러는 ``ErrorCollector`` 에 리전/리소스 ID와 함께 기록됩니다.

Example:
    >>> from core.shared.aws.inventory import InventoryCollector
    >>> collector = InventoryCollector(InventoryConfig(profile_name="prod"))
    >>> records = collector.collect_all()
    >>> records_seoul = collector.collect_region("ap-northeast-2")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.auth.session import get_session
from core.config import InventoryConfig
from core.exceptions import RegionDiscoveryError
from core.parallel import ErrorCollector, ErrorSeverity, get_client, parallel_collect, try_or_default
from core.shared.aws.pricing import PriceCache, PricingFetcher, calculate_annual_cost

from .services import get_attached_storage_gb, get_enabled_regions, iter_instances, parse_instance
from .specs import InstanceSpecCache
from .types import NOT_AVAILABLE, ResourceRecord

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)

SessionFactory = Callable[[str], "boto3.Session"]


class InventoryCollector:
    """EC2 인벤토리 수집기.

    스펙 캐시와 가격 캐시는 수집기가 소유하며 모든 리전 워커가 공유합니다.
    리전 워커마다 별도 Session을 생성합니다 (boto3 Session은 스레드 세이프하지 않음).

    Attributes:
        config: 수집 설정
        spec_cache: 인스턴스 타입 스펙 캐시
        price_cache: On-Demand 가격 캐시
        error_collector: 복구 가능한 에러 수집기
    """

    def __init__(
        self,
        config: InventoryConfig | None = None,
        session_factory: SessionFactory | None = None,
        spec_cache: InstanceSpecCache | None = None,
        price_cache: PriceCache | None = None,
        error_collector: ErrorCollector | None = None,
    ):
        """
        Args:
            config: 수집 설정 (None이면 기본값)
            session_factory: region -> boto3.Session (None이면 프로파일 기반 get_session)
            spec_cache: 스펙 캐시 (None이면 새로 생성)
            price_cache: 가격 캐시 (None이면 새로 생성)
            error_collector: 에러 수집기 (None이면 새로 생성)
        """
        self.config = config if config is not None else InventoryConfig()
        self.error_collector = error_collector if error_collector is not None else ErrorCollector("ec2")
        self._session_factory: SessionFactory = session_factory or partial(get_session, self.config.profile_name)
        # 캐시는 __len__ 을 정의하므로 비어 있으면 falsy
        self.spec_cache = spec_cache if spec_cache is not None else InstanceSpecCache(self.error_collector)
        if price_cache is None:
            price_cache = PriceCache(
                PricingFetcher(profile_name=self.config.profile_name, error_collector=self.error_collector)
            )
        self.price_cache = price_cache

    def get_regions(self) -> list[str]:
        """활성 리전 목록 조회

        Returns:
            응답 순서대로의 리전 코드 목록

        Raises:
            RegionDiscoveryError: 리전 목록 조회 실패 시
        """
        region = self.config.default_region
        try:
            ec2 = get_client(self._session_factory(region), "ec2", region_name=region)
            return get_enabled_regions(ec2)
        except (ClientError, BotoCoreError) as e:
            raise RegionDiscoveryError(cause=e, region=region) from e

    def collect_all(self) -> list[ResourceRecord]:
        """모든 활성 리전의 EC2 인스턴스를 병렬 수집합니다.

        결과는 리전 목록 응답 순서, 리전 내에서는 인스턴스 목록 순서를 따르며
        정렬이나 중복 제거는 하지 않습니다.

        Returns:
            전체 ResourceRecord 목록

        Raises:
            RegionDiscoveryError: 활성 리전 조회 실패 시
        """
        logger.info("활성 리전 조회 중...")
        regions = self.get_regions()
        logger.info(f"{len(regions)}개 리전 발견")

        result = parallel_collect(regions, self.collect_region, max_workers=self.config.max_workers)
        if result.error_count:
            logger.warning(result.get_error_summary())

        records: list[ResourceRecord] = result.get_flat_data()
        logger.info(f"전체 인스턴스 수: {len(records)}")
        return records

    def collect_region(self, region: str) -> list[ResourceRecord]:
        """단일 리전의 EC2 인스턴스를 수집합니다.

        호출할 때마다 처음부터 다시 조회하며, 호출 간에 남는 상태는 공유 캐시뿐입니다.
        목록 조회가 중간에 실패하면 그때까지 수집한 레코드를 반환합니다.

        Args:
            region: AWS 리전 코드

        Returns:
            인스턴스 목록 순서대로의 ResourceRecord 목록
        """
        logger.info(f"[{region}] 인스턴스 수집 중...")
        records: list[ResourceRecord] = []

        try:
            ec2 = get_client(self._session_factory(region), "ec2", region_name=region)
            for inst in iter_instances(ec2, self.config.page_size):
                records.append(self._build_record(ec2, region, inst))
        except (ClientError, BotoCoreError) as e:
            self.error_collector.collect(e, region, "describe_instances", severity=ErrorSeverity.CRITICAL)
            logger.warning(f"[{region}] 수집 중단: {len(records)}개 인스턴스까지 반환")

        logger.info(f"[{region}] {len(records)}개 인스턴스 수집 완료")
        return records

    def _build_record(self, ec2: Any, region: str, inst: dict[str, Any]) -> ResourceRecord:
        """Instance 딕셔너리를 스펙/용량/가격이 채워진 ResourceRecord로 변환"""
        fields = parse_instance(inst, self.config.name_tag_key)
        instance_id = fields["instance_id"]
        instance_type = fields["instance_type"]

        spec = self.spec_cache.get(instance_type, ec2, region)

        disk_storage_gb = 0
        if instance_id != NOT_AVAILABLE:
            disk_storage_gb = try_or_default(
                lambda: get_attached_storage_gb(ec2, instance_id),
                default=0,
                collector=self.error_collector,
                region=region,
                operation="describe_volumes",
                resource_id=instance_id,
            )

        hourly_price = self.price_cache.get(region, instance_type, self.config.operating_system)

        return ResourceRecord(
            instance_id=instance_id,
            name=fields["name"],
            region=region,
            instance_type=instance_type,
            cpu_count=spec.cpu_count,
            cpu_architecture=fields["cpu_architecture"],
            ram_gb=spec.ram_gb,
            disk_storage_gb=disk_storage_gb,
            state=fields["state"],
            hourly_price=hourly_price,
            annual_cost=calculate_annual_cost(hourly_price),
        )

    def get_metrics(self) -> dict[str, dict[str, float | int]]:
        """캐시 메트릭 조회"""
        return {
            "instance_spec": self.spec_cache.metrics.to_dict(),
            "price": self.price_cache.metrics.to_dict(),
        }
