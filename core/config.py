"""
core/config.py - 중앙 설정 관리

버전 정보와 인벤토리 수집 설정(``InventoryConfig``)을 제공합니다.

Usage:
    from core.config import InventoryConfig, get_version

    config = InventoryConfig(profile_name="prod", max_workers=10)
    print(get_version())
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.exceptions import ConfigError

# 프로젝트 루트 (core/ 의 상위)
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# describe_instances MaxResults 허용 범위
MIN_PAGE_SIZE = 5
MAX_PAGE_SIZE = 1000

# 기본값
DEFAULT_REGION = "us-east-1"
DEFAULT_NAME_TAG_KEY = "Name"
DEFAULT_OPERATING_SYSTEM = "Linux"


def get_version() -> str:
    """version.txt 에서 버전 문자열을 읽어 반환한다.

    Returns:
        버전 문자열. 파일이 없으면 ``"0.0.0"``
    """
    version_file = PROJECT_ROOT / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


@dataclass
class InventoryConfig:
    """인벤토리 수집 설정

    Attributes:
        profile_name: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        default_region: 활성 리전 조회에 사용할 리전
        page_size: describe_instances 페이지 크기 (5~1000, 범위 밖이면 보정)
        name_tag_key: 표시 이름으로 사용할 태그 키
        operating_system: 가격 조회 기준 OS
        max_workers: 리전 병렬 수집 워커 수 (None이면 리전 수만큼)
    """

    profile_name: str | None = None
    default_region: str = DEFAULT_REGION
    page_size: int = MAX_PAGE_SIZE
    name_tag_key: str = DEFAULT_NAME_TAG_KEY
    operating_system: str = DEFAULT_OPERATING_SYSTEM
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError(f"max_workers must be >= 1, got {self.max_workers}", key="max_workers")
        if not self.name_tag_key:
            raise ConfigError("name_tag_key must not be empty", key="name_tag_key")
        self.page_size = max(MIN_PAGE_SIZE, min(self.page_size, MAX_PAGE_SIZE))
