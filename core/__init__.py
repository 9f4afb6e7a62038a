# core/__init__.py
"""
core - EC2 인벤토리 인프라

인증, 병렬 처리, 캐시, 공유 AWS 유틸리티를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # boto3 Session 생성
    ├── parallel/       # 리전 병렬 처리 (executor, 에러 수집, 클라이언트)
    ├── tools/          # 캐시, 파일 I/O
    ├── shared/         # 공유 유틸리티 (AWS inventory/pricing, I/O)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import InventoryConfig
    config = InventoryConfig(profile_name="prod", max_workers=8)

    # 수집
    from core.shared.aws.inventory import InventoryCollector
    records = InventoryCollector(config).collect_all()

    # 예외 처리
    from core.exceptions import RegionDiscoveryError
    try:
        records = InventoryCollector().collect_all()
    except RegionDiscoveryError as e:
        print(e)
"""

from core import auth, config, exceptions, parallel, tools

__all__: list[str] = [
    # 서브패키지
    "auth",
    "tools",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
